"""
Parser for the hOCR title micro-grammar.

hOCR stores properties as ``key value...`` clauses separated by semicolons
inside the ``title`` attribute, e.g.::

    bbox 36 92 582 108; x_wconf 96

The functions here turn those clauses into typed values and raise
MalformedAttribute when a required clause is missing or badly formed.
"""

import re
from typing import Dict, List, Optional

from .utils import BoundingBox, MalformedAttribute

# Semicolons inside double quotes (e.g. in image paths) do not end a clause
CLAUSE_SPLIT = re.compile(r';(?=(?:[^"]*"[^"]*")*[^"]*$)')


def parse_title(title: str) -> Dict[str, List[str]]:
    """
    Split a title attribute into its clauses.

    Returns:
        Mapping of clause key to its argument tokens. A repeated key keeps
        the last occurrence.
    """
    props = {}
    for clause in CLAUSE_SPLIT.split(title or ""):
        tokens = clause.split()
        if not tokens:
            continue
        props[tokens[0]] = tokens[1:]
    return props


def _clause(title: str, key: str) -> List[str]:
    props = parse_title(title)
    if key not in props:
        raise MalformedAttribute(f"No '{key}' clause in title {title!r}")
    return props[key]


def parse_bbox(title: str) -> BoundingBox:
    """
    Parse the ``bbox x0 y0 x1 y1`` clause.

    The coordinates are returned in order; ordering is not checked here.
    """
    args = _clause(title, "bbox")
    if len(args) != 4:
        raise MalformedAttribute(f"bbox needs 4 values, got {len(args)} in {title!r}")
    try:
        x0, y0, x1, y1 = (int(a) for a in args)
    except ValueError:
        raise MalformedAttribute(f"Non-integer bbox value in {title!r}")
    return BoundingBox(x0, y0, x1, y1)


def parse_confidence(title: str, key: str = "x_wconf") -> float:
    """Parse a confidence clause, a single percentage in [0, 100]."""
    args = _clause(title, key)
    if len(args) != 1:
        raise MalformedAttribute(f"{key} needs 1 value, got {len(args)} in {title!r}")
    try:
        conf = float(args[0])
    except ValueError:
        raise MalformedAttribute(f"Non-numeric {key} value in {title!r}")
    if not 0 <= conf <= 100:
        raise MalformedAttribute(f"{key} {conf} outside 0-100 in {title!r}")
    return conf


def parse_image(title: str) -> Optional[str]:
    """Return the path in the ``image "..."`` clause, or None if there is none."""
    match = re.search(r'(?:^|;)\s*image\s+(?:"([^"]*)"|(\S+))', title or "")
    if not match:
        return None
    path = match.group(1) if match.group(1) is not None else match.group(2)
    return path or None
