"""
Text reconstruction and dehyphenation.

Different OCR engines fill different levels of the hOCR tree, so the text of
a line is taken from the most specific level that actually has content:
the line itself, then its words, then its characters.
"""

from typing import List

from .utils import HocrDocument, OcrLine


def _has_text(text: str) -> bool:
    return bool(text.rstrip())


def line_text(line: OcrLine) -> str:
    """
    Reconstruct the text of a line.

    Uses the line's own text if it has any, else its ocrx_word texts joined
    by spaces, else the ocrx_cinfo characters of each word. Never raises;
    a line with no text anywhere gives an empty string.
    """
    text = line.text
    words = [w for w in line.words if w.is_ordinary]
    # emptied words (e.g. after dehyphenation) add no separator
    if not _has_text(text):
        text = " ".join(w.text for w in words if w.text)
    if not _has_text(text):
        chars = ("".join(c.text for c in w.chars if c.is_ordinary) for w in words)
        text = " ".join(c for c in chars if c)
    if not _has_text(text):
        return ""
    return text.rstrip(" ")


def document_text(doc: HocrDocument) -> str:
    """Text of every line in document order, one line per row."""
    return "\n".join(line_text(line) for line in doc.lines)


def dehyphenate_lines(lines: List[OcrLine]) -> List[str]:
    """
    Join words split by a hyphen at the end of a line, in place.

    When the last word of a line ends in '-', the hyphen is dropped and the
    first word of the next line is appended to it. That next word is left in
    place with empty text.

    Words carrying character nodes are left alone, as joining at character
    level is not supported.

    Returns:
        Ids of the lines that were skipped for having character-level words
    """
    unhandled = []
    for line, next_line in zip(lines, lines[1:]):
        if not line.words or not next_line.words:
            continue
        last = line.words[-1]
        if last.chars:
            if last.text.endswith("-") or "".join(c.text for c in last.chars).endswith("-"):
                unhandled.append(line.id)
            continue
        if last.text.endswith("-"):
            first = next_line.words[0]
            last.text = last.text[:-1] + first.text
            first.text = ""
    return unhandled


def dehyphenate_text(text: str) -> str:
    """
    Dehyphenate plain text.

    A row whose last space-separated token ends in '-' takes the first token
    of the following row, which keeps its remaining tokens. The final row of
    newline-terminated text is never joined.
    """
    rows = text.split("\n")
    out = []
    for i, row in enumerate(rows):
        last = row.split(" ")[-1]
        # len(rows) - 2 skips the empty entry after a trailing newline
        if last.endswith("-") and i < len(rows) - 2:
            next_tokens = rows[i + 1].split(" ")
            row = row[:-1] + next_tokens[0]
            rows[i + 1] = " ".join(next_tokens[1:])
        out.append(row)
    return "\n".join(out)
