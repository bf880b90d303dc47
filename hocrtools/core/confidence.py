"""
Confidence aggregation for words, lines, pages and documents.

Word confidence comes from the x_wconf clause of the word title. Line
confidence is normalised to 0.0-1.0; page and document confidence stay
percentages. Page and document means are taken over every word, so lines
with more words weigh more.
"""

from typing import Iterable, List

import numpy as np

from .attributes import parse_confidence
from .utils import HocrDocument, OcrLine, OcrPage, OcrWord, NoWords


def word_confidence(word: OcrWord) -> float:
    """Confidence of a word as a percentage. Raises MalformedAttribute."""
    return parse_confidence(word.title)


def _confidences(lines: Iterable[OcrLine]) -> List[float]:
    return [word_confidence(w) for line in lines for w in line.words if w.is_ordinary]


def line_confidence(line: OcrLine) -> float:
    """Mean word confidence of a line, from 0.0 to 1.0."""
    confs = _confidences([line])
    if not confs:
        raise NoWords(f"Line {line.id!r} has no words")
    return float(np.mean(confs)) / 100


def page_confidence(page: OcrPage) -> float:
    """Mean confidence of every word on a page, as a percentage."""
    confs = _confidences(page.lines)
    if not confs:
        raise NoWords(f"Page {page.id!r} has no words")
    return float(np.mean(confs))


def document_confidence(doc: HocrDocument) -> float:
    """Mean confidence of every word in a document, as a percentage."""
    confs = _confidences(doc.lines)
    if not confs:
        raise NoWords("Document has no words")
    return float(np.mean(confs))
