"""
Data classes, errors and file I/O helpers for hocrtools.

Contains the hOCR tree (document, page, line, word, character), the flattened
LineDetail export record, the error taxonomy shared by every stage, and the
helpers that write line image/text pairs to disk.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator, List, Optional, Tuple

import cv2
import numpy as np


# =============================================================================
# Errors
# =============================================================================

class HocrError(Exception):
    """Base class for all hOCR processing errors."""


class MalformedDocument(HocrError):
    """Raised when the byte stream cannot be parsed as markup at all."""


class MalformedAttribute(HocrError):
    """Raised when a required title clause is missing or badly formed."""


class NoWords(HocrError):
    """Raised when confidence is requested for a line or page with no words."""


class InvalidGeometry(HocrError):
    """Raised when a crop rectangle is degenerate or leaves the page."""


class ImageUnreadable(HocrError):
    """Raised when a page image is missing or cannot be decoded."""


class ImageUnreadableWarning(UserWarning):
    """Emitted when extraction continues without a page image."""


# =============================================================================
# Data Classes
# =============================================================================

WORD_CLASS = "ocrx_word"
CHAR_CLASS = "ocrx_cinfo"


@dataclass(frozen=True)
class BoundingBox:
    """Represents a bounding box in page pixel coordinates (x0, y0, x1, y1)."""
    x0: int
    y0: int
    x1: int
    y1: int

    @property
    def width(self) -> int:
        return self.x1 - self.x0

    @property
    def height(self) -> int:
        return self.y1 - self.y0

    @property
    def is_degenerate(self) -> bool:
        return self.x0 >= self.x1 or self.y0 >= self.y1

    def as_tuple(self) -> Tuple[int, int, int, int]:
        return (self.x0, self.y0, self.x1, self.y1)


@dataclass
class OcrChar:
    """A single recognised character (ocrx_cinfo) inside a word."""
    cls: str
    text: str = ""
    title: str = ""

    @property
    def is_ordinary(self) -> bool:
        return self.cls == CHAR_CLASS


@dataclass
class OcrWord:
    """A word node. Only ocrx_word nodes carry recognised text."""
    id: str
    cls: str
    title: str = ""
    text: str = ""
    chars: List[OcrChar] = field(default_factory=list)

    @property
    def is_ordinary(self) -> bool:
        return self.cls == WORD_CLASS


@dataclass
class OcrLine:
    """A text line with its directly-stated text and its words."""
    id: str
    cls: str
    title: str = ""
    text: str = ""
    words: List[OcrWord] = field(default_factory=list)
    lang: Optional[str] = None


@dataclass
class OcrPage:
    """A page; its title normally names the source image."""
    id: str
    title: str = ""
    lines: List[OcrLine] = field(default_factory=list)


@dataclass
class HocrDocument:
    """Root of a parsed hOCR file."""
    pages: List[OcrPage] = field(default_factory=list)

    @property
    def lines(self) -> List[OcrLine]:
        return [line for page in self.pages for line in page.lines]

    def training_used(self) -> Optional[str]:
        """Return the recognition language/training of the first line declaring one."""
        for line in self.lines:
            if line.lang:
                return line.lang
        return None


@dataclass
class LineDetail:
    """
    Flattened, exported representation of one line.

    ``image`` is a numpy view over the decoded page canvas, not a copy. The
    view's ``base`` keeps the canvas alive for as long as the line image is
    referenced, and the canvas is read-only, so the crop never changes under
    the caller.
    """
    name: str
    ocr_name: str
    text: str
    confidence: Optional[float]
    bbox: Optional[BoundingBox] = None
    image: Optional[np.ndarray] = field(default=None, compare=False, repr=False)

    @property
    def has_image(self) -> bool:
        return self.image is not None

    @property
    def base_name(self) -> str:
        return f"{self.ocr_name}_{self.name}"


@dataclass
class LineIssue:
    """A per-element failure reported alongside partial results."""
    line_name: Optional[str]
    error: HocrError

    def __str__(self) -> str:
        where = self.line_name if self.line_name is not None else "page"
        return f"{where}: {self.error}"


@dataclass
class ExtractionResult:
    """Line details for a document together with any per-element issues."""
    lines: List[LineDetail] = field(default_factory=list)
    issues: List[LineIssue] = field(default_factory=list)

    def __iter__(self) -> Iterator[LineDetail]:
        return iter(self.lines)

    def __len__(self) -> int:
        return len(self.lines)

    def extend(self, other: "ExtractionResult") -> None:
        self.lines.extend(other.lines)
        self.issues.extend(other.issues)


# =============================================================================
# File I/O Utilities
# =============================================================================

def save_line(detail: LineDetail, out_dir: Path) -> Tuple[Path, Path]:
    """
    Save the image and text of a line as <ocr_name>_<name>.png/.txt.

    Args:
        detail: Line to save; must carry an image
        out_dir: Directory to save into (created if missing)

    Returns:
        (image_path, text_path)
    """
    if detail.image is None:
        raise ValueError(f"Line {detail.base_name} has no image to save")

    out_dir = Path(out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)

    image_path = out_dir / f"{detail.base_name}.png"
    text_path = out_dir / f"{detail.base_name}.txt"

    if not cv2.imwrite(str(image_path), np.ascontiguousarray(detail.image)):
        raise OSError(f"Error writing line image {image_path}")

    with open(text_path, "w", encoding="utf-8") as f:
        f.write(detail.text)

    return image_path, text_path
