"""
Line extraction from hOCR pages and their source images.

Each page image is decoded once into a single-channel 8-bit canvas. Line
images are numpy slices of that canvas, so extracting every line of a page
costs one decode plus one view per line. The canvas is made read-only after
decoding; a line image must never be written to.

A missing or undecodable image is not fatal: the lines of that page are
still returned, without images, and an ImageUnreadableWarning is emitted.
Bad geometry or confidence on one line only affects that line.
"""

import warnings
from pathlib import Path
from typing import Optional, Union

import cv2
import numpy as np

from .attributes import parse_bbox, parse_image
from .confidence import line_confidence
from .parser import parse_file
from .text import line_text
from .utils import (
    BoundingBox, OcrPage, LineDetail, LineIssue, ExtractionResult,
    MalformedAttribute, NoWords, InvalidGeometry, ImageUnreadable,
    ImageUnreadableWarning
)

HOCR_SUFFIX = ".hocr"


# =============================================================================
# Path Resolution
# =============================================================================

def ocr_name(hocr_path: Union[str, Path]) -> str:
    """Name of an hOCR file with its .hocr suffix removed, used to name exports."""
    return Path(hocr_path).name.replace(HOCR_SUFFIX, "", 1)


def sibling_image_path(hocr_path: Union[str, Path], suffix: str = ".png") -> Path:
    """The hOCR path with its .hocr suffix replaced by an image suffix."""
    path = Path(hocr_path)
    name = path.name
    if name.endswith(HOCR_SUFFIX):
        name = name[:-len(HOCR_SUFFIX)]
    return path.with_name(name + suffix)


def resolve_image_path(
    hocr_path: Union[str, Path],
    page: OcrPage,
    override: Optional[Union[str, Path]] = None,
    suffix: str = ".png"
) -> Path:
    """
    Find the image for a page.

    An explicit override wins. Otherwise the file named in the page's image
    clause is looked up in the directory of the hOCR file, and pages without
    an image clause fall back to the sibling image path.
    """
    if override is not None:
        return Path(override)
    embedded = parse_image(page.title)
    if embedded is None:
        return sibling_image_path(hocr_path, suffix)
    # the embedded path may use either separator
    basename = embedded.replace("\\", "/").rsplit("/", 1)[-1]
    return Path(hocr_path).parent / basename


# =============================================================================
# Canvas and Cropping
# =============================================================================

def load_canvas(image_path: Union[str, Path]) -> np.ndarray:
    """
    Decode an image into a read-only single-channel 8-bit canvas.

    Colour is discarded; only luminance is kept.

    Raises:
        ImageUnreadable: If the file is missing or cannot be decoded
    """
    path = Path(image_path)
    if not path.is_file():
        raise ImageUnreadable(f"Image not found: {path}")

    # hOCR boxes refer to the stored pixel grid, so EXIF rotation is not applied
    canvas = cv2.imread(str(path), cv2.IMREAD_GRAYSCALE | cv2.IMREAD_IGNORE_ORIENTATION)
    if canvas is None:
        raise ImageUnreadable(f"Could not decode image: {path}")

    canvas.flags.writeable = False
    return canvas


def crop_line(canvas: np.ndarray, bbox: BoundingBox) -> np.ndarray:
    """
    Crop a line from the canvas as a view, without copying pixels.

    Raises:
        InvalidGeometry: If the box is degenerate or not inside the canvas
    """
    if bbox.is_degenerate:
        raise InvalidGeometry(f"Degenerate box {bbox.as_tuple()}")

    height, width = canvas.shape[:2]
    if bbox.x0 < 0 or bbox.y0 < 0 or bbox.x1 > width or bbox.y1 > height:
        raise InvalidGeometry(
            f"Box {bbox.as_tuple()} outside {width}x{height} image"
        )

    return canvas[bbox.y0:bbox.y1, bbox.x0:bbox.x1]


# =============================================================================
# Line Details
# =============================================================================

def page_line_details(
    page: OcrPage,
    name: str,
    canvas: Optional[np.ndarray] = None
) -> ExtractionResult:
    """
    Build a LineDetail for every line of a page.

    Args:
        page: Parsed page
        name: Source document name stored on each detail
        canvas: Decoded page image, or None to extract without images

    Returns:
        ExtractionResult with one detail per line, plus per-line issues
    """
    result = ExtractionResult()

    for line in page.lines:
        try:
            conf = line_confidence(line)
        except (NoWords, MalformedAttribute) as e:
            conf = None
            result.issues.append(LineIssue(line.id, e))

        try:
            bbox = parse_bbox(line.title)
        except MalformedAttribute as e:
            bbox = None
            result.issues.append(LineIssue(line.id, e))

        image = None
        if canvas is not None and bbox is not None:
            try:
                image = crop_line(canvas, bbox)
            except InvalidGeometry as e:
                result.issues.append(LineIssue(line.id, e))

        result.lines.append(LineDetail(
            name=line.id,
            ocr_name=name,
            text=line_text(line),
            confidence=conf,
            bbox=bbox,
            image=image
        ))

    return result


def _extract(
    hocr_path: Union[str, Path],
    with_images: bool,
    image_path: Optional[Union[str, Path]] = None
) -> ExtractionResult:
    doc = parse_file(hocr_path)
    name = ocr_name(hocr_path)
    result = ExtractionResult()

    for page in doc.pages:
        canvas = None
        if with_images:
            path = resolve_image_path(hocr_path, page, image_path)
            try:
                canvas = load_canvas(path)
            except ImageUnreadable as e:
                warnings.warn(f"{hocr_path}: {e}", ImageUnreadableWarning)
                result.issues.append(LineIssue(None, e))

        result.extend(page_line_details(page, name, canvas))

    return result


def get_line_details(
    hocr_path: Union[str, Path],
    image_path: Optional[Union[str, Path]] = None
) -> ExtractionResult:
    """
    Parse an hOCR file and return its lines with image extracts.

    Args:
        hocr_path: Path to the hOCR file
        image_path: Image to use for every page instead of the embedded one

    Raises:
        MalformedDocument: If the file is not parseable markup
    """
    return _extract(hocr_path, with_images=True, image_path=image_path)


def get_line_basics(hocr_path: Union[str, Path]) -> ExtractionResult:
    """Parse an hOCR file and return its lines without decoding any image."""
    return _extract(hocr_path, with_images=False)
