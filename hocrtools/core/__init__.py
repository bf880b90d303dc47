"""
Core module for hocrtools.

This package contains the hOCR engine used by every tool:
- utils: Data classes, errors, and line file I/O
- attributes: Parser for the title attribute micro-grammar
- parser: hOCR document model builder
- text: Line text reconstruction and dehyphenation
- confidence: Word, line, page and document confidence
- extraction: Page image decoding and per-line crops
- config: Options for the extraction tool
"""

# Data classes
from .utils import (
    BoundingBox,
    OcrChar,
    OcrWord,
    OcrLine,
    OcrPage,
    HocrDocument,
    LineDetail,
    LineIssue,
    ExtractionResult,
)

# Errors
from .utils import (
    HocrError,
    MalformedDocument,
    MalformedAttribute,
    NoWords,
    InvalidGeometry,
    ImageUnreadable,
    ImageUnreadableWarning,
)

# File I/O utilities
from .utils import save_line

# Title micro-grammar
from .attributes import parse_title, parse_bbox, parse_confidence, parse_image

# Document model
from .parser import parse, parse_file

# Text
from .text import line_text, document_text, dehyphenate_lines, dehyphenate_text

# Confidence
from .confidence import (
    word_confidence,
    line_confidence,
    page_confidence,
    document_confidence,
)

# Extraction
from .extraction import (
    ocr_name,
    sibling_image_path,
    resolve_image_path,
    load_canvas,
    crop_line,
    page_line_details,
    get_line_details,
    get_line_basics,
)

# Configuration
from .config import ExtractionConfig, load_config


__all__ = [
    # Data classes
    "BoundingBox",
    "OcrChar",
    "OcrWord",
    "OcrLine",
    "OcrPage",
    "HocrDocument",
    "LineDetail",
    "LineIssue",
    "ExtractionResult",
    # Errors
    "HocrError",
    "MalformedDocument",
    "MalformedAttribute",
    "NoWords",
    "InvalidGeometry",
    "ImageUnreadable",
    "ImageUnreadableWarning",
    # File I/O
    "save_line",
    # Title micro-grammar
    "parse_title",
    "parse_bbox",
    "parse_confidence",
    "parse_image",
    # Document model
    "parse",
    "parse_file",
    # Text
    "line_text",
    "document_text",
    "dehyphenate_lines",
    "dehyphenate_text",
    # Confidence
    "word_confidence",
    "line_confidence",
    "page_confidence",
    "document_confidence",
    # Extraction
    "ocr_name",
    "sibling_image_path",
    "resolve_image_path",
    "load_canvas",
    "crop_line",
    "page_line_details",
    "get_line_details",
    "get_line_basics",
    # Configuration
    "ExtractionConfig",
    "load_config",
]
