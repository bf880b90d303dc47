"""
Pytest configuration and shared fixtures for hocrtools tests.

This module provides:
- Sample hOCR documents in the nested (ocr_page) and legacy flat shapes
- Synthetic page images written with OpenCV
- A fixture laying out an hOCR file next to its page image

Usage:
    pytest hocrtools/tests/ -v
    pytest hocrtools/tests/test_extraction.py -v
"""

import sys
from pathlib import Path

import cv2
import numpy as np
import pytest

# Add repository root to path for imports
PROJECT_ROOT = Path(__file__).parent.parent.parent
sys.path.insert(0, str(PROJECT_ROOT))


# =============================================================================
# Sample Documents
# =============================================================================

NESTED_HOCR = """<?xml version="1.0" encoding="UTF-8"?>
<!DOCTYPE html PUBLIC "-//W3C//DTD XHTML 1.0 Transitional//EN"
    "http://www.w3.org/TR/xhtml1/DTD/xhtml1-transitional.dtd">
<html xmlns="http://www.w3.org/1999/xhtml" xml:lang="en" lang="en">
 <head>
  <title></title>
  <meta name="ocr-system" content="tesseract" />
 </head>
 <body>
  <div class="ocr_page" id="page_1" title='image "/scans/book/page.png"; bbox 0 0 100 100; ppageno 0'>
   <div class="ocr_carea" id="block_1_1" title="bbox 10 10 60 40">
    <p class="ocr_par" id="par_1_1" lang="lat" title="bbox 10 10 60 40">
     <span class="ocr_line" id="line_1_1" title="bbox 10 10 60 20; baseline 0 -2">
      <span class="ocrx_word" id="word_1_1" title="bbox 10 10 30 20; x_wconf 90">Hello</span>
      <span class="ocrx_word" id="word_1_2" title="bbox 35 10 60 20; x_wconf 80">world</span>
     </span>
     <span class="ocr_line" id="line_1_2" title="bbox 10 30 60 40; baseline 0 -2">
      <span class="ocrx_word" id="word_1_3" title="bbox 10 30 20 40; x_wconf 70">one</span>
      <span class="ocrx_word" id="word_1_4" title="bbox 25 30 40 40; x_wconf 60">two</span>
      <span class="ocrx_word" id="word_1_5" title="bbox 45 30 60 40; x_wconf 50">three</span>
     </span>
    </p>
   </div>
  </div>
 </body>
</html>
"""

FLAT_HOCR = """<html>
 <body>
  <span class="ocr_line" id="line_1" title="bbox 0 0 50 10">
   <span class="ocrx_word" id="word_1" title="bbox 0 0 20 10; x_wconf 95">Ave</span>
   <span class="ocrx_word" id="word_2" title="bbox 25 0 50 10; x_wconf 85">Maria</span>
  </span>
  <span class="ocr_line" id="line_2" title="bbox 0 20 50 30">
   <span class="ocrx_word" id="word_3" title="bbox 0 20 50 30; x_wconf 75">gratia</span>
  </span>
 </body>
</html>
"""


@pytest.fixture
def hocr_page():
    """
    Provide a function wrapping ocr_line markup in a single-page document.

    Returns:
        Function taking the line markup and an optional page title.
    """
    def _hocr_page(lines: str, title: str = "bbox 0 0 100 100") -> str:
        return (
            '<html xmlns="http://www.w3.org/1999/xhtml"><body>'
            f'<div class="ocr_page" id="page_1" title=\'{title}\'>{lines}</div>'
            "</body></html>"
        )

    return _hocr_page


@pytest.fixture
def nested_hocr() -> str:
    return NESTED_HOCR


@pytest.fixture
def flat_hocr() -> str:
    return FLAT_HOCR


# =============================================================================
# Image Fixtures
# =============================================================================

@pytest.fixture
def gradient_canvas() -> np.ndarray:
    """100x100 8-bit image whose pixel values differ along both axes."""
    return (np.arange(100 * 100).reshape(100, 100) % 251).astype(np.uint8)


@pytest.fixture
def page_dir(tmp_path, gradient_canvas) -> Path:
    """
    Directory holding page.hocr and the page.png it refers to.

    Returns:
        Path to page.hocr
    """
    hocr_path = tmp_path / "page.hocr"
    hocr_path.write_text(NESTED_HOCR, encoding="utf-8")
    cv2.imwrite(str(tmp_path / "page.png"), gradient_canvas)
    return hocr_path


# =============================================================================
# Test Session Info
# =============================================================================

def pytest_report_header(config):
    """Add project info to test report header."""
    return [
        "hocrtools Test Suite",
        f"Project Root: {PROJECT_ROOT}",
        f"OpenCV: {cv2.__version__}",
    ]
