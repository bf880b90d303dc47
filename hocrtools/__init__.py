"""Tools for preparing OCR training and evaluation data from hOCR files."""

__version__ = "0.1.0"
