"""
hOCR document model builder.

Parses hOCR markup into the HocrDocument -> OcrPage -> OcrLine -> OcrWord ->
OcrChar tree. Node roles come from the class attribute; elements with other
classes are descended through but not recorded. Parsing is best-effort:
words outside a line and characters outside a word are dropped, since OCR
engines disagree on how strictly they nest their output.

Two document shapes are accepted. Modern files nest lines under ocr_page
(and area/paragraph) containers; legacy files hang lines directly off the
body. Lines found outside any page are gathered into a synthetic page with
no id or title, so every consumer sees the same tree.
"""

import re
from html.entities import html5 as html_entities
from pathlib import Path
from typing import Optional, Union
from xml.etree import ElementTree as ET

from .utils import (
    HocrDocument, OcrPage, OcrLine, OcrWord, OcrChar, MalformedDocument
)


PAGE_CLASSES = {"ocr_page"}
LINE_CLASSES = {"ocr_line", "ocrx_line", "ocr_header", "ocr_caption", "ocr_textfloat"}
CHAR_CLASSES = {"ocrx_cinfo", "ocr_glyph"}
NON_WORD_CLASSES = {"ocrx_block", "ocrx_line"} | CHAR_CLASSES

PAGE, LINE, WORD, CHAR = "page", "line", "word", "char"

XML_LANG = "{http://www.w3.org/XML/1998/namespace}lang"

ENTITY_PAT = re.compile(r"&([A-Za-z][A-Za-z0-9]*);")
XML_ENTITIES = {"lt", "gt", "amp", "quot", "apos"}


def _fix_entity(match: re.Match) -> str:
    """Rewrite an HTML named entity as numeric references the XML parser accepts."""
    name = match.group(1)
    if name in XML_ENTITIES:
        return match.group(0)
    value = html_entities.get(name + ";")
    if value is None:
        return match.group(0)
    return "".join(f"&#{ord(c)};" for c in value)


def element_role(elem: ET.Element) -> Optional[tuple]:
    """
    Work out the hOCR role of an element from its class tokens.

    Returns:
        (role, class) or None for elements with no recognised role
    """
    for cls in (elem.get("class") or "").split():
        if cls in PAGE_CLASSES:
            return PAGE, cls
        if cls in LINE_CLASSES:
            return LINE, cls
        if cls in CHAR_CLASSES:
            return CHAR, cls
        if cls == "ocr_word" or (cls.startswith("ocrx_") and cls not in NON_WORD_CLASSES):
            return WORD, cls
    return None


def _own_text(elem: ET.Element) -> str:
    """Text of an element, leaving out the subtrees of nested hOCR nodes."""
    parts = [elem.text or ""]
    for child in elem:
        if element_role(child) is None:
            parts.append(_own_text(child))
        parts.append(child.tail or "")
    return "".join(parts)


def _lang(elem: ET.Element) -> Optional[str]:
    return elem.get("lang") or elem.get(XML_LANG)


class _TreeBuilder:
    """Walks the parsed markup once, building the normalised tree."""

    def __init__(self):
        self.doc = HocrDocument()
        self._flat_page = None

    def flat_page(self) -> OcrPage:
        """Synthetic page holding lines of legacy documents without ocr_page."""
        if self._flat_page is None:
            self._flat_page = OcrPage(id="")
            self.doc.pages.append(self._flat_page)
        return self._flat_page

    def walk(self, elem, page=None, line=None, word=None, lang=None):
        role = element_role(elem)

        if role is None:
            # the recognition language is declared per paragraph, never inherited
            # from the html root
            if "ocr_par" in (elem.get("class") or "").split():
                lang = _lang(elem)
            for child in elem:
                self.walk(child, page, line, word, lang)
            return

        kind, cls = role
        ident = elem.get("id", "")
        title = elem.get("title", "")

        if kind == PAGE:
            page = OcrPage(id=ident, title=title)
            self.doc.pages.append(page)
            line = word = None
        elif kind == LINE:
            if word is not None:
                return
            line = OcrLine(id=ident, cls=cls, title=title,
                           text=_own_text(elem).strip(), lang=_lang(elem) or lang)
            (page or self.flat_page()).lines.append(line)
        elif kind == WORD:
            if line is None or word is not None:
                return
            word = OcrWord(id=ident, cls=cls, title=title, text=_own_text(elem).strip())
            line.words.append(word)
        else:
            if word is not None:
                word.chars.append(OcrChar(cls=cls, text="".join(elem.itertext()), title=title))
            return

        for child in elem:
            self.walk(child, page, line, word, lang)


def parse(data: Union[bytes, str]) -> HocrDocument:
    """
    Parse hOCR markup into a HocrDocument.

    Args:
        data: Raw hOCR bytes (UTF-8) or an already decoded string

    Returns:
        A freshly built document tree

    Raises:
        MalformedDocument: If the input is not parseable markup
    """
    if isinstance(data, bytes):
        try:
            data = data.decode("utf-8")
        except UnicodeDecodeError as e:
            raise MalformedDocument(f"hOCR is not valid UTF-8: {e}")

    fixed = ENTITY_PAT.sub(_fix_entity, data)
    try:
        root = ET.fromstring(fixed.encode("utf-8"))
    except ET.ParseError as e:
        raise MalformedDocument(f"Failed to parse hOCR markup: {e}")

    builder = _TreeBuilder()
    builder.walk(root)
    return builder.doc


def parse_file(path: Union[str, Path]) -> HocrDocument:
    """Read and parse an hOCR file."""
    with open(path, "rb") as f:
        return parse(f.read())
