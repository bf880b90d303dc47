"""
Unit tests for line text reconstruction and dehyphenation.

Usage:
    pytest hocrtools/tests/test_text.py -v
"""

import pytest

from hocrtools.core import (
    OcrChar, OcrLine, OcrWord,
    dehyphenate_lines, dehyphenate_text, document_text, line_text, parse
)


def make_word(text="", chars=(), cls="ocrx_word", ident="w"):
    return OcrWord(id=ident, cls=cls, text=text,
                   chars=[OcrChar(cls="ocrx_cinfo", text=c) for c in chars])


def make_line(text="", words=(), ident="l"):
    return OcrLine(id=ident, cls="ocr_line", text=text, words=list(words))


# =============================================================================
# Line Text Tests
# =============================================================================

class TestLineText:
    """Test the line -> words -> characters fallback."""

    def test_direct_text_wins(self):
        line = make_line("Hello", [make_word("Other"), make_word("words")])
        assert line_text(line) == "Hello"

    def test_words_when_no_direct_text(self):
        line = make_line("", [make_word("Hel"), make_word("lo")])
        assert line_text(line) == "Hel lo"

    def test_whitespace_direct_text_counts_as_empty(self):
        line = make_line("   ", [make_word("Hel"), make_word("lo")])
        assert line_text(line) == "Hel lo"

    def test_characters_when_no_word_text(self):
        line = make_line("", [make_word("", chars=["H", "i"])])
        assert line_text(line) == "Hi"

    def test_characters_across_words(self):
        line = make_line("", [make_word("", chars="ab"), make_word("", chars="cd")])
        assert line_text(line) == "ab cd"

    def test_placeholders_ignored(self):
        line = make_line("", [
            make_word("real"),
            make_word("junk", cls="ocrx_space"),
            make_word("text"),
        ])
        assert line_text(line) == "real text"

    def test_placeholder_characters_ignored(self):
        word = make_word("")
        word.chars = [OcrChar("ocrx_cinfo", "o"), OcrChar("ocr_glyph", "?"), OcrChar("ocrx_cinfo", "k")]
        assert line_text(make_line("", [word])) == "ok"

    def test_trailing_spaces_trimmed(self):
        line = make_line("", [make_word("end"), make_word("")])
        assert line_text(line) == "end"

    def test_emptied_words_add_no_spaces(self):
        line = make_line("", [make_word(""), make_word("a"), make_word(""), make_word("b")])
        assert line_text(line) == "a b"

    def test_words_without_characters_add_no_spaces(self):
        line = make_line("", [make_word(""), make_word("", chars="ab"), make_word(""),
                              make_word("", chars="cd")])
        assert line_text(line) == "ab cd"

    def test_empty_line(self):
        assert line_text(make_line()) == ""
        assert line_text(make_line("", [make_word(""), make_word("")])) == ""


class TestDocumentText:
    """Test whole-document text."""

    def test_lines_joined_by_newline(self, nested_hocr):
        assert document_text(parse(nested_hocr)) == "Hello world\none two three"

    def test_flat_document(self, flat_hocr):
        assert document_text(parse(flat_hocr)) == "Ave Maria\ngratia"


# =============================================================================
# Dehyphenation Tests
# =============================================================================

class TestDehyphenateLines:
    """Test word-level dehyphenation of the hOCR tree."""

    def test_joins_across_lines(self):
        first = make_line(words=[make_word("a"), make_word("com-")], ident="l1")
        second = make_line(words=[make_word("bined"), make_word("word")], ident="l2")

        unhandled = dehyphenate_lines([first, second])

        assert unhandled == []
        assert [w.text for w in first.words] == ["a", "combined"]
        # the moved word stays, emptied
        assert [w.text for w in second.words] == ["", "word"]
        assert line_text(second) == "word"

    def test_no_hyphen_unchanged(self):
        first = make_line(words=[make_word("plain")])
        second = make_line(words=[make_word("text")])
        dehyphenate_lines([first, second])
        assert first.words[0].text == "plain"
        assert second.words[0].text == "text"

    def test_last_line_left_alone(self):
        only = make_line(words=[make_word("dangling-")])
        assert dehyphenate_lines([only]) == []
        assert only.words[0].text == "dangling-"

    def test_lines_without_words_skipped(self):
        first = make_line(words=[make_word("trail-")])
        empty = make_line(ident="empty")
        assert dehyphenate_lines([first, empty]) == []
        assert first.words[0].text == "trail-"

    def test_character_level_reported(self):
        first = make_line(words=[make_word("", chars="ab-")], ident="l1")
        second = make_line(words=[make_word("cd")], ident="l2")

        assert dehyphenate_lines([first, second]) == ["l1"]
        assert second.words[0].text == "cd"

    def test_document_lines(self, hocr_page):
        doc = parse(hocr_page(
            '<span class="ocr_line" id="l1"><span class="ocrx_word" id="w1">Deus ex-</span></span>'
            '<span class="ocr_line" id="l2"><span class="ocrx_word" id="w2">celsis</span></span>'
        ))
        dehyphenate_lines(doc.lines)
        assert document_text(doc) == "Deus excelsis\n"


class TestDehyphenateText:
    """Test plain text dehyphenation."""

    def test_joins_first_word_of_next_row(self):
        assert dehyphenate_text("a com-\nbined word\n") == "a combined\nword\n"

    def test_single_word_next_row(self):
        assert dehyphenate_text("con-\ntinued\nnext\n") == "continued\n\nnext\n"

    @pytest.mark.parametrize("text", ["no hyphens\nhere\n", "final-\n", ""])
    def test_unchanged(self, text):
        assert dehyphenate_text(text) == text
