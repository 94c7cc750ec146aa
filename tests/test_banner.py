"""Banner glyph rendering."""

import pytest

import termnovel


class TestBanner:

    def test_render_is_multiline(self, banner):
        """Text renders as a stable multi-line glyph block."""
        rendered = banner.render("12")
        assert rendered.count("\n") >= 2
        assert rendered == banner.render("12")

    def test_no_trailing_blank_lines(self, banner):
        """Blank glyph rows and trailing spaces are trimmed."""
        rendered = banner.render("Rain")
        assert not rendered.endswith("\n")
        assert all(line == line.rstrip() for line in rendered.split("\n"))

    def test_empty_text(self, banner):
        """Empty or blank text renders as nothing."""
        assert banner.render("") == ""
        assert banner.render("   ") == ""

    def test_missing_font_fails_at_construction(self):
        """An unknown font is reported when the banner is created."""
        with pytest.raises(termnovel.FontError):
            termnovel.Banner(font="no-such-font-termnovel")

    def test_typographic_characters_folded(self, banner):
        """Dashes, accents and quotes render as their plain forms."""
        assert banner.printable("12–Ré") == "12-Re"
        assert banner.printable("‘Hi” — ok…") == "'Hi\" - ok..."
        assert banner.render("12–Ré") == banner.render("12-Re")

    def test_unsupported_characters_become_question_marks(self, banner):
        """Characters without a glyph are shown, not silently dropped."""
        assert banner.printable("A ✓") == "A ?"
        assert banner.render("12–Ré ✓") == banner.render("12-Re ?")
