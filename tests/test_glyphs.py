"""
Tests for the digit glyph tables and GlyphMode.
"""

import unicodedata

import pytest

from indexing_fmt.glyphs import (
    GlyphMode,
    SUPERSCRIPT_DIGITS,
    SUBSCRIPT_DIGITS,
    SUPERSCRIPT_MINUS,
    SUBSCRIPT_MINUS,
)


class TestGlyphTables:
    """Tests for the raw glyph constants."""

    def test_tables_have_ten_single_characters(self):
        for table in (SUPERSCRIPT_DIGITS, SUBSCRIPT_DIGITS):
            assert len(table) == 10
            assert all(len(glyph) == 1 for glyph in table)

    def test_superscript_code_points(self):
        expected = [0x2070, 0x00B9, 0x00B2, 0x00B3, 0x2074, 0x2075, 0x2076, 0x2077, 0x2078, 0x2079]
        assert [ord(g) for g in SUPERSCRIPT_DIGITS] == expected

    def test_subscript_code_points(self):
        assert [ord(g) for g in SUBSCRIPT_DIGITS] == list(range(0x2080, 0x208A))

    def test_glyphs_decode_to_their_digit(self):
        """Unicode assigns each glyph the digit value of its index."""
        for table in (SUPERSCRIPT_DIGITS, SUBSCRIPT_DIGITS):
            for digit, glyph in enumerate(table):
                assert unicodedata.digit(glyph) == digit

    def test_minus_glyphs(self):
        assert SUPERSCRIPT_MINUS == "⁻"
        assert SUBSCRIPT_MINUS == "₋"
        assert unicodedata.name(SUPERSCRIPT_MINUS) == "SUPERSCRIPT MINUS"
        assert unicodedata.name(SUBSCRIPT_MINUS) == "SUBSCRIPT MINUS"

    def test_tables_are_immutable(self):
        with pytest.raises(TypeError):
            SUPERSCRIPT_DIGITS[0] = "0"


class TestGlyphMode:
    """Tests for GlyphMode lookups."""

    def test_superscript_mode(self):
        assert GlyphMode.SUPERSCRIPT.digits is SUPERSCRIPT_DIGITS
        assert GlyphMode.SUPERSCRIPT.minus == SUPERSCRIPT_MINUS

    def test_subscript_mode(self):
        assert GlyphMode.SUBSCRIPT.digits is SUBSCRIPT_DIGITS
        assert GlyphMode.SUBSCRIPT.minus == SUBSCRIPT_MINUS

    def test_minus_glyphs_differ_between_modes(self):
        assert GlyphMode.SUPERSCRIPT.minus != GlyphMode.SUBSCRIPT.minus

    def test_glyph_lookup(self):
        assert GlyphMode.SUPERSCRIPT.glyph(2) == "²"
        assert GlyphMode.SUBSCRIPT.glyph(9) == "₉"

    @pytest.mark.parametrize("digit", [-1, 10, 42])
    def test_glyph_lookup_rejects_non_digits(self, digit):
        with pytest.raises(ValueError):
            GlyphMode.SUPERSCRIPT.glyph(digit)

    def test_str(self):
        assert str(GlyphMode.SUPERSCRIPT) == "superscript"
        assert str(GlyphMode.SUBSCRIPT) == "subscript"
