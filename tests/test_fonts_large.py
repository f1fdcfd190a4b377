import pytest

from asciidraw.fonts_large import glyph_11x16, glyph_8x12

PRINTABLE = [chr(code) for code in range(0x20, 0x7F)]


def test_8x12_letter_a_matches_table():
    assert glyph_8x12("A") == (
        0x00, 0x38, 0x6C, 0xC6, 0xC6, 0xC6, 0xFE, 0xC6, 0xC6, 0xC6, 0x00, 0x00,
    )


def test_8x12_underscore_only_fills_bottom_row():
    glyph = glyph_8x12("_")
    assert glyph[-1] == 0xFF
    assert all(row == 0 for row in glyph[:-1])


def test_11x16_letter_a_matches_table():
    assert glyph_11x16("A") == (
        0x3800, 0x3F00, 0x07E0, 0x06FC, 0x061F, 0x061F,
        0x06FC, 0x07E0, 0x3F00, 0x3800, 0x0000,
    )


def test_11x16_underscore_is_uniform():
    assert set(glyph_11x16("_")) == {0xC000}


def test_11x16_tilde_is_last_entry():
    assert glyph_11x16("~") == (
        0x0010, 0x0018, 0x000C, 0x0004, 0x000C, 0x0018,
        0x0010, 0x0018, 0x000C, 0x0004, 0x0000,
    )


def test_space_is_blank_in_both_fonts():
    assert all(row == 0 for row in glyph_8x12(" "))
    assert all(col == 0 for col in glyph_11x16(" "))


@pytest.mark.parametrize("char", PRINTABLE)
def test_8x12_glyph_shape(char):
    glyph = glyph_8x12(char)
    assert len(glyph) == 12
    assert all(0 <= row <= 0xFF for row in glyph)


@pytest.mark.parametrize("char", PRINTABLE)
def test_11x16_glyph_shape(char):
    glyph = glyph_11x16(char)
    assert len(glyph) == 11
    assert all(0 <= col <= 0xFFFF for col in glyph)


@pytest.mark.parametrize("char", [c for c in PRINTABLE if c != " "])
def test_visible_characters_have_ink(char):
    assert max(glyph_8x12(char)) > 0
    assert max(glyph_11x16(char)) > 0


def test_upper_and_lower_case_differ():
    assert glyph_8x12("a")[4] == 0x78
    assert glyph_8x12("A")[4] == 0xC6
    assert glyph_11x16("a")[0] == 0x1C00
    assert glyph_11x16("A")[0] == 0x3800


@pytest.mark.parametrize("lookup", [glyph_8x12, glyph_11x16])
@pytest.mark.parametrize("char", ["\x7f", "\x1f", "\n", "é"])
def test_characters_outside_font_are_rejected(lookup, char):
    with pytest.raises(ValueError):
        lookup(char)


@pytest.mark.parametrize("lookup", [glyph_8x12, glyph_11x16])
@pytest.mark.parametrize("text", ["", "ab"])
def test_non_single_character_rejected(lookup, text):
    with pytest.raises(ValueError):
        lookup(text)


@pytest.mark.parametrize("lookup", [glyph_8x12, glyph_11x16])
def test_non_string_rejected(lookup):
    with pytest.raises(TypeError):
        lookup(65)