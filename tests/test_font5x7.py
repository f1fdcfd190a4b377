import pytest

from asciidraw.font5x7 import FIRST_CHAR, FONT_5X7, LAST_CHAR, glyph_5x7


def test_table_covers_printable_ascii_and_degree():
    assert len(FONT_5X7) == 96
    assert FIRST_CHAR == 0x20
    assert LAST_CHAR == 0x7F
    assert glyph_5x7(chr(LAST_CHAR)) == (0x00, 0x06, 0x09, 0x09, 0x06)


def test_every_glyph_has_five_seven_bit_columns():
    for code in range(FIRST_CHAR, LAST_CHAR + 1):
        columns = glyph_5x7(chr(code))
        assert len(columns) == 5
        assert all(0 <= bits < 0x80 for bits in columns)


def test_space_is_blank():
    assert glyph_5x7(" ") == (0x00, 0x00, 0x00, 0x00, 0x00)


def test_letter_a_columns():
    assert glyph_5x7("A") == (0x7E, 0x11, 0x11, 0x11, 0x7E)


def test_lookup_is_offset_from_space():
    assert glyph_5x7("~") == FONT_5X7[0x7E - 0x20]
    assert glyph_5x7("!") == FONT_5X7[1]


@pytest.mark.parametrize("bad", ["\x1f", "\x80", "\n", "é"])
def test_characters_outside_font_are_rejected(bad):
    with pytest.raises(ValueError):
        glyph_5x7(bad)


@pytest.mark.parametrize("bad", ["", "ab"])
def test_wrong_length_is_rejected(bad):
    with pytest.raises(ValueError):
        glyph_5x7(bad)


def test_non_string_is_rejected():
    with pytest.raises(TypeError):
        glyph_5x7(65)