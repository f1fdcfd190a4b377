import io

import pytest

from asciidraw.chars import print_char_5x7, render_char_5x7
from asciidraw.font5x7 import glyph_5x7


def test_layout_is_five_lines_of_seven_then_blank():
    text = render_char_5x7("a")
    lines = text.split("\n")
    # five glyph lines, one empty line, and the remainder after the last newline
    assert len(lines) == 7
    assert all(len(line) == 7 for line in lines[:5])
    assert lines[5:] == ["", ""]


def test_space_renders_blank():
    assert render_char_5x7(" ") == ("       \n" * 5) + "\n"


def test_vertical_bar_fills_middle_column():
    lines = render_char_5x7("|").split("\n")
    assert lines[2] == "*******"
    assert lines[0].strip() == ""
    assert lines[4].strip() == ""


@pytest.mark.parametrize("char", ["a", "b", "c", "Q", "@", "~"])
def test_star_count_matches_set_bits(char):
    text = render_char_5x7(char)
    expected = sum(bin(bits).count("1") for bits in glyph_5x7(char))
    assert text.count("*") == expected


def test_only_stars_spaces_and_newlines():
    for char in "Hello, World!":
        assert set(render_char_5x7(char)) <= {"*", " ", "\n"}


def test_print_writes_rendering_to_file():
    buffer = io.StringIO()
    print_char_5x7("b", buffer)
    assert buffer.getvalue() == render_char_5x7("b")


def test_print_defaults_to_stdout(capsys):
    print_char_5x7("c")
    assert capsys.readouterr().out == render_char_5x7("c")


def test_unknown_character_raises():
    with pytest.raises(ValueError):
        render_char_5x7("\x7f\x7f")