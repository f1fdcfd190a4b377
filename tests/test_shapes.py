import pytest

from asciidraw.shapes import render_arrow, render_square, render_triangle


def _lines(text):
    assert text.endswith("\n")
    return text[:-1].split("\n")


def test_small_square():
    assert render_square(0, 2) == "**\n**\n"


@pytest.mark.parametrize("left, size", [(0, 1), (5, 5), (3, 7), (10, 2)])
def test_square_rows(left, size):
    lines = _lines(render_square(left, size))
    assert len(lines) == size
    for line in lines:
        assert line == " " * left + "*" * size


def test_empty_square():
    assert render_square(5, 0) == ""


def test_small_triangle():
    assert render_triangle(0, 1) == " *\n***\n"


@pytest.mark.parametrize("left, size", [(0, 0), (5, 7), (2, 3)])
def test_triangle_rows(left, size):
    lines = _lines(render_triangle(left, size))
    assert len(lines) == size + 1
    for row, line in enumerate(lines):
        assert len(line) - len(line.lstrip(" ")) == left + size - row
        assert line.count("*") == 2 * row + 1
        assert line.strip(" ") == "*" * (2 * row + 1)


def test_triangle_base_starts_at_left_col():
    last = _lines(render_triangle(5, 7))[-1]
    assert last.index("*") == 5


def test_arrow_head_matches_triangle():
    arrow = render_arrow(5, 3, 4)
    assert arrow.startswith(render_triangle(5, 3))


@pytest.mark.parametrize("left, head, shaft", [(5, 3, 4), (0, 2, 1), (4, 1, 3)])
def test_arrow_shaft_rows(left, head, shaft):
    lines = _lines(render_arrow(left, head, shaft))
    assert len(lines) == head + 1 + shaft
    for line in lines[head + 1 :]:
        assert line == " " * (left + head - 1) + "*" * (head + 1)


def test_arrow_without_shaft_is_triangle():
    assert render_arrow(2, 4, 0) == render_triangle(2, 4)


def test_arrow_example():
    assert render_arrow(0, 1, 1) == " *\n***\n**\n"