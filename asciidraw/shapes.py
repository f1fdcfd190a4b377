"""Simple shapes drawn with asterisks."""


def _row(first_col: int, last_col: int) -> str:
    """Spaces up to ``first_col`` then stars through ``last_col``, as one line."""
    start = max(0, first_col)
    stars = max(0, last_col + 1 - start)
    return " " * start + "*" * stars + "\n"


def render_square(left_col: int, size: int) -> str:
    """Return a ``size`` by ``size`` square whose left edge is at ``left_col``."""
    line = _row(left_col, left_col + size - 1)
    return line * max(0, size)


def _triangle(left_col: int, size: int) -> str:
    apex = left_col + size
    return "".join(_row(apex - row, apex + row) for row in range(size + 1))


def render_triangle(left_col: int, size: int) -> str:
    """Return a triangle of ``size + 1`` rows whose left edge is at ``left_col``."""
    return _triangle(left_col, size)


def render_arrow(left_col: int, head_size: int, shaft_height: int) -> str:
    """Return an arrow: a triangular head above a shaft ``shaft_height`` rows tall."""
    shaft_left_col = left_col + head_size
    shaft = " " * max(0, shaft_left_col - 1) + "*" * max(0, head_size) + "*\n"
    return _triangle(left_col, head_size) + shaft * max(0, shaft_height)