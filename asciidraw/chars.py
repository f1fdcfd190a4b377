"""Render characters of the 5x7 font as text made of asterisks."""

import sys
from typing import TextIO

from asciidraw.font5x7 import GLYPH_HEIGHT, glyph_5x7


def render_char_5x7(char: str) -> str:
    """Return ``char`` drawn sideways: one line per font column, then a blank line."""
    lines = (
        "".join(
            "*" if bits & (1 << (GLYPH_HEIGHT - 1 - row)) else " "
            for row in range(GLYPH_HEIGHT)
        )
        for bits in glyph_5x7(char)
    )
    return "".join(f"{line}\n" for line in lines) + "\n"


def print_char_5x7(char: str, file: TextIO | None = None) -> None:
    """Write the rendering of ``char`` to ``file`` (standard output by default)."""
    out = sys.stdout if file is None else file
    out.write(render_char_5x7(char))