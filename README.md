# asciidraw

Draw simple shapes and bitmap-font characters as ASCII art. You can use it
from an interactive prompt or call it from your own Python code.

## Installation

    pip install .

## Interactive use

    asciidraw

The program prints `Welcome!` and asks which shape to print:

- `t` draws a triangle (left column 5, size 7)
- `s` draws a 5 by 5 square (left column 5)
- `c` draws the characters `a`, `b` and `c` in the 5x7 font
- `a` draws an arrow (left column 5, head size 3, shaft height 4)
- `q` prints `Bye!` and quits

Input is read one character at a time, and newlines are skipped. End of input
also ends the session. For any other character the program reports
`Unrecognized option '<char>', please try again!` and asks again.

The same loop can be run on any pair of text streams with
`asciidraw.cli.run(stdin, stdout)`, which returns the exit status 0.

## Library use

    from asciidraw.shapes import render_square, render_triangle, render_arrow
    from asciidraw.chars import render_char_5x7, print_char_5x7

    print(render_square(5, 5), end="")
    print(render_triangle(5, 7), end="")
    print(render_arrow(5, 3, 4), end="")
    print(render_char_5x7("a"), end="")

- `render_square(left_col, size)` returns `size` rows of `size` stars, each
  row indented by `left_col` spaces.
- `render_triangle(left_col, size)` returns `size + 1` rows. Row `r` spans the
  columns from `left_col + size - r` to `left_col + size + r`.
- `render_arrow(left_col, head_size, shaft_height)` returns a triangular head
  like `render_triangle(left_col, head_size)`, followed by `shaft_height`
  shaft rows.
- `render_char_5x7(char)` returns the character drawn sideways, with one line
  of seven cells for each of the five font columns, followed by a blank line.
- `print_char_5x7(char, file=None)` writes that drawing to `file`, or to
  standard output if no file is given.

Each render function returns the drawing as a string in which every line ends
with a newline.

## Glyph bitmaps

    from asciidraw.font5x7 import glyph_5x7
    from asciidraw.fonts_large import glyph_8x12, glyph_11x16

- `glyph_5x7(char)` returns five column bytes. It covers characters 0x20 to
  0x7F, where 0x7F is a degree symbol.
- `glyph_8x12(char)` returns twelve row bytes, with the top row first.
- `glyph_11x16(char)` returns eleven 16-bit column words.

The 8x12 and 11x16 fonts cover characters 0x20 to 0x7E. A character outside a
font's range, or a string that is not exactly one character long, raises
`ValueError`. A value that is not a string raises `TypeError`.

The 8x12 and 11x16 fonts are available only as bitmap data. The package does
not render them as text; only the 5x7 font has a renderer.

## Running the tests

    pip install ".[test]"
    pytest