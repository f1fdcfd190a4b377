"""Interactive menu that draws shapes and characters on request."""

import argparse
import sys
from collections.abc import Iterator
from typing import TextIO

from asciidraw.chars import render_char_5x7
from asciidraw.shapes import render_arrow, render_square, render_triangle

WELCOME = "Welcome!\n"
PROMPT = (
    "Select which shape you want to print "
    "(Triangle = t, Square = s, Chars = c, Arrow = a) or 'q' to quit\n> "
)
FAREWELL = "Bye!\n"


def _choices(stdin: TextIO) -> Iterator[str]:
    """Yield input characters one at a time, skipping newlines."""
    while char := stdin.read(1):
        if char != "\n":
            yield char


def _respond(choice: str) -> str:
    if choice == "t":
        return "You selected triangle:\n" + render_triangle(5, 7)
    if choice == "s":
        return "You selected square:\n" + render_square(5, 5)
    if choice == "c":
        return "You selected chars:\n" + "".join(render_char_5x7(c) for c in "abc")
    if choice == "a":
        return "You selected arrow:\n" + render_arrow(5, 3, 4)
    return f"Unrecognized option '{choice}', please try again!\n"


def run(stdin: TextIO, stdout: TextIO) -> int:
    """Run the menu loop until 'q' or end of input; return the exit status."""
    stdout.write(WELCOME)
    choices = _choices(stdin)
    while True:
        stdout.write(PROMPT)
        stdout.flush()
        choice = next(choices, None)
        if choice is None:
            break
        if choice == "q":
            stdout.write(FAREWELL)
            break
        stdout.write(_respond(choice))
    return 0


def main(argv: list[str] | None = None) -> int:
    """Command entry point."""
    parser = argparse.ArgumentParser(
        prog="asciidraw", description="Draw shapes and characters with asterisks."
    )
    parser.parse_args(argv)
    return run(sys.stdin, sys.stdout)


if __name__ == "__main__":
    sys.exit(main())