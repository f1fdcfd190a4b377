"""Draw shapes and bitmap-font characters as ASCII art, with an interactive menu."""

__version__ = "0.1.0"