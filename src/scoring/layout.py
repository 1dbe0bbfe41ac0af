"""Board layout parsing."""

from typing import Dict, List

from .models import Square


SQUARE_TYPES: Dict[str, Square] = {
    ".": Square(letter_multiplier=1, word_multiplier=1),
    "d": Square(letter_multiplier=2, word_multiplier=1),
    "t": Square(letter_multiplier=3, word_multiplier=1),
    "D": Square(letter_multiplier=1, word_multiplier=2),
    "T": Square(letter_multiplier=1, word_multiplier=3),
}

STANDARD_LAYOUT = """
T..d...T...d..T
.D...t...t...D.
..D...d.d...D..
d..D...d...D..d
....D.....D....
.t...t...t...t.
..d...d.d...d..
T..d...D...d..T
..d...d.d...d..
.t...t...t...t.
....D.....D....
d..D...d...D..d
..D...d.d...D..
.D...t...t...D.
T..d...T...d..T
"""


def parse_square(char: str) -> Square:
    """Map a layout character to its square."""
    if char not in SQUARE_TYPES:
        raise ValueError(f"Unknown square type: {char!r}")
    return SQUARE_TYPES[char]


def square_char(square: Square) -> str:
    """Inverse of parse_square, used when rendering empty cells."""
    for char, known in SQUARE_TYPES.items():
        if known == square:
            return char
    return "?"


def parse_squares(layout: str) -> List[List[Square]]:
    """
    Parse a layout text block into an N x N grid of squares.

    Each non-blank line is one row. Raises ValueError if the layout is
    empty, not square, or uses an unknown character.
    """
    lines = [line.strip() for line in layout.strip().split('\n') if line.strip()]

    if not lines:
        raise ValueError("Board layout is empty")

    size = len(lines)
    for i, line in enumerate(lines, start=1):
        if len(line) != size:
            raise ValueError(
                f"Board layout must be square: line {i} has {len(line)} "
                f"squares, expected {size}"
            )

    return [[parse_square(char) for char in line] for line in lines]
