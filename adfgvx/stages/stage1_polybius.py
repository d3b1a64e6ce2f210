"""
Stage 1 : SUBSTITUTION: Polybius Square
=======================================
Each plaintext character is replaced by the pair of symbols naming its
row and column in a 6x6 grid. The row/column labels are the six letters
A D F G V X, picked in 1918 because they sound unlike each other in Morse.

    A D F G V X
  A A B C D E F
  D G H I J K L
  F M N O P Q R
  G S T U V W X
  V Y Z _ 1 2 3        (_ = space)
  X 4 5 6 7 8 9

'C' sits in row A, column F, so it becomes "AF".

Squares are immutable and shared: the registry below is built once at
import time and never written again.
"""

from dataclasses import dataclass, field
from typing import Dict, Iterable, Optional, Tuple, Union

from ..errors import InvalidSquareError

ALPHABET = "ADFGVX"
SIZE     = len(ALPHABET)


@dataclass(frozen=True)
class PolybiusTable:
    """A 6x6 Polybius square labelled by the ADFGVX alphabet."""

    alphabet = ALPHABET

    rows: Tuple[str, ...]
    _coords: Dict[str, Tuple[int, int]] = field(
        init=False, repr=False, compare=False
    )

    def __post_init__(self):
        rows = tuple("".join(r) for r in self.rows)
        if len(rows) != SIZE or any(len(r) != SIZE for r in rows):
            raise InvalidSquareError(f"Polybius square must be {SIZE}x{SIZE}.")

        coords = {}
        for i, row in enumerate(rows):
            for j, ch in enumerate(row):
                if ch in coords:
                    raise InvalidSquareError(f"Character {ch!r} appears twice in the square.")
                coords[ch] = (i, j)

        object.__setattr__(self, "rows", rows)
        object.__setattr__(self, "_coords", coords)

    @classmethod
    def from_string(cls, chars: str) -> "PolybiusTable":
        """Build a square from 36 characters read row by row."""
        if len(chars) != SIZE * SIZE:
            raise InvalidSquareError(
                f"Square string must hold {SIZE * SIZE} characters, got {len(chars)}."
            )
        return cls(tuple(chars[i:i + SIZE] for i in range(0, len(chars), SIZE)))

    @property
    def characters(self) -> str:
        return "".join(self.rows)

    def supports(self, c: str) -> bool:
        return c in self._coords

    def substitute(self, c: str) -> Optional[Tuple[str, str]]:
        """Return (row_symbol, col_symbol) for c, or None if c is not in the square."""
        pos = self._coords.get(c)
        if pos is None:
            return None
        return self.alphabet[pos[0]], self.alphabet[pos[1]]

    def unsubstitute(self, row_symbol: str, col_symbol: str) -> Optional[str]:
        """Return the character at (row_symbol, col_symbol), or None for a bad symbol."""
        if len(row_symbol) != 1 or len(col_symbol) != 1:
            return None
        row = self.alphabet.find(row_symbol)
        col = self.alphabet.find(col_symbol)
        if row < 0 or col < 0:
            return None
        return self.rows[row][col]

    def __str__(self):
        lines = ["  " + " ".join(self.alphabet)]
        for label, row in zip(self.alphabet, self.rows):
            lines.append(label + " " + " ".join(row))
        return "\n".join(lines)


_UPPER = ("ABCDEF", "GHIJKL", "MNOPQR", "STUVWX")

SQUARES = {
    "standard":   PolybiusTable(_UPPER + ("YZ 123", "456789")),
    "punctuated": PolybiusTable(_UPPER + ("YZ ,.1", "234567")),
    "classic":    PolybiusTable(_UPPER + ("YZ0123", "456789")),
}

DEFAULT_SQUARE = "standard"

SquareLike = Union[None, str, PolybiusTable, Iterable[str]]


def get_square(square: SquareLike = None) -> PolybiusTable:
    """
    Resolve a square argument.

    Accepts None (default square), a registered name, a 36-character
    string, a PolybiusTable, or six row strings.
    """
    if square is None:
        return SQUARES[DEFAULT_SQUARE]
    if isinstance(square, PolybiusTable):
        return square
    if isinstance(square, str):
        if square in SQUARES:
            return SQUARES[square]
        if len(square) == SIZE * SIZE:
            return PolybiusTable.from_string(square)
        raise InvalidSquareError(
            f"Unknown square {square!r}. Choose from {sorted(SQUARES)} "
            f"or pass {SIZE * SIZE} characters."
        )
    return PolybiusTable(tuple(square))
