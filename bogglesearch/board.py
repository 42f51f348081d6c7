"""A fixed 4x4 Boggle board of single uppercase letters."""

import random
from typing import Sequence

from bogglesearch.neighbors import SIZE
from bogglesearch.neighbors import in_bounds as _in_bounds

# https://www.bananagrammer.com/2013/10/the-boggle-cube-redesign-and-its-effect.html
# "New" Boggle dice, 1987 to ~2008. The "q" face stands for a plain Q.
DICE = [
    "aaeegn",
    "achops",
    "affkps",
    "abjoob",
    "ciimot",
    "delrvy",
    "deilrx",
    "eeinsu",
    "eeghnw",
    "hlnnrz",
    "distty",
    "aoottw",
    "elrtty",
    "eiosst",
    "ehrtuv",
    "himnqu",
]
assert len(DICE) == SIZE * SIZE


class Board:
    """Read-only grid, indexed by (row, col)."""

    _rows: tuple[str, ...]

    def __init__(self, rows: Sequence[str]):
        if len(rows) != SIZE:
            raise ValueError(f"Board must have {SIZE} rows, got {len(rows)}")
        out = []
        for row in rows:
            row = row.upper()
            if len(row) != SIZE:
                raise ValueError(f"Board rows must have {SIZE} letters: {row!r}")
            if not all("A" <= let <= "Z" for let in row):
                raise ValueError(f"Board letters must be A-Z: {row!r}")
            out.append(row)
        self._rows = tuple(out)

    @staticmethod
    def from_string(bd: str) -> "Board":
        """Parse "abcdefghijklmnop", "ABCD/EFGH/IJKL/MNOP" or "ABCD EFGH ..."."""
        lets = "".join(bd.replace("/", " ").split())
        if len(lets) != SIZE * SIZE:
            raise ValueError(
                f"Board must have exactly {SIZE * SIZE} letters, got {len(lets)}: {bd!r}"
            )
        return Board([lets[i : i + SIZE] for i in range(0, SIZE * SIZE, SIZE)])

    @staticmethod
    def roll(rng: random.Random | None = None) -> "Board":
        """Shake the dice into the grid and pick a face for each."""
        rng = rng or random.Random()
        dice = list(DICE)
        rng.shuffle(dice)
        return Board.from_string("".join(rng.choice(die) for die in dice))

    @property
    def letters(self) -> str:
        return "".join(self._rows)

    def in_bounds(self, row: int, col: int):
        return _in_bounds(row, col)

    def letter_at(self, row: int, col: int) -> str:
        return self._rows[row][col]

    def __str__(self):
        return "/".join(self._rows)

    def __repr__(self):
        return f"Board({str(self)!r})"

    def __eq__(self, other):
        return isinstance(other, Board) and self._rows == other._rows

    def __hash__(self):
        return hash(self._rows)
