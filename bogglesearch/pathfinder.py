"""Depth-first search for words along simple paths on a Boggle board.

Every step must stay on the board, avoid cells already on the current path and
keep the accumulated letters a prefix of some dictionary word. The prefix check
is what keeps this fast: the search only visits paths that spell a prefix in the
dictionary, so its cost scales with the dictionary's branching factor rather
than with the (enormous) number of simple paths on a 4x4 grid.
"""

from typing import Callable, Protocol

from bogglesearch.board import Board
from bogglesearch.neighbors import DIRECTIONS, START_CELLS, Cell


class Dictionary(Protocol):
    def contains_word(self, word: str) -> bool: ...

    def contains_prefix(self, prefix: str) -> bool: ...


# Called with (word, depth) each time the path is extended.
# Return True to stop the whole search.
OnCandidate = Callable[[str, int], bool | None]


class PathFinder:
    """Choose / explore / unchoose over a single shared path state."""

    def __init__(self, board: Board, dictionary: Dictionary):
        self._board = board
        self._dictionary = dictionary
        self._used: set[Cell] = set()
        self._path: list[Cell] = []
        self._word = ""

    @property
    def path(self) -> list[Cell]:
        return [*self._path]

    @property
    def word(self) -> str:
        return self._word

    def search(self, on_candidate: OnCandidate) -> bool:
        """Explore from every cell. Returns True if on_candidate stopped the search."""
        for start in START_CELLS:
            self._reset()
            if self.explore(start, on_candidate):
                return True
        return False

    def explore(self, cell: Cell, on_candidate: OnCandidate) -> bool:
        row, col = cell
        if not self._board.in_bounds(row, col):
            return False
        if cell in self._used:
            return False
        word = self._word + self._board.letter_at(row, col)
        if not self._dictionary.contains_prefix(word):
            return False

        self._used.add(cell)
        self._path.append(cell)
        prev_word = self._word
        self._word = word
        try:
            if on_candidate(self._word, len(self._path)):
                return True
            for dr, dc in DIRECTIONS:
                if self.explore((row + dr, col + dc), on_candidate):
                    return True
            return False
        finally:
            self._word = prev_word
            self._path.pop()
            self._used.remove(cell)

    def _reset(self):
        self._used.clear()
        self._path.clear()
        self._word = ""
