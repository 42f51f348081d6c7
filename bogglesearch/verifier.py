"""Check a human player's word against the board."""

from bogglesearch.board import Board
from bogglesearch.neighbors import Cell
from bogglesearch.pathfinder import Dictionary, PathFinder
from bogglesearch.scoring import MIN_WORD_LENGTH, ScoreSink, score_word


class HumanVerifier:
    def __init__(
        self,
        board: Board,
        dictionary: Dictionary,
        sink: ScoreSink | None = None,
        min_length: int = MIN_WORD_LENGTH,
    ):
        self._finder = PathFinder(board, dictionary)
        self._dictionary = dictionary
        self._sink = sink
        self._min_length = min_length

    def find_path(self, word: str) -> list[Cell] | None:
        """The first path spelling this dictionary word, or None."""
        target = word.upper()
        found: list[list[Cell]] = []

        def on_candidate(chosen: str, depth: int):
            if (
                depth >= self._min_length
                and chosen == target
                and self._dictionary.contains_word(chosen)
            ):
                found.append(self._finder.path)
                return True
            return False

        self._finder.search(on_candidate)
        return found[0] if found else None

    def verify(self, word: str) -> bool:
        """Is this word on the board? Scores it for the human if so."""
        path = self.find_path(word)
        if path is None:
            return False
        if self._sink is not None:
            self._sink.add_human_score(score_word(len(path)))
        return True


def verify(
    board: Board,
    dictionary: Dictionary,
    word: str,
    sink: ScoreSink | None = None,
    min_length: int = MIN_WORD_LENGTH,
) -> bool:
    return HumanVerifier(board, dictionary, sink, min_length).verify(word)
