"""Find every word on the board that the human missed."""

from typing import Iterable

from bogglesearch.board import Board
from bogglesearch.neighbors import Cell
from bogglesearch.pathfinder import Dictionary, PathFinder
from bogglesearch.scoring import MIN_WORD_LENGTH, ScoreSink, score_word


class ComputerEnumerator:
    paths: dict[str, list[Cell]]
    """First path found for each recorded word."""

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
        self.paths = {}

    def enumerate(self, excluded_words: Iterable[str] = ()) -> set[str]:
        excluded = {word.upper() for word in excluded_words}
        found: set[str] = set()
        self.paths = {}

        def on_candidate(word: str, depth: int):
            if (
                depth >= self._min_length
                and word not in found
                and word not in excluded
                and self._dictionary.contains_word(word)
            ):
                found.add(word)
                self.paths[word] = self._finder.path
                if self._sink is not None:
                    self._sink.add_computer_score(score_word(depth))
            return False

        stopped = self._finder.search(on_candidate)
        assert not stopped
        return found


def enumerate_words(
    board: Board,
    dictionary: Dictionary,
    excluded_words: Iterable[str] = (),
    sink: ScoreSink | None = None,
    min_length: int = MIN_WORD_LENGTH,
) -> set[str]:
    return ComputerEnumerator(board, dictionary, sink, min_length).enumerate(
        excluded_words
    )
