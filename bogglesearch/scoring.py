from dataclasses import dataclass
from typing import Protocol

MIN_WORD_LENGTH = 4

#          0..4  5  6  7  8+
SCORES = (1, 1, 1, 1, 1, 2, 3, 5, 11)


def score_word(length: int) -> int:
    """Points for a word of this many letters."""
    return SCORES[min(length, len(SCORES) - 1)]


class ScoreSink(Protocol):
    def add_human_score(self, points: int) -> None: ...

    def add_computer_score(self, points: int) -> None: ...


@dataclass
class Scoreboard:
    """In-memory ScoreSink."""

    human: int = 0
    computer: int = 0

    def add_human_score(self, points: int):
        self.human += points

    def add_computer_score(self, points: int):
        self.computer += points
