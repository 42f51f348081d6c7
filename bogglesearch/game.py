"""One round of Boggle: the human plays words, then the computer sweeps up."""

import enum
import logging

from bogglesearch.board import Board
from bogglesearch.enumerator import ComputerEnumerator
from bogglesearch.pathfinder import Dictionary
from bogglesearch.scoring import MIN_WORD_LENGTH, Scoreboard
from bogglesearch.verifier import HumanVerifier

log = logging.getLogger(__name__)


class WordResult(enum.Enum):
    ACCEPTED = "accepted"
    TOO_SHORT = "too short"
    DUPLICATE = "already found"
    NOT_FOUND = "not on the board or not a word"


class Game:
    def __init__(
        self, board: Board, dictionary: Dictionary, min_length: int = MIN_WORD_LENGTH
    ):
        self.board = board
        self.scoreboard = Scoreboard()
        self.human_words: list[str] = []
        self.computer_words: set[str] = set()
        self._verifier = HumanVerifier(board, dictionary, self.scoreboard, min_length)
        self._enumerator = ComputerEnumerator(
            board, dictionary, self.scoreboard, min_length
        )
        self._min_length = min_length

    def play_human_word(self, word: str) -> WordResult:
        word = word.strip().upper()
        if len(word) < self._min_length:
            result = WordResult.TOO_SHORT
        elif word in self.human_words:
            result = WordResult.DUPLICATE
        elif self._verifier.verify(word):
            self.human_words.append(word)
            result = WordResult.ACCEPTED
        else:
            result = WordResult.NOT_FOUND
        log.debug("human played %s: %s", word, result.value)
        return result

    def play_computer_turn(self) -> set[str]:
        self.computer_words = self._enumerator.enumerate(self.human_words)
        log.debug(
            "computer found %d words for %d points",
            len(self.computer_words),
            self.scoreboard.computer,
        )
        return self.computer_words

    def winner(self) -> str:
        human, computer = self.scoreboard.human, self.scoreboard.computer
        if human > computer:
            return "human"
        if computer > human:
            return "computer"
        return "tie"
