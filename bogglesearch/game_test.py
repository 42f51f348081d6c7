from bogglesearch.board import Board
from bogglesearch.game import Game, WordResult
from bogglesearch.test_utils import ALPHABET_BOARD, get_test_trie


def test_game():
    game = Game(Board.from_string(ALPHABET_BOARD), get_test_trie())
    assert game.play_human_word("fin") == WordResult.TOO_SHORT
    assert game.play_human_word("knife") == WordResult.ACCEPTED
    assert game.play_human_word("KNIFE") == WordResult.DUPLICATE
    assert game.play_human_word("mince") == WordResult.NOT_FOUND
    assert game.play_human_word(" plonk\n") == WordResult.ACCEPTED
    assert game.human_words == ["KNIFE", "PLONK"]
    assert game.scoreboard.human == 4

    words = game.play_computer_turn()
    assert words == {"FINK", "FINO", "GLOP", "JINK", "KNOP", "MINK"}
    assert game.computer_words == words
    assert game.scoreboard.computer == 6
    assert game.winner() == "computer"


def test_winner():
    game = Game(Board.from_string(ALPHABET_BOARD), get_test_trie())
    for word in ["FINK", "FINO", "GLOP", "JINK", "KNIFE", "KNOP", "MINK", "PLONK"]:
        assert game.play_human_word(word) == WordResult.ACCEPTED
    assert game.play_computer_turn() == set()
    assert game.winner() == "human"

    game = Game(Board.from_string("ZZZZ/ZZZZ/ZZZZ/ZZZZ"), get_test_trie())
    assert game.play_computer_turn() == set()
    assert game.winner() == "tie"


def test_min_length():
    game = Game(Board.from_string(ALPHABET_BOARD), get_test_trie(), min_length=3)
    assert game.play_human_word("fin") == WordResult.ACCEPTED
    assert game.play_human_word("fi") == WordResult.TOO_SHORT
    assert len(game.play_computer_turn()) == 15
