from bogglesearch.test_utils import get_test_trie
from bogglesearch.trie import Trie, normalize_word


def test_trie():
    t = Trie.create_from_wordlist(
        [
            "agriculture",
            "culture",
            "boggle",
            "tea",
            "sea",
            "teapot",
        ]
    )
    assert not t.is_word()

    assert t.size() == 6
    assert t.contains_word("AGRICULTURE")
    assert t.contains_word("CULTURE")
    assert t.contains_word("BOGGLE")
    assert t.contains_word("TEA")
    assert t.contains_word("SEA")
    assert t.contains_word("TEAPOT")

    assert not t.contains_word("TEAP")
    assert not t.contains_word("RANDOM")
    assert not t.contains_word("CULTUR")

    assert t.contains_prefix("TEAP")
    assert t.contains_prefix("CULTUR")
    assert t.contains_prefix("TEAPOT")
    assert t.contains_prefix("")
    assert not t.contains_prefix("TEAPOTS")
    assert not t.contains_prefix("X")


def test_find_word():
    t = Trie.create_from_wordlist(["tea", "teapot"])
    node = t.find_word("TEA")
    assert node is not None
    assert node.is_word()
    assert t.find_word("TEAP") is not None
    assert not t.find_word("TEAP").is_word()
    assert t.find_word("") is t
    assert t.num_nodes() == 7


def test_odd_characters():
    t = Trie.create_from_wordlist(["tea"])
    # Words are stored upper-case.
    assert not t.contains_word("tea")
    assert not t.contains_prefix("t")
    assert not t.contains_word("TE A")
    assert not t.contains_prefix("T3")


def test_normalize_word():
    assert normalize_word("boggle\n") == "BOGGLE"
    assert normalize_word("  Quart ") == "QUART"
    assert normalize_word("don't") is None
    assert normalize_word("e-mail") is None
    assert normalize_word("") is None
    assert normalize_word("\n") is None


def test_load_file():
    t = get_test_trie()
    assert not t.is_word()
    assert t.size() == 19

    assert t.contains_word("KNIFE")
    assert t.contains_word("PLONK")
    assert not t.contains_word("KNIF")
    assert not t.contains_prefix("DON")
