import logging
from typing import Iterable, Self

LETTER_A = ord("A")

log = logging.getLogger(__name__)


def to_idx(letter: str) -> int | None:
    if not "A" <= letter <= "Z":
        return None
    return ord(letter) - LETTER_A


class Trie:
    """Prefix tree over uppercase A-Z. Doubles as the search's dictionary."""

    _children: list[Self | None]
    _is_word: bool

    def __init__(self):
        self._is_word = False
        self._children = [None] * 26

    def starts_word(self, i: int):
        return self._children[i] is not None

    def descend(self, i: int):
        return self._children[i]

    def is_word(self):
        return self._is_word

    # ---

    def set_is_word(self):
        self._is_word = True

    def add_word(self, word: str) -> Self:
        if word == "":
            self.set_is_word()
            return self
        c = to_idx(word[0])
        assert c is not None, word
        if not self.starts_word(c):
            self._children[c] = Trie()
        return self.descend(c).add_word(word[1:])

    def find_word(self, word: str) -> Self | None:
        """Node reached by spelling out word, whether or not it's a word."""
        node = self
        for let in word:
            c = to_idx(let)
            if c is None or not node.starts_word(c):
                return None
            node = node.descend(c)
        return node

    def contains_word(self, word: str):
        node = self.find_word(word)
        return node is not None and node.is_word()

    def contains_prefix(self, prefix: str):
        return self.find_word(prefix) is not None

    def size(self):
        return (1 if self.is_word() else 0) + sum(c.size() for c in self._children if c)

    def num_nodes(self):
        return 1 + sum(c.num_nodes() for c in self._children if c)

    @staticmethod
    def create_from_wordlist(words: Iterable[str]) -> Self:
        trie = Trie()
        for word in words:
            word = normalize_word(word)
            if word is not None:
                trie.add_word(word)
        return trie


def normalize_word(word: str) -> str | None:
    """Upper-case a dictionary line, or None if it can't appear on a board."""
    word = word.strip().upper()
    if not word or not all("A" <= let <= "Z" for let in word):
        return None
    return word


def make_trie(dict_input: str) -> Trie:
    with open(dict_input) as f:
        t = Trie.create_from_wordlist(f)
    log.info("Loaded %d words (%d nodes) from %s", t.size(), t.num_nodes(), dict_input)
    return t
