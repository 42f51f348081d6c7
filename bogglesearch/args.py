"""Standard command-line arguments."""

import argparse

from bogglesearch.scoring import MIN_WORD_LENGTH
from bogglesearch.trie import Trie, make_trie


def add_standard_args(parser: argparse.ArgumentParser, *, random_seed=False):
    parser.add_argument(
        "--dictionary",
        type=str,
        default="wordlists/enable2k.txt",
        help="Path to dictionary file with one word per line.",
    )
    parser.add_argument(
        "--min_length",
        type=int,
        default=MIN_WORD_LENGTH,
        help="Shortest word that counts.",
    )

    if random_seed:
        parser.add_argument(
            "--random_seed",
            help="Explicitly set the random seed.",
            type=int,
            default=-1,
        )


def get_dictionary_from_args(args: argparse.Namespace) -> Trie:
    t = make_trie(args.dictionary)
    assert t
    return t
