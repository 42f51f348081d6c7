#!/usr/bin/env python
"""Play boards: the human's words first, then everything the computer can find."""

import argparse
import fileinput
import logging
import random
import sys
import time

from tqdm import tqdm

from bogglesearch.args import add_standard_args, get_dictionary_from_args
from bogglesearch.board import Board
from bogglesearch.game import Game, WordResult


def main(argv=None):
    parser = argparse.ArgumentParser(description="Find all the words on Boggle boards")
    add_standard_args(parser, random_seed=True)
    parser.add_argument(
        "files", metavar="FILE", nargs="*", help="Files containing boards, or stdin"
    )
    parser.add_argument(
        "--random_boards",
        type=int,
        default=0,
        help="Roll this many random boards instead of reading them.",
    )
    parser.add_argument(
        "--human",
        nargs="*",
        default=[],
        help="Words the human found. These are verified and excluded from the computer's turn.",
    )
    parser.add_argument(
        "--print_words",
        action="store_true",
        help="Print all the words the computer found on each board.",
    )
    parser.add_argument("--verbose", action="store_true", help="Debug logging.")

    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )
    dictionary = get_dictionary_from_args(args)

    if args.random_boards:
        if args.random_seed >= 0:
            rng = random.Random(args.random_seed)
        else:
            rng = random.Random()
        boards = tqdm(
            (Board.roll(rng) for _ in range(args.random_boards)),
            total=args.random_boards,
        )
    else:
        boards = (
            Board.from_string(line)
            for line in fileinput.input(files=args.files)
            if line.strip()
        )

    start_s = time.time()
    n = 0
    for board in boards:
        game = Game(board, dictionary, min_length=args.min_length)
        for word in args.human:
            result = game.play_human_word(word)
            if result != WordResult.ACCEPTED:
                print(f"{word}: {result.value}")
        words = game.play_computer_turn()
        score = game.scoreboard
        print(f"{board}: human={score.human} computer={score.computer}")
        if args.print_words:
            print("\n".join(sorted(words)))
        n += 1
    end_s = time.time()
    elapsed_s = end_s - start_s
    rate = n / elapsed_s if elapsed_s else 0
    sys.stderr.write(f"{n} boards in {elapsed_s:.2f}s = {rate:.2f} boards/s\n")


if __name__ == "__main__":
    main()
