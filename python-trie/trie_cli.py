import argparse
import logging
import os
import sys

from trie_printer import print_trie
from word_loader import build_trie, load_words_from_file

WORDS_FILE = os.environ.get("TRIE_WORDS_FILE", "words.txt")
LOG_LEVEL = os.environ.get("TRIE_LOG_LEVEL", "INFO")

logger = logging.getLogger(__name__)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Load words into a trie, print it and count them")
    parser.add_argument("words_file", nargs="?", default=WORDS_FILE,
                        help=f"Whitespace-delimited words file (default: {WORDS_FILE})")
    parser.add_argument("--prefix", action="append", default=[],
                        help="Print completions for this prefix (repeatable)")
    parser.add_argument("--no-tree", action="store_true", help="Do not print the tree")
    parser.add_argument("--log-level", default=LOG_LEVEL, help=f"Logging level (default: {LOG_LEVEL})")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=args.log_level.upper(), format='%(asctime)s %(levelname)s: %(message)s')

    try:
        words = load_words_from_file(args.words_file)
    except (OSError, UnicodeDecodeError):
        logger.error(f"Aborting: no words loaded from {args.words_file}")
        return 1

    trie = build_trie(words)

    if not args.no_tree:
        print_trie(trie)

    print(f"Number of words: {trie.count_words()}")

    for prefix in args.prefix:
        completions = sorted(trie.words_with_prefix(prefix))
        if completions:
            print(f"Completions for {prefix!r}: {', '.join(completions)}")
        else:
            print(f"No completions for {prefix!r}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
