"""Command line wrapper: stem words given as arguments or on stdin."""

import argparse
import logging
import sys

from rulestem.dispatch import ALGORITHMS, stem

logger = logging.getLogger(__name__)


def build_parser():
    parser = argparse.ArgumentParser(
        prog='rulestem',
        description='Reduce words to their stems with a rule-based stemmer.',
    )
    parser.add_argument(
        'words', nargs='*', metavar='WORD',
        help='words to stem (read from stdin when none are given)',
    )
    parser.add_argument(
        '-a', '--algorithm', choices=ALGORITHMS, default='porter',
        help='stemming algorithm (default: %(default)s)',
    )
    parser.add_argument(
        '-v', '--verbose', action='store_true',
        help='show debug output',
    )
    return parser


def main(argv=None, stdin=None, stdout=None):
    args = build_parser().parse_args(argv)
    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(levelname)s: %(message)s',
    )

    words = args.words
    if not words:
        words = stdin.read().split()
    logger.debug("Stemming %d words with %s", len(words), args.algorithm)

    for word in words:
        stdout.write('{0}\t{1}\n'.format(word, stem(word, args.algorithm)))
    return 0


if __name__ == '__main__':
    sys.exit(main())
