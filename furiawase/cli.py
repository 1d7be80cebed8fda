"""
Command line interface for furiawase.

Usage:
    furiawase 食べる たべる              # one "annotation<TAB>text" line per segment
    furiawase 今日 きょう -p "0-1:きょう"
    furiawase -j 食べ物 たべもの         # JSON output
    furiawase -g 食べ物                  # generate the reading with MeCab
"""

import argparse
import logging
import sys
from typing import Optional

from furiawase import __version__, settings
from furiawase.furigana import AlignmentError, combine_furi
from furiawase.models import FuriganaResult
from furiawase.placement import PlacementError
from furiawase.reading import ReadingService, ReadingServiceError


def format_pairs_text(pairs) -> str:
    """Format pairs as tab separated lines, annotation first."""
    return '\n'.join(f"{annotation}\t{text}" for annotation, text in pairs)


def _configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else getattr(logging, settings.LOG_LEVEL, logging.WARNING)
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def main(args: Optional[list] = None, service: Optional[ReadingService] = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description='Split a Japanese word and its reading into furigana segments',
        prog='furiawase',
    )

    parser.add_argument(
        'word',
        nargs='?',
        help='Japanese word with kanji and kana',
    )

    parser.add_argument(
        'reading',
        nargs='?',
        default='',
        help='Full kana reading of the word',
    )

    parser.add_argument(
        '-p', '--placement',
        type=str,
        default=None,
        metavar='DATA',
        help='Furigana placement data, e.g. "0-1:きょう;2:び"',
    )

    parser.add_argument(
        '-g', '--generate',
        action='store_true',
        help='Generate the reading with MeCab when none is given',
    )

    parser.add_argument(
        '-j', '--json',
        action='store_true',
        help='Print the result as JSON',
    )

    parser.add_argument(
        '--verbose',
        action='store_true',
        help='Log debug information to stderr',
    )

    parser.add_argument(
        '-v', '--version',
        action='store_true',
        help='Show version information',
    )

    parsed = parser.parse_args(args)

    if parsed.version:
        print(f'furiawase {__version__}')
        return 0

    if not parsed.word:
        parser.print_help()
        return 1

    _configure_logging(parsed.verbose or settings.DEBUG)

    reading = parsed.reading
    if not reading and parsed.generate:
        if service is None:
            service = ReadingService()
        try:
            reading = service.generate_reading(parsed.word)
        except ReadingServiceError as e:
            print(f'Error generating reading: {e}', file=sys.stderr)
            return 1

    try:
        pairs = combine_furi(parsed.word, reading, parsed.placement)
    except (PlacementError, AlignmentError) as e:
        print(f'Error: {e}', file=sys.stderr)
        return 1

    if parsed.json:
        print(FuriganaResult.from_pairs(parsed.word, reading, pairs).model_dump_json())
    else:
        print(format_pairs_text(pairs))
    return 0


if __name__ == '__main__':
    sys.exit(main())
