#!/usr/bin/env python3
"""List the words matching a filter built up one keystroke at a time.

The filter can be modified with the following keys:
  +      for 'character must occur'
  -      for 'character must not occur'
  1-5    for 'character must (not) be in position'
  esc, * for any position
  a-z    to apply the chosen filter
"""
import argparse
import logging
import sys

from . import __version__
from .errors import InvalidInputError, WordleError
from .filter import WORD_LENGTH, Filter
from .input_mode import DEFAULT_INPUT_MODE, KeyEvent, process_key
from .ranker import COMMON, NONE, RARE, SINGLE
from .view import INVALID, MAX_WORDS, build_lines
from .words import build_word_list, load_words, write_words

log = logging.getLogger(__name__)

DEFAULT_WORDS_FILE = "words.txt"


class Colors:
    red = "\033[31m"
    green = "\033[32m"
    yellow = "\033[33m"
    white = "\033[37m"
    grey = "\033[90m"
    reset = "\033[0m"


STYLE_COLORS = {
    NONE: Colors.red,
    SINGLE: Colors.green,
    COMMON: Colors.white,
    RARE: Colors.grey,
    INVALID: Colors.yellow,
}


def colorize(style, text):
    """Return text wrapped in the ANSI color for style"""
    color = STYLE_COLORS.get(style)
    if color is None:
        return text
    return f"{color}{text}{Colors.reset}"


def make_argparser():
    """Return arparse.ArgumentParser instance"""
    parser = argparse.ArgumentParser(
        description=__doc__,  # printed with -h/--help
        # Don't mess with format of description
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    # Only allow one of debug/quiet mode
    verbosity_group = parser.add_mutually_exclusive_group()
    verbosity_group.add_argument("-d", "--debug",
                                 action='store_true', default=False,
                                 help="Turn on debugging")
    verbosity_group.add_argument("-q", "--quiet",
                                 action="store_true", default=False,
                                 help="run quietly")
    parser.add_argument("--log-file",
                        action="store", default=None,
                        help="write log messages to this file instead of"
                        " stderr (keeps them off the interactive screen)")
    parser.add_argument("-w", "--words",
                        action="store", default=DEFAULT_WORDS_FILE,
                        help="word list file (default: %(default)s)")
    parser.add_argument("-n", "--max-words",
                        action="store", type=int, default=MAX_WORDS,
                        help="maximum number of matches to show"
                        " (default: %(default)s)")
    parser.add_argument("--version", action="version",
                        version=f"%(prog)s {__version__}")
    parser.set_defaults(func=cmd_assist)

    subparsers = parser.add_subparsers(help='sub-command help')

    parser_assist = subparsers.add_parser('assist', help=cmd_assist.__doc__)
    parser_assist.set_defaults(func=cmd_assist)

    parser_list = subparsers.add_parser('list', help=cmd_list.__doc__)
    parser_list.set_defaults(func=cmd_list)
    parser_list.add_argument(
        "keys", metavar="keys", type=str,
        help="keys to apply, e.g. '+3c-d' (use * for esc)")

    parser_build = subparsers.add_parser('build', help=cmd_build.__doc__)
    parser_build.set_defaults(func=cmd_build)
    parser_build.add_argument(
        "-t", "--threshold",
        action="store", type=float, default=3.0,
        help="zipf_frequency() threshold for common words")
    parser_build.add_argument(
        "-m", "--minimum",
        action="store", type=float, default=1.0,
        help="zipf_frequency() threshold for words to include")

    return parser


def configure_logging(args):
    """Set up the root logger from command line options"""
    if args.debug:
        level = logging.DEBUG
    elif args.quiet:
        level = logging.WARNING
    else:
        level = logging.INFO
    logging.basicConfig(level=level, filename=args.log_file,
                        format="%(levelname)s: %(message)s")


def read_words(args):
    log.info(f"Reading word list {args.words}...")
    return load_words(args.words, WORD_LENGTH)


def cmd_assist(args):
    """Interactively filter the word list"""
    # curses is only needed for the interactive screen
    from .screen import assist
    words = read_words(args)
    try:
        assist(words, args.max_words)
    except KeyboardInterrupt:
        pass
    return(0)


def cmd_list(args):
    """Apply keys to an empty filter and print the matches"""
    words = read_words(args)
    flt = Filter(WORD_LENGTH)
    mode = DEFAULT_INPUT_MODE
    message = None
    for c in args.keys:
        try:
            mode = process_key(mode, KeyEvent(c), flt)
        except InvalidInputError as e:
            message = str(e)
            log.warning(message)
    for style, text in build_lines(words, flt, mode, args.max_words,
                                   message):
        print(colorize(style, text))
    return(0)


def cmd_build(args):
    """Write the word list from wordfreq"""
    words = build_word_list(WORD_LENGTH, args.threshold, args.minimum)
    write_words(words, args.words)
    common = sum(1 for _, c in words if c)
    log.info(f"Wrote {len(words)} words ({common} common) to {args.words}")
    return(0)


def main(argv=None):
    parser = make_argparser()
    args = parser.parse_args(argv if argv else sys.argv[1:])
    configure_logging(args)
    try:
        return args.func(args)
    except WordleError as e:
        print(colorize(NONE, f"Error: {e}"), file=sys.stderr)
        return(1)


if __name__ == "__main__":
    sys.exit(main())
