"""
wortschatz CLI.
"""

import argparse
import logging

from wortschatz import config
from wortschatz.cli.commands import pw, words


def main(argv: list[str] | None = None):
    parser = argparse.ArgumentParser(prog="wortschatz", description="German lexicon passwords")
    parser.add_argument("--dict", dest="dict_source", default=config.dict_source(),
                        help="Lexicon file or URL (default: $WORTSCHATZ_DICT)")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="-v info, -vv debug")
    subparsers = parser.add_subparsers(dest="command")

    pw.add_subparser(subparsers)
    words.add_subparser(subparsers)

    args = parser.parse_args(argv)

    logging.basicConfig(format="%(message)s")
    if args.verbose >= 2:
        logging.getLogger("wortschatz").setLevel(logging.DEBUG)
    elif args.verbose == 1:
        logging.getLogger("wortschatz").setLevel(logging.INFO)

    if hasattr(args, "func"):
        args.func(args)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
