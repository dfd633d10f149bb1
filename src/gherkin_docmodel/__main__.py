import sys
import argparse
import logging

from typing import List, Optional

from .cli import cli


def parse_arguments() -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog='gherkin-docmodel')

    parser.add_argument(
        'files',
        nargs='*',
        type=str,
        default=['.'],
        help='feature files, or directories to search for feature files',
    )

    parser.add_argument(
        '--hide-tags',
        type=str,
        default=None,
        required=False,
        help='";" separated tags that should not be visible',
    )

    parser.add_argument(
        '--exclude-tags',
        type=str,
        default=None,
        required=False,
        help='";" separated tags, features and scenarios with any of them are skipped',
    )

    parser.add_argument(
        '--no-comments',
        action='store_true',
        required=False,
        default=False,
        help='do not keep comments in the feature model',
    )

    parser.add_argument(
        '--comment-parsing',
        type=str,
        default='',
        required=False,
        help='derive tags from comments, only "theme-story" is supported',
    )

    parser.add_argument(
        '--language',
        type=str,
        default='en',
        required=False,
        help='language of feature files without a language marker',
    )

    parser.add_argument(
        '--verbose',
        action='store_true',
        required=False,
        default=False,
        help='verbose output',
    )

    parser.add_argument(
        '--no-verbose',
        nargs='+',
        type=str,
        default=None,
        help='name of loggers to disable',
    )

    parser.add_argument(
        '--version',
        action='store_true',
        required=False,
        default=False,
        help='print version and exit',
    )

    args = parser.parse_args()

    if args.version:
        from gherkin_docmodel import __version__

        print(__version__, file=sys.stderr)

        raise SystemExit(0)

    return args


def setup_logging(args: argparse.Namespace) -> None:
    level = logging.INFO if not args.verbose else logging.DEBUG

    logging.basicConfig(
        level=level,
        format='[%(asctime)s] %(levelname)s: %(message)s',
        handlers=[logging.StreamHandler(sys.stderr)],
    )

    no_verbose: Optional[List[str]] = args.no_verbose

    if no_verbose is None:
        no_verbose = []

    # always supress these loggers
    no_verbose.append('parse')

    for logger_name in no_verbose:
        if logger_name in logging.Logger.manager.loggerDict:
            logger = logging.getLogger(logger_name)
            logger.setLevel(logging.ERROR)
        else:
            print(f'!! logger "{logger_name}" does not exist', file=sys.stderr)


def main() -> int:
    args = parse_arguments()

    setup_logging(args)

    return cli(args)


if __name__ == '__main__':  # pragma: no cover
    sys.exit(main())
