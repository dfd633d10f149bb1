from __future__ import annotations

import logging

from typing import List
from argparse import Namespace as Arguments
from pathlib import Path

from behave.parser import ParserError
from colorama import init, Fore

from gherkin_docmodel.configuration import Configuration
from gherkin_docmodel.mapper import FeatureParser
from gherkin_docmodel.model import Feature, FeatureElement


logger = logging.getLogger(__name__)


def find_feature_files(arguments: List[str]) -> List[Path]:
    files: List[Path] = []

    for argument in arguments:
        path = Path(argument)

        if path.is_dir():
            files.extend(sorted(path.rglob('*.feature')))
        else:
            files.append(path)

    return files


def feature_element_to_text(feature_element: FeatureElement) -> str:
    tags = ' '.join(feature_element.tags)

    return '\t'.join(
        [
            f'  {feature_element.location.line}:{feature_element.location.column}',
            f'{Fore.BLUE}{feature_element.kind.value}{Fore.RESET}',
            feature_element.name,
            f'{Fore.CYAN}{tags}{Fore.RESET}',
            f'{len(feature_element.steps)} steps',
        ]
    )


def feature_to_text(filename: str, feature: Feature) -> List[str]:
    tags = ' '.join(feature.tags)
    lines: List[str] = [f'{filename}\t{Fore.GREEN}{feature.name}{Fore.RESET}\t{Fore.CYAN}{tags}{Fore.RESET}']

    if feature.background is not None:
        lines.append(feature_element_to_text(feature.background))

    lines.extend([feature_element_to_text(feature_element) for feature_element in feature.feature_elements])

    return lines


def cli(args: Arguments) -> int:
    # init colorama for ansi colors
    init()

    try:
        configuration = Configuration(
            hide_tags=args.hide_tags,
            exclude_tags=args.exclude_tags,
            enable_comments=not args.no_comments,
            comment_parsing=args.comment_parsing,
            language=args.language,
        )
    except ValueError as e:
        logger.error(str(e))
        return 1

    parser = FeatureParser(configuration)

    rc: int = 0
    for file in find_feature_files(args.files):
        filename = file.as_posix().replace(Path.cwd().as_posix(), '').lstrip('/\\')

        try:
            feature = parser.parse_file(file)
        except (ParserError, ValueError, OSError):
            logger.exception(f'failed to parse {filename}')
            rc = 1
            continue

        if feature is None:
            print(f'{filename}\t{Fore.YELLOW}skipped{Fore.RESET}')
            continue

        for line in feature_to_text(filename, feature):
            print(line)

    return rc
