from __future__ import annotations

import re
import unicodedata

from typing import List, Optional, Set

from gherkin_docmodel.constants import DEFAULT_LANGUAGE, MARKER_COMMENT
from gherkin_docmodel.tree import CommentNode, Location


language_marker_pattern = re.compile(r'^#\s*language\s*:', re.IGNORECASE)


def is_language_marker(line: str) -> bool:
    return language_marker_pattern.match(line.strip()) is not None


def find_language(source: str, default: str = DEFAULT_LANGUAGE) -> str:
    language = default

    for line in source.splitlines():
        line = line.strip()
        if len(line) < 1:
            continue

        if is_language_marker(line):
            _, lang = line.split(':', 1)
            lang = lang.strip()
            if len(lang) >= 2:
                language = lang

        # the marker is only valid before any other content
        if not line.startswith(MARKER_COMMENT):
            break

    return language


def get_column(line: str) -> int:
    """1-based column of the first non-whitespace character in `line`."""
    return len(line) - len(line.lstrip()) + 1


def find_comments(source: str, ignore_lines: Optional[Set[int]] = None) -> List[CommentNode]:
    """Comment lines in `source`, in line order.

    The language marker is not a comment, and neither is any line in
    `ignore_lines` (doc-string lines, as found by the parser).
    """
    comments: List[CommentNode] = []

    if ignore_lines is None:
        ignore_lines = set()

    for lineno, line in enumerate(source.splitlines(), start=1):
        stripped_line = line.strip()

        if len(stripped_line) < 1 or lineno in ignore_lines:
            continue

        if not stripped_line.startswith(MARKER_COMMENT) or is_language_marker(stripped_line):
            continue

        comments.append(CommentNode(location=Location(line=lineno, column=get_column(line)), text=stripped_line))

    return comments


def slugify(text: str) -> str:
    text = unicodedata.normalize('NFKD', str(text)).encode('ascii', 'ignore').decode('ascii').lower()
    text = re.sub(r'[^\w\s-]', '', text)

    return re.sub(r'[-\s]+', '-', text).strip('-_')
