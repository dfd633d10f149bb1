from __future__ import annotations

import re
import logging

from typing import Iterable, List, Optional

from ordered_set import OrderedSet

from gherkin_docmodel.constants import TAG_PREFIX, TAG_STORY_PREFIX, TAG_STORY_PREFIX_LEGACY, TAG_THEME_PREFIX
from gherkin_docmodel.model import Comment, CommentType, FeatureElement


logger = logging.getLogger(__name__)

story_pattern = re.compile(r'\(B[-_](\d+)\)')

# a capture starting with "B" or "(" is a story reference, e.g. "RI:(B-12345)"
theme_pattern = re.compile(r'RI:\W*([^B(][A-Za-z0-9-]*)')


def retrieve_visible_tags(tags: Iterable[str], tags_to_hide: Optional[Iterable[str]] = None) -> List[str]:
    if tags_to_hide is None:
        return list(tags)

    hidden = OrderedSet(tag.lstrip(TAG_PREFIX).lower() for tag in tags_to_hide)

    return [tag for tag in tags if tag.lstrip(TAG_PREFIX).lower() not in hidden]


def parse_story(text: str) -> Optional[str]:
    match = story_pattern.search(text)
    if match is None:
        return None

    return match.group(1)


def parse_theme(text: str) -> Optional[str]:
    match = theme_pattern.search(text)
    if match is None:
        return None

    return f'{TAG_THEME_PREFIX}{match.group(1).replace("-", "_")}'


def add_parsed_tags(feature_element: FeatureElement, comment: Comment) -> None:
    tag = parse_theme(comment.text)
    if tag is not None and tag not in feature_element.tags:
        logger.debug(f'adding theme tag {tag} to "{feature_element.name}" from comment at line {comment.location.line}')
        feature_element.tags.append(tag)

    story = parse_story(comment.text)
    if story is None:
        return

    tag = f'{TAG_STORY_PREFIX}{story}'
    if tag in feature_element.tags or f'{TAG_STORY_PREFIX_LEGACY}{story}' in feature_element.tags:
        return

    logger.debug(f'adding story tag {tag} to "{feature_element.name}" from comment at line {comment.location.line}')
    feature_element.tags.append(tag)


def get_candidate_comments(previous: Optional[FeatureElement], current: FeatureElement, comments: List[Comment]) -> List[Comment]:
    """Comments whose theme and story references apply to `current`, in the order they should be applied.

    The first element of a feature also gets the comments that precede it,
    and every element inherits the comments trailing the last step of the
    element before it.
    """
    candidates: List[Comment] = []

    if previous is None:
        for comment in comments:
            if comment.type != CommentType.NORMAL:
                break
            candidates.append(comment)

    if previous is not None and len(previous.steps) > 0:
        candidates.extend([comment for comment in previous.steps[-1].comments if comment.type == CommentType.AFTER_LAST_STEP_COMMENT])

    for step in current.steps:
        candidates.extend([comment for comment in step.comments if comment.type != CommentType.AFTER_LAST_STEP_COMMENT])

    return candidates


def derive_tags(previous: Optional[FeatureElement], current: FeatureElement, comments: List[Comment]) -> None:
    for comment in get_candidate_comments(previous, current, comments):
        add_parsed_tags(current, comment)
