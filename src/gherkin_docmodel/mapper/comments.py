from __future__ import annotations

import logging

from typing import List, Optional

from gherkin_docmodel.model import Comment, CommentType, FeatureElement, Step


logger = logging.getLogger(__name__)


def find_owner(feature_elements: List[FeatureElement], comment: Comment) -> Optional[FeatureElement]:
    owner: Optional[FeatureElement] = None

    for feature_element in feature_elements:
        if feature_element.location.line < comment.location.line:
            owner = feature_element

    return owner


def find_step_after(steps: List[Step], comment: Comment) -> Optional[Step]:
    return next((step for step in steps if step.location.line > comment.location.line), None)


def find_step_before(steps: List[Step], comment: Comment) -> Optional[Step]:
    return next((step for step in reversed(steps) if step.location.line < comment.location.line), None)


def associate_comment(feature_elements: List[FeatureElement], comment: Comment) -> None:
    owner = find_owner(feature_elements, comment)
    if owner is None:
        return

    step = find_step_after(owner.steps, comment)
    if step is not None:
        comment.type = CommentType.STEP_COMMENT
        step.comments.append(comment)
        return

    step = find_step_before(owner.steps, comment)
    if step is not None and step is owner.steps[-1]:
        comment.type = CommentType.AFTER_LAST_STEP_COMMENT
        step.comments.append(comment)
        return

    logger.debug(f'comment at line {comment.location.line} could not be associated with a step in "{owner.name}"')


def associate_comments(feature_elements: List[FeatureElement], comments: List[Comment]) -> None:
    """Attach each comment to the step it precedes, or to the last step it trails.

    Ownership is decided on line numbers only: a comment belongs to the last
    feature element that starts before it. Comments that cannot be attached
    keep their normal type.
    """
    for comment in sorted(comments, key=lambda comment: comment.location.line):
        associate_comment(feature_elements, comment)
