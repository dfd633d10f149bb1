from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Iterable, Optional, Union
from dataclasses import dataclass, field

from ordered_set import OrderedSet

from gherkin_docmodel.constants import COMMENT_PARSING_THEME_STORY, DEFAULT_LANGUAGE, TAG_PREFIX


TagNames = Union[str, Iterable[str], None]


class CommentMode(Enum):
    DISCARD = 0
    RETAIN = 1
    DERIVE_TAGS = 2
    DERIVE_TAGS_AND_RETAIN = 3

    @property
    def collect(self) -> bool:
        return self != CommentMode.DISCARD

    @property
    def derive(self) -> bool:
        return self in (CommentMode.DERIVE_TAGS, CommentMode.DERIVE_TAGS_AND_RETAIN)

    @property
    def retain(self) -> bool:
        return self in (CommentMode.RETAIN, CommentMode.DERIVE_TAGS_AND_RETAIN)

    @classmethod
    def from_settings(cls, enable_comments: bool, comment_parsing: Optional[str]) -> CommentMode:
        comment_parsing = (comment_parsing or '').strip()

        if comment_parsing == '':
            return cls.RETAIN if enable_comments else cls.DISCARD

        if comment_parsing.lower() != COMMENT_PARSING_THEME_STORY:
            raise ValueError(f'"{comment_parsing}" is not a valid comment parsing mode, only "{COMMENT_PARSING_THEME_STORY}" is supported')

        return cls.DERIVE_TAGS_AND_RETAIN if enable_comments else cls.DERIVE_TAGS


def normalize_tag_names(tags: TagNames, *, delimiter: str = ';') -> OrderedSet[str]:
    """Lower-cased tag names without "@", from a delimited string or an iterable."""
    if tags is None:
        return OrderedSet()

    if isinstance(tags, str):
        tags = tags.split(delimiter)

    return OrderedSet(tag.strip().lstrip(TAG_PREFIX).lower() for tag in tags if len(tag.strip().lstrip(TAG_PREFIX)) > 0)


@dataclass(frozen=True)
class Configuration:
    hide_tags: OrderedSet[str] = field(default_factory=OrderedSet)
    exclude_tags: OrderedSet[str] = field(default_factory=OrderedSet)
    enable_comments: bool = field(default=True)
    comment_parsing: str = field(default='')
    language: str = field(default=DEFAULT_LANGUAGE)

    def __post_init__(self) -> None:
        object.__setattr__(self, 'hide_tags', normalize_tag_names(self.hide_tags))
        object.__setattr__(self, 'exclude_tags', normalize_tag_names(self.exclude_tags))
        # fail early on an unknown comment parsing mode
        CommentMode.from_settings(self.enable_comments, self.comment_parsing)

    @property
    def comment_mode(self) -> CommentMode:
        return CommentMode.from_settings(self.enable_comments, self.comment_parsing)

    def is_excluded(self, tag: str) -> bool:
        return tag.lstrip(TAG_PREFIX).lower() in self.exclude_tags

    @classmethod
    def from_settings(cls, settings: Dict[str, Any]) -> Configuration:
        return cls(
            hide_tags=normalize_tag_names(settings.get('hide_tags', None)),
            exclude_tags=normalize_tag_names(settings.get('exclude_tags', None)),
            enable_comments=bool(settings.get('enable_comments', True)),
            comment_parsing=settings.get('comment_parsing', None) or '',
            language=settings.get('language', None) or DEFAULT_LANGUAGE,
        )
