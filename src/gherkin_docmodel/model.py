from __future__ import annotations

import weakref

from enum import Enum
from typing import List, Optional
from dataclasses import dataclass, field

from gherkin_docmodel.constants import DEFAULT_LANGUAGE
from gherkin_docmodel.tree import Location


class Keyword(Enum):
    GIVEN = 'Given'
    WHEN = 'When'
    THEN = 'Then'
    AND = 'And'
    BUT = 'But'


class CommentType(Enum):
    NORMAL = 0
    STEP_COMMENT = 1
    AFTER_LAST_STEP_COMMENT = 2


class TestResult(Enum):
    __test__ = False

    INCONCLUSIVE = 0
    FAILED = 1
    PASSED = 2
    NOT_PROVIDED = 3


class FeatureElementKind(Enum):
    SCENARIO = 'scenario'
    SCENARIO_OUTLINE = 'scenario_outline'
    BACKGROUND = 'background'


@dataclass
class Comment:
    text: str
    location: Location
    type: CommentType = field(default=CommentType.NORMAL)


@dataclass
class TableRow:
    cells: List[str]


@dataclass
class TableRowWithTestResult(TableRow):
    result: Optional[TestResult] = field(default=None)


@dataclass
class Table:
    header_row: TableRow
    data_rows: List[TableRow] = field(default_factory=list)


@dataclass
class ExampleTable(Table):
    data_rows: List[TableRowWithTestResult] = field(default_factory=list)  # type: ignore[assignment]


@dataclass
class Step:
    location: Location
    keyword: Keyword
    native_keyword: str
    name: str
    table_argument: Optional[Table] = field(default=None)
    doc_string_argument: Optional[str] = field(default=None)
    comments: List[Comment] = field(default_factory=list)


@dataclass
class Example:
    table_argument: Optional[ExampleTable]
    name: Optional[str] = field(default=None)
    description: Optional[str] = field(default=None)
    tags: List[str] = field(default_factory=list)


@dataclass
class FeatureElement:
    """A scenario, scenario outline or background.

    `examples` is only populated for scenario outlines, and `slug` is not
    computed for backgrounds. The owning feature is only referenced weakly.
    """

    kind: FeatureElementKind
    name: str
    location: Location
    description: str = field(default='')
    slug: Optional[str] = field(default=None)
    tags: List[str] = field(default_factory=list)
    steps: List[Step] = field(default_factory=list)
    examples: List[Example] = field(default_factory=list)
    _feature: Optional[weakref.ReferenceType[Feature]] = field(default=None, init=False, repr=False, compare=False)

    @property
    def feature(self) -> Optional[Feature]:
        if self._feature is None:
            return None

        return self._feature()

    @feature.setter
    def feature(self, feature: Feature) -> None:
        if self._feature is not None:
            raise ValueError(f'{self.kind.value} "{self.name}" already belongs to a feature')

        self._feature = weakref.ref(feature)


@dataclass
class Feature:
    name: str
    description: str = field(default='')
    tags: List[str] = field(default_factory=list)
    background: Optional[FeatureElement] = field(default=None)
    feature_elements: List[FeatureElement] = field(default_factory=list)
    comments: List[Comment] = field(default_factory=list)
    language: str = field(default=DEFAULT_LANGUAGE)

    def add_background(self, background: FeatureElement) -> None:
        background.feature = self
        self.background = background

    def add_feature_element(self, feature_element: FeatureElement) -> None:
        feature_element.feature = self
        self.feature_elements.append(feature_element)
