"""Immutable parse tree handed over by the gherkin parser adapter.

Nodes only carry what the grammar produced; nothing in here is derived.
"""
from __future__ import annotations

from typing import Optional, Tuple, Union
from dataclasses import dataclass, field


@dataclass(frozen=True, order=True)
class Location:
    line: int
    column: int = field(default=1)


@dataclass(frozen=True)
class DataTable:
    rows: Tuple[Tuple[str, ...], ...]


@dataclass(frozen=True)
class DocString:
    content: str


StepArgument = Union[DataTable, DocString]


@dataclass(frozen=True)
class StepNode:
    location: Location
    keyword: str
    text: str
    argument: Optional[StepArgument] = field(default=None)


@dataclass(frozen=True)
class ExamplesNode:
    location: Location
    keyword: str
    name: Optional[str] = field(default=None)
    description: Optional[str] = field(default=None)
    tags: Tuple[str, ...] = field(default=())
    rows: Tuple[Tuple[str, ...], ...] = field(default=())


@dataclass(frozen=True)
class BackgroundNode:
    location: Location
    keyword: str
    name: str
    description: Optional[str] = field(default=None)
    steps: Tuple[StepNode, ...] = field(default=())


@dataclass(frozen=True)
class ScenarioNode:
    location: Location
    keyword: str
    name: str
    description: Optional[str] = field(default=None)
    tags: Tuple[str, ...] = field(default=())
    steps: Tuple[StepNode, ...] = field(default=())


@dataclass(frozen=True)
class ScenarioOutlineNode(ScenarioNode):
    examples: Tuple[ExamplesNode, ...] = field(default=())


ScenarioDefinition = Union[ScenarioNode, ScenarioOutlineNode, BackgroundNode]


@dataclass(frozen=True)
class CommentNode:
    location: Location
    text: str


@dataclass(frozen=True)
class FeatureNode:
    location: Location
    keyword: str
    name: str
    language: str
    description: Optional[str] = field(default=None)
    tags: Tuple[str, ...] = field(default=())
    background: Optional[BackgroundNode] = field(default=None)
    children: Tuple[ScenarioDefinition, ...] = field(default=())


@dataclass(frozen=True)
class GherkinDocument:
    feature: Optional[FeatureNode]
    comments: Tuple[CommentNode, ...] = field(default=())
    filename: Optional[str] = field(default=None)
