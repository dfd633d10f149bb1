from __future__ import annotations

import logging

from typing import Any, List, Optional, Sequence, Set, Tuple
from pathlib import Path

from behave.parser import parse_feature
from behave import model as behave_model

from gherkin_docmodel.constants import DEFAULT_LANGUAGE, MARKER_DOCSTRING, TAG_PREFIX
from gherkin_docmodel.errors import UnsupportedNodeError
from gherkin_docmodel.text import find_comments, find_language, get_column
from gherkin_docmodel.tree import (
    BackgroundNode,
    DataTable,
    DocString,
    ExamplesNode,
    FeatureNode,
    GherkinDocument,
    Location,
    ScenarioDefinition,
    ScenarioNode,
    ScenarioOutlineNode,
    StepArgument,
    StepNode,
)


logger = logging.getLogger(__name__)


class TreeBuilder:
    """Converts a behave model into the parse tree, using the source lines for columns."""

    lines: List[str]
    docstring_lines: Set[int]

    def __init__(self, source: str) -> None:
        self.lines = source.splitlines()
        self.docstring_lines = set()

    def location(self, line: Optional[int]) -> Location:
        if line is None or line < 1:
            return Location(line=0, column=0)

        try:
            column = get_column(self.lines[line - 1])
        except IndexError:
            column = 1

        return Location(line=line, column=column)

    @staticmethod
    def tags(tags: Optional[Sequence[str]]) -> Tuple[str, ...]:
        return tuple(tag if tag.startswith(TAG_PREFIX) else f'{TAG_PREFIX}{tag}' for tag in (tags or []))

    @staticmethod
    def description(node: Any) -> Optional[str]:
        lines: Optional[Sequence[str]] = getattr(node, 'description', None)
        if not lines:
            return None

        return '\n'.join(lines)

    @staticmethod
    def rows(table: Optional[behave_model.Table]) -> Tuple[Tuple[str, ...], ...]:
        if table is None:
            return ()

        return (tuple(table.headings), *[tuple(row.cells) for row in table.rows])

    def argument(self, step: behave_model.Step) -> Optional[StepArgument]:
        if step.table is not None:
            return DataTable(rows=self.rows(step.table))

        if step.text is not None:
            self.docstring_lines.update(self.docstring_range(step))
            return DocString(content=str(step.text))

        return None

    def docstring_range(self, step: behave_model.Step) -> range:
        """Source lines of the doc-string of `step`, fences included.

        The doc-string is the first fenced block after the step line.
        """
        start = next((lineno for lineno in range(step.line + 1, len(self.lines) + 1) if self.lines[lineno - 1].strip().startswith(MARKER_DOCSTRING)), None)
        if start is None:
            return range(0)

        fence = self.lines[start - 1].strip()[:3]
        end = next((lineno for lineno in range(start + 1, len(self.lines) + 1) if self.lines[lineno - 1].strip().startswith(fence)), len(self.lines))

        return range(start, end + 1)

    def step(self, step: behave_model.Step) -> StepNode:
        return StepNode(
            location=self.location(step.line),
            keyword=step.keyword,
            text=step.name,
            argument=self.argument(step),
        )

    def steps(self, steps: Optional[Sequence[behave_model.Step]]) -> Tuple[StepNode, ...]:
        return tuple(self.step(step) for step in (steps or []))

    def examples(self, examples: behave_model.Examples) -> ExamplesNode:
        return ExamplesNode(
            location=self.location(examples.line),
            keyword=examples.keyword,
            name=examples.name or None,
            description=self.description(examples),
            tags=self.tags(getattr(examples, 'tags', None)),
            rows=self.rows(examples.table),
        )

    def background(self, background: Optional[behave_model.Background]) -> Optional[BackgroundNode]:
        if background is None:
            return None

        return BackgroundNode(
            location=self.location(background.line),
            keyword=background.keyword,
            name=background.name or '',
            description=self.description(background),
            steps=self.steps(background.steps),
        )

    def scenario(self, scenario: Any) -> ScenarioDefinition:
        # outlines are scenarios in behave, check them first
        if isinstance(scenario, behave_model.ScenarioOutline):
            return ScenarioOutlineNode(
                location=self.location(scenario.line),
                keyword=scenario.keyword,
                name=scenario.name,
                description=self.description(scenario),
                tags=self.tags(scenario.tags),
                steps=self.steps(scenario.steps),
                examples=tuple(self.examples(examples) for examples in scenario.examples),
            )

        if isinstance(scenario, behave_model.Scenario):
            return ScenarioNode(
                location=self.location(scenario.line),
                keyword=scenario.keyword,
                name=scenario.name,
                description=self.description(scenario),
                tags=self.tags(scenario.tags),
                steps=self.steps(scenario.steps),
            )

        raise UnsupportedNodeError(scenario)

    def feature(self, feature: behave_model.Feature, language: str) -> FeatureNode:
        # scenarios grouped by a rule are not part of the model
        for rule in getattr(feature, 'rules', None) or []:
            raise UnsupportedNodeError(rule)

        return FeatureNode(
            location=self.location(feature.line),
            keyword=feature.keyword,
            name=feature.name,
            language=language,
            description=self.description(feature),
            tags=self.tags(feature.tags),
            background=self.background(feature.background),
            children=tuple(self.scenario(scenario) for scenario in feature.scenarios),
        )


def parse_document(source: str, *, language: Optional[str] = None, filename: Optional[str] = None) -> GherkinDocument:
    """Parse `source` with behave and return it as a parse tree.

    `behave.parser.ParserError` is not handled here.
    """
    feature = parse_feature(source, language=language, filename=filename)

    if feature is None:
        logger.debug(f'no feature found in {filename or "<string>"}')
        return GherkinDocument(feature=None, filename=filename)

    builder = TreeBuilder(source)

    return GherkinDocument(
        feature=builder.feature(feature, find_language(source, language or DEFAULT_LANGUAGE)),
        comments=tuple(find_comments(source, builder.docstring_lines)),
        filename=filename,
    )


def parse_file(path: Path, *, language: Optional[str] = None) -> GherkinDocument:
    return parse_document(path.read_text(encoding='utf-8'), language=language, filename=path.as_posix())
