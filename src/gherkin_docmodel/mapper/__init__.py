from __future__ import annotations

import logging

from typing import Iterable, List, Optional, Sequence, Tuple
from pathlib import Path

from gherkin_docmodel.configuration import Configuration
from gherkin_docmodel.errors import UnrecognizedKeywordError, UnsupportedNodeError
from gherkin_docmodel.language import LanguageServices
from gherkin_docmodel.model import (
    Comment,
    Example,
    ExampleTable,
    Feature,
    FeatureElement,
    FeatureElementKind,
    Keyword,
    Step,
    Table,
    TableRow,
    TableRowWithTestResult,
)
from gherkin_docmodel.parser import parse_document, parse_file
from gherkin_docmodel.text import slugify
from gherkin_docmodel.tree import (
    BackgroundNode,
    CommentNode,
    DataTable,
    DocString,
    ExamplesNode,
    GherkinDocument,
    ScenarioDefinition,
    ScenarioNode,
    ScenarioOutlineNode,
    StepNode,
)

from .comments import associate_comments
from .tags import derive_tags, retrieve_visible_tags


logger = logging.getLogger(__name__)

Rows = Sequence[Sequence[str]]


class Mapper:
    configuration: Configuration
    language_services: LanguageServices

    def __init__(self, configuration: Configuration, language_services: Optional[LanguageServices] = None) -> None:
        self.configuration = configuration

        if language_services is None:
            language_services = LanguageServices.for_language(configuration.language)

        self.language_services = language_services

    def map_to_table_row(self, cells: Sequence[str]) -> TableRow:
        return TableRow(cells=list(cells))

    def map_to_table(self, rows: Rows) -> Table:
        return Table(
            header_row=self.map_to_table_row(rows[0]),
            data_rows=[self.map_to_table_row(row) for row in rows[1:]],
        )

    def map_to_table_row_with_test_result(self, cells: Sequence[str]) -> TableRowWithTestResult:
        return TableRowWithTestResult(cells=list(cells))

    def map_to_example_table(self, rows: Rows) -> ExampleTable:
        return ExampleTable(
            header_row=self.map_to_table_row(rows[0]),
            data_rows=[self.map_to_table_row_with_test_result(row) for row in rows[1:]],
        )

    def map_to_keyword(self, keyword: str) -> Keyword:
        keyword = keyword.strip()
        language_services = self.language_services

        if keyword in language_services.when:
            return Keyword.WHEN

        if keyword in language_services.given:
            return Keyword.GIVEN

        if keyword in language_services.then:
            return Keyword.THEN

        if keyword in language_services.and_:
            return Keyword.AND

        if keyword in language_services.but:
            return Keyword.BUT

        raise UnrecognizedKeywordError(keyword, language_services.language)

    def map_to_step(self, step: StepNode) -> Step:
        return Step(
            location=step.location,
            keyword=self.map_to_keyword(step.keyword),
            native_keyword=step.keyword,
            name=step.text,
            table_argument=self.map_to_table(step.argument.rows) if isinstance(step.argument, DataTable) else None,
            doc_string_argument=step.argument.content if isinstance(step.argument, DocString) else None,
        )

    def map_to_comment(self, comment: CommentNode) -> Comment:
        return Comment(text=comment.text.strip(), location=comment.location)

    def map_to_example(self, examples: ExamplesNode) -> Example:
        return Example(
            name=examples.name,
            description=examples.description,
            table_argument=self.map_to_example_table(examples.rows) if len(examples.rows) > 0 else None,
            tags=list(examples.tags),
        )

    def map_to_scenario(self, scenario: ScenarioNode, tags_to_hide: Optional[Iterable[str]] = None) -> FeatureElement:
        return FeatureElement(
            kind=FeatureElementKind.SCENARIO,
            name=scenario.name,
            description=scenario.description or '',
            location=scenario.location,
            slug=slugify(scenario.name),
            steps=[self.map_to_step(step) for step in scenario.steps],
            tags=retrieve_visible_tags(scenario.tags, tags_to_hide),
        )

    def map_to_scenario_outline(self, scenario_outline: ScenarioOutlineNode, tags_to_hide: Optional[Iterable[str]] = None) -> FeatureElement:
        return FeatureElement(
            kind=FeatureElementKind.SCENARIO_OUTLINE,
            name=scenario_outline.name,
            description=scenario_outline.description or '',
            location=scenario_outline.location,
            slug=slugify(scenario_outline.name),
            steps=[self.map_to_step(step) for step in scenario_outline.steps],
            tags=retrieve_visible_tags(scenario_outline.tags, tags_to_hide),
            examples=[self.map_to_example(examples) for examples in scenario_outline.examples],
        )

    def map_to_background(self, background: BackgroundNode) -> FeatureElement:
        return FeatureElement(
            kind=FeatureElementKind.BACKGROUND,
            name=background.name,
            description=background.description or '',
            location=background.location,
            steps=[self.map_to_step(step) for step in background.steps],
        )

    def map_to_feature_element(self, node: ScenarioDefinition, tags_to_hide: Optional[Iterable[str]] = None) -> FeatureElement:
        if isinstance(node, ScenarioOutlineNode):
            return self.map_to_scenario_outline(node, tags_to_hide)

        if isinstance(node, ScenarioNode):
            return self.map_to_scenario(node, tags_to_hide)

        if isinstance(node, BackgroundNode):
            return self.map_to_background(node)

        raise UnsupportedNodeError(node)

    def is_excluded(self, tags: Iterable[str]) -> bool:
        return any(self.configuration.is_excluded(tag) for tag in tags)

    def map_to_feature(self, document: GherkinDocument) -> Optional[Feature]:
        """Build the feature model of `document`.

        Returns `None` when the document has no feature, or when the feature is
        excluded by its own tags or by the tags of every one of its elements.
        """
        node = document.feature
        if node is None:
            return None

        comment_mode = self.configuration.comment_mode
        tags_to_hide = self.configuration.hide_tags or None

        feature = Feature(
            name=node.name,
            description=node.description or '',
            tags=retrieve_visible_tags(node.tags, tags_to_hide),
            language=node.language,
        )

        if node.background is not None:
            feature.add_background(self.map_to_background(node.background))

        if comment_mode.collect:
            feature.comments.extend([self.map_to_comment(comment) for comment in document.comments])

        elements: List[Tuple[ScenarioDefinition, FeatureElement]] = []
        for child in node.children:
            feature_element = self.map_to_feature_element(child, tags_to_hide)
            feature.add_feature_element(feature_element)
            elements.append((child, feature_element))

        associate_comments(feature.feature_elements, feature.comments)

        if comment_mode.derive:
            previous: Optional[FeatureElement] = None
            for feature_element in feature.feature_elements:
                derive_tags(previous, feature_element, feature.comments)
                previous = feature_element

        if comment_mode.collect and not comment_mode.retain:
            for feature_element in feature.feature_elements:
                for step in feature_element.steps:
                    step.comments.clear()
            feature.comments.clear()

        if self.is_excluded(node.tags):
            logger.debug(f'feature "{feature.name}" is excluded by tags {list(node.tags)}')
            return None

        feature_elements: List[FeatureElement] = []
        for child, feature_element in elements:
            source_tags = getattr(child, 'tags', ())
            if self.is_excluded([*source_tags, *feature_element.tags]):
                logger.debug(f'{feature_element.kind.value} "{feature_element.name}" is excluded by tags {feature_element.tags}')
                continue

            feature_elements.append(feature_element)

        if len(feature_elements) < 1 and len(elements) > 0:
            logger.debug(f'feature "{feature.name}" is excluded, all of its scenarios are excluded')
            return None

        feature.feature_elements = feature_elements

        return feature


class FeatureParser:
    """Parses gherkin text into a feature model, using the language declared by each document."""

    configuration: Configuration

    def __init__(self, configuration: Optional[Configuration] = None) -> None:
        if configuration is None:
            configuration = Configuration()

        self.configuration = configuration

    def map(self, document: GherkinDocument) -> Optional[Feature]:
        language = document.feature.language if document.feature is not None else self.configuration.language
        mapper = Mapper(self.configuration, LanguageServices.for_language(language))

        return mapper.map_to_feature(document)

    def parse(self, source: str, *, filename: Optional[str] = None) -> Optional[Feature]:
        return self.map(parse_document(source, language=self.configuration.language, filename=filename))

    def parse_file(self, path: Path) -> Optional[Feature]:
        return self.map(parse_file(path, language=self.configuration.language))
