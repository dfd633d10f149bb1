import pytest

from gherkin_docmodel.configuration import Configuration
from gherkin_docmodel.mapper import FeatureParser, Mapper


@pytest.fixture
def mapper() -> Mapper:
    return Mapper(Configuration())


@pytest.fixture
def feature_parser() -> FeatureParser:
    return FeatureParser(
        Configuration(
            hide_tags='TagsToHideFeature;TagsToHideScenario',
            exclude_tags='exclude-tag',
        )
    )


@pytest.fixture
def comment_parser() -> FeatureParser:
    return FeatureParser(Configuration(comment_parsing='theme-story', enable_comments=False))
