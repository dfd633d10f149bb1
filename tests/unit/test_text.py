import pytest

from gherkin_docmodel.text import find_comments, find_language, get_column, is_language_marker, slugify
from gherkin_docmodel.tree import CommentNode, Location


def test_is_language_marker() -> None:
    assert is_language_marker('# language: sv')
    assert is_language_marker('  #language:en')
    assert is_language_marker('# Language : de')
    assert not is_language_marker('# languages are hard')
    assert not is_language_marker('Feature: # language: sv')


def test_find_language() -> None:
    assert find_language('') == 'en'
    assert find_language('Feature: test') == 'en'
    assert find_language('# language: sv\nEgenskap: test') == 'sv'
    assert find_language('# some comment\n  # language: de\nFunktionalität: test') == 'de'
    assert find_language('# language: \nFeature: test') == 'en'
    assert find_language('Feature: test\n# language: sv') == 'en'
    assert find_language('Feature: test', 'sv') == 'sv'
    assert find_language('# language: de\nFeature: test', 'sv') == 'de'


def test_get_column() -> None:
    assert get_column('Feature: test') == 1
    assert get_column('    Given a step') == 5
    assert get_column('\t# comment') == 2


def test_find_comments() -> None:
    source = '''# language: en
# ignore this comment
Feature: Test
  Scenario: A scenario
    # before given
    Given some text
      """
      # not a comment
      """
    And a table
      | # not a comment either |
    # after the last step
'''

    assert find_comments(source, {7, 8, 9}) == [
        CommentNode(location=Location(line=2, column=1), text='# ignore this comment'),
        CommentNode(location=Location(line=5, column=5), text='# before given'),
        CommentNode(location=Location(line=12, column=5), text='# after the last step'),
    ]

    # without the doc-string lines, a comment inside it is found too
    assert [comment.location.line for comment in find_comments(source)] == [2, 5, 8, 12]


def test_find_comments_no_comments() -> None:
    assert find_comments('') == []
    assert find_comments('Feature: Test\n  Scenario: test\n    Given a step\n') == []


@pytest.mark.parametrize(
    'text,expected',
    [
        ('A scenario', 'a-scenario'),
        ('Check FSA values For G8 Crop', 'check-fsa-values-for-g8-crop'),
        ('Verify_CLU_Against_CLU_Certified', 'verify_clu_against_clu_certified'),
        ('  What? Really!  ', 'what-really'),
        ('Räksmörgås - med   ägg', 'raksmorgas-med-agg'),
        ('', ''),
    ],
)
def test_slugify(text: str, expected: str) -> None:
    assert slugify(text) == expected
