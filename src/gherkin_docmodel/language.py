from __future__ import annotations

from typing import Dict, FrozenSet, List
from dataclasses import dataclass

from behave.i18n import languages


@dataclass(frozen=True)
class LanguageServices:
    """Localized step keywords for one language, as found in behave's i18n tables."""

    language: str
    given: FrozenSet[str]
    when: FrozenSet[str]
    then: FrozenSet[str]
    and_: FrozenSet[str]
    but: FrozenSet[str]

    @staticmethod
    def _keywords(localizations: Dict[str, List[str]], key: str) -> FrozenSet[str]:
        # some languages mark keywords that are not followed by whitespace with a trailing "<"
        return frozenset(value.strip().rstrip('<').strip() for value in localizations.get(key, []))

    @classmethod
    def for_language(cls, language: str) -> LanguageServices:
        localizations = languages.get(language, {})
        if localizations == {}:
            raise ValueError(f'unknown language "{language}"')

        return cls(
            language=language,
            given=cls._keywords(localizations, 'given'),
            when=cls._keywords(localizations, 'when'),
            then=cls._keywords(localizations, 'then'),
            and_=cls._keywords(localizations, 'and'),
            but=cls._keywords(localizations, 'but'),
        )
