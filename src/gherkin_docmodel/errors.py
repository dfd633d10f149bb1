from typing import Any


class MappingError(ValueError):
    pass


class UnrecognizedKeywordError(MappingError):
    keyword: str
    language: str

    def __init__(self, keyword: str, language: str) -> None:
        self.keyword = keyword
        self.language = language

        super().__init__(f'"{keyword}" is not a recognized step keyword in language "{language}"')


class UnsupportedNodeError(MappingError):
    node: Any

    def __init__(self, node: Any) -> None:
        self.node = node

        super().__init__(f'only scenario, scenario outline and background nodes are supported, got {node.__class__.__name__}')
