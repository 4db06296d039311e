"""Core data model and error types for parser resolution."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

PARSER_NAME_PROPERTY_PREFIX = "parser-name"


class TikaBuildError(RuntimeError):
    """Raised when the build step cannot produce a parser configuration."""


class UnresolvableAbbreviationError(TikaBuildError):
    """A requested abbreviation matches neither the built-in nor the user table."""

    def __init__(self, abbreviation: str) -> None:
        self.abbreviation = abbreviation
        self.property_name = f"{PARSER_NAME_PROPERTY_PREFIX}.{abbreviation}"
        super().__init__(
            f"The custom abbreviation `{abbreviation}` can not be resolved to a parser "
            f"class name, please map it under {PARSER_NAME_PROPERTY_PREFIX}: in the build config "
            f"or pass --parser-name {abbreviation}=<parser class>"
        )


class ParserNotLoadableError(TikaBuildError):
    """The parser identifier is unknown to the parameter schema and providers."""

    def __init__(self, parser: str) -> None:
        self.parser = parser
        super().__init__(f"Parser {parser} can not be loaded")


class ParserPropertyNotFoundError(TikaBuildError):
    """The parser is known but declares no parameter with the given name."""

    def __init__(self, parser: str, property_name: str) -> None:
        self.parser = parser
        self.property_name = property_name
        super().__init__(f"Parser {parser} has no {property_name} property")


class AmbiguousParserRequestError(TikaBuildError):
    """Two different requested abbreviations resolve to the same parser."""

    def __init__(self, parser: str, first: str, second: str) -> None:
        self.parser = parser
        self.abbreviations = (first, second)
        super().__init__(
            f"Abbreviations `{first}` and `{second}` both resolve to parser {parser}"
        )


class CatalogError(TikaBuildError):
    """Raised when catalog data or a provider listing is malformed."""


@dataclass(frozen=True)
class ParserParameter:
    """A single build-time parameter for one parser."""

    name: str
    value: str
    type: str

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "value": self.value, "type": self.type}


ResolvedParserConfig = dict[str, list[ParserParameter]]
"""Parser identifier to its ordered parameters, in provider-registry order."""
