"""Parameter type lookup backed by the catalog's declared parameter schema."""

from __future__ import annotations

from typing import Iterable, Mapping, Protocol

from .base import ParserNotLoadableError, ParserPropertyNotFoundError

_BOOLEAN_TYPE = "boolean"
# The Tika config Param loader only understands "bool".
_BOOLEAN_TAG = "bool"


class ParameterIntrospector(Protocol):
    """Looks up the type tag of a parser's configurable property."""

    def parameter_type(self, parser: str, name: str) -> str:
        ...


def type_tag(declared: str) -> str:
    """Map a declared type name such as ``java.lang.Boolean`` to a config tag."""

    simple = declared.strip().rsplit(".", 1)[-1].lower()
    if simple == _BOOLEAN_TYPE:
        return _BOOLEAN_TAG
    return simple


class SchemaIntrospector:
    def __init__(
        self,
        parameters: Mapping[str, Mapping[str, str]],
        *,
        known_parsers: Iterable[str] = (),
    ) -> None:
        self._parameters = {parser: dict(props) for parser, props in parameters.items()}
        self._known = set(known_parsers) | set(self._parameters)

    def is_loadable(self, parser: str) -> bool:
        return parser in self._known

    def parameter_type(self, parser: str, name: str) -> str:
        if not self.is_loadable(parser):
            raise ParserNotLoadableError(parser)
        declared = self._parameters.get(parser, {}).get(name)
        if declared is None:
            raise ParserPropertyNotFoundError(parser, name)
        return type_tag(declared)


__all__ = ["ParameterIntrospector", "SchemaIntrospector", "type_tag"]
