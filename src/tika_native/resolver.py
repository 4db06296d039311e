"""Resolve requested parser abbreviations into the parsers kept in a native build."""

from __future__ import annotations

import logging
from typing import Mapping

from . import utils
from .base import (
    AmbiguousParserRequestError,
    ParserParameter,
    ResolvedParserConfig,
    UnresolvableAbbreviationError,
)
from .catalog import ParserCatalog
from .config import TikaBuildConfig
from .providers import Capability, ProviderSource
from .schema import ParameterIntrospector, SchemaIntrospector

logger = logging.getLogger(__name__)


def unhyphenate(name: str) -> str:
    """Convert a property name such as ``sort-by-position`` to ``sortByPosition``."""

    first, *rest = name.split("-")
    return first + "".join(word[:1].upper() + word[1:] for word in rest)


def resolve_abbreviation(
    abbreviation: str,
    catalog: ParserCatalog,
    user_abbreviations: Mapping[str, str],
) -> str:
    """Return the parser identifier for an abbreviation; built-in entries win."""

    identifier = catalog.lookup(abbreviation)
    if identifier is not None:
        return identifier
    identifier = user_abbreviations.get(abbreviation)
    if identifier is not None:
        return identifier
    raise UnresolvableAbbreviationError(abbreviation)


def build_parameter_list(
    parser: str,
    overrides: Mapping[str, str] | None,
    introspector: ParameterIntrospector,
) -> list[ParserParameter]:
    parameters: list[ParserParameter] = []
    if not overrides:
        return parameters
    for key, value in overrides.items():
        name = unhyphenate(key)
        param_type = introspector.parameter_type(parser, name)
        parameters.append(ParserParameter(name=name, value=value, type=param_type))
    return parameters


def eligible_parsers(providers: ProviderSource, catalog: ParserCatalog) -> list[str]:
    """Available parser providers, in registry order, minus the deny-list."""

    names = providers.provider_names(Capability.PARSER)
    eligible = [name for name in names if not catalog.is_denied(name)]
    skipped = len(names) - len(eligible)
    if skipped:
        logger.debug("Excluded %d parsers that are not native-ready", skipped)
    return eligible


def resolve_parsers(
    explicit_config_path: str | None,
    requested_abbreviations: str | None,
    parameter_overrides: Mapping[str, Mapping[str, str]] | None = None,
    user_abbreviations: Mapping[str, str] | None = None,
    *,
    providers: ProviderSource,
    catalog: ParserCatalog | None = None,
    introspector: ParameterIntrospector | None = None,
) -> ResolvedParserConfig:
    """Map each kept parser identifier to its build-time parameters.

    With an explicit Tika config path, or without any requested parsers,
    every eligible provider is kept with no parameters; the external config
    governs the rest. Otherwise only the requested parsers survive, in
    provider-registry order, and overrides keyed by the caller's
    abbreviation are attached to them.
    """

    catalog = catalog or ParserCatalog.default()
    parameter_overrides = parameter_overrides or {}
    user_abbreviations = user_abbreviations or {}

    eligible = eligible_parsers(providers, catalog)
    requested_present = bool(requested_abbreviations and requested_abbreviations.strip())

    if explicit_config_path or not requested_present:
        if explicit_config_path and requested_present:
            logger.info(
                "Parser selection delegated to %s; ignoring requested parsers", explicit_config_path
            )
        return {name: [] for name in eligible}

    requested: dict[str, str] = {}
    for token in utils.split_tokens(requested_abbreviations):
        identifier = resolve_abbreviation(token, catalog, user_abbreviations)
        previous = requested.get(identifier)
        if previous is not None and previous != token:
            raise AmbiguousParserRequestError(identifier, previous, token)
        requested[identifier] = token

    if introspector is None:
        introspector = SchemaIntrospector(catalog.parameters, known_parsers=eligible)

    resolved: ResolvedParserConfig = {}
    for name in eligible:
        abbreviation = requested.get(name)
        if abbreviation is None:
            continue
        resolved[name] = build_parameter_list(
            name, parameter_overrides.get(abbreviation), introspector
        )

    missing = [name for name in requested if name not in resolved]
    if missing:
        logger.warning("Requested parsers not available for a native build: %s", ", ".join(missing))
    logger.debug("Resolved %d parsers from %s", len(resolved), requested_abbreviations)
    return resolved


class ParserResolver:
    """Bundle the catalog, provider source and introspector used for resolution."""

    def __init__(
        self,
        catalog: ParserCatalog,
        providers: ProviderSource,
        *,
        introspector: ParameterIntrospector | None = None,
    ) -> None:
        self.catalog = catalog
        self.providers = providers
        self.introspector = introspector

    def resolve(self, config: TikaBuildConfig) -> ResolvedParserConfig:
        return resolve_parsers(
            config.tika_config_path,
            config.parsers,
            config.parser_options,
            config.parser_names,
            providers=self.providers,
            catalog=self.catalog,
            introspector=self.introspector,
        )


__all__ = [
    "ParserResolver",
    "build_parameter_list",
    "eligible_parsers",
    "resolve_abbreviation",
    "resolve_parsers",
    "unhyphenate",
]
