"""Parser resolution for natively compiled Apache Tika builds."""

from .base import (
    AmbiguousParserRequestError,
    CatalogError,
    ParserNotLoadableError,
    ParserParameter,
    ParserPropertyNotFoundError,
    ResolvedParserConfig,
    TikaBuildError,
    UnresolvableAbbreviationError,
)
from .catalog import ParserCatalog, load_catalog
from .config import TikaBuildConfig, load_build_config
from .providers import (
    Capability,
    ProviderSource,
    ServiceListingSource,
    StaticProviderSource,
    default_provider_source,
)
from .registration import BuildManifest, ManifestWriter, build_manifest
from .resolver import ParserResolver, build_parameter_list, resolve_parsers, unhyphenate
from .schema import ParameterIntrospector, SchemaIntrospector, type_tag

__all__ = [
    "AmbiguousParserRequestError",
    "BuildManifest",
    "Capability",
    "CatalogError",
    "ManifestWriter",
    "ParameterIntrospector",
    "ParserCatalog",
    "ParserNotLoadableError",
    "ParserParameter",
    "ParserPropertyNotFoundError",
    "ParserResolver",
    "ProviderSource",
    "ResolvedParserConfig",
    "SchemaIntrospector",
    "ServiceListingSource",
    "StaticProviderSource",
    "TikaBuildConfig",
    "TikaBuildError",
    "UnresolvableAbbreviationError",
    "build_manifest",
    "build_parameter_list",
    "default_provider_source",
    "load_build_config",
    "load_catalog",
    "resolve_parsers",
    "type_tag",
    "unhyphenate",
]
