"""Parser catalog: abbreviations, native-image deny-list and parameter schema."""

from __future__ import annotations

import logging
from collections.abc import Mapping as MappingABC
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping

import yaml
from jsonschema import ValidationError, validate

from src import paths

logger = logging.getLogger(__name__)

PDF_PARSER = "org.apache.tika.parser.pdf.PDFParser"
ODF_PARSER = "org.apache.tika.parser.odf.OpenDocumentParser"
OOXML_PARSER = "org.apache.tika.parser.microsoft.ooxml.OOXMLParser"

_DEFAULT_ABBREVIATIONS = {
    "pdf": PDF_PARSER,
    "odf": ODF_PARSER,
    "ooxml": OOXML_PARSER,
}

# Parsers that do not work in a natively compiled application.
_DEFAULT_DENY_LIST = (
    "org.apache.tika.parser.mat.MatParser",
    "org.apache.tika.parser.journal.GrobidRESTParser",
    "org.apache.tika.parser.journal.JournalParser",
    "org.apache.tika.parser.jdbc.SQLite3Parser",
    "org.apache.tika.parser.mail.RFC822Parser",
    "org.apache.tika.parser.pkg.CompressorParser",
    "org.apache.tika.parser.geo.topic.GeoParser",
)

_DEFAULT_PARAMETERS = {
    PDF_PARSER: {
        "sortByPosition": "boolean",
        "enableAutoSpace": "boolean",
        "suppressDuplicateOverlappingText": "boolean",
        "extractAnnotationText": "boolean",
        "extractInlineImages": "boolean",
        "extractUniqueInlineImagesOnly": "boolean",
        "extractAcroFormContent": "boolean",
        "extractMarkedContent": "boolean",
        "ifXFAExtractOnlyXFA": "boolean",
        "catchIntermediateIOExceptions": "boolean",
        "averageCharTolerance": "float",
        "spacingTolerance": "float",
        "dropThreshold": "float",
        "ocrStrategy": "String",
        "ocrDPI": "int",
    },
    OOXML_PARSER: {
        "useSAXDocxExtractor": "boolean",
        "useSAXPptxExtractor": "boolean",
        "includeDeletedContent": "boolean",
        "includeMoveFromContent": "boolean",
    },
}

_STRING_MAP = {"type": "object", "additionalProperties": {"type": "string", "minLength": 1}}

CATALOG_SCHEMA = {
    "type": "object",
    "properties": {
        "abbreviations": _STRING_MAP,
        "deny-list": {
            "type": "array",
            "items": {"type": "string", "minLength": 1},
        },
        "parameters": {
            "type": "object",
            "additionalProperties": _STRING_MAP,
        },
    },
    "additionalProperties": False,
}


@dataclass(slots=True)
class ParserCatalog:
    """Static tables consulted while resolving parsers."""

    abbreviations: dict[str, str] = field(default_factory=dict)
    deny_list: frozenset[str] = frozenset()
    parameters: dict[str, dict[str, str]] = field(default_factory=dict)

    @classmethod
    def default(cls) -> "ParserCatalog":
        return cls(
            abbreviations=dict(_DEFAULT_ABBREVIATIONS),
            deny_list=frozenset(_DEFAULT_DENY_LIST),
            parameters={parser: dict(props) for parser, props in _DEFAULT_PARAMETERS.items()},
        )

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "ParserCatalog":
        """Build a catalog, keeping the defaults for any section not supplied."""

        try:
            validate(instance=dict(payload), schema=CATALOG_SCHEMA)
        except ValidationError as exc:
            raise ValueError(f"Catalog validation failed: {exc.message}") from exc

        catalog = cls.default()
        if "abbreviations" in payload:
            catalog.abbreviations = {
                key.strip(): value.strip() for key, value in payload["abbreviations"].items()
            }
        if "deny-list" in payload:
            catalog.deny_list = frozenset(item.strip() for item in payload["deny-list"])
        if "parameters" in payload:
            catalog.parameters = {
                parser.strip(): dict(props) for parser, props in payload["parameters"].items()
            }
        return catalog

    def lookup(self, abbreviation: str) -> str | None:
        return self.abbreviations.get(abbreviation)

    def is_denied(self, identifier: str) -> bool:
        return identifier in self.deny_list

    def to_dict(self) -> dict[str, Any]:
        return {
            "abbreviations": dict(self.abbreviations),
            "deny-list": sorted(self.deny_list),
            "parameters": {parser: dict(props) for parser, props in self.parameters.items()},
        }


def load_catalog(catalog_path: Path | None = None) -> ParserCatalog:
    """Load the parser catalog from YAML or fall back to the built-in tables."""

    if catalog_path is not None:
        resolved = Path(catalog_path).expanduser()
        if not resolved.exists():
            raise FileNotFoundError(f"Parser catalog '{resolved}' does not exist")
        return _read_catalog(resolved)

    default_path = paths.get_catalog_file()
    if default_path.exists():
        return _read_catalog(default_path)

    logger.debug("No catalog file at %s; using built-in tables", default_path)
    return ParserCatalog.default()


def _read_catalog(path: Path) -> ParserCatalog:
    raw = path.read_text(encoding="utf-8")
    try:
        data = yaml.safe_load(raw) or {}
    except yaml.YAMLError as exc:
        raise ValueError(f"Invalid YAML in parser catalog '{path}': {exc}") from exc
    if not isinstance(data, MappingABC):
        raise ValueError("Parser catalog must be a mapping")
    catalog = ParserCatalog.from_dict(data)
    logger.debug(
        "Loaded catalog %s: %d abbreviations, %d denied parsers",
        path,
        len(catalog.abbreviations),
        len(catalog.deny_list),
    )
    return catalog


def render_catalog(catalog: ParserCatalog) -> str:
    return yaml.safe_dump(catalog.to_dict(), sort_keys=False)


__all__ = [
    "CATALOG_SCHEMA",
    "ParserCatalog",
    "render_catalog",
    "load_catalog",
]
