"""Build configuration for the Tika native-image integration."""

from __future__ import annotations

import logging
from collections.abc import Mapping as MappingABC
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Mapping

import yaml
from jsonschema import ValidationError, validate

from src import paths
from . import utils

logger = logging.getLogger(__name__)

_SCALAR = {"type": ["string", "number", "boolean"]}

BUILD_CONFIG_SCHEMA = {
    "type": "object",
    "properties": {
        "tika-config-path": {"type": "string", "minLength": 1},
        "parsers": {
            "oneOf": [
                {"type": "string"},
                {"type": "array", "items": {"type": "string"}},
            ]
        },
        "parser-options": {
            "type": "object",
            "additionalProperties": {
                "type": "object",
                "additionalProperties": _SCALAR,
            },
        },
        "parser-name": {
            "type": "object",
            "additionalProperties": {"type": "string", "minLength": 1},
        },
        "catalog": {"type": "string", "minLength": 1},
        "services": {"type": "string", "minLength": 1},
    },
    "additionalProperties": False,
}


@dataclass(slots=True)
class TikaBuildConfig:
    """User-facing settings that drive parser resolution."""

    tika_config_path: str | None = None
    parsers: str | None = None
    parser_options: dict[str, dict[str, str]] = field(default_factory=dict)
    parser_names: dict[str, str] = field(default_factory=dict)
    catalog_path: Path | None = None
    services_root: Path | None = None

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any], *, base_path: Path | None) -> "TikaBuildConfig":
        try:
            validate(instance=dict(payload), schema=BUILD_CONFIG_SCHEMA)
        except ValidationError as exc:
            raise ValueError(f"Build config validation failed: {exc.message}") from exc

        parsers_value = payload.get("parsers")
        if isinstance(parsers_value, list):
            parsers = ",".join(utils.split_tokens(parsers_value))
        else:
            parsers = parsers_value

        options = {
            str(abbreviation): {str(key): utils.stringify(value) for key, value in entries.items()}
            for abbreviation, entries in (payload.get("parser-options") or {}).items()
        }
        names = {
            str(abbreviation): identifier.strip()
            for abbreviation, identifier in (payload.get("parser-name") or {}).items()
        }

        catalog_value = payload.get("catalog")
        services_value = payload.get("services")
        return cls(
            tika_config_path=payload.get("tika-config-path"),
            parsers=parsers,
            parser_options=options,
            parser_names=names,
            catalog_path=(
                utils.resolve_path(Path(catalog_value), base=base_path) if catalog_value else None
            ),
            services_root=(
                utils.resolve_path(Path(services_value), base=base_path) if services_value else None
            ),
        )

    def with_overrides(
        self,
        *,
        tika_config_path: str | None = None,
        parsers: str | None = None,
        parser_options: Mapping[str, Mapping[str, str]] | None = None,
        parser_names: Mapping[str, str] | None = None,
        catalog_path: Path | None = None,
        services_root: Path | None = None,
    ) -> "TikaBuildConfig":
        """Return a copy with any supplied value layered over this config."""

        options = {key: dict(value) for key, value in self.parser_options.items()}
        for abbreviation, entries in (parser_options or {}).items():
            options.setdefault(abbreviation, {}).update(entries)
        names = dict(self.parser_names)
        names.update(parser_names or {})

        return replace(
            self,
            tika_config_path=tika_config_path if tika_config_path is not None else self.tika_config_path,
            parsers=parsers if parsers is not None else self.parsers,
            parser_options=options,
            parser_names=names,
            catalog_path=catalog_path if catalog_path is not None else self.catalog_path,
            services_root=services_root if services_root is not None else self.services_root,
        )


def load_build_config(config_path: Path | None = None) -> TikaBuildConfig:
    """Load the build configuration from YAML or fallback to defaults."""

    if config_path is not None:
        resolved = Path(config_path).expanduser()
        if not resolved.exists():
            raise FileNotFoundError(f"Build config '{resolved}' does not exist")
        return _read_config(resolved)

    default_path = paths.get_build_config_file()
    if default_path.exists():
        return _read_config(default_path)

    return TikaBuildConfig()


def _read_config(path: Path) -> TikaBuildConfig:
    raw = path.read_text(encoding="utf-8")
    try:
        data = yaml.safe_load(raw) or {}
    except yaml.YAMLError as exc:
        raise ValueError(f"Invalid YAML in build config '{path}': {exc}") from exc
    if not isinstance(data, MappingABC):
        raise ValueError("Build config must be a mapping")
    logger.debug("Loading build config from %s", path)
    return TikaBuildConfig.from_dict(data, base_path=path.parent)


__all__ = [
    "BUILD_CONFIG_SCHEMA",
    "TikaBuildConfig",
    "load_build_config",
]
