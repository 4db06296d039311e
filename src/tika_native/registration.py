"""Publish resolved parsers as service listings and a build manifest."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from . import utils
from .base import ParserParameter, ResolvedParserConfig
from .providers import Capability, ProviderSource

logger = logging.getLogger(__name__)

_MANIFEST_VERSION = 1
_DEFAULT_MANIFEST = "tika-build.json"
_SERVICES_DIR = "services"


@dataclass(slots=True)
class BuildManifest:
    """Enabled providers per capability plus the per-parser parameters."""

    parsers: ResolvedParserConfig = field(default_factory=dict)
    services: dict[Capability, list[str]] = field(default_factory=dict)
    version: int = _MANIFEST_VERSION

    def to_dict(self) -> dict[str, Any]:
        return {
            "version": self.version,
            "services": {
                capability.value: list(names) for capability, names in self.services.items()
            },
            "parsers": {
                parser: [parameter.to_dict() for parameter in parameters]
                for parser, parameters in self.parsers.items()
            },
        }

    @classmethod
    def from_dict(cls, payload: dict[str, Any]) -> "BuildManifest":
        services = {
            Capability.from_name(name): list(values)
            for name, values in payload.get("services", {}).items()
        }
        parsers = {
            parser: [ParserParameter(**item) for item in items]
            for parser, items in payload.get("parsers", {}).items()
        }
        return cls(
            parsers=parsers,
            services=services,
            version=payload.get("version", _MANIFEST_VERSION),
        )


def build_manifest(resolved: ResolvedParserConfig, providers: ProviderSource) -> BuildManifest:
    services = {
        Capability.PARSER: list(resolved),
        Capability.DETECTOR: providers.provider_names(Capability.DETECTOR),
        Capability.ENCODING_DETECTOR: providers.provider_names(Capability.ENCODING_DETECTOR),
    }
    return BuildManifest(parsers=dict(resolved), services=services)


class ManifestWriter:
    def __init__(self, root: Path, *, manifest_filename: str = _DEFAULT_MANIFEST) -> None:
        self.root = Path(root)
        self.root = self.root if self.root.is_absolute() else self.root.resolve()
        self._manifest_filename = manifest_filename

    @property
    def manifest_path(self) -> Path:
        return self.root / self._manifest_filename

    def service_path(self, capability: Capability) -> Path:
        return self.root / _SERVICES_DIR / capability.value

    def write(self, manifest: BuildManifest) -> list[Path]:
        """Write the manifest and one service listing per capability."""

        written: list[Path] = []
        for capability, names in manifest.services.items():
            path = self.service_path(capability)
            text = "".join(f"{name}\n" for name in names)
            utils.write_text_atomic(path, text)
            written.append(path)

        payload = json.dumps(manifest.to_dict(), indent=2)
        utils.write_text_atomic(self.manifest_path, payload)
        written.append(self.manifest_path)
        logger.info("Wrote build manifest to %s", self.manifest_path)
        return written

    def read(self) -> BuildManifest:
        raw = json.loads(self.manifest_path.read_text(encoding="utf-8"))
        return BuildManifest.from_dict(raw)


__all__ = ["BuildManifest", "ManifestWriter", "build_manifest"]
