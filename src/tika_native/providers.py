"""Provider enumeration from Java-style service listings."""

from __future__ import annotations

import logging
from enum import Enum
from pathlib import Path
from typing import Iterable, Mapping, Protocol

from src import paths
from . import utils
from .base import CatalogError

logger = logging.getLogger(__name__)

_COMMENT_MARKER = "#"


class Capability(str, Enum):
    """Tika service interfaces whose providers are enumerated at build time."""

    PARSER = "org.apache.tika.parser.Parser"
    DETECTOR = "org.apache.tika.detect.Detector"
    ENCODING_DETECTOR = "org.apache.tika.detect.EncodingDetector"

    @property
    def short_name(self) -> str:
        return self.value.rsplit(".", 1)[-1]

    @classmethod
    def from_name(cls, name: str) -> "Capability":
        for capability in cls:
            if name in (capability.value, capability.short_name):
                return capability
        raise ValueError(f"Unknown capability '{name}'")


class ProviderSource(Protocol):
    """Supplies the ordered provider identifiers available for a capability."""

    def provider_names(self, capability: Capability) -> list[str]:
        ...


class ServiceListingSource:
    """Read providers from ``<root>/<interface name>`` listing files."""

    def __init__(self, root: Path) -> None:
        self.root = Path(root)

    def listing_path(self, capability: Capability) -> Path:
        return self.root / capability.value

    def provider_names(self, capability: Capability) -> list[str]:
        path = self.listing_path(capability)
        if not path.exists():
            logger.debug("No provider listing for %s at %s", capability.short_name, path)
            return []
        if not path.is_file():
            raise CatalogError(f"Provider listing '{path}' is not a file")
        names = parse_service_listing(path.read_text(encoding="utf-8").splitlines())
        logger.debug("Found %d %s providers in %s", len(names), capability.short_name, path)
        return names


class StaticProviderSource:
    """In-memory provider listings keyed by capability."""

    def __init__(self, listings: Mapping[Capability, Iterable[str]] | None = None) -> None:
        self._listings = {
            capability: utils.unique(names) for capability, names in (listings or {}).items()
        }

    def provider_names(self, capability: Capability) -> list[str]:
        return list(self._listings.get(capability, ()))


def parse_service_listing(lines: Iterable[str]) -> list[str]:
    """Extract provider identifiers, dropping comments, blanks and repeats."""

    names: list[str] = []
    for line in lines:
        entry = line.split(_COMMENT_MARKER, 1)[0].strip()
        if not entry:
            continue
        if any(char.isspace() for char in entry):
            raise CatalogError(f"Invalid provider name in service listing: {entry!r}")
        names.append(entry)
    return utils.unique(names)


def default_provider_source() -> ServiceListingSource:
    return ServiceListingSource(paths.get_services_root())


__all__ = [
    "Capability",
    "ProviderSource",
    "ServiceListingSource",
    "StaticProviderSource",
    "default_provider_source",
    "parse_service_listing",
]
