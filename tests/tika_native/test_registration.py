"""Tests for the build manifest and service listing output."""

from __future__ import annotations

import json
from pathlib import Path

from src.tika_native.base import ParserParameter
from src.tika_native.providers import Capability, StaticProviderSource
from src.tika_native.registration import ManifestWriter, build_manifest

PDF = "org.apache.tika.parser.pdf.PDFParser"
ODF = "org.apache.tika.parser.odf.OpenDocumentParser"


def make_providers() -> StaticProviderSource:
    return StaticProviderSource(
        {
            Capability.PARSER: [ODF, PDF, "org.apache.tika.parser.txt.TXTParser"],
            Capability.DETECTOR: ["org.apache.tika.parser.pkg.ZipContainerDetector"],
            Capability.ENCODING_DETECTOR: ["org.apache.tika.parser.html.HtmlEncodingDetector"],
        }
    )


def test_manifest_publishes_resolved_parsers() -> None:
    resolved = {ODF: [], PDF: [ParserParameter("sortByPosition", "true", "bool")]}

    manifest = build_manifest(resolved, make_providers())

    assert manifest.services[Capability.PARSER] == [ODF, PDF]
    assert manifest.services[Capability.DETECTOR] == ["org.apache.tika.parser.pkg.ZipContainerDetector"]
    assert manifest.parsers[PDF][0].name == "sortByPosition"


def test_writer_persists_manifest_and_listings(tmp_path: Path) -> None:
    resolved = {PDF: [ParserParameter("sortByPosition", "true", "bool")]}
    manifest = build_manifest(resolved, make_providers())
    writer = ManifestWriter(tmp_path / "out")

    written = writer.write(manifest)

    assert writer.manifest_path in written
    listing = writer.service_path(Capability.PARSER).read_text(encoding="utf-8")
    assert listing == f"{PDF}\n"

    payload = json.loads(writer.manifest_path.read_text(encoding="utf-8"))
    assert payload["services"][Capability.PARSER.value] == [PDF]
    assert payload["parsers"][PDF] == [{"name": "sortByPosition", "value": "true", "type": "bool"}]
    assert not list((tmp_path / "out").glob("*.tmp"))


def test_writer_reads_back_manifest(tmp_path: Path) -> None:
    manifest = build_manifest({ODF: []}, make_providers())
    writer = ManifestWriter(tmp_path)
    writer.write(manifest)

    loaded = writer.read()

    assert loaded.services == manifest.services
    assert loaded.parsers == {ODF: []}


def test_writer_keeps_registry_order_of_parsers(tmp_path: Path) -> None:
    resolved = {PDF: [], ODF: []}
    writer = ManifestWriter(tmp_path)
    writer.write(build_manifest(resolved, make_providers()))

    loaded = writer.read()

    assert list(loaded.parsers) == [PDF, ODF]
    assert loaded.services[Capability.PARSER] == [PDF, ODF]
