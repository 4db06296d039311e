"""End-to-end tests for the resolve CLI surface in main.py."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from main import main as main_entry

SHIPPED_SERVICES = Path(__file__).resolve().parents[2] / "config" / "services"
PDF = "org.apache.tika.parser.pdf.PDFParser"


@pytest.fixture(autouse=True)
def isolated_data_root(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TIKA_BUILD_DATA_DIR", str(tmp_path / "data"))


def test_resolve_json_output(capsys: pytest.CaptureFixture[str]) -> None:
    exit_code = main_entry(
        [
            "resolve",
            "--services",
            str(SHIPPED_SERVICES),
            "--parsers",
            "pdf",
            "--option",
            "pdf.sort-by-position=true",
            "--output",
            "json",
        ]
    )

    assert exit_code == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["services"]["org.apache.tika.parser.Parser"] == [PDF]
    assert payload["parsers"][PDF] == [{"name": "sortByPosition", "value": "true", "type": "bool"}]


def test_resolve_without_request_keeps_all(capsys: pytest.CaptureFixture[str]) -> None:
    exit_code = main_entry(["--services", str(SHIPPED_SERVICES)])

    assert exit_code == 0
    assert "Resolved 69 parser(s):" in capsys.readouterr().out


def test_resolve_writes_manifest(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    out_dir = tmp_path / "build"
    exit_code = main_entry(
        [
            "resolve",
            "--services",
            str(SHIPPED_SERVICES),
            "--parsers",
            "pdf,opendoc",
            "--parser-name",
            "opendoc=org.apache.tika.parser.odf.OpenDocumentParser",
            "--write",
            str(out_dir),
        ]
    )

    assert exit_code == 0
    assert (out_dir / "tika-build.json").exists()
    listing = (out_dir / "services" / "org.apache.tika.parser.Parser").read_text(encoding="utf-8")
    assert listing.splitlines() == ["org.apache.tika.parser.odf.OpenDocumentParser", PDF]
    assert "Wrote" in capsys.readouterr().out


def test_resolve_reports_unresolvable_abbreviation(capsys: pytest.CaptureFixture[str]) -> None:
    exit_code = main_entry(["resolve", "--services", str(SHIPPED_SERVICES), "--parsers", "classparser"])

    assert exit_code == 1
    assert "--parser-name classparser=" in capsys.readouterr().err


def test_resolve_reports_unreadable_catalog(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    catalog_dir = tmp_path / "catalog-dir"
    catalog_dir.mkdir()

    exit_code = main_entry(["resolve", "--services", str(SHIPPED_SERVICES), "--catalog", str(catalog_dir)])

    assert exit_code == 1
    assert capsys.readouterr().err.startswith("error: ")


def test_catalog_command_reports_unreadable_catalog(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    exit_code = main_entry(["catalog", "--catalog", str(tmp_path)])

    assert exit_code == 1
    assert capsys.readouterr().err.startswith("error: ")


def test_resolve_rejects_malformed_option(capsys: pytest.CaptureFixture[str]) -> None:
    exit_code = main_entry(["resolve", "--parsers", "pdf", "--option", "sort-by-position=true"])

    assert exit_code == 1
    assert "abbreviation.key=value" in capsys.readouterr().err


def test_catalog_command_prints_tables(capsys: pytest.CaptureFixture[str]) -> None:
    exit_code = main_entry(["catalog"])

    assert exit_code == 0
    out = capsys.readouterr().out
    assert "pdf: org.apache.tika.parser.pdf.PDFParser" in out
    assert "deny-list:" in out
