from __future__ import annotations

from pathlib import Path

import pytest

from src.tika_native.catalog import PDF_PARSER, ParserCatalog, load_catalog, render_catalog
from src.tika_native.schema import SchemaIntrospector, type_tag


def _write_yaml(path: Path, content: str) -> None:
    path.write_text(content, encoding="utf-8")


def test_default_catalog_tables() -> None:
    catalog = ParserCatalog.default()

    assert catalog.lookup("pdf") == PDF_PARSER
    assert catalog.lookup("rtf") is None
    assert len(catalog.deny_list) == 7
    assert catalog.is_denied("org.apache.tika.parser.pkg.CompressorParser")


def test_load_catalog_replaces_supplied_sections(tmp_path: Path) -> None:
    catalog_yaml = tmp_path / "catalog.yaml"
    _write_yaml(
        catalog_yaml,
        (
            "abbreviations:\n"
            "  rtf: org.apache.tika.parser.rtf.RTFParser\n"
            "deny-list:\n"
            "  - org.apache.tika.parser.txt.TXTParser\n"
        ),
    )

    catalog = load_catalog(catalog_yaml)

    assert catalog.abbreviations == {"rtf": "org.apache.tika.parser.rtf.RTFParser"}
    assert catalog.deny_list == frozenset({"org.apache.tika.parser.txt.TXTParser"})
    assert PDF_PARSER in catalog.parameters


def test_load_catalog_requires_existing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_catalog(tmp_path / "missing.yaml")


def test_load_catalog_rejects_unknown_sections(tmp_path: Path) -> None:
    catalog_yaml = tmp_path / "catalog.yaml"
    _write_yaml(catalog_yaml, "aliases:\n  pdf: x\n")

    with pytest.raises(ValueError, match="Catalog validation failed"):
        load_catalog(catalog_yaml)


def test_load_catalog_rejects_non_mapping(tmp_path: Path) -> None:
    catalog_yaml = tmp_path / "catalog.yaml"
    _write_yaml(catalog_yaml, "- pdf\n- odf\n")

    with pytest.raises(ValueError, match="must be a mapping"):
        load_catalog(catalog_yaml)


def test_shipped_catalog_matches_built_in_tables() -> None:
    shipped = Path(__file__).resolve().parents[2] / "config" / "tika-catalog.yaml"

    assert load_catalog(shipped) == ParserCatalog.default()


def test_render_catalog_round_trips(tmp_path: Path) -> None:
    catalog_yaml = tmp_path / "catalog.yaml"
    _write_yaml(catalog_yaml, render_catalog(ParserCatalog.default()))

    assert load_catalog(catalog_yaml) == ParserCatalog.default()


@pytest.mark.parametrize(
    ("declared", "expected"),
    [
        ("boolean", "bool"),
        ("java.lang.Boolean", "bool"),
        ("int", "int"),
        ("String", "string"),
        ("java.lang.String", "string"),
        ("float", "float"),
    ],
)
def test_type_tag(declared: str, expected: str) -> None:
    assert type_tag(declared) == expected


def test_schema_introspector_knows_parsers_without_parameters() -> None:
    introspector = SchemaIntrospector({}, known_parsers=["org.apache.tika.parser.txt.TXTParser"])

    assert introspector.is_loadable("org.apache.tika.parser.txt.TXTParser")
    assert not introspector.is_loadable("com.example.Missing")
