"""CLI commands for resolving the Tika parsers kept in a native build."""
from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Iterable

from src.tika_native.base import ResolvedParserConfig, TikaBuildError
from src.tika_native.catalog import load_catalog, render_catalog
from src.tika_native.config import load_build_config
from src.tika_native.providers import ServiceListingSource, default_provider_source
from src.tika_native.registration import ManifestWriter, build_manifest
from src.tika_native.resolver import ParserResolver

OUTPUT_TEXT = "text"
OUTPUT_JSON = "json"

__all__ = ["build_resolve_parser", "build_catalog_parser", "resolve_cli", "catalog_cli"]


def build_resolve_parser(*, prog: str | None = None) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Resolve the Tika parsers kept in a native build.",
        prog=prog,
    )
    _configure_resolve_parser(parser)
    return parser


def build_catalog_parser(*, prog: str | None = None) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Print the effective parser catalog.", prog=prog)
    _configure_catalog_parser(parser)
    return parser


def _configure_catalog_parser(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--catalog",
        type=Path,
        help="Path to a parser catalog YAML (default: config/tika-catalog.yaml when present).",
    )
    parser.set_defaults(func=catalog_cli)


def _configure_resolve_parser(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--config",
        type=Path,
        help="Path to a build config YAML (default: config/tika.yaml when present).",
    )
    parser.add_argument(
        "--catalog",
        type=Path,
        default=None,
        help="Path to a parser catalog YAML (overrides configuration).",
    )
    parser.add_argument(
        "--services",
        type=Path,
        default=None,
        help="Directory holding provider listings (overrides configuration).",
    )
    parser.add_argument(
        "--tika-config-path",
        default=None,
        help="External Tika config; when set every native-ready parser is kept.",
    )
    parser.add_argument(
        "--parsers",
        default=None,
        help="Comma-separated parser abbreviations to keep (e.g. pdf,odf).",
    )
    parser.add_argument(
        "--parser-name",
        action="append",
        default=[],
        metavar="ABBR=CLASS",
        help="Map a custom abbreviation to a parser class. Repeat for multiple values.",
    )
    parser.add_argument(
        "--option",
        action="append",
        default=[],
        metavar="ABBR.KEY=VALUE",
        help="Parser option such as pdf.sort-by-position=true. Repeat for multiple values.",
    )
    parser.add_argument(
        "--output",
        choices=[OUTPUT_TEXT, OUTPUT_JSON],
        default=OUTPUT_TEXT,
        help="Output format: friendly text or JSON.",
    )
    parser.add_argument(
        "--write",
        type=Path,
        default=None,
        metavar="DIR",
        help="Write the build manifest and service listings to this directory.",
    )
    parser.set_defaults(func=resolve_cli)


def parse_parser_names(pairs: Iterable[str]) -> dict[str, str]:
    names: dict[str, str] = {}
    for pair in pairs:
        if "=" not in pair:
            raise argparse.ArgumentTypeError(
                f"Invalid parser name '{pair}'. Use the form abbreviation=class."
            )
        key, value = pair.split("=", 1)
        if not key.strip() or not value.strip():
            raise argparse.ArgumentTypeError("Parser name mappings need both an abbreviation and a class.")
        names[key.strip()] = value.strip()
    return names


def parse_options(pairs: Iterable[str]) -> dict[str, dict[str, str]]:
    options: dict[str, dict[str, str]] = {}
    for pair in pairs:
        target, sep, value = pair.partition("=")
        abbreviation, dot, key = target.partition(".")
        if not sep or not dot or not abbreviation.strip() or not key.strip():
            raise argparse.ArgumentTypeError(
                f"Invalid option '{pair}'. Use the form abbreviation.key=value."
            )
        options.setdefault(abbreviation.strip(), {})[key.strip()] = value
    return options


def resolve_cli(args: argparse.Namespace) -> int:
    try:
        config = load_build_config(args.config).with_overrides(
            tika_config_path=args.tika_config_path,
            parsers=args.parsers,
            parser_options=parse_options(args.option),
            parser_names=parse_parser_names(args.parser_name),
            catalog_path=args.catalog,
            services_root=args.services,
        )
        catalog = load_catalog(config.catalog_path)
        providers = (
            ServiceListingSource(config.services_root)
            if config.services_root is not None
            else default_provider_source()
        )
        resolved = ParserResolver(catalog, providers).resolve(config)
        manifest = build_manifest(resolved, providers)
        written = ManifestWriter(args.write).write(manifest) if args.write is not None else []
    except (TikaBuildError, OSError, ValueError, argparse.ArgumentTypeError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    if args.output == OUTPUT_JSON:
        print(json.dumps(manifest.to_dict(), indent=2))
    else:
        _emit_resolution(resolved)
        for path in written:
            print(f"Wrote {path}")
    return 0


def catalog_cli(args: argparse.Namespace) -> int:
    try:
        catalog = load_catalog(args.catalog)
    except (OSError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    print(render_catalog(catalog), end="")
    return 0


def _emit_resolution(resolved: ResolvedParserConfig) -> None:
    if not resolved:
        print("No parsers resolved.")
        return
    print(f"Resolved {len(resolved)} parser(s):")
    for parser, parameters in resolved.items():
        print(f"- {parser}")
        for parameter in parameters:
            print(f"    {parameter.name} = {parameter.value} ({parameter.type})")
