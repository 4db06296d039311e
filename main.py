#!/usr/bin/env python3

from __future__ import annotations

import argparse
import sys

from src.cli.commands.tika import (
    build_catalog_parser,
    build_resolve_parser,
    catalog_cli,
    resolve_cli,
)


def main(argv: list[str] | None = None) -> int:
    raw_args = sys.argv[1:] if argv is None else argv

    if raw_args and raw_args[0] == "catalog":
        parser = build_catalog_parser(prog="python -m main catalog")
        try:
            args = parser.parse_args(raw_args[1:])
        except argparse.ArgumentError as exc:
            parser.error(str(exc))
        return catalog_cli(args)

    if raw_args and raw_args[0] == "resolve":
        raw_args = raw_args[1:]

    parser = build_resolve_parser(prog="python -m main resolve")
    try:
        args = parser.parse_args(raw_args)
    except argparse.ArgumentError as exc:
        parser.error(str(exc))

    return resolve_cli(args)


if __name__ == "__main__":
    raise SystemExit(main())
