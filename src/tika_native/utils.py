"""Utility helpers shared across the build components."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from pathlib import Path
from typing import Any


def ensure_directory(path: Path) -> None:
    path.mkdir(parents=True, exist_ok=True)


def write_text_atomic(path: Path, text: str) -> None:
    ensure_directory(path.parent)
    tmp_path = path.with_name(path.name + ".tmp")
    tmp_path.write_text(text, encoding="utf-8")
    tmp_path.replace(path)


def split_tokens(values: Sequence[str] | str | None, *, separator: str = ",") -> tuple[str, ...]:
    """Split a separated string (or sequence of strings) into trimmed tokens.

    Empty tokens are dropped; order and duplicates are kept so callers can
    decide how repeats are handled.
    """

    if not values:
        return ()
    if isinstance(values, str):
        values = [values]
    tokens: list[str] = []
    for raw in values:
        for piece in str(raw).split(separator):
            token = piece.strip()
            if token:
                tokens.append(token)
    return tuple(tokens)


def unique(values: Iterable[str]) -> list[str]:
    return list(dict.fromkeys(values))


def stringify(value: Any) -> str:
    """Render a YAML scalar the way it would appear in a properties file."""

    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def resolve_path(path: Path, *, base: Path | None) -> Path:
    candidate = path.expanduser()
    if candidate.is_absolute() or base is None:
        return candidate.resolve()
    return (base / candidate).resolve()
