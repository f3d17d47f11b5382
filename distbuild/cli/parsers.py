"""CLI argument parsers and validators."""

from __future__ import annotations

from pathlib import Path

import typer

from ..core.models import validate_relative_name


def parse_file_name(value: str) -> str:
    """Parse a --file argument, rejecting names outside the project root."""
    try:
        return validate_relative_name(value)
    except ValueError as e:
        raise typer.BadParameter(str(e)) from e


def parse_root(value: str) -> Path | None:
    """Parse the --root argument; empty means not given."""
    if not value:
        return None
    path = Path(value)
    if not path.is_dir():
        raise typer.BadParameter(f"Project root is not a directory: {value!r}")
    return path


def parse_out_dir(value: str) -> Path | None:
    """Parse the --out-dir argument; empty means not given."""
    return Path(value) if value else None
