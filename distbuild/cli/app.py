"""Main CLI application."""

from __future__ import annotations

import logging
import sys

import typer
from pydantic import ValidationError
from typing_extensions import Annotated

from ..copying import engine
from ..core.settings import BuildSettings
from .parsers import parse_file_name, parse_out_dir, parse_root

logger = logging.getLogger(__name__)

LOG_FORMAT = "[%(levelname)s] %(message)s"

app = typer.Typer(
    name="distbuild",
    help="Copy static site files into the dist directory.",
)


class _BelowWarning(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno < logging.WARNING


def configure_logging(verbose: bool = False) -> None:
    """Route package log records to stdout (below WARNING) and stderr."""
    package_logger = logging.getLogger("distbuild")
    for handler in list(package_logger.handlers):
        if not isinstance(handler, logging.NullHandler):
            package_logger.removeHandler(handler)

    formatter = logging.Formatter(LOG_FORMAT)

    out_handler = logging.StreamHandler(sys.stdout)
    out_handler.addFilter(_BelowWarning())
    out_handler.setFormatter(formatter)

    err_handler = logging.StreamHandler(sys.stderr)
    err_handler.setLevel(logging.WARNING)
    err_handler.setFormatter(formatter)

    package_logger.addHandler(out_handler)
    package_logger.addHandler(err_handler)
    package_logger.setLevel(logging.DEBUG if verbose else logging.INFO)


@app.command()
def build(
    root: Annotated[
        str,
        typer.Option(
            "--root",
            help="Project root holding the source files (default: cwd).",
            metavar="DIR",
        ),
    ] = "",
    out_dir: Annotated[
        str,
        typer.Option(
            "--out-dir",
            help="Output directory, relative to the project root (default: dist).",
            metavar="DIR",
        ),
    ] = "",
    files: Annotated[
        list[str],
        typer.Option(
            "--file",
            help="File to copy, relative to the project root. Repeatable; replaces the default list.",
            metavar="NAME",
        ),
    ] = [],
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable verbose logging.",
        ),
    ] = False,
) -> None:
    """Copy the configured static files into the output directory."""
    configure_logging(verbose)

    logger.debug("Starting distbuild")

    # Parse configuration; CLI options win over DISTBUILD_* variables
    settings = BuildSettings()
    try:
        config = settings.to_config(
            project_root=parse_root(root),
            dist_dir=parse_out_dir(out_dir),
            files=[parse_file_name(name) for name in files] or None,
        )
    except ValidationError as e:
        raise typer.BadParameter(
            "; ".join(err["msg"] for err in e.errors())
        ) from e

    logger.debug(
        f"Config: {len(config.files)} file(s) from {config.project_root} "
        f"to {config.output_dir}"
    )

    report = engine.copy_all(config)

    logger.debug(
        f"Completed: {len(report.copied)} copied, {len(report.missing)} missing"
    )


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
