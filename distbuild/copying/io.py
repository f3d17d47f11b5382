"""File I/O operations for copying."""

from __future__ import annotations

import os
import shutil
import tempfile
from pathlib import Path


def ensure_dir(path: Path) -> None:
    """Create a directory and its parents; no-op if it already exists.

    Args:
        path: Directory to create
    """
    path.mkdir(parents=True, exist_ok=True)


def ensure_parent(path: Path) -> None:
    """Ensure parent directories exist for the given path.

    Args:
        path: Path whose parent directories should be created
    """
    ensure_dir(path.parent)


def atomic_copy(source: Path, destination: Path) -> None:
    """Copy a file atomically using a temporary file in the destination directory.

    Content, permission bits and timestamps are copied from the source.
    An existing destination is replaced.

    Args:
        source: Source file path
        destination: Destination file path
    """
    ensure_parent(destination)

    fd, tmp_name = tempfile.mkstemp(
        prefix=f".{destination.name}.", dir=str(destination.parent)
    )
    os.close(fd)
    try:
        shutil.copy2(source, tmp_name)
        os.replace(tmp_name, destination)
    finally:
        if os.path.exists(tmp_name):
            os.remove(tmp_name)


def copy_tree(source: Path, destination: Path) -> None:
    """Copy a directory recursively, merging into an existing destination.

    Args:
        source: Source directory
        destination: Destination directory
    """
    ensure_parent(destination)
    shutil.copytree(source, destination, dirs_exist_ok=True)
