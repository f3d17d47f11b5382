"""Domain models for the copy configuration and its outcome."""

from __future__ import annotations

from enum import Enum
from pathlib import Path, PurePosixPath, PureWindowsPath

from pydantic import BaseModel, Field, field_validator, model_validator

DEFAULT_FILES: tuple[str, ...] = ("index.html", "styles.css", "main.js")
DEFAULT_DIST_DIR = Path("dist")


def validate_relative_name(name: str) -> str:
    """Check that a file name is relative and stays inside the project root.

    Args:
        name: File name as configured

    Returns:
        The unchanged name

    Raises:
        ValueError: If the name is empty, absolute, names the project root
            itself or contains ``..``
    """
    if not name.strip():
        raise ValueError("File name must not be empty")
    if PurePosixPath(name).is_absolute() or PureWindowsPath(name).is_absolute():
        raise ValueError(f"File name must be relative: {name!r}")
    parts = PurePosixPath(name.replace("\\", "/")).parts
    if not parts:
        raise ValueError(f"File name must not be the project root: {name!r}")
    if ".." in parts:
        raise ValueError(f"File name must not leave the project root: {name!r}")
    return name


class CopyTask(BaseModel):
    """A single file copy task."""

    name: str = Field(..., description="File name relative to the project root")
    source_path: Path = Field(..., description="Source file path")
    output_path: Path = Field(..., description="Destination file path")


class BuildConfig(BaseModel):
    """Configuration for the copy run."""

    files: list[str] = Field(
        default_factory=lambda: list(DEFAULT_FILES),
        min_length=1,
        description="Ordered file names to copy",
    )
    project_root: Path = Field(
        default_factory=Path.cwd, description="Directory holding the sources"
    )
    dist_dir: Path = Field(
        default=DEFAULT_DIST_DIR,
        description="Output directory, relative to the project root unless absolute",
    )

    @field_validator("files")
    @classmethod
    def check_files(cls, value: list[str]) -> list[str]:
        return [validate_relative_name(name) for name in value]

    @model_validator(mode="after")
    def check_sources_outside_output(self) -> BuildConfig:
        # A source at or above the output dir would be copied into itself
        out_dir = self.output_dir.resolve()
        for name in self.files:
            source = (self.project_root / name).resolve()
            if out_dir == source or out_dir.is_relative_to(source):
                raise ValueError(
                    f"File name must not contain the output directory: {name!r}"
                )
        return self

    @property
    def output_dir(self) -> Path:
        if self.dist_dir.is_absolute():
            return self.dist_dir
        return self.project_root / self.dist_dir

    def tasks(self) -> list[CopyTask]:
        """Expand the file list into copy tasks, preserving order."""
        out_dir = self.output_dir
        return [
            CopyTask(
                name=name,
                source_path=self.project_root / name,
                output_path=out_dir / name,
            )
            for name in self.files
        ]


class CopyStatus(str, Enum):
    COPIED = "copied"
    MISSING = "missing"


class CopyResult(BaseModel):
    """Outcome of one copy task."""

    name: str
    status: CopyStatus
    destination: Path | None = None


class BuildReport(BaseModel):
    """Ordered outcome of a whole run."""

    output_dir: Path
    results: list[CopyResult] = Field(default_factory=list)

    @property
    def copied(self) -> list[str]:
        return [r.name for r in self.results if r.status is CopyStatus.COPIED]

    @property
    def missing(self) -> list[str]:
        return [r.name for r in self.results if r.status is CopyStatus.MISSING]
