from __future__ import annotations

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .models import DEFAULT_DIST_DIR, DEFAULT_FILES, BuildConfig


class BuildSettings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="DISTBUILD_", case_sensitive=False)

    project_root: Path = Field(default_factory=Path.cwd)
    dist_dir: Path = DEFAULT_DIST_DIR
    files: list[str] = Field(default_factory=lambda: list(DEFAULT_FILES))

    def to_config(
        self,
        *,
        project_root: Path | None = None,
        dist_dir: Path | None = None,
        files: list[str] | None = None,
    ) -> BuildConfig:
        """Build a validated config, letting explicit arguments win over the environment."""
        return BuildConfig(
            files=files or self.files,
            project_root=project_root or self.project_root,
            dist_dir=dist_dir or self.dist_dir,
        )
