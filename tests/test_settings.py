import json

import pytest
from pydantic import ValidationError

from distbuild.core.settings import BuildSettings


def test_defaults_from_cwd(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    config = BuildSettings().to_config()
    assert config.project_root == tmp_path.resolve()
    assert config.output_dir == tmp_path.resolve() / "dist"
    assert config.files == ["index.html", "styles.css", "main.js"]


def test_environment_is_read(tmp_path, monkeypatch):
    monkeypatch.setenv("DISTBUILD_PROJECT_ROOT", str(tmp_path))
    monkeypatch.setenv("DISTBUILD_DIST_DIR", "public")
    monkeypatch.setenv("DISTBUILD_FILES", json.dumps(["app.js"]))

    config = BuildSettings().to_config()

    assert config.project_root == tmp_path
    assert config.output_dir == tmp_path / "public"
    assert config.files == ["app.js"]


def test_explicit_arguments_override_environment(tmp_path, monkeypatch):
    monkeypatch.setenv("DISTBUILD_DIST_DIR", "public")
    monkeypatch.setenv("DISTBUILD_FILES", json.dumps(["app.js"]))

    config = BuildSettings().to_config(
        project_root=tmp_path, dist_dir=tmp_path / "out", files=["main.js"]
    )

    assert config.output_dir == tmp_path / "out"
    assert config.files == ["main.js"]


def test_environment_names_are_validated(monkeypatch):
    monkeypatch.setenv("DISTBUILD_FILES", json.dumps(["../outside.js"]))
    with pytest.raises(ValidationError):
        BuildSettings().to_config()
