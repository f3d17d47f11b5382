"""Shared fixtures for the distbuild test suite."""

import logging

import pytest

SOURCES = {
    "index.html": "<!doctype html>\n<title>site</title>\n",
    "styles.css": "body { margin: 0; }\n",
    "main.js": "console.log('ready');\n",
}


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep DISTBUILD_* variables and CLI log handlers from leaking between tests."""
    for name in ("DISTBUILD_PROJECT_ROOT", "DISTBUILD_DIST_DIR", "DISTBUILD_FILES"):
        monkeypatch.delenv(name, raising=False)
    yield
    package_logger = logging.getLogger("distbuild")
    for handler in list(package_logger.handlers):
        if not isinstance(handler, logging.NullHandler):
            package_logger.removeHandler(handler)
    package_logger.setLevel(logging.NOTSET)


@pytest.fixture
def make_project(tmp_path):
    """Create a project root holding the named default sources."""

    def _make(*names):
        root = tmp_path / "site"
        root.mkdir(exist_ok=True)
        for name in names:
            (root / name).write_text(SOURCES[name])
        return root

    return _make


@pytest.fixture
def full_project(make_project):
    return make_project(*SOURCES)
