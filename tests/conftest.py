"""Shared pytest fixtures for the maven_repo_cleaner tests."""

from __future__ import annotations

from pathlib import Path

import pytest


@pytest.fixture(name="artifact_dir")
def fixture_artifact_dir(tmp_path: Path) -> Path:
    """Return an empty ``com/example/foo/1.0`` directory inside a fake repository."""
    folder = tmp_path / "repository" / "com" / "example" / "foo" / "1.0"
    folder.mkdir(parents=True)
    return folder
