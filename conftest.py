"""Pytest configuration and shared fixtures for the Maven repository cleaner."""

# pylint: disable=wrong-import-position

import os
import sys
from pathlib import Path
from unittest import mock

PROJECT_ROOT = Path(__file__).resolve().parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

import pytest

from maven_repo_cleaner.config import ENV_FILE_VARIABLE, MAVEN_HOME_ENV_VARS


@pytest.fixture(autouse=True)
def isolated_maven_env(tmp_path_factory, monkeypatch):
    """Keep the developer's Maven installation and ~/.env out of every test.

    MAVEN_HOME/M2_HOME are cleared, PATH is reduced to a directory without
    Maven, and MAVEN_CLEANER_ENV_FILE points at an empty .env file. Anything a
    test loads from a .env file is rolled back afterwards.
    """
    with mock.patch.dict(os.environ):
        for name in MAVEN_HOME_ENV_VARS:
            monkeypatch.delenv(name, raising=False)
        sandbox = tmp_path_factory.mktemp("isolated-env")
        empty_bin = sandbox / "empty-bin"
        empty_bin.mkdir()
        monkeypatch.setenv("PATH", str(empty_bin))
        env_file = sandbox / ".env"
        env_file.write_text("")
        monkeypatch.setenv(ENV_FILE_VARIABLE, str(env_file))
        yield str(env_file)
