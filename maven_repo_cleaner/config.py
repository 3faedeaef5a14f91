"""
Configuration and constants for maven_repo_cleaner.

Holds the fixed scan/clean heuristics and loads optional ``.env`` overrides
for the Maven environment variables.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from dotenv import load_dotenv

PACKAGE_SUFFIX = ".jar"
DESCRIPTOR_SUFFIX = ".pom"
RECOGNISED_SUFFIXES = (PACKAGE_SUFFIX, DESCRIPTOR_SUFFIX)

MAX_JAR_SIZE = 1024  # bytes
POM_PREVIEW_CHARS = 1024

# Markers of an HTML error page served by a misconfigured Harbor proxy.
BAD_POM_KEYWORDS = (
    "<!DOCTYPE html>",
    "<title>Harbor</title>",
    "Login to Harbor",
)

# Tracking files Maven keeps per artifact directory.
METADATA_FILES = (
    "_remote.repositories",
    "_maven.repositories",
    "resolver-status.properties",
)

MAVEN_HOME_ENV_VARS = ("MAVEN_HOME", "M2_HOME")
MAVEN_PATH_MARKER = "maven"
MAVEN_BIN_MARKER = "bin"
MAVEN_HOME_PREFIX = "Maven home:"
SETTINGS_FILE_NAME = "settings.xml"
USER_MAVEN_DIR = ".m2"
DEFAULT_REPOSITORY_DIR = "repository"

WORKER_MULTIPLIER = 4

ENV_FILE_VARIABLE = "MAVEN_CLEANER_ENV_FILE"


class ConfigurationError(RuntimeError):
    """Raised when required configuration cannot be determined."""


def resolve_env_path(env_path: str | None = None) -> Path:
    """
    Determine which .env file should be consulted.

    Priority order:
      1. Explicit parameter
      2. MAVEN_CLEANER_ENV_FILE environment variable
      3. ~/.env
    """
    if env_path:
        return Path(env_path).expanduser()
    configured = os.environ.get(ENV_FILE_VARIABLE)
    if configured:
        return Path(configured).expanduser()
    return Path.home() / ".env"


def load_env_file(env_path: str | None = None) -> Path:
    """Load MAVEN_HOME/M2_HOME style overrides from a .env file.

    Variables already present in the process environment win over the file.
    A missing file is not an error.
    """
    resolved = resolve_env_path(env_path)
    if load_dotenv(resolved, override=False):
        logging.debug("Loaded environment overrides from %s", resolved)
    else:
        logging.debug("No environment overrides loaded from %s", resolved)
    return resolved
