"""
Resolution of the local Maven repository directory.

Strategies are tried in the order Maven itself applies configuration: the
global settings of the installation reported by ``mvn -v``, then the
installations named by MAVEN_HOME/M2_HOME, then installations inferred from
PATH, then the user's ``~/.m2/settings.xml``, and finally ``~/.m2/repository``.
"""

from __future__ import annotations

import logging
import os
import subprocess
from pathlib import Path
from typing import Callable, Iterable, Optional, Sequence

from .config import (
    DEFAULT_REPOSITORY_DIR,
    MAVEN_BIN_MARKER,
    MAVEN_HOME_ENV_VARS,
    MAVEN_HOME_PREFIX,
    MAVEN_PATH_MARKER,
    SETTINGS_FILE_NAME,
    USER_MAVEN_DIR,
    ConfigurationError,
)
from .settings_parser import parse_local_repository

# subprocess.CREATE_NO_WINDOW only exists on Windows builds of Python.
CREATE_NO_WINDOW = 0x08000000

Strategy = Callable[[], Optional[str]]


class RepositoryResolutionError(ConfigurationError):
    """Raised when no repository path can be determined."""


def _is_windows() -> bool:
    return os.name == "nt"


def maven_executables() -> list[str]:
    """Return the executable names to try for ``mvn -v``."""
    if _is_windows():
        return ["mvn.cmd", "mvn.bat", "mvn"]
    return ["mvn"]


def parse_maven_home(output: str) -> str | None:
    """Extract the installation directory from ``mvn -v`` output."""
    for line in output.splitlines():
        if line.startswith(MAVEN_HOME_PREFIX):
            maven_home = line[len(MAVEN_HOME_PREFIX) :].strip()
            if maven_home:
                return maven_home
    return None


def query_maven_home() -> str | None:
    """Ask the installed ``mvn`` where it lives."""
    # Decode leniently: locale lines or Java paths may not be UTF-8.
    kwargs: dict[str, object] = {
        "capture_output": True,
        "text": True,
        "encoding": "utf-8",
        "errors": "replace",
        "check": False,
    }
    if _is_windows():
        kwargs["creationflags"] = CREATE_NO_WINDOW

    for executable in maven_executables():
        logging.debug("Trying %s -v", executable)
        try:
            completed = subprocess.run([executable, "-v"], **kwargs)  # type: ignore[call-overload]
        except OSError as exc:
            logging.debug("%s could not be started: %s", executable, exc)
            continue
        if completed.returncode != 0:
            logging.debug("%s -v exited with status %s", executable, completed.returncode)
            continue
        maven_home = parse_maven_home(completed.stdout or "")
        if maven_home:
            logging.debug("mvn -v reports Maven home %s", maven_home)
            return maven_home

    logging.debug("No usable mvn executable found")
    return None


def global_settings_path(maven_home: Path | str) -> Path:
    """Return the installation-wide settings.xml for ``maven_home``."""
    return Path(maven_home) / "conf" / SETTINGS_FILE_NAME


def resolve_home() -> Path:
    """Return the current user's home directory.

    Raises:
        RepositoryResolutionError: If the home directory cannot be determined.
    """
    try:
        return Path.home()
    except (RuntimeError, KeyError) as exc:
        raise RepositoryResolutionError(f"Unable to determine the user home directory: {exc}") from exc


def _first_configured(maven_homes: Iterable[str]) -> str | None:
    for maven_home in maven_homes:
        repo = parse_local_repository(global_settings_path(maven_home))
        if repo:
            return repo
    return None


def maven_homes_from_env() -> list[str]:
    """Return installation directories named by MAVEN_HOME and M2_HOME."""
    homes: list[str] = []
    for name in MAVEN_HOME_ENV_VARS:
        value = os.environ.get(name)
        if value:
            logging.debug("Environment variable %s = %s", name, value)
            homes.append(value)
        else:
            logging.debug("Environment variable %s is not set", name)
    return homes


def maven_homes_from_path() -> list[str]:
    """Infer installation directories from Maven ``bin`` entries on PATH."""
    homes: list[str] = []
    path_env = os.environ.get("PATH")
    if not path_env:
        return homes
    for entry in path_env.split(os.pathsep):
        lowered = entry.lower()
        if MAVEN_PATH_MARKER in lowered and MAVEN_BIN_MARKER in lowered:
            maven_home = str(Path(entry).parent)
            logging.debug("PATH entry %s suggests Maven home %s", entry, maven_home)
            homes.append(maven_home)
    return homes


def from_tool_query() -> str | None:
    maven_home = query_maven_home()
    if maven_home is None:
        return None
    return parse_local_repository(global_settings_path(maven_home))


def from_environment() -> str | None:
    return _first_configured(maven_homes_from_env())


def from_path_entries() -> str | None:
    return _first_configured(maven_homes_from_path())


def from_user_settings() -> str | None:
    try:
        home = resolve_home()
    except RepositoryResolutionError as exc:
        logging.debug("Skipping user settings: %s", exc)
        return None
    return parse_local_repository(home / USER_MAVEN_DIR / SETTINGS_FILE_NAME)


def default_repository_path() -> str:
    """Return ``~/.m2/repository``.

    Raises:
        RepositoryResolutionError: If the home directory cannot be determined.
    """
    return str(resolve_home() / USER_MAVEN_DIR / DEFAULT_REPOSITORY_DIR)


def default_strategies() -> list[Strategy]:
    """Return the lookup chain in priority order, ahead of the default path."""
    return [from_tool_query, from_environment, from_path_entries, from_user_settings]


def locate_repository(strategies: Sequence[Strategy] | None = None) -> str:
    """Return the local repository root Maven would use.

    Raises:
        RepositoryResolutionError: If every strategy fails and the home directory
            is unavailable for the default location.
    """
    for strategy in default_strategies() if strategies is None else strategies:
        name = getattr(strategy, "__name__", repr(strategy))
        logging.debug("Trying repository strategy %s", name)
        repo = strategy()
        if repo:
            logging.info("Maven repository resolved via %s: %s", name, repo)
            return repo

    repo = default_repository_path()
    logging.info("Falling back to default Maven repository %s", repo)
    return repo
