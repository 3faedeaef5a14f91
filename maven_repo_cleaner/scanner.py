"""
Scanning of a local Maven repository for corrupted artifacts.

Discovery walks the tree sequentially; classification of the discovered
``.jar``/``.pom`` files fans out over a shared thread pool.
"""

from __future__ import annotations

import logging
import os
import threading
from concurrent.futures import ThreadPoolExecutor, as_completed
from pathlib import Path

from .config import (
    BAD_POM_KEYWORDS,
    DESCRIPTOR_SUFFIX,
    MAX_JAR_SIZE,
    PACKAGE_SUFFIX,
    POM_PREVIEW_CHARS,
    RECOGNISED_SUFFIXES,
    WORKER_MULTIPLIER,
    ConfigurationError,
)
from .models import InvalidArtifact
from .progress import ProgressTracker

SMALL_JAR_REASON = f"JAR smaller than {MAX_JAR_SIZE} bytes"
ERROR_PAGE_POM_REASON = "POM replaced by a Harbor error page"
PROGRESS_UPDATE_INTERVAL_SECONDS = 0.5

_pool_lock = threading.Lock()
_worker_pool: ThreadPoolExecutor | None = None
_worker_pool_size = 0


class InvalidScanTargetError(ConfigurationError):
    """Raised when the scan root is missing or is not a directory."""


def default_worker_count() -> int:
    """Classification is I/O bound, so oversubscribe the CPU count."""
    return (os.cpu_count() or 1) * WORKER_MULTIPLIER


def get_worker_pool(max_workers: int | None = None) -> ThreadPoolExecutor:
    """Return the process-wide classification pool, creating it on first use.

    The first call fixes the pool size; later sizes are ignored.
    """
    global _worker_pool, _worker_pool_size  # pylint: disable=global-statement
    with _pool_lock:
        if _worker_pool is None:
            _worker_pool_size = max_workers or default_worker_count()
            logging.debug("Creating scan worker pool with %d threads", _worker_pool_size)
            _worker_pool = ThreadPoolExecutor(max_workers=_worker_pool_size, thread_name_prefix="maven-scan")
        elif max_workers is not None and max_workers != _worker_pool_size:
            logging.debug(
                "Scan worker pool already sized at %d threads; ignoring %d", _worker_pool_size, max_workers
            )
        return _worker_pool


def base_name(file_name: str) -> str:
    """Strip the recognised ``.jar``/``.pom`` suffix from ``file_name``."""
    for suffix in RECOGNISED_SUFFIXES:
        if file_name.endswith(suffix):
            return file_name[: -len(suffix)]
    return file_name


def _is_hidden(name: str) -> bool:
    return name.startswith(".")


def discover_candidate_files(root: Path) -> list[Path]:
    """Collect ``.jar`` and ``.pom`` files below ``root``, skipping hidden entries."""
    found: list[Path] = []
    for dirpath, dirnames, filenames in os.walk(root):
        dirnames[:] = [name for name in dirnames if not _is_hidden(name)]
        for name in filenames:
            if _is_hidden(name):
                continue
            path = Path(dirpath) / name
            if path.suffix in RECOGNISED_SUFFIXES and path.is_file():
                found.append(path)
    return found


def _jar_reason(path: Path) -> str | None:
    try:
        size = path.stat().st_size
    except OSError:
        return None
    if size < MAX_JAR_SIZE:
        return SMALL_JAR_REASON
    return None


def _pom_reason(path: Path) -> str | None:
    try:
        with path.open("r", encoding="utf-8", newline="") as handle:
            preview = handle.read(POM_PREVIEW_CHARS)
    except (OSError, UnicodeDecodeError):
        return None
    if any(keyword in preview for keyword in BAD_POM_KEYWORDS):
        return ERROR_PAGE_POM_REASON
    return None


def classify_file(path: Path) -> InvalidArtifact | None:
    """Return an ``InvalidArtifact`` when ``path`` looks corrupted.

    Files that cannot be read are treated as valid.
    """
    name = path.name
    if name.endswith(PACKAGE_SUFFIX):
        reason = _jar_reason(path)
    elif name.endswith(DESCRIPTOR_SUFFIX):
        reason = _pom_reason(path)
    else:
        return None
    if reason is None:
        return None
    return InvalidArtifact(folder=path.parent, base_name=base_name(name), reason=reason)


def scan(repo_path: Path | str, *, show_progress: bool = False) -> list[InvalidArtifact]:
    """Return every corrupted artifact found below ``repo_path``.

    The order of the returned list is unspecified.

    Raises:
        InvalidScanTargetError: If ``repo_path`` is missing or not a directory.
    """
    root = Path(repo_path)
    if not root.exists():
        raise InvalidScanTargetError(f"Repository path does not exist: {root}")
    if not root.is_dir():
        raise InvalidScanTargetError(f"Repository path is not a directory: {root}")

    files = discover_candidate_files(root)
    logging.info("Found %d JAR/POM files under %s; checking them in parallel", len(files), root)

    pool = get_worker_pool()
    futures = [pool.submit(classify_file, path) for path in files]
    progress = None
    if show_progress:
        progress = ProgressTracker(
            total=len(files),
            label="Checking artifacts",
            update_interval=PROGRESS_UPDATE_INTERVAL_SECONDS,
        )
        progress.update(0)

    invalid: list[InvalidArtifact] = []
    for done, future in enumerate(as_completed(futures), start=1):
        artifact = future.result()
        if artifact is not None:
            invalid.append(artifact)
        if progress is not None:
            progress.update(done)
    if progress is not None:
        progress.finish()

    logging.info("Scan complete: %d corrupted artifact file(s)", len(invalid))
    return invalid
