"""
Removal of corrupted artifacts and their sibling files.

For each item, every entry of the item's folder whose name starts with the
item's base name is removed, together with Maven's per-directory tracking
files so the next build re-downloads the artifact.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

from .config import METADATA_FILES
from .models import CleanItem, CleanResult


class FolderReadError(OSError):
    """Raised when an item's folder cannot be listed."""


def matches_item(file_name: str, base_name: str) -> bool:
    """Return True when ``file_name`` belongs to ``base_name`` or is a tracking file."""
    return file_name.startswith(base_name) or file_name in METADATA_FILES


def _matching_entries(item: CleanItem) -> list[Path] | None:
    """List the entries of ``item.folder`` that ``clean`` would remove.

    Returns None when the folder no longer exists.

    Raises:
        FolderReadError: If the folder exists but cannot be listed.
    """
    folder = Path(item.folder)
    if not folder.exists():
        return None
    try:
        entries = sorted(folder.iterdir())
    except OSError as exc:
        raise FolderReadError(f"Cannot read directory {folder}: {exc}") from exc
    return [entry for entry in entries if matches_item(entry.name, item.base_name)]


def plan_clean(items: Iterable[CleanItem]) -> list[Path]:
    """Return the files ``clean`` would delete, without deleting anything."""
    planned: list[Path] = []
    seen: set[Path] = set()
    for item in items:
        try:
            entries = _matching_entries(item)
        except FolderReadError as exc:
            logging.warning("%s", exc)
            continue
        for entry in entries or ():
            if entry not in seen:
                seen.add(entry)
                planned.append(entry)
    return planned


def clean(items: Iterable[CleanItem]) -> CleanResult:
    """Delete the files belonging to each item, collecting failures instead of raising."""
    result = CleanResult()
    for item in items:
        try:
            entries = _matching_entries(item)
        except FolderReadError as exc:
            logging.warning("%s", exc)
            result.record_error(str(exc))
            continue
        if entries is None:
            logging.debug("Folder %s already gone; skipping %s", item.folder, item.base_name)
            continue

        for entry in entries:
            try:
                entry.unlink()
            except OSError as exc:
                logging.warning("Failed to delete %s: %s", entry, exc)
                result.record_error(f"Failed to delete {entry}: {exc}")
            else:
                logging.info("Deleted %s", entry)
                result.record_deleted()
    return result
