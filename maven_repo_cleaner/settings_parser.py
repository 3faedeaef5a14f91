"""
Extraction of ``<localRepository>`` from Maven ``settings.xml`` files.

Every failure mode (missing file, unreadable file, malformed XML, missing or
empty element) collapses to ``None``: an absent override is the common case.
"""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from pathlib import Path

LOCAL_REPOSITORY_TAG = "localRepository"


def _local_name(tag: str) -> str:
    """Strip the ``{namespace}`` prefix ElementTree puts on qualified tags."""
    return tag.rsplit("}", 1)[-1]


def parse_local_repository(settings_path: Path | str) -> str | None:
    """Return the trimmed ``localRepository`` value configured in ``settings_path``."""
    settings_path = Path(settings_path)
    logging.debug("Reading Maven settings %s", settings_path)

    if not settings_path.is_file():
        logging.debug("Settings file %s does not exist", settings_path)
        return None

    try:
        content = settings_path.read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as exc:
        logging.debug("Failed to read %s: %s", settings_path, exc)
        return None

    try:
        root = ET.fromstring(content)
    except ET.ParseError as exc:
        logging.debug("Failed to parse %s: %s", settings_path, exc)
        return None

    for element in root.iter():
        if not isinstance(element.tag, str) or _local_name(element.tag) != LOCAL_REPOSITORY_TAG:
            continue
        value = (element.text or "").strip()
        if value:
            logging.debug("Found localRepository %s in %s", value, settings_path)
            return value

    logging.debug("No <%s> element in %s", LOCAL_REPOSITORY_TAG, settings_path)
    return None
