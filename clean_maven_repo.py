#!/usr/bin/env python3
"""
Scan the local Maven repository for corrupted artifacts and optionally delete them.

Truncated JARs (under 1 KiB) and POMs that are really HTML error pages served
by a repository proxy are reported; with --delete they are removed together
with their checksum/signature siblings and Maven's tracking files.

This is a thin wrapper around the maven_repo_cleaner package.
"""
from __future__ import annotations

from maven_repo_cleaner.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
