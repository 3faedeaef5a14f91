"""
Report generation and output functions for maven_repo_cleaner.

Handles JSON and CSV report generation, summaries, and console display.
"""

from __future__ import annotations

import csv
import json
from collections import Counter
from pathlib import Path
from typing import Sequence

from .models import CleanResult, InvalidArtifact

REPORT_FIELDS = ["folder", "base_name", "reason"]


def order_artifacts(artifacts: Sequence[InvalidArtifact], *, order: str) -> list[InvalidArtifact]:
    """Sort artifacts by reason or path; scan order is not stable."""
    if order == "reason":
        return sorted(artifacts, key=lambda a: (a.reason, str(a.folder), a.base_name))
    return sorted(artifacts, key=lambda a: (str(a.folder), a.base_name, a.reason))


def summarise(artifacts: Sequence[InvalidArtifact]) -> list[tuple[str, int]]:
    """Return per-reason counts sorted by reason."""
    return sorted(Counter(artifact.reason for artifact in artifacts).items())


def write_reports(
    artifacts: Sequence[InvalidArtifact],
    *,
    json_path: Path | None,
    csv_path: Path | None,
) -> None:
    """Write the artifact list to JSON and/or CSV report files."""
    rows = [artifact.to_dict() for artifact in artifacts]
    if json_path:
        json_path.parent.mkdir(parents=True, exist_ok=True)
        json_path.write_text(json.dumps(rows, indent=2))
    if csv_path:
        csv_path.parent.mkdir(parents=True, exist_ok=True)
        with csv_path.open("w", newline="") as handle:
            writer = csv.DictWriter(handle, fieldnames=REPORT_FIELDS)
            writer.writeheader()
            writer.writerows(rows)


def print_artifacts_report(
    artifacts: Sequence[InvalidArtifact],
    acted_upon: Sequence[InvalidArtifact],
    repo_path: Path,
) -> None:
    """Print the corrupted artifact list and per-reason totals."""
    print(
        f"Identified {len(artifacts)} corrupted artifact file(s) "
        f"(showing {len(acted_upon)}) under {repo_path}:"
    )
    for artifact in acted_upon:
        print(f"- [{artifact.reason}] {Path(artifact.folder) / artifact.base_name}")

    print("\nPer-reason totals:")
    for reason, count in summarise(artifacts):
        print(f"  {reason:40} count={count:6d}")


def print_deletion_plan(paths: Sequence[Path]) -> None:
    """Display the files a clean would remove."""
    print(f"\nWould delete {len(paths)} file(s):")
    for path in paths:
        print(f"    delete {path}")


def print_clean_result(result: CleanResult) -> None:
    """Print the deletion count and any failures."""
    print(f"Deleted {result.deleted_count} file(s).")
    if result.errors:
        print(f"{len(result.errors)} error(s):")
        for message in result.errors:
            print(f"  {message}")
