"""Tests for maven_repo_cleaner/reports.py output helpers."""

from __future__ import annotations

import csv
import json
from pathlib import Path

from maven_repo_cleaner.models import CleanResult, InvalidArtifact
from maven_repo_cleaner.reports import (
    order_artifacts,
    print_artifacts_report,
    print_clean_result,
    print_deletion_plan,
    summarise,
    write_reports,
)
from tests.assertions import assert_equal

SMALL = InvalidArtifact(folder=Path("/repo/z/1.0"), base_name="z-1.0", reason="JAR smaller than 1024 bytes")
PAGE = InvalidArtifact(folder=Path("/repo/a/2.0"), base_name="a-2.0", reason="POM replaced by a Harbor error page")
SMALL_A = InvalidArtifact(folder=Path("/repo/a/2.0"), base_name="a-2.0", reason="JAR smaller than 1024 bytes")


def test_order_by_path():
    """Test path ordering sorts by folder then base name."""
    assert_equal(order_artifacts([SMALL, PAGE, SMALL_A], order="path"), [SMALL_A, PAGE, SMALL])


def test_order_by_reason():
    """Test reason ordering groups findings by reason."""
    assert_equal(order_artifacts([PAGE, SMALL, SMALL_A], order="reason"), [SMALL_A, SMALL, PAGE])


def test_summarise_counts_reasons():
    """Test per-reason counts."""
    assert_equal(
        summarise([SMALL, PAGE, SMALL_A]),
        [("JAR smaller than 1024 bytes", 2), ("POM replaced by a Harbor error page", 1)],
    )


def test_write_reports_json_and_csv(tmp_path: Path):
    """Test JSON and CSV reports contain every finding."""
    json_path = tmp_path / "out" / "report.json"
    csv_path = tmp_path / "out" / "report.csv"

    write_reports([SMALL, PAGE], json_path=json_path, csv_path=csv_path)

    assert_equal(json.loads(json_path.read_text()), [SMALL.to_dict(), PAGE.to_dict()])
    with csv_path.open(newline="") as handle:
        rows = list(csv.DictReader(handle))
    assert_equal(rows, [SMALL.to_dict(), PAGE.to_dict()])


def test_write_reports_nothing_requested(tmp_path: Path):
    """Test no files are written without report paths."""
    write_reports([SMALL], json_path=None, csv_path=None)

    assert_equal(list(tmp_path.iterdir()), [])


def test_print_artifacts_report(capsys):
    """Test the console report lists shown findings and totals."""
    print_artifacts_report([SMALL, PAGE], [PAGE], Path("/repo"))

    out = capsys.readouterr().out
    assert "Identified 2 corrupted artifact file(s) (showing 1)" in out
    assert str(Path("/repo/a/2.0") / "a-2.0") in out
    assert "Per-reason totals:" in out
    assert "JAR smaller than 1024 bytes" in out


def test_print_deletion_plan(capsys):
    """Test the dry-run plan lists each file."""
    print_deletion_plan([Path("/repo/a/2.0/a-2.0.pom")])

    out = capsys.readouterr().out
    assert "Would delete 1 file(s)" in out
    assert str(Path("/repo/a/2.0/a-2.0.pom")) in out


def test_print_clean_result_with_errors(capsys):
    """Test deletion counts and errors are printed."""
    print_clean_result(CleanResult(deleted_count=3, errors=["Failed to delete x: denied"]))

    out = capsys.readouterr().out
    assert "Deleted 3 file(s)." in out
    assert "1 error(s):" in out
    assert "Failed to delete x: denied" in out
