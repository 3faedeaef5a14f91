"""
Command-line interface and main entry point for maven_repo_cleaner.

Handles workflow orchestration and user interaction.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .args_parser import parse_args
from .cleaner import clean, plan_clean
from .config import load_env_file
from .locator import RepositoryResolutionError, locate_repository
from .models import CleanItem, InvalidArtifact
from .reports import (
    order_artifacts,
    print_artifacts_report,
    print_clean_result,
    print_deletion_plan,
    write_reports,
)
from .scanner import InvalidScanTargetError, scan


def _resolve_repo_path(args: argparse.Namespace) -> Path | int:
    """Return the repository to scan, or an exit code on failure."""
    if args.repo_path is not None:
        return args.repo_path
    load_env_file(args.env_file)
    try:
        return Path(locate_repository())
    except RepositoryResolutionError:
        logging.exception("Could not determine the local Maven repository")
        return 1


def _confirm(message: str) -> bool:
    try:
        response = input(message).strip()
    except EOFError:
        print("\nConfirmation not received.")
        return False
    return response.lower() in {"y", "yes"}


def _handle_deletion(args: argparse.Namespace, acted_upon: list[InvalidArtifact]) -> int:
    """Handle deletion logic. Returns exit code."""
    # A JAR and a POM of the same artifact produce the same item.
    items = list(dict.fromkeys(CleanItem.from_artifact(artifact) for artifact in acted_upon))
    if not args.delete:
        print_deletion_plan(plan_clean(items))
        print("\nDry run only (use --delete --yes to remove the listed files).")
        return 0

    if not args.yes and not _confirm(f"\nDelete {len(items)} corrupted artifact(s)? [y/N] "):
        print("Aborted by user.")
        return 0

    result = clean(items)
    print_clean_result(result)
    if result.errors:
        print(f"Completed with {len(result.errors)} error(s); see log for details.")
        return 2
    print("Deletion complete.")
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the maven_repo_cleaner CLI."""
    args = parse_args(sys.argv[1:] if argv is None else argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(message)s",
    )

    repo_path = _resolve_repo_path(args)
    if isinstance(repo_path, int):
        return repo_path

    if args.locate_only:
        print(repo_path)
        return 0

    try:
        artifacts = scan(repo_path, show_progress=args.progress)
    except InvalidScanTargetError as exc:
        logging.error("%s", exc)
        return 1

    if not artifacts:
        print(f"No corrupted artifacts found under {repo_path}.")
        return 0

    ordered = order_artifacts(artifacts, order=args.sort)
    acted_upon = ordered[: args.limit] if args.limit else ordered

    print_artifacts_report(ordered, acted_upon, repo_path)
    write_reports(ordered, json_path=args.report_json, csv_path=args.report_csv)

    return _handle_deletion(args, acted_upon)
