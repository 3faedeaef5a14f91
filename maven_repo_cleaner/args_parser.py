"""
Argument parsing for the maven_repo_cleaner CLI.

Handles command-line argument definition, parsing, and validation.
"""

from __future__ import annotations

import argparse
from pathlib import Path


def add_location_arguments(parser: argparse.ArgumentParser) -> None:
    """Add repository location arguments."""
    parser.add_argument(
        "--repo-path",
        type=Path,
        help="Local Maven repository to scan (default: detected from mvn, MAVEN_HOME/M2_HOME, PATH, ~/.m2).",
    )
    parser.add_argument(
        "--env-file",
        help="Optional .env file providing MAVEN_HOME/M2_HOME (default: $MAVEN_CLEANER_ENV_FILE or ~/.env).",
    )
    parser.add_argument(
        "--locate-only",
        action="store_true",
        help="Print the detected repository path and exit.",
    )


def add_filter_arguments(parser: argparse.ArgumentParser) -> None:
    """Add filtering and sorting arguments."""
    parser.add_argument(
        "--limit",
        type=int,
        help="Limit the number of corrupted artifacts acted on.",
    )
    parser.add_argument(
        "--sort",
        choices={"path", "reason"},
        default="path",
        help="Order used when reporting/deleting.",
    )


def add_action_arguments(parser: argparse.ArgumentParser) -> None:
    """Add action and confirmation arguments."""
    parser.add_argument(
        "--delete",
        action="store_true",
        help="Delete the corrupted artifacts. Default is dry-run/report only.",
    )
    parser.add_argument(
        "--yes",
        action="store_true",
        help="Skip the confirmation prompt when deleting.",
    )


def add_output_arguments(parser: argparse.ArgumentParser) -> None:
    """Add output and reporting arguments."""
    parser.add_argument("--report-json", type=Path, help="Optional path to write the corrupted artifacts as JSON.")
    parser.add_argument("--report-csv", type=Path, help="Optional path to write the report as CSV.")
    parser.add_argument("--progress", action="store_true", help="Show a progress line while checking files.")
    parser.add_argument("--verbose", action="store_true", help="Enable verbose logging.")


def build_parser() -> argparse.ArgumentParser:
    """Create the ArgumentParser for the cleaner CLI."""
    parser = argparse.ArgumentParser(
        description=(
            "Scan the local Maven repository for corrupted JAR/POM files "
            "(truncated JARs, POMs replaced by proxy error pages) and optionally delete them."
        )
    )
    add_location_arguments(parser)
    add_filter_arguments(parser)
    add_action_arguments(parser)
    add_output_arguments(parser)
    return parser


def _validate_args(args: argparse.Namespace, parser: argparse.ArgumentParser) -> None:
    """Validate parsed arguments."""
    if args.limit is not None and args.limit <= 0:
        parser.error("--limit must be positive.")
    if args.repo_path is not None:
        args.repo_path = args.repo_path.expanduser()


def parse_args(argv: list[str]) -> argparse.Namespace:
    """Parse and validate command-line arguments."""
    parser = build_parser()
    args = parser.parse_args(argv)
    _validate_args(args, parser)
    return args
