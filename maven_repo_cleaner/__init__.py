"""
Maven local repository cleaner package.

Locate the local Maven repository, find corrupted JAR/POM files in it and
delete them together with their sibling and tracking files.
"""

from . import args_parser, cleaner, config, locator, models, reports, scanner, settings_parser
from .cleaner import clean, plan_clean
from .locator import RepositoryResolutionError, locate_repository
from .models import CleanItem, CleanResult, InvalidArtifact
from .scanner import InvalidScanTargetError, scan
from .settings_parser import parse_local_repository

__all__ = [
    "CleanItem",
    "CleanResult",
    "InvalidArtifact",
    "InvalidScanTargetError",
    "RepositoryResolutionError",
    "args_parser",
    "clean",
    "cleaner",
    "config",
    "locate_repository",
    "locator",
    "models",
    "parse_local_repository",
    "plan_clean",
    "reports",
    "scan",
    "scanner",
    "settings_parser",
]
