"""Data types shared by the scanner, the cleaner and the reports."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class InvalidArtifact:
    """A corrupted artifact found during a scan."""

    folder: Path
    base_name: str
    reason: str

    def to_dict(self) -> dict[str, str]:
        """Return a JSON/CSV friendly representation."""
        return {
            "folder": str(self.folder),
            "base_name": self.base_name,
            "reason": self.reason,
        }


@dataclass(frozen=True)
class CleanItem:
    """Files sharing ``base_name`` inside ``folder`` that should be removed."""

    folder: Path
    base_name: str

    @classmethod
    def from_artifact(cls, artifact: InvalidArtifact) -> "CleanItem":
        return cls(folder=artifact.folder, base_name=artifact.base_name)


@dataclass
class CleanResult:
    """Outcome of a clean run: deletions performed and per-file failures."""

    deleted_count: int = 0
    errors: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        """Return True when no deletion failed."""
        return not self.errors

    def record_deleted(self) -> None:
        """Count one successful deletion."""
        self.deleted_count += 1

    def record_error(self, message: str) -> None:
        """Append a failure message; the run continues."""
        self.errors.append(message)
