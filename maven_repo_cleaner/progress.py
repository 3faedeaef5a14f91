"""Console progress line for long-running scans."""

from __future__ import annotations

import time


class ProgressTracker:
    """Prints ``label: current/total (pct%)`` at most once per interval, and at completion."""

    def __init__(self, total: int, label: str, update_interval: float = 0.5):
        self.total = total
        self.label = label
        self.update_interval = update_interval
        self.last_update = time.time()

    def update(self, current: int) -> None:
        now = time.time()
        if current == self.total or now - self.last_update >= self.update_interval:
            if self.total:
                pct = (current / self.total) * 100
                status = f"{current:,}/{self.total:,} ({pct:5.1f}%)"
            else:
                status = f"{current:,}"
            print(f"\r{self.label}: {status}", end="", flush=True)
            self.last_update = now

    def finish(self) -> None:
        """Print final newline to complete progress display."""
        print()
