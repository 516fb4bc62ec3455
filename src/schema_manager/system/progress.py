# Author: PB & Claude
# Maintainer: PB
# Original date: 2026.10.18
# License: (c) HRDAG, 2026, GPL-2 or newer
#
# ------
# src/schema_manager/system/progress.py

"""
Progress reporting for init.

Prints the user-facing init lines and, when verbose, shows a rich spinner
while the clone runs.
"""

from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.status import Status


class CloneProgressReporter:
    """Progress reporting for init with Rich UI."""

    def __init__(self, console: Console, verbose: bool = False) -> None:
        self.console = console
        self.verbose = verbose
        self.status: Status | None = None

    def report_removed(self, path: Path) -> None:
        """Report that the previous cache was removed."""
        self.console.print("Removed existing cache directory.")

    def start_clone(self, url: str, path: Path) -> None:
        """Report start of the clone."""
        self.console.print(f"Cloning repository to: {escape(str(path))}", emoji=False, soft_wrap=True)
        if self.verbose:
            self.status = self.console.status(f"[cyan]Fetching {escape(url)}...")
            self.status.start()

    def complete_clone(self) -> None:
        """Report completion of the clone."""
        self.stop()
        self.console.print("Repository cloned successfully!")

    def stop(self) -> None:
        """Stop the spinner if one is running."""
        if self.status:
            self.status.stop()
            self.status = None
