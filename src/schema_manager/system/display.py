# Author: PB & Claude
# Maintainer: PB
# Original date: 2026.10.18
# License: (c) HRDAG, 2026, GPL-2 or newer
#
# ------
# src/schema_manager/system/display.py

# Standard library imports
from typing import Iterable

# Third-party imports
from rich.console import Console
from rich.markup import escape

# Local imports
from schema_manager.core.operations import InitResult, StatusResult

RULE_WIDTH = 50


def _print_plain(console: Console, text: str) -> None:
    console.print(text, markup=False, emoji=False, highlight=False, soft_wrap=True)


def display_init_exists(console: Console, result: InitResult) -> None:
    """Tell the user the cache is already there and how to replace it."""
    _print_plain(console, f"Repository already exists at: {result.cache_dir}")
    console.print("Use -f flag to force re-clone.")


def display_not_initialized(console: Console) -> None:
    """Print the notice shown when the cache directory is missing."""
    console.print("Repository not found. Run 'schema-manager init' first.", highlight=False)


def display_file_list(console: Console, paths: Iterable[str], suffix: str) -> int:
    """Print the listing header and each path as it is produced.

    Returns:
        Number of paths printed
    """
    header = f"Listing {suffix} files in cache directory:"
    _print_plain(console, header)
    _print_plain(console, "=" * len(header))

    count = 0
    for path in paths:
        _print_plain(console, f"  {path}")
        count += 1
    return count


def display_search_results(console: Console, pattern: str, paths: Iterable[str], suffix: str) -> int:
    """Print the search header, each match, and a notice when nothing matched.

    Returns:
        Number of matches printed
    """
    _print_plain(console, f"Searching for {suffix} files matching pattern: {pattern}")
    _print_plain(console, "=" * RULE_WIDTH)

    count = 0
    for path in paths:
        _print_plain(console, f"  {path}")
        count += 1

    if count == 0:
        _print_plain(console, f"No {suffix} files found matching the pattern.")
    return count


def display_status(console: Console, result: StatusResult) -> None:
    """Display the HEAD comparison produced by check_status."""
    if result.up_to_date:
        console.print("[green]✓[/green] Local repository is up to date with remote.")
        return

    console.print("[red]✗[/red] Local repository is behind remote.")
    console.print(f"  Local HEAD:  {result.local_short}", highlight=False)
    console.print(f"  Remote {escape(result.branch)}: {result.remote_short}", emoji=False, highlight=False)
    console.print("  Run 'schema-manager init -f' to update.", highlight=False)


def display_error(console: Console, error: Exception) -> None:
    """Print an error message without interpreting it as markup."""
    console.print(f"[red]✗[/red] {escape(str(error))}", emoji=False, soft_wrap=True)
