# Author: PB & Claude
# Maintainer: PB
# Original date: 2026.10.18
# License: (c) HRDAG, 2026, GPL-2 or newer
#
# ------
# src/schema_manager/cli/commands/actions.py

"""
Action command handlers - state-changing commands.

Handles: init
"""

from typing import Any

from rich.console import Console

from schema_manager.cli.utils import run_operation
from schema_manager.config.manager import SchemaManagerConfig
from schema_manager.core.operations import init_cache
from schema_manager.core.protocols import RepositoryClient
from schema_manager.system.display import display_init_exists
from schema_manager.system.progress import CloneProgressReporter


def init(
    console: Console,
    config: SchemaManagerConfig,
    client: RepositoryClient,
    force: bool = False,
    verbose: bool = False
) -> dict[str, Any]:
    """Clone the schema repository into the cache directory.

    Args:
        console: Rich console for output
        config: Runtime configuration
        client: Repository client used for the clone
        force: Remove an existing cache and clone again
        verbose: Show a spinner while cloning

    Returns:
        Init summary

    Raises:
        typer.Exit: If the cache cannot be removed, created or cloned
    """
    reporter = CloneProgressReporter(console, verbose=verbose)
    try:
        result = run_operation(
            console,
            lambda: init_cache(config, client, force=force, reporter=reporter),
            fatal=True
        )
    finally:
        reporter.stop()

    if result.already_exists:
        display_init_exists(console, result)

    return {
        'operation': 'init',
        'cache_dir': str(result.cache_dir),
        'force': force,
        'removed': result.removed,
        'cloned': result.cloned
    }
