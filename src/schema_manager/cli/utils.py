# Author: PB & Claude
# Maintainer: PB
# Original date: 2026.10.18
# License: (c) HRDAG, 2026, GPL-2 or newer
#
# ------
# src/schema_manager/cli/utils.py

"""
CLI utility functions shared by the schema-manager commands.

This module provides:
- Configuration loading with console error reporting
- The cache existence precondition used by list, search and status
- run_operation, the single place where workflow errors become messages
  and exit codes

Fatal commands (init) exit 1 on a SchemaManagerError; soft commands
(list, search, status) print the message and return normally.
"""

from typing import Any, Callable, Optional

import typer
from loguru import logger
from rich.console import Console

from schema_manager.config.manager import SchemaManagerConfig
from schema_manager.core.operations import cache_exists
from schema_manager.system.display import display_error, display_not_initialized
from schema_manager.system.exceptions import ConfigError, SchemaManagerError


def load_config_with_console(console: Console) -> SchemaManagerConfig:
    """
    Build the runtime configuration, exiting on failure.

    Args:
        console: Rich console for output

    Returns:
        Loaded configuration object

    Raises:
        typer.Exit: If the configuration cannot be built
    """
    try:
        return SchemaManagerConfig.load()
    except ConfigError as e:
        handle_operation_error(console, e)


def ensure_cache_exists(console: Console, config: SchemaManagerConfig) -> bool:
    """
    Check that the cache directory exists.

    Unlike a failed precondition in init, a missing cache is not an error:
    the user is told to run init and the command exits 0.

    Args:
        console: Rich console for output
        config: Runtime configuration

    Returns:
        True if the cache exists, False after printing the not-found notice
    """
    if cache_exists(config):
        return True
    logger.debug(f"No cache at {config.cache_dir}")
    display_not_initialized(console)
    return False


def run_operation(
    console: Console,
    operation: Callable[[], Any],
    fatal: bool = False
) -> Optional[Any]:
    """
    Run a workflow and map its errors to console output and exit codes.

    Args:
        console: Rich console for output
        operation: Zero-argument callable performing the workflow
        fatal: Exit with status 1 on error instead of returning None

    Returns:
        The operation's return value, or None after a soft failure

    Raises:
        typer.Exit: On error when fatal is True
    """
    try:
        return operation()
    except SchemaManagerError as e:
        logger.debug(f"{type(e).__name__}: {e}")
        if fatal:
            handle_operation_error(console, e)
        display_error(console, e)
        return None


def handle_operation_error(console: Console, error: Exception) -> None:
    """Handle fatal errors with consistent formatting."""
    display_error(console, error)
    raise typer.Exit(1)
