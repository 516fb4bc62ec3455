# Author: PB & Claude
# Maintainer: PB
# Original date: 2026.10.18
# License: (c) HRDAG, 2026, GPL-2 or newer
#
# ------
# src/schema_manager/cli/commands/info.py

"""
Info command handlers - read-only commands against the cache.

Handles: list, search, status

Each handler checks the cache precondition itself; a missing cache and
every workflow error are soft failures that leave the exit status at 0.
"""

from typing import Any

from rich.console import Console

from schema_manager.cli.utils import ensure_cache_exists, run_operation
from schema_manager.config.manager import SchemaManagerConfig
from schema_manager.core.matcher import PatternMatcher
from schema_manager.core.operations import check_status, list_schema_files, search_schema_files
from schema_manager.core.protocols import RepositoryClient
from schema_manager.system.display import display_file_list, display_search_results, display_status


def list_files(console: Console, config: SchemaManagerConfig) -> dict[str, Any]:
    """List every schema file in the cache.

    Args:
        console: Rich console for output
        config: Runtime configuration

    Returns:
        Summary of the listing
    """
    if not ensure_cache_exists(console, config):
        return {'initialized': False}

    count = run_operation(
        console,
        lambda: display_file_list(console, list_schema_files(config), config.schema_suffix)
    )
    return {
        'initialized': True,
        'completed': count is not None,
        'total_files': count or 0
    }


def search(console: Console, config: SchemaManagerConfig, pattern: str) -> dict[str, Any]:
    """List cached schema files whose filename matches pattern.

    Args:
        console: Rich console for output
        config: Runtime configuration
        pattern: Regular expression tested against filenames

    Returns:
        Summary of the search
    """
    if not ensure_cache_exists(console, config):
        return {'initialized': False, 'pattern': pattern}

    matcher = run_operation(console, lambda: PatternMatcher(pattern))
    if matcher is None:
        return {'initialized': True, 'pattern': pattern, 'valid_pattern': False}

    count = run_operation(
        console,
        lambda: display_search_results(
            console, pattern, search_schema_files(config, matcher), config.schema_suffix
        )
    )
    return {
        'initialized': True,
        'pattern': pattern,
        'valid_pattern': True,
        'completed': count is not None,
        'total_matches': count or 0
    }


def status(console: Console, config: SchemaManagerConfig, client: RepositoryClient) -> dict[str, Any]:
    """Compare the cached HEAD with the remote main branch.

    Args:
        console: Rich console for output
        config: Runtime configuration
        client: Repository client used to open the cache

    Returns:
        Status summary; 'up_to_date' is None when the check did not complete
    """
    if not ensure_cache_exists(console, config):
        return {'initialized': False, 'up_to_date': None}

    result = run_operation(console, lambda: check_status(config, client))
    if result is None:
        return {'initialized': True, 'up_to_date': None}

    display_status(console, result)
    return {
        'initialized': True,
        'up_to_date': result.up_to_date,
        'local_head': result.local_head,
        'remote_head': result.remote_head
    }
