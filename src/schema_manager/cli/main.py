# Author: PB & Claude
# Maintainer: PB
# Original date: 2026.10.18
# License: (c) HRDAG, 2026, GPL-2 or newer
#
# ------
# src/schema_manager/cli/main.py

"""
CLI dispatcher for schema-manager.

Routes each subcommand to its handler in schema_manager.cli.commands:
- info commands: list, search, status (soft failures, exit 0)
- action commands: init (filesystem and clone failures exit 1)
"""

# Standard library imports
from importlib.metadata import PackageNotFoundError, version
from typing import Any, Optional

# Third-party imports
import typer
from rich.console import Console

# Local imports
from schema_manager.cli.commands import actions as action_commands
from schema_manager.cli.commands import info as info_commands
from schema_manager.cli.utils import handle_operation_error, load_config_with_console
from schema_manager.storage.factory import create_repository_client
from schema_manager.system.logging_setup import setup_logging

# Initialize Typer app
app = typer.Typer(
    help="""schema-manager - manage command schemas from the opencommand/commands repository

[bold blue]Setup:[/bold blue] init
[bold green]Cache:[/bold green] list, search, status
""",
    rich_markup_mode="rich"
)

console = Console()


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        try:
            pkg_version = version("schema-manager")
        except PackageNotFoundError as e:
            handle_operation_error(console, e)
        console.print(f"schema-manager version {pkg_version}")
        raise typer.Exit()


@app.callback()
def main(
    version: Optional[bool] = typer.Option(
        None, "--version", callback=version_callback, is_eager=True,
        help="Show version and exit"
    ),
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging"),
) -> None:
    """schema-manager - keep a local cache of command schemas (.hl files)."""
    setup_logging(debug=debug)


# =============================================================================
# ACTION COMMANDS - State-changing operations
# =============================================================================

@app.command()
def init(
    force: bool = typer.Option(False, "--force", "-f", help="Force re-clone by removing existing cache"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show a spinner while cloning"),
) -> Any:
    """[bold blue]Setup[/bold blue]: Clone the schema repository to the cache directory."""
    config = load_config_with_console(console)
    return action_commands.init(
        console, config, create_repository_client(),
        force=force, verbose=verbose
    )


# =============================================================================
# INFO COMMANDS - Read-only commands against the cache
# =============================================================================

@app.command(name="list")
def list_command() -> Any:
    """[bold green]Cache[/bold green]: List all .hl files in the cache directory."""
    config = load_config_with_console(console)
    return info_commands.list_files(console, config)


@app.command()
def search(
    pattern: str = typer.Argument(..., help="Regular expression matched against file names"),
) -> Any:
    """[bold green]Cache[/bold green]: Search for .hl files whose name matches a regex pattern."""
    config = load_config_with_console(console)
    return info_commands.search(console, config, pattern)


@app.command()
def status() -> Any:
    """[bold green]Cache[/bold green]: Check whether the cache is in sync with the remote main branch."""
    config = load_config_with_console(console)
    return info_commands.status(console, config, create_repository_client())


# =============================================================================
# ENTRY POINT
# =============================================================================

def cli_main() -> None:  # pragma: no cover - entry point
    """Entry point for the schema-manager CLI application."""
    app()


if __name__ == "__main__":  # pragma: no cover
    cli_main()
