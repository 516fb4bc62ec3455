# Author: PB & Claude
# Maintainer: PB
# Original date: 2026.10.18
# License: (c) HRDAG, 2026, GPL-2 or newer
#
# ------
# src/schema_manager/cli/commands/__init__.py

"""
Command handlers for schema-manager CLI operations.

This package contains the logic behind each CLI command, separated from the
typer interface layer:

- info: Read-only commands (list, search, status)
- actions: State-changing commands (init)
"""
