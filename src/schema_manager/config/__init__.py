# Author: PB & Claude
# Maintainer: PB
# Original date: 2026.10.18
# License: (c) HRDAG, 2026, GPL-2 or newer
#
# ------
# src/schema_manager/config/__init__.py

"""Configuration package for schema-manager."""

from .manager import SchemaManagerConfig

__all__ = ['SchemaManagerConfig']
