# Author: PB & Claude
# Maintainer: PB
# Original date: 2026.10.18
# License: (c) HRDAG, 2026, GPL-2 or newer
#
# ------
# src/schema_manager/__init__.py

"""schema-manager - local cache of opencommand command schemas."""
