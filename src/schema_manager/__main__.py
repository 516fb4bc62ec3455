# Author: PB & Claude
# Maintainer: PB
# Original date: 2026.10.18
# License: (c) HRDAG, 2026, GPL-2 or newer
#
# ------
# src/schema_manager/__main__.py

from schema_manager.cli import main

main()
