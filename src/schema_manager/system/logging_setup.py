# Author: PB & Claude
# Maintainer: PB
# Original date: 2026.10.18
# License: (c) HRDAG, 2026, GPL-2 or newer
#
# ------
# src/schema_manager/system/logging_setup.py

import sys

from loguru import logger


def setup_logging(debug: bool = False) -> None:
    """Setup loguru logging for the entire application.

    Configures a single stderr handler: WARNING+ for clean CLI output,
    DEBUG+ when --debug is given.
    """
    logger.remove()

    logger.add(
        sys.stderr,
        level="DEBUG" if debug else "WARNING",
        format="<level>{level}</level>: {message}",
        colorize=True
    )

    if debug:
        logger.debug("Debug logging enabled")
