# Author: PB & Claude
# Maintainer: PB
# Original date: 2026.10.18
# License: (c) HRDAG, 2026, GPL-2 or newer
#
# ------
# src/schema_manager/storage/factory.py

"""Repository client factory."""

from loguru import logger

from schema_manager.core.protocols import RepositoryClient
from .client import DulwichRepositoryClient


def create_repository_client() -> RepositoryClient:
    """Create the repository client used by init and status."""
    logger.debug("Using dulwich repository client")
    return DulwichRepositoryClient()
