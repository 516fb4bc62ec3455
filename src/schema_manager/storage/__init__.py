# Author: PB & Claude
# Maintainer: PB
# Original date: 2026.10.18
# License: (c) HRDAG, 2026, GPL-2 or newer
#
# ------
# src/schema_manager/storage/__init__.py

"""
Storage layer for schema-manager - the git repository behind the cache.
"""

from .client import DulwichRemote, DulwichRepository, DulwichRepositoryClient
from .factory import create_repository_client

__all__ = [
    'DulwichRemote',
    'DulwichRepository',
    'DulwichRepositoryClient',
    'create_repository_client',
]
