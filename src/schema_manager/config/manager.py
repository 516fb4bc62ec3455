# Author: PB & Claude
# Maintainer: PB
# Original date: 2026.10.18
# License: (c) HRDAG, 2026, GPL-2 or newer
#
# ------
# src/schema_manager/config/manager.py

from __future__ import annotations

from pathlib import Path
from typing import Optional, Final

from loguru import logger
from pydantic import BaseModel

from schema_manager.system.exceptions import ConfigError


# ---- Constants ----

REPO_URL: Final = "https://github.com/opencommand/commands"
CACHE_SUBPATH: Final = Path(".opencmd") / "commands"
REMOTE_NAME: Final = "origin"
MAIN_BRANCH: Final = "main"
SCHEMA_SUFFIX: Final = ".hl"


def default_cache_dir(home: Optional[Path] = None) -> Path:
    """Return <home>/.opencmd/commands.

    Raises:
        ConfigError: If the home directory cannot be determined
    """
    if home is None:
        try:
            home = Path.home()
        except RuntimeError as e:
            raise ConfigError(f"Error getting user home directory: {e}") from e
    return home / CACHE_SUBPATH


class SchemaManagerConfig(BaseModel):
    """Runtime configuration passed to every workflow."""
    cache_dir: Path
    repo_url: str = REPO_URL
    remote_name: str = REMOTE_NAME
    main_branch: str = MAIN_BRANCH
    schema_suffix: str = SCHEMA_SUFFIX

    @classmethod
    def load(cls, home: Optional[Path] = None) -> "SchemaManagerConfig":
        """Build the configuration from the user's home directory."""
        config = cls(cache_dir=default_cache_dir(home))
        logger.debug(f"Cache directory: {config.cache_dir}")
        return config
