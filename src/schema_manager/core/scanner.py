# Author: PB & Claude
# Maintainer: PB
# Original date: 2026.10.18
# License: (c) HRDAG, 2026, GPL-2 or newer
#
# ------
# src/schema_manager/core/scanner.py

from __future__ import annotations

# Standard library imports
import os
from dataclasses import dataclass
from pathlib import Path, PurePosixPath
from typing import Iterator

# Third-party imports
import loguru

# Local imports
from schema_manager.config.manager import SCHEMA_SUFFIX
from schema_manager.system.exceptions import FilesystemError

logger = loguru.logger


@dataclass
class ProcessedPath:
    """Structured representation of a file found during scanning."""
    relative_path: Path
    posix_path: PurePosixPath
    filename: str


def _raise_walk_error(error: OSError) -> None:
    # os.walk swallows errors unless onerror re-raises them
    path = getattr(error, "filename", None)
    logger.debug(f"Walk error at {path}: {error}")
    raise FilesystemError(f"Error walking directory: {error}", path=path) from error


def _process_file_path(full_path: Path, root_path: Path) -> ProcessedPath:
    """Process a file path into its component parts for scanning."""
    relative_path = full_path.relative_to(root_path)
    return ProcessedPath(
        relative_path=relative_path,
        posix_path=PurePosixPath(relative_path.as_posix()),
        filename=full_path.name,
    )


def iter_processed_paths(root_path: Path, suffix: str = SCHEMA_SUFFIX) -> Iterator[ProcessedPath]:
    """
    Walk root_path and yield every non-directory entry whose name ends with suffix.

    Sibling directories and files are visited in sorted order. Symlinked
    directories are not followed. Each call performs a fresh walk.

    Args:
        root_path: Directory to scan
        suffix: Filename suffix to keep

    Raises:
        FilesystemError: On the first traversal error; the walk is abandoned
    """
    root_path = Path(root_path)
    logger.debug(f"Scanning {root_path} for *{suffix}")

    for dirpath, dirnames, filenames in os.walk(root_path, onerror=_raise_walk_error):
        dirnames.sort()
        for filename in sorted(filenames):
            if not filename.endswith(suffix):
                continue
            yield _process_file_path(Path(dirpath) / filename, root_path)


def iter_schema_files(root_path: Path, suffix: str = SCHEMA_SUFFIX) -> Iterator[str]:
    """Yield relative POSIX paths of schema files under root_path."""
    for processed in iter_processed_paths(root_path, suffix):
        yield str(processed.posix_path)
