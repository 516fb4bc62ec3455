# Author: PB & Claude
# Maintainer: PB
# Original date: 2026.10.18
# License: (c) HRDAG, 2026, GPL-2 or newer
#
# ------
# src/schema_manager/core/operations.py

"""
Cache workflows: init, list, search and status.

These functions never print and never exit. They return result objects or
raise SchemaManagerError subclasses; the CLI layer renders results and maps
errors to messages and exit codes.
"""

import shutil
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, Optional, Protocol

import loguru

from schema_manager.config.manager import SchemaManagerConfig
from schema_manager.core.matcher import PatternMatcher
from schema_manager.core.protocols import RemoteRef, RepositoryClient
from schema_manager.core.scanner import iter_processed_paths, iter_schema_files
from schema_manager.system.exceptions import FilesystemError, RemoteBranchNotFoundError

logger = loguru.logger

SHORT_ID_LENGTH = 8


class InitReporter(Protocol):
    """Receives init progress events."""

    def report_removed(self, path: Path) -> None: ...

    def start_clone(self, url: str, path: Path) -> None: ...

    def complete_clone(self) -> None: ...


@dataclass
class InitResult:
    """Outcome of init_cache."""
    cache_dir: Path
    cloned: bool
    removed: bool = False

    @property
    def already_exists(self) -> bool:
        return not self.cloned


@dataclass
class StatusResult:
    """Local HEAD compared with the remote tracked branch."""
    local_head: str
    remote_head: str
    branch: str

    @property
    def up_to_date(self) -> bool:
        return self.local_head == self.remote_head

    @property
    def local_short(self) -> str:
        return self.local_head[:SHORT_ID_LENGTH]

    @property
    def remote_short(self) -> str:
        return self.remote_head[:SHORT_ID_LENGTH]


def cache_exists(config: SchemaManagerConfig) -> bool:
    """True if anything exists at the cache path. Validity is not checked."""
    return config.cache_dir.exists()


def _remove_path(path: Path) -> None:
    if path.is_symlink() or path.is_file():
        path.unlink()
    elif path.exists():
        shutil.rmtree(path)


def init_cache(
    config: SchemaManagerConfig,
    client: RepositoryClient,
    force: bool = False,
    reporter: Optional[InitReporter] = None
) -> InitResult:
    """Clone the schema repository into the cache directory.

    Args:
        config: Runtime configuration
        client: Repository client used for the clone
        force: Remove any existing cache first
        reporter: Optional progress receiver

    Returns:
        InitResult; cloned is False when the cache already existed

    Raises:
        FilesystemError: If the cache cannot be removed or created
        VcsError: If the clone fails
    """
    cache_dir = config.cache_dir
    removed = False

    if force:
        logger.debug(f"Removing existing cache at {cache_dir}")
        try:
            _remove_path(cache_dir)
        except OSError as e:
            raise FilesystemError(f"Error removing existing directory: {e}", path=str(cache_dir)) from e
        removed = True
        if reporter:
            reporter.report_removed(cache_dir)

    if cache_exists(config) and not force:
        logger.debug(f"Cache already present at {cache_dir}, skipping clone")
        return InitResult(cache_dir=cache_dir, cloned=False)

    try:
        cache_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise FilesystemError(f"Error creating directory: {e}", path=str(cache_dir)) from e

    if reporter:
        reporter.start_clone(config.repo_url, cache_dir)
    repo = client.clone(config.repo_url, cache_dir)
    repo.close()
    if reporter:
        reporter.complete_clone()

    return InitResult(cache_dir=cache_dir, cloned=True, removed=removed)


def list_schema_files(config: SchemaManagerConfig) -> Iterator[str]:
    """Yield relative paths of the schema files in the cache."""
    return iter_schema_files(config.cache_dir, config.schema_suffix)


def search_schema_files(config: SchemaManagerConfig, matcher: PatternMatcher) -> Iterator[str]:
    """Yield relative paths of cached schema files whose filename matches."""
    for processed in iter_processed_paths(config.cache_dir, config.schema_suffix):
        if matcher.matches(processed.filename):
            yield str(processed.posix_path)


def find_branch_commit(refs: list[RemoteRef], branch: str) -> Optional[str]:
    """Commit id of the first branch ref whose short name is branch."""
    for ref in refs:
        if ref.is_branch and ref.short_name == branch:
            return ref.commit_id
    return None


def check_status(config: SchemaManagerConfig, client: RepositoryClient) -> StatusResult:
    """Compare the cache's HEAD with the remote tracked branch.

    Raises:
        VcsError: If the cache cannot be opened, the remote is missing or
            HEAD cannot be resolved
        NetworkError: If the remote refs cannot be listed
        RemoteBranchNotFoundError: If the remote does not advertise the branch
    """
    repo = client.open(config.cache_dir)
    try:
        remote = repo.remote(config.remote_name)
        refs = remote.list_refs()
        local_head = repo.head()
    finally:
        repo.close()

    remote_head = find_branch_commit(refs, config.main_branch)
    if remote_head is None:
        raise RemoteBranchNotFoundError(
            f"Could not find remote {config.main_branch} branch.",
            branch=config.main_branch,
            url=remote.url
        )

    logger.debug(f"Local HEAD {local_head}, remote {config.main_branch} {remote_head}")
    return StatusResult(local_head=local_head, remote_head=remote_head, branch=config.main_branch)
