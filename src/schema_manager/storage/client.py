# Author: PB & Claude
# Maintainer: PB
# Original date: 2026.10.18
# License: (c) HRDAG, 2026, GPL-2 or newer
#
# ------
# src/schema_manager/storage/client.py

"""
dulwich-backed repository client.

Implements the RepositoryClient/Repository/Remote protocols from
schema_manager.core.protocols with pure-Python git, so no git binary is
needed on the operator's machine.
"""

from pathlib import Path

import loguru
from dulwich import porcelain
from dulwich.client import get_transport_and_path
from dulwich.errors import NotGitRepository
from dulwich.repo import Repo

from schema_manager.core.protocols import RemoteRef
from schema_manager.system.exceptions import NetworkError, VcsError

logger = loguru.logger

PEELED_SUFFIX = "^{}"


class DulwichRemote:
    """A configured remote, listed over whatever transport its URL names."""

    def __init__(self, name: str, url: str) -> None:
        self.name = name
        self.url = url

    def list_refs(self) -> list[RemoteRef]:
        logger.debug(f"Listing refs of remote '{self.name}' at {self.url}")
        try:
            client, path = get_transport_and_path(self.url)
            result = client.get_refs(path)
        except Exception as e:
            raise NetworkError(f"Error listing remote refs: {e}", url=self.url) from e

        # Newer dulwich wraps the mapping in an LsRemoteResult
        refs = getattr(result, "refs", result)

        remote_refs = []
        for name, sha in refs.items():
            if sha is None:
                continue
            ref_name = name.decode("utf-8")
            if ref_name.endswith(PEELED_SUFFIX):
                continue
            remote_refs.append(RemoteRef(name=ref_name, commit_id=sha.decode("ascii")))

        logger.debug(f"Remote '{self.name}' advertised {len(remote_refs)} refs")
        return remote_refs

    def __repr__(self) -> str:
        return f"DulwichRemote({self.name!r}, {self.url!r})"


class DulwichRepository:
    """An opened working tree."""

    def __init__(self, repo: Repo, path: Path) -> None:
        self._repo = repo
        self.path = path

    def remote(self, name: str) -> DulwichRemote:
        config = self._repo.get_config()
        try:
            url = config.get((b"remote", name.encode("utf-8")), b"url")
        except KeyError as e:
            raise VcsError(f"Error getting remote: remote '{name}' not found", path=str(self.path)) from e
        return DulwichRemote(name, url.decode("utf-8"))

    def head(self) -> str:
        try:
            return self._repo.head().decode("ascii")
        except KeyError as e:
            raise VcsError(f"Error getting HEAD: reference not found: {e}", path=str(self.path)) from e

    def close(self) -> None:
        self._repo.close()

    def __enter__(self) -> "DulwichRepository":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()


class DulwichRepositoryClient:
    """Clone and open repositories with dulwich."""

    def clone(self, url: str, destination: Path) -> DulwichRepository:
        logger.debug(f"Cloning {url} into {destination}")
        try:
            repo = porcelain.clone(url, str(destination))
        except Exception as e:
            raise VcsError(f"Error cloning repository: {e}", path=str(destination), url=url) from e
        return DulwichRepository(repo, Path(destination))

    def open(self, path: Path) -> DulwichRepository:
        logger.debug(f"Opening repository at {path}")
        try:
            repo = Repo(str(path))
        except (NotGitRepository, OSError) as e:
            raise VcsError(f"Error opening repository: {e}", path=str(path)) from e
        return DulwichRepository(repo, Path(path))
