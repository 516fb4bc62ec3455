# Author: PB & Claude
# Maintainer: PB
# Original date: 2026.10.18
# License: (c) HRDAG, 2026, GPL-2 or newer
#
# ------
# src/schema_manager/core/protocols.py

"""
Version-control capabilities consumed by the workflows.

The workflows only clone, open, look up a remote, list its advertised refs
and read HEAD. Anything providing these methods can stand in for the
dulwich-backed client, which is how the tests drive the workflows offline.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

BRANCH_PREFIX = "refs/heads/"


@dataclass(frozen=True)
class RemoteRef:
    """A (name, commit id) pair advertised by a remote."""
    name: str
    commit_id: str

    @property
    def is_branch(self) -> bool:
        return self.name.startswith(BRANCH_PREFIX)

    @property
    def short_name(self) -> str:
        """Branch name without refs/heads/, otherwise the full name."""
        if self.is_branch:
            return self.name[len(BRANCH_PREFIX):]
        return self.name


class Remote(Protocol):
    """A named remote of an opened repository."""

    name: str
    url: str

    def list_refs(self) -> list[RemoteRef]:
        """List the refs the remote advertises.

        Raises:
            NetworkError: If the remote cannot be reached or answers badly
        """
        ...


class Repository(Protocol):
    """An opened local repository."""

    path: Path

    def remote(self, name: str) -> Remote:
        """Return the remote called name.

        Raises:
            VcsError: If no such remote is configured
        """
        ...

    def head(self) -> str:
        """Return the hex commit id HEAD points at.

        Raises:
            VcsError: If HEAD cannot be resolved
        """
        ...

    def close(self) -> None:
        ...


class RepositoryClient(Protocol):
    """Factory for local repositories."""

    def clone(self, url: str, destination: Path) -> Repository:
        """Clone url into destination.

        Raises:
            VcsError: If the clone fails
        """
        ...

    def open(self, path: Path) -> Repository:
        """Open the repository at path.

        Raises:
            VcsError: If path is not a valid repository
        """
        ...
