# Author: PB & Claude
# Maintainer: PB
# Original date: 2026.10.18
# License: (c) HRDAG, 2026, GPL-2 or newer
#
# ------
# src/schema_manager/system/exceptions.py

"""
schema-manager exception classes.

Workflows raise these instead of printing and exiting; the CLI layer decides
whether an error is fatal for the command being run.
"""


class SchemaManagerError(Exception):
    """Base exception for all schema-manager errors."""
    pass


class ConfigError(SchemaManagerError):
    """Raised when the runtime configuration cannot be built."""
    pass


# === FILESYSTEM OPERATION ERRORS ===

class FilesystemError(SchemaManagerError):
    """Filesystem failures while creating, removing or walking the cache."""

    def __init__(self, message: str, path: str = None):
        self.path = path
        super().__init__(message)


# === VERSION CONTROL ERRORS ===

class VcsError(SchemaManagerError):
    """Clone, open, remote lookup or HEAD resolution failed."""

    def __init__(self, message: str, path: str = None, url: str = None):
        self.path = path
        self.url = url
        super().__init__(message)


class NetworkError(VcsError):
    """Listing the refs advertised by a remote failed."""
    pass


class RemoteBranchNotFoundError(VcsError):
    """The remote does not advertise the tracked branch."""

    def __init__(self, message: str, branch: str = None, **kwargs):
        self.branch = branch
        super().__init__(message, **kwargs)


# === USER INPUT ERRORS ===

class InvalidPatternError(SchemaManagerError):
    """A search pattern is not a valid regular expression."""

    def __init__(self, message: str, pattern: str = None):
        self.pattern = pattern
        super().__init__(message)
