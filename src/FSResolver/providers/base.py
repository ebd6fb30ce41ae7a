"""Abstract base class for filesystem providers."""

from __future__ import annotations

import os
from abc import ABC, abstractmethod


class FileSystemProvider(ABC):
    """Read-only access to a directory tree.

    Failures are reported with the built-in ``OSError`` hierarchy so callers
    can tell ``FileNotFoundError`` and ``PermissionError`` apart from any
    other error.
    """

    @abstractmethod
    def lstat(self, path: str) -> os.stat_result:
        """Stat *path* without following a symbolic link."""

    @abstractmethod
    def stat(self, path: str) -> os.stat_result:
        """Stat *path*, following a symbolic link."""

    @abstractmethod
    def listdir(self, path: str) -> list[str]:
        """Return the names of the immediate entries of a directory."""
