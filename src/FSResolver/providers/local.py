"""Local disk provider."""

from __future__ import annotations

import os

from FSResolver.providers.base import FileSystemProvider


class LocalFileSystem(FileSystemProvider):
    """Provider backed by the ``os`` module."""

    def lstat(self, path: str) -> os.stat_result:
        return os.lstat(path)

    def stat(self, path: str) -> os.stat_result:
        return os.stat(path)

    def listdir(self, path: str) -> list[str]:
        return os.listdir(path)
