"""Depth-first directory scan producing an immutable node tree."""

from __future__ import annotations

import logging
import os
import stat

from FSResolver.file_types import FOLDER_CLOSED, FOLDER_OPEN, get_category, is_skipped_name
from FSResolver.models import Node, NodeKind, ScanOutcome, ScanSettings
from FSResolver.providers.base import FileSystemProvider
from FSResolver.providers.local import LocalFileSystem

logger = logging.getLogger(__name__)


class RootUnreadableError(Exception):
    """Raised when the root directory itself cannot be scanned."""


def sort_key(node: Node) -> tuple[bool, str, str]:
    """Folders first, then case-insensitive name; the exact name breaks ties."""
    return (not node.is_folder, node.name.casefold(), node.name)


class TreeBuilder:
    """Builds a :class:`Node` tree for a root directory.

    Entries that vanish or cannot be accessed during the scan are dropped and
    the scan carries on; only an unreadable root aborts it.
    """

    def __init__(
        self,
        settings: ScanSettings | None = None,
        provider: FileSystemProvider | None = None,
    ):
        self.settings = settings or ScanSettings()
        self.provider = provider or LocalFileSystem()
        self.scanned_nodes = 0

    def build(self, root: str | None = None) -> Node:
        """Scan *root* (default: ``settings.root``) and return the root node.

        Raises:
            RootUnreadableError: the root cannot be stat'ed or listed, or is
                not a directory.
        """
        root = os.path.abspath(root or self.settings.root)
        self.scanned_nodes = 1
        try:
            st = self.provider.stat(root)
        except OSError as exc:
            raise RootUnreadableError(f"Cannot read root directory {root}: {exc}") from exc

        if not stat.S_ISDIR(st.st_mode):
            raise RootUnreadableError(f"Root is not a directory: {root}")

        try:
            names = self.provider.listdir(root)
        except OSError as exc:
            raise RootUnreadableError(f"Cannot list root directory {root}: {exc}") from exc

        return self._build_folder(root, names, depth=0)

    def _build_node(self, path: str, depth: int) -> Node | None:
        """Return the node for *path*, or None if the entry is dropped."""
        self.scanned_nodes += 1
        name = os.path.basename(path)

        try:
            st = self.provider.lstat(path)
        except (FileNotFoundError, PermissionError):
            self._log_entry(ScanOutcome.SKIPPED, NodeKind.SYSTEM, path)
            return None
        except OSError as exc:
            logger.error("Cannot stat %s: %s", path, exc)
            return None

        kind = _kind_of(st)
        if kind in (NodeKind.LINK, NodeKind.SYSTEM) or is_skipped_name(
            name, self.settings.ignored_names, self.settings.include_dotfiles
        ):
            self._log_entry(ScanOutcome.SKIPPED, kind, path)
            return None

        if kind is NodeKind.FILE:
            self._log_entry(ScanOutcome.SCANNED, kind, path)
            return Node(
                name=name,
                kind=NodeKind.FILE,
                category=get_category(name),
                path=path,
                size=st.st_size,
                depth=depth,
            )

        try:
            names = self.provider.listdir(path)
        except (FileNotFoundError, PermissionError):
            self._log_entry(ScanOutcome.SKIPPED, NodeKind.SYSTEM, path)
            return None
        except OSError as exc:
            logger.error("Cannot list %s: %s", path, exc)
            return None
        return self._build_folder(path, names, depth)

    def _build_folder(self, path: str, names: list[str], depth: int) -> Node:
        children = []
        for child_name in names:
            child = self._build_node(os.path.join(path, child_name), depth + 1)
            if child is not None:
                children.append(child)
        children.sort(key=sort_key)

        self._log_entry(ScanOutcome.SCANNED, NodeKind.FOLDER, path)
        return Node(
            name=os.path.basename(path) or path,
            kind=NodeKind.FOLDER,
            category=FOLDER_OPEN if children else FOLDER_CLOSED,
            path=path,
            size=sum(child.size for child in children),
            depth=depth,
            children=tuple(children),
        )

    def _log_entry(self, outcome: ScanOutcome, kind: NodeKind, path: str) -> None:
        if not self.settings.log_entries:
            return
        level = logging.WARNING if outcome is ScanOutcome.SKIPPED else logging.INFO
        logger.log(level, "[%s %s]: %s", outcome.value, kind.value, path)


def _kind_of(st: os.stat_result) -> NodeKind:
    if stat.S_ISLNK(st.st_mode):
        return NodeKind.LINK
    if stat.S_ISREG(st.st_mode):
        return NodeKind.FILE
    if stat.S_ISDIR(st.st_mode):
        return NodeKind.FOLDER
    return NodeKind.SYSTEM
