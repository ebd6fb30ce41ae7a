"""Data classes for FSResolver."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from enum import Enum

from FSResolver.file_types import FOLDER_OPEN, get_icon


class NodeKind(Enum):
    FILE = "File"
    FOLDER = "Folder"
    SYSTEM = "System"  # scan diagnostics only
    LINK = "Link"  # scan diagnostics only


class ScanOutcome(Enum):
    SCANNED = "Scanned"
    SKIPPED = "Skipped"


class OutputFormat(Enum):
    TEXT = "text"
    MARKDOWN = "markdown"
    JSON = "json"

    @property
    def filename(self) -> str:
        return OUTPUT_FILENAMES[self]


OUTPUT_FILENAMES: dict[OutputFormat, str] = {
    OutputFormat.TEXT: "#FilesStructure.txt",
    OutputFormat.MARKDOWN: "#FilesStructure.md",
    OutputFormat.JSON: "#FilesStructure.json",
}

DEFAULT_IGNORED_NAMES: tuple[str, ...] = tuple(OUTPUT_FILENAMES.values())


@dataclass(frozen=True)
class Node:
    name: str
    kind: NodeKind
    category: str
    path: str = field(compare=False)
    size: int = 0
    depth: int = 0
    children: tuple[Node, ...] | None = None  # None for files

    @property
    def is_folder(self) -> bool:
        return self.kind is NodeKind.FOLDER

    @property
    def is_open(self) -> bool:
        return self.category == FOLDER_OPEN

    @property
    def icon(self) -> str:
        return get_icon(self.category)


@dataclass
class ScanSettings:
    root: str = field(default_factory=os.getcwd)
    include_dotfiles: bool = False
    ignored_names: tuple[str, ...] = DEFAULT_IGNORED_NAMES
    output_formats: frozenset[OutputFormat] = frozenset({OutputFormat.TEXT})
    log_entries: bool = False
    write_files: bool = True


@dataclass
class ScanResult:
    tree: Node
    scanned_nodes: int = 0
    elapsed_ms: int = 0
    outputs: dict[OutputFormat, str] = field(default_factory=dict)
    written: list[str] = field(default_factory=list)
