"""Tree rendering: box-drawing text lines and the structured dump."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

from FSResolver.formatting import format_size
from FSResolver.models import Node

_DRIVE_LETTER = re.compile(r"^[a-zA-Z]:")


@dataclass(frozen=True)
class _StyleLook:
    pad: str
    line_separator: str
    links: bool


class RenderStyle(Enum):
    PLAIN = _StyleLook(pad=" ", line_separator="\n", links=False)
    # U+2007 keeps Markdown viewers from collapsing the indentation and
    # a trailing double space forces a hard line break.
    LINKED = _StyleLook(pad="\u2007", line_separator="  \n", links=True)


BRANCH_MID = "├── "
BRANCH_LAST = "└── "
BAR = "│"
COLUMN_WIDTH = 5


def format_name(path: str, name: str, links: bool = False) -> str:
    """Return *name*, or a ``file://`` hyperlink to *path* labelled *name*.

    Backslash separators become forward slashes, and drive-letter paths get a
    leading slash: ``C:\\docs\\a.txt`` -> ``file:///C:/docs/a.txt``.
    """
    if not links:
        return name
    absolute = path.replace("\\", "/")
    if _DRIVE_LETTER.match(absolute):
        absolute = "/" + absolute
    return f'<a href="file://{absolute}">{name}</a>'


def _node_label(node: Node, display_name: str, look: _StyleLook) -> str:
    name = format_name(node.path, display_name, look.links)
    size = format_size(node.size)
    size = f"`({size})`" if look.links else f"({size})"
    return f"{node.icon} {name} {size}"


def render_lines(root: Node, style: RenderStyle = RenderStyle.PLAIN) -> list[str]:
    """Render a node tree into display lines.

    The root is shown unindented under its absolute path. Example output
    (plain style):
        📂 /home/me/project (30.00 B)
        ├── 📂 A (20.00 B)
        │    └── 📋 c.txt (20.00 B)
        │
        └── 📋 b.txt (10.00 B)
    """
    look = style.value
    lines = [_node_label(root, root.path, look)]
    children = root.children or ()
    for i, child in enumerate(children):
        _render_node(child, (), i == len(children) - 1, look, lines)
    return lines


def _render_node(
    node: Node,
    ancestors_have_siblings: tuple[bool, ...],
    is_last: bool,
    look: _StyleLook,
    lines: list[str],
) -> None:
    """Append the lines for *node* and its subtree.

    ``ancestors_have_siblings[i]`` is True when the ancestor at depth ``i + 1``
    still has siblings below the current branch.
    """
    prefix = "".join(
        BAR + look.pad * (COLUMN_WIDTH - 1) if has_more else look.pad * COLUMN_WIDTH
        for has_more in ancestors_have_siblings[: node.depth - 1]
    )
    empty_line = prefix.rstrip()
    branch = BRANCH_LAST if is_last else BRANCH_MID

    lines.append(prefix + branch + _node_label(node, node.name, look))

    if is_last and empty_line and not node.is_open:
        lines.append(empty_line)

    children = node.children or ()
    descendants_state = ancestors_have_siblings + (not is_last,)
    for i, child in enumerate(children):
        _render_node(child, descendants_state, i == len(children) - 1, look, lines)


def render_tree(root: Node, style: RenderStyle = RenderStyle.PLAIN) -> str:
    """Render a node tree into a single string, one line per separator."""
    separator = style.value.line_separator
    return separator.join(render_lines(root, style)) + separator


def tree_to_dict(node: Node) -> dict:
    """Return the structured (JSON-ready) form of a node and its subtree."""
    data = {
        "name": node.name,
        "type": node.kind.value,
        "category": node.category,
        "icon": node.icon,
        "path": node.path,
        "size": format_size(node.size),
        "raw_size": node.size,
        "depth": node.depth,
    }
    if node.children is not None:
        data["children"] = [tree_to_dict(child) for child in node.children]
    return data
