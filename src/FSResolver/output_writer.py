"""Persist rendered outputs beside the scanned root."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from FSResolver.models import Node, OutputFormat
from FSResolver.tree_renderer import RenderStyle, render_tree, tree_to_dict

logger = logging.getLogger(__name__)


class OutputWriteError(Exception):
    """Raised when an output file cannot be written."""


def render_output(tree: Node, output_format: OutputFormat) -> str:
    """Return the full file content for one output format."""
    if output_format is OutputFormat.JSON:
        return json.dumps(tree_to_dict(tree), indent=2, ensure_ascii=False)
    if output_format is OutputFormat.MARKDOWN:
        return render_tree(tree, RenderStyle.LINKED)
    return render_tree(tree, RenderStyle.PLAIN)


def write_outputs(root_dir: str | Path, outputs: dict[OutputFormat, str]) -> list[Path]:
    """Write each rendered output to its fixed file name inside *root_dir*.

    Returns the written paths, in ``OutputFormat`` declaration order.
    """
    written: list[Path] = []
    for output_format in OutputFormat:
        if output_format not in outputs:
            continue
        target = Path(root_dir) / output_format.filename
        try:
            target.write_text(outputs[output_format], encoding="utf-8")
        except OSError as exc:
            raise OutputWriteError(f"Cannot write {target}: {exc}") from exc
        logger.info("Files Structure saved to %s: %s", output_format.value, target)
        written.append(target)
    return written
