"""Scan → render → write pipeline."""

from __future__ import annotations

import logging
import time

from FSResolver.formatting import format_elapsed
from FSResolver.models import OutputFormat, ScanResult, ScanSettings
from FSResolver.output_writer import render_output, write_outputs
from FSResolver.providers.base import FileSystemProvider
from FSResolver.tree_builder import TreeBuilder

logger = logging.getLogger(__name__)


def resolve(
    settings: ScanSettings,
    provider: FileSystemProvider | None = None,
) -> ScanResult:
    """Scan ``settings.root``, render every requested format and write them.

    Nothing is written unless the whole tree was built and rendered.

    Raises:
        RootUnreadableError: the root directory cannot be scanned.
        OutputWriteError: an output file cannot be written.
    """
    start = time.perf_counter()

    logger.info("Scanned Directory: %s", settings.root)
    builder = TreeBuilder(settings, provider)
    tree = builder.build()

    outputs = {
        output_format: render_output(tree, output_format)
        for output_format in OutputFormat
        if output_format in settings.output_formats
    }

    result = ScanResult(tree=tree, scanned_nodes=builder.scanned_nodes, outputs=outputs)
    if settings.write_files and outputs:
        result.written = [str(p) for p in write_outputs(tree.path, outputs)]

    result.elapsed_ms = int((time.perf_counter() - start) * 1000)
    logger.info("Scanned Nodes: %d", result.scanned_nodes)
    logger.info("Processing Time: %s", format_elapsed(result.elapsed_ms))
    return result
