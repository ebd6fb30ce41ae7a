"""Command-line entry point: scan once and write the configured outputs."""

from __future__ import annotations

import argparse
import logging
import sys

from FSResolver.models import ScanSettings
from FSResolver.output_writer import OutputWriteError
from FSResolver.resolver import resolve
from FSResolver.tree_builder import RootUnreadableError


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="fsresolver",
        description="Write a tree view of a directory beside it.",
    )
    parser.add_argument(
        "root",
        nargs="?",
        default=None,
        help="Directory to scan (default: current directory)",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(message)s")

    settings = ScanSettings() if args.root is None else ScanSettings(root=args.root)
    try:
        resolve(settings)
    except (RootUnreadableError, OutputWriteError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
