"""
Module: cli

Purpose:
    Command line entry point. Parses the node and exclusion counts,
    validates them through RunConfig and runs the pipeline.

Exit Codes:
    0 - success
    1 - an output file could not be written
    2 - invalid configuration (nothing is written)

Key Functions:
    - build_parser(): argparse parser
    - main(): Entry point returning an exit code
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import List, Optional

from . import __version__
from .config import (
    DEFAULT_FILE_STEM,
    DEFAULT_NODE_COUNT,
    DEFAULT_OUTPUT_DIR,
    ConfigurationError,
    RunConfig,
)
from .controller import RunError, RunResult, run

logger = logging.getLogger("mst_toolkit")

EXIT_OK = 0
EXIT_RUN_ERROR = 1
EXIT_CONFIG_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mst-toolkit",
        description=(
            "Generate a random fully-connected graph on an integer grid, compute its "
            "minimum spanning tree and export it as text, PNG and SVG."
        ),
    )
    parser.add_argument(
        "nodes", type=int, nargs="?", default=DEFAULT_NODE_COUNT,
        help=f"Number of nodes (default {DEFAULT_NODE_COUNT})",
    )
    parser.add_argument(
        "exclude", type=int, nargs="?", default=0,
        help="Trailing nodes drawn but left out of the MST (default 0)",
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducible graphs")
    parser.add_argument("--grid-size", type=int, default=None, help="Side of the coordinate grid (default: nodes)")
    parser.add_argument(
        "-o", "--output-dir", type=Path, default=DEFAULT_OUTPUT_DIR,
        help=f"Output directory (default {DEFAULT_OUTPUT_DIR})",
    )
    parser.add_argument("--stem", default=DEFAULT_FILE_STEM, help="Output filename prefix")
    parser.add_argument("--no-text", action="store_true", help="Skip the cost matrix text file")
    parser.add_argument("--no-png", action="store_true", help="Skip the PNG image")
    parser.add_argument("--no-svg", action="store_true", help="Skip the SVG image")

    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    verbosity.add_argument("-q", "--quiet", action="store_true", help="Only log warnings and errors")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _configure_logging(args: argparse.Namespace) -> None:
    level = logging.INFO
    if args.verbose:
        level = logging.DEBUG
    elif args.quiet:
        level = logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def _print_summary(result: RunResult) -> None:
    graph, tree = result.graph, result.tree
    print(f"Nodes: {graph.node_count} ({graph.excluded_node_count} excluded)")
    print(f"MST edges: {tree.edge_count}")
    print(f"MST total weight: {tree.total_weight}")
    for path in result.written_paths:
        print(f"Wrote {path}")


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    _configure_logging(args)

    try:
        config = RunConfig(
            node_count=args.nodes,
            excluded_node_count=args.exclude,
            seed=args.seed,
            grid_size=args.grid_size,
            output_dir=args.output_dir,
            file_stem=args.stem,
            write_text=not args.no_text,
            write_png=not args.no_png,
            write_svg=not args.no_svg,
        )
    except ConfigurationError as e:
        logger.error(f"Invalid configuration: {e}")
        return EXIT_CONFIG_ERROR

    try:
        result = run(config)
    except RunError as e:
        logger.error(f"Run failed at {e.path}: {e}" if e.path else f"Run failed: {e}")
        return EXIT_RUN_ERROR

    _print_summary(result)
    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
