"""
Module: controller

Purpose:
    Orchestrate one complete run.
    Sample → Cost matrix → MST → Export (text, PNG, SVG)

Key Functions:
    - run(): Main entry point for a generate-and-export run

Key Classes:
    - RunResult: Complete run result
    - RunError: Exception for run failures

Dependencies:
    - generator: Graph generation
    - spanning: MST computation
    - output: Exporters

Used By:
    - mst_toolkit.cli: Command line entry point
"""

from __future__ import annotations

import logging
import random
import time
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Optional

from mst_toolkit.core.models import GraphModel, SpanningTree

from .config import RunConfig
from .generator import generate_graph
from .output import (
    ExportError,
    build_output_paths,
    render_png,
    render_svg,
    timestamp_slug,
    write_graph_text,
)
from .spanning import compute_spanning_tree

logger = logging.getLogger(__name__)


class RunError(Exception):
    """Error during a run; ``path`` names the file that failed, if any."""

    def __init__(self, message: str, path: Optional[Path] = None) -> None:
        super().__init__(message)
        self.path = path


@dataclass(frozen=True)
class RunResult:
    """
    Complete run result (immutable).

    Attributes:
        graph: Generated graph
        tree: Spanning tree over the included nodes
        text_path: Written cost matrix file (None if disabled)
        png_path: Written raster image (None if disabled)
        svg_path: Written vector image (None if disabled)
        elapsed_seconds: Wall time of the whole run

    Example:
        >>> result = run(RunConfig(node_count=10, seed=1))
        >>> print(f"MST weight {result.total_weight} over {result.tree.node_count} nodes")
    """
    graph: GraphModel
    tree: SpanningTree
    text_path: Optional[Path]
    png_path: Optional[Path]
    svg_path: Optional[Path]
    elapsed_seconds: float

    @property
    def total_weight(self) -> int:
        return self.tree.total_weight

    @property
    def written_paths(self) -> tuple[Path, ...]:
        """Paths of every file written, in export order."""
        return tuple(p for p in (self.text_path, self.png_path, self.svg_path) if p is not None)


def run(
    config: RunConfig,
    *,
    rng: Optional[random.Random] = None,
    now: Optional[datetime] = None,
) -> RunResult:
    """
    Generate a graph, compute its MST and export the enabled artifacts.

    Pipeline:
    1. Sample unique coordinates and build the cost matrix
    2. Compute the (partial) MST
    3. Write text, PNG and SVG files in that order

    Files already written stay on disk when a later export fails.

    Args:
        config: Run configuration (already validated on construction)
        rng: Random source; defaults to ``random.Random(config.seed)``
        now: Timestamp used in output filenames (default: current time)

    Returns:
        RunResult with graph, tree and written paths

    Raises:
        RunError: If an output file cannot be written
    """
    start_time = time.perf_counter()
    rng = rng if rng is not None else random.Random(config.seed)

    logger.info(
        f"Starting run with {config.node_count} nodes, "
        f"{config.excluded_node_count} excluded"
    )

    # 1. Generate graph
    graph = generate_graph(
        config.node_count,
        config.excluded_node_count,
        rng=rng,
        grid_size=config.grid_size,
    )

    # 2. Spanning tree
    tree = compute_spanning_tree(graph)
    logger.info(f"MST has {tree.edge_count} edges, total weight {tree.total_weight}")

    # 3. Export
    text_path = png_path = svg_path = None
    if not config.any_output:
        logger.info("All exports disabled, nothing written")
        return RunResult(
            graph=graph,
            tree=tree,
            text_path=None,
            png_path=None,
            svg_path=None,
            elapsed_seconds=time.perf_counter() - start_time,
        )

    paths = build_output_paths(config.output_dir, config.file_stem, timestamp_slug(now))
    try:
        if config.write_text:
            text_path = write_graph_text(graph, tree, paths.text)
        if config.write_png:
            png_path = render_png(graph, tree, paths.png)
        if config.write_svg:
            svg_path = render_svg(graph, tree, paths.svg)
    except ExportError as e:
        raise RunError(str(e), path=e.path) from e

    elapsed = time.perf_counter() - start_time
    logger.info(f"Run completed in {elapsed:.2f}s")

    return RunResult(
        graph=graph,
        tree=tree,
        text_path=text_path,
        png_path=png_path,
        svg_path=svg_path,
        elapsed_seconds=elapsed,
    )
