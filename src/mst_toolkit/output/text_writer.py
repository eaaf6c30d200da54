"""
Module: output.text_writer

Purpose:
    Serialize a graph and its spanning tree to the plain-text cost matrix
    format.

Format:
    line 1                  node count
    next node_count lines   space-separated cost matrix rows
    next line               excluded node count (partial MST only)
    last line               MST total weight

Key Functions:
    - format_graph_text(): Build the file contents
    - write_graph_text(): Write them to disk

Used By:
    - controller.run
"""

from __future__ import annotations

import logging
from pathlib import Path

from mst_toolkit.core.models import GraphModel, SpanningTree

from .errors import ExportError

logger = logging.getLogger(__name__)


def format_graph_text(graph: GraphModel, tree: SpanningTree) -> str:
    """
    Render the text cost matrix format.

    The excluded node count line only appears when at least one node is
    excluded, so full-graph files keep the shorter layout.

    Args:
        graph: Graph whose cost matrix is written
        tree: Spanning tree providing the total weight

    Returns:
        File contents ending in a newline
    """
    lines = [str(graph.node_count)]
    lines.extend(" ".join(str(value) for value in row) for row in graph.cost_matrix)
    if graph.is_partial:
        lines.append(str(graph.excluded_node_count))
    lines.append(str(tree.total_weight))
    return "\n".join(lines) + "\n"


def write_graph_text(graph: GraphModel, tree: SpanningTree, output_path: Path) -> Path:
    """
    Write the text cost matrix file.

    Args:
        graph: Graph whose cost matrix is written
        tree: Spanning tree providing the total weight
        output_path: Destination file (parent directories are created)

    Returns:
        The written path

    Raises:
        ExportError: If the file cannot be written
    """
    output_path = Path(output_path)
    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(format_graph_text(graph, tree), encoding="utf-8")
    except OSError as e:
        raise ExportError(output_path, str(e)) from e

    logger.info(f"Wrote cost matrix to {output_path}")
    return output_path
