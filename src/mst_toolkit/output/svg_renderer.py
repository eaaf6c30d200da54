"""
Module: output.svg_renderer

Purpose:
    Draw the spanning tree as an SVG document. Edges are black lines with
    their weight printed next to the midpoint; nodes are drawn on top with
    their index. Included nodes are red and excluded nodes are grey.

Key Functions:
    - build_svg_drawing(): Build the svgwrite Drawing
    - build_svg_document(): Build the SVG markup as a string
    - render_svg(): Build and write it

Dependencies:
    - svgwrite: SVG element construction and serialisation

Used By:
    - controller.run
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Tuple

import svgwrite

from mst_toolkit.core.models import GraphModel, SpanningTree

from .errors import ExportError
from .paths import grid_extent

logger = logging.getLogger(__name__)

# Drawing constants
SCALE = 20
PADDING = 20
NODE_RADIUS = 8
FONT_SIZE = 10
FONT_FAMILY = "Arial"
EDGE_STROKE = "black"
WEIGHT_FILL = "grey"
INCLUDED_NODE_FILL = "red"
EXCLUDED_NODE_FILL = "grey"
INDEX_FILL = "orange"


def _to_canvas(point: Tuple[int, int]) -> Tuple[int, int]:
    return (point[0] * SCALE + PADDING, point[1] * SCALE + PADDING)


def _label(dwg: svgwrite.Drawing, content: str, x: int, y: int, fill: str):
    return dwg.text(
        content,
        insert=(x, y),
        fill=fill,
        font_size=FONT_SIZE,
        font_family=FONT_FAMILY,
    )


def build_svg_drawing(
    graph: GraphModel,
    tree: SpanningTree,
    filename: str = "tree.svg",
) -> svgwrite.Drawing:
    """
    Build the SVG drawing for a graph and its spanning tree.

    Grid point ``(x, y)`` maps to ``(x * 20 + 20, y * 20 + 20)``. Edges
    and weight labels come first so that node circles and index labels
    are painted over them.

    Args:
        graph: Graph providing coordinates and included/excluded split
        tree: Spanning tree whose edges are drawn
        filename: Target filename stored on the drawing

    Returns:
        svgwrite Drawing, not yet saved
    """
    side = grid_extent(graph) * SCALE + 2 * PADDING
    dwg = svgwrite.Drawing(filename, size=(side, side))
    dwg.set_desc(title=_caption(graph, tree))

    for edge in tree.edges:
        x1, y1 = _to_canvas(graph.coordinate(edge.source))
        x2, y2 = _to_canvas(graph.coordinate(edge.target))
        dwg.add(dwg.line(start=(x1, y1), end=(x2, y2), stroke=EDGE_STROKE))
        # Weight label sits slightly off the edge midpoint
        dwg.add(_label(dwg, str(edge.weight), (x1 + x2) // 2 + 5, (y1 + y2) // 2 + 5, WEIGHT_FILL))

    for index, point in enumerate(graph.coordinates):
        cx, cy = _to_canvas(point)
        included = graph.is_included(index)
        dwg.add(dwg.circle(
            center=(cx, cy),
            r=NODE_RADIUS,
            fill=INCLUDED_NODE_FILL if included else EXCLUDED_NODE_FILL,
            class_="included" if included else "excluded",
        ))
        dwg.add(_label(dwg, str(index), cx - NODE_RADIUS // 2, cy + NODE_RADIUS // 2, INDEX_FILL))

    return dwg


def build_svg_document(graph: GraphModel, tree: SpanningTree) -> str:
    """Build the SVG markup (without XML declaration) for a graph and its tree."""
    return build_svg_drawing(graph, tree).tostring()


def _caption(graph: GraphModel, tree: SpanningTree) -> str:
    return (
        f"MST over {tree.node_count} of {graph.node_count} nodes, "
        f"total weight {tree.total_weight}"
    )


def render_svg(graph: GraphModel, tree: SpanningTree, output_path: Path) -> Path:
    """
    Write the SVG document for a graph and its spanning tree.

    Args:
        graph: Graph providing coordinates
        tree: Spanning tree whose edges are drawn
        output_path: Destination file (parent directories are created)

    Returns:
        The written path

    Raises:
        ExportError: If the file cannot be written
    """
    output_path = Path(output_path)
    dwg = build_svg_drawing(graph, tree, filename=str(output_path))
    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        dwg.save()
    except OSError as e:
        raise ExportError(output_path, str(e)) from e

    logger.info(f"Wrote SVG to {output_path}")
    return output_path
