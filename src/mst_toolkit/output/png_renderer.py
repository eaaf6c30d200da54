"""
Module: output.png_renderer

Purpose:
    Draw the spanning tree as a raster image with Pillow. Tree edges are
    white line segments on a black canvas; included nodes are red dots and
    excluded nodes are grey dots.

Key Functions:
    - draw_tree_image(): Build the PIL image
    - render_png(): Build and save it

Dependencies:
    - PIL: Image drawing

Used By:
    - controller.run
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Tuple

from PIL import Image, ImageDraw

from mst_toolkit.core.models import GraphModel, SpanningTree

from .errors import ExportError
from .paths import grid_extent

logger = logging.getLogger(__name__)

# Drawing constants
SCALE_PX = 10
PADDING_PX = 10
NODE_RADIUS_PX = 3
BACKGROUND_COLOR = (0, 0, 0)
EDGE_COLOR = (255, 255, 255)
INCLUDED_NODE_COLOR = (255, 0, 0)
EXCLUDED_NODE_COLOR = (128, 128, 128)


def _to_pixel(point: Tuple[int, int], scale: int, padding: int) -> Tuple[int, int]:
    return (point[0] * scale + padding, point[1] * scale + padding)


def draw_tree_image(
    graph: GraphModel,
    tree: SpanningTree,
    *,
    scale: int = SCALE_PX,
    padding: int = PADDING_PX,
    node_radius: int = NODE_RADIUS_PX,
) -> Image.Image:
    """
    Draw the tree over the graph's node positions.

    Grid point ``(x, y)`` maps to pixel ``(x * scale + padding,
    y * scale + padding)``. Nodes are drawn after edges so they stay on
    top.

    Args:
        graph: Graph providing coordinates and included/excluded split
        tree: Spanning tree whose edges are drawn
        scale: Pixels per grid unit
        padding: Border around the grid in pixels
        node_radius: Dot radius in pixels

    Returns:
        New RGB image
    """
    side = scale * grid_extent(graph) + 2 * padding
    image = Image.new("RGB", (side, side), BACKGROUND_COLOR)
    draw = ImageDraw.Draw(image)

    for edge in tree.edges:
        start = _to_pixel(graph.coordinate(edge.source), scale, padding)
        end = _to_pixel(graph.coordinate(edge.target), scale, padding)
        draw.line([start, end], fill=EDGE_COLOR, width=1)

    for index, point in enumerate(graph.coordinates):
        cx, cy = _to_pixel(point, scale, padding)
        color = INCLUDED_NODE_COLOR if graph.is_included(index) else EXCLUDED_NODE_COLOR
        draw.ellipse(
            (cx - node_radius, cy - node_radius, cx + node_radius, cy + node_radius),
            fill=color,
        )

    return image


def render_png(graph: GraphModel, tree: SpanningTree, output_path: Path) -> Path:
    """
    Draw the tree and save it as PNG.

    Args:
        graph: Graph providing coordinates
        tree: Spanning tree whose edges are drawn
        output_path: Destination file (parent directories are created)

    Returns:
        The written path

    Raises:
        ExportError: If the image cannot be written
    """
    output_path = Path(output_path)
    image = draw_tree_image(graph, tree)
    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        image.save(output_path, "PNG")
    except OSError as e:
        raise ExportError(output_path, str(e)) from e

    logger.info(f"Wrote PNG ({image.width}x{image.height}) to {output_path}")
    return output_path
