"""
Tests for output.png_renderer

Test Coverage:
- draw_tree_image(): canvas size, node and edge colors
- render_png(): file creation and error wrapping
"""

import pytest
from PIL import Image

from mst_toolkit.generator import graph_from_coordinates
from mst_toolkit.output import ExportError, draw_tree_image, render_png
from mst_toolkit.output.png_renderer import (
    BACKGROUND_COLOR,
    EDGE_COLOR,
    EXCLUDED_NODE_COLOR,
    INCLUDED_NODE_COLOR,
)
from mst_toolkit.spanning import compute_spanning_tree


@pytest.fixture
def partial_graph():
    """Nodes 0..2 on a line, node 3 excluded in the far corner."""
    return graph_from_coordinates(
        [(0, 0), (2, 0), (3, 0), (3, 3)], excluded_node_count=1
    )


def test_draw_when_graph_then_canvas_scaled_with_padding(unit_square_graph):
    """Side is scale * node_count + 2 * padding."""
    image = draw_tree_image(unit_square_graph, compute_spanning_tree(unit_square_graph))

    assert image.mode == "RGB"
    assert image.size == (10 * 4 + 20, 10 * 4 + 20)


def test_draw_when_partial_then_included_red_excluded_grey(partial_graph):
    image = draw_tree_image(partial_graph, compute_spanning_tree(partial_graph))

    assert image.getpixel((10, 10)) == INCLUDED_NODE_COLOR      # node 0 at (0, 0)
    assert image.getpixel((40, 40)) == EXCLUDED_NODE_COLOR      # node 3 at (3, 3)


def test_draw_when_tree_edge_then_white_line_between_nodes(partial_graph):
    image = draw_tree_image(partial_graph, compute_spanning_tree(partial_graph))

    # Midway along edge 0-1 from (10, 10) to (30, 10), clear of node dots
    assert image.getpixel((20, 10)) == EDGE_COLOR


def test_draw_when_excluded_node_then_no_edge_drawn_to_it(partial_graph):
    image = draw_tree_image(partial_graph, compute_spanning_tree(partial_graph))

    # Between node 2 at (40, 10) and excluded node 3 at (40, 40)
    assert image.getpixel((40, 25)) == BACKGROUND_COLOR


def test_render_when_called_then_writes_png(tmp_path, unit_square_graph):
    output_path = tmp_path / "out" / "tree.png"

    result = render_png(unit_square_graph, compute_spanning_tree(unit_square_graph), output_path)

    assert result == output_path
    with Image.open(output_path) as saved:
        assert saved.format == "PNG"
        assert saved.size == (60, 60)


def test_render_when_parent_is_a_file_then_raises_export_error(tmp_path, unit_square_graph):
    blocker = tmp_path / "blocker"
    blocker.write_text("x")

    with pytest.raises(ExportError, match="blocker"):
        render_png(unit_square_graph, compute_spanning_tree(unit_square_graph), blocker / "tree.png")
