"""
Tests for output.text_writer

Test Coverage:
- format_graph_text(): full and partial layouts
- write_graph_text(): directory creation and error wrapping
"""

import pytest

from mst_toolkit.generator import graph_from_coordinates
from mst_toolkit.output import ExportError, format_graph_text, write_graph_text
from mst_toolkit.spanning import compute_spanning_tree


def test_format_when_full_graph_then_count_rows_weight(unit_square_graph):
    tree = compute_spanning_tree(unit_square_graph)

    lines = format_graph_text(unit_square_graph, tree).splitlines()

    assert lines == [
        "4",
        "0 1 1 1",
        "1 0 1 1",
        "1 1 0 1",
        "1 1 1 0",
        "3",
    ]


def test_format_when_partial_graph_then_includes_excluded_count():
    graph = graph_from_coordinates([(0, 0), (3, 4), (0, 8)], excluded_node_count=1)
    tree = compute_spanning_tree(graph)

    lines = format_graph_text(graph, tree).splitlines()

    assert lines[0] == "3"
    assert lines[1:4] == ["0 5 8", "5 0 5", "8 5 0"]
    assert lines[4] == "1"   # excluded node count
    assert lines[5] == "5"   # MST weight over nodes 0 and 1
    assert len(lines) == 6


def test_format_when_called_then_ends_with_newline(line_graph):
    text = format_graph_text(line_graph, compute_spanning_tree(line_graph))
    assert text.endswith("10\n")


def test_write_when_nested_dir_missing_then_creates_it(tmp_path, unit_square_graph):
    # Arrange
    output_path = tmp_path / "nested" / "deep" / "graph.txt"
    tree = compute_spanning_tree(unit_square_graph)

    # Act
    result = write_graph_text(unit_square_graph, tree, output_path)

    # Assert
    assert result == output_path
    assert output_path.read_text(encoding="utf-8") == format_graph_text(unit_square_graph, tree)


def test_write_when_parent_is_a_file_then_raises_export_error(tmp_path, unit_square_graph):
    """The error names the failing path."""
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory")
    output_path = blocker / "graph.txt"

    with pytest.raises(ExportError) as excinfo:
        write_graph_text(unit_square_graph, compute_spanning_tree(unit_square_graph), output_path)

    assert excinfo.value.path == output_path
    assert str(output_path) in str(excinfo.value)
