"""
Module: generator.factory

Purpose:
    Build a GraphModel: from known node positions, or from scratch by
    sampling unique positions first. Either way the cost matrix is derived
    here and the exclusion count attached.

Key Functions:
    - generate_graph(): Main entry point for graph generation
    - graph_from_coordinates(): GraphModel for fixed positions

Dependencies:
    - generator.sampler: Coordinate sampling
    - generator.costs: Cost matrix construction
    - core.models.GraphModel

Used By:
    - controller.run
"""

from __future__ import annotations

import logging
import random
from typing import Optional, Sequence, Tuple

from mst_toolkit.core.models import GraphModel

from .costs import build_cost_matrix
from .sampler import sample_coordinates

logger = logging.getLogger(__name__)


def graph_from_coordinates(
    coordinates: Sequence[Tuple[int, int]],
    excluded_node_count: int = 0,
) -> GraphModel:
    """
    Build a graph from node positions, deriving the cost matrix.

    Args:
        coordinates: One (x, y) pair per node, index = node index
        excluded_node_count: Trailing nodes left out of the spanning tree

    Returns:
        GraphModel with rounded Euclidean edge weights

    Raises:
        ValueError: If coordinates repeat or excluded_node_count is out of range

    Example:
        >>> graph_from_coordinates([(0, 0), (3, 4)]).cost(0, 1)
        5
    """
    coords = tuple((int(x), int(y)) for x, y in coordinates)
    return GraphModel(
        node_count=len(coords),
        coordinates=coords,
        cost_matrix=build_cost_matrix(coords),
        excluded_node_count=excluded_node_count,
    )


def generate_graph(
    node_count: int,
    excluded_node_count: int = 0,
    *,
    rng: random.Random,
    grid_size: Optional[int] = None,
) -> GraphModel:
    """
    Generate a random complete graph on an integer grid.

    Args:
        node_count: Number of nodes (>= 1)
        excluded_node_count: Trailing nodes left out of the spanning tree
        rng: Source of randomness for coordinate sampling
        grid_size: Side of the coordinate grid (default: node_count)

    Returns:
        GraphModel with unique coordinates and rounded Euclidean costs

    Raises:
        SamplingError: If the grid cannot hold node_count points
        ValueError: If excluded_node_count is outside [0, node_count)

    Example:
        >>> graph = generate_graph(10, 3, rng=random.Random(42))
        >>> graph.included_node_count
        7
    """
    coordinates = sample_coordinates(node_count, rng, grid_size=grid_size)
    graph = graph_from_coordinates(coordinates, excluded_node_count)
    logger.info(
        f"Generated graph with {graph.node_count} nodes "
        f"({graph.excluded_node_count} excluded from the MST)"
    )
    return graph
