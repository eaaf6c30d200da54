"""
Module: generator.costs

Purpose:
    Derive the dense cost matrix of a complete graph from node positions.
    Every edge weight is the Euclidean distance rounded to the nearest
    integer, halves rounding away from zero.

Key Functions:
    - euclidean_cost(): Weight of a single edge
    - build_cost_matrix(): Full symmetric matrix for all node pairs

Dependencies:
    - numpy: Pairwise distances via broadcasting

Used By:
    - generator.factory.graph_from_coordinates
    - generator.factory.generate_graph
"""

from __future__ import annotations

import math
from typing import Sequence, Tuple

import numpy as np


def euclidean_cost(a: Tuple[int, int], b: Tuple[int, int]) -> int:
    """
    Rounded Euclidean distance between two grid points.

    Args:
        a: First (x, y) point
        b: Second (x, y) point

    Returns:
        ``round(sqrt(dx**2 + dy**2))`` with halves rounded up

    Example:
        >>> euclidean_cost((0, 0), (1, 1))
        1
        >>> euclidean_cost((0, 0), (3, 4))
        5
    """
    distance = math.hypot(a[0] - b[0], a[1] - b[1])
    # Distances are non-negative, so floor(d + 0.5) rounds halves away from zero
    return int(math.floor(distance + 0.5))


def build_cost_matrix(
    coordinates: Sequence[Tuple[int, int]],
) -> Tuple[Tuple[int, ...], ...]:
    """
    Build the symmetric cost matrix for a complete graph.

    Args:
        coordinates: One (x, y) pair per node, index = node index

    Returns:
        ``n x n`` nested tuple of ints; ``[i][j] == [j][i]``, zero diagonal

    Example:
        >>> build_cost_matrix([(0, 0), (0, 1), (1, 1)])
        ((0, 1, 1), (1, 0, 1), (1, 1, 0))
    """
    if len(coordinates) == 0:
        return ()

    points = np.asarray(coordinates, dtype=np.float64).reshape(-1, 2)
    deltas = points[:, np.newaxis, :] - points[np.newaxis, :, :]
    distances = np.sqrt((deltas ** 2).sum(axis=-1))
    costs = np.floor(distances + 0.5).astype(np.int64)
    np.fill_diagonal(costs, 0)

    return tuple(tuple(int(value) for value in row) for row in costs)
