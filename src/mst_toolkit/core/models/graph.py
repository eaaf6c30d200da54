"""
Module: graph

Purpose:
    Provides the GraphModel dataclass - the immutable value object for a
    complete weighted graph over points on an integer grid. Holds the node
    coordinates, the dense cost matrix and the number of trailing nodes
    that are left out of the spanning tree.

Key Functions:
    - GraphModel.coordinate(i): Position of node i
    - GraphModel.cost(i, j): Edge weight between nodes i and j
    - GraphModel.is_included(i): Whether node i takes part in the tree

Dependencies:
    - dataclasses (std)

Used By:
    - generator.factory.generate_graph
    - spanning.kruskal.compute_spanning_tree
    - output.* exporters
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

Coordinate = Tuple[int, int]


@dataclass(frozen=True)
class GraphModel:
    """
    Complete weighted graph over unique grid points (immutable).

    Node ``i`` sits at ``coordinates[i]`` and row/column ``i`` of the cost
    matrix holds its edge weights. The matrix always covers every node,
    excluded ones included; exclusion only limits which nodes the spanning
    tree may use.

    Attributes:
        node_count: Total number of nodes (>= 1)
        coordinates: One (x, y) pair per node, pairwise distinct
        cost_matrix: node_count x node_count symmetric weights, zero diagonal
        excluded_node_count: Trailing nodes left out of the spanning tree

    Invariants:
        - len(coordinates) == node_count
        - coordinates are pairwise distinct
        - cost_matrix is square, symmetric, non-negative, zero on the diagonal
        - 0 <= excluded_node_count < node_count

    Example:
        >>> graph = GraphModel(2, ((0, 0), (3, 4)), ((0, 5), (5, 0)))
        >>> graph.cost(0, 1)
        5
        >>> graph.included_node_count
        2
    """

    node_count: int
    coordinates: Tuple[Coordinate, ...]
    cost_matrix: Tuple[Tuple[int, ...], ...]
    excluded_node_count: int = 0

    def __post_init__(self) -> None:
        """Validate graph invariants on construction."""
        if self.node_count < 1:
            raise ValueError(f"node_count must be >= 1: {self.node_count}")
        if len(self.coordinates) != self.node_count:
            raise ValueError(
                f"Expected {self.node_count} coordinates, got {len(self.coordinates)}"
            )
        if len(set(self.coordinates)) != self.node_count:
            raise ValueError("coordinates must be pairwise distinct")
        if not 0 <= self.excluded_node_count < self.node_count:
            raise ValueError(
                f"excluded_node_count must be in [0, {self.node_count}): "
                f"{self.excluded_node_count}"
            )
        self._validate_cost_matrix()

    def _validate_cost_matrix(self) -> None:
        n = self.node_count
        if len(self.cost_matrix) != n or any(len(row) != n for row in self.cost_matrix):
            raise ValueError(f"cost_matrix must be {n}x{n}")
        for i in range(n):
            if self.cost_matrix[i][i] != 0:
                raise ValueError(f"cost_matrix diagonal must be zero at {i}")
            for j in range(i + 1, n):
                weight = self.cost_matrix[i][j]
                if weight < 0:
                    raise ValueError(f"cost ({i}, {j}) must be non-negative: {weight}")
                if weight != self.cost_matrix[j][i]:
                    raise ValueError(f"cost_matrix not symmetric at ({i}, {j})")

    # ─────────────────────────────────────────────────────────────────────────
    # Properties
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def included_node_count(self) -> int:
        """Number of leading nodes that take part in the spanning tree."""
        return self.node_count - self.excluded_node_count

    @property
    def included_nodes(self) -> range:
        """Indices of nodes that take part in the spanning tree."""
        return range(self.included_node_count)

    @property
    def excluded_nodes(self) -> range:
        """Indices of trailing nodes left out of the spanning tree."""
        return range(self.included_node_count, self.node_count)

    @property
    def is_partial(self) -> bool:
        """True when at least one node is excluded from the tree."""
        return self.excluded_node_count > 0

    # ─────────────────────────────────────────────────────────────────────────
    # Query Methods
    # ─────────────────────────────────────────────────────────────────────────

    def coordinate(self, index: int) -> Coordinate:
        """Position of node ``index``."""
        self._check_index(index)
        return self.coordinates[index]

    def cost(self, source: int, target: int) -> int:
        """Edge weight between ``source`` and ``target`` (0 when equal)."""
        self._check_index(source)
        self._check_index(target)
        return self.cost_matrix[source][target]

    def is_included(self, index: int) -> bool:
        """Whether node ``index`` takes part in the spanning tree."""
        self._check_index(index)
        return index < self.included_node_count

    def is_excluded(self, index: int) -> bool:
        """Whether node ``index`` is a trailing node left out of the tree."""
        return not self.is_included(index)

    def _check_index(self, index: int) -> None:
        if not 0 <= index < self.node_count:
            raise IndexError(f"node index {index} out of range [0, {self.node_count})")

    def __repr__(self) -> str:
        """Concise representation for debugging."""
        return (
            f"GraphModel(nodes={self.node_count}, "
            f"excluded={self.excluded_node_count})"
        )
