"""
Module: tree

Purpose:
    Provides TreeEdge and SpanningTree - the result of a minimum spanning
    tree computation. The tree owns its edges outright and keeps no
    reference back to the GraphModel that produced it.

Key Functions:
    - SpanningTree.total_weight: Sum of edge weights
    - SpanningTree.nodes(): Node indices touched by the tree
    - SpanningTree.as_tuples(): Edges as (i, j, weight) tuples

Dependencies:
    - dataclasses (std)

Used By:
    - spanning.kruskal.compute_spanning_tree
    - output.* exporters
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import FrozenSet, Tuple


@dataclass(frozen=True, slots=True)
class TreeEdge:
    """
    One undirected weighted edge, stored with ``source < target``.

    Attributes:
        source: Lower node index
        target: Higher node index
        weight: Non-negative edge cost

    Example:
        >>> TreeEdge(0, 2, 7).as_tuple()
        (0, 2, 7)
    """

    source: int
    target: int
    weight: int

    def __post_init__(self) -> None:
        """Validate edge on construction."""
        if self.source < 0:
            raise ValueError(f"source must be >= 0: {self.source}")
        if self.source >= self.target:
            raise ValueError(f"source must be < target: {self.source} >= {self.target}")
        if self.weight < 0:
            raise ValueError(f"weight must be non-negative: {self.weight}")

    def as_tuple(self) -> Tuple[int, int, int]:
        return (self.source, self.target, self.weight)


@dataclass(frozen=True)
class SpanningTree:
    """
    Minimum spanning tree over the included nodes of a graph (immutable).

    Attributes:
        edges: Tree edges in the order they were accepted
        node_count: Number of nodes the tree spans

    Invariants:
        - len(edges) == node_count - 1

    Example:
        >>> tree = SpanningTree((TreeEdge(0, 1, 2), TreeEdge(1, 2, 3)), node_count=3)
        >>> tree.total_weight
        5
    """

    edges: Tuple[TreeEdge, ...]
    node_count: int

    def __post_init__(self) -> None:
        """Validate edge count on construction."""
        if self.node_count < 1:
            raise ValueError(f"node_count must be >= 1: {self.node_count}")
        if len(self.edges) != self.node_count - 1:
            raise ValueError(
                f"A tree over {self.node_count} nodes needs {self.node_count - 1} "
                f"edges, got {len(self.edges)}"
            )

    @property
    def total_weight(self) -> int:
        """Sum of all edge weights."""
        return sum(edge.weight for edge in self.edges)

    @property
    def edge_count(self) -> int:
        return len(self.edges)

    def nodes(self) -> FrozenSet[int]:
        """Node indices that appear as an endpoint of some edge."""
        return frozenset(
            index for edge in self.edges for index in (edge.source, edge.target)
        )

    def as_tuples(self) -> Tuple[Tuple[int, int, int], ...]:
        """Edges as plain ``(source, target, weight)`` tuples."""
        return tuple(edge.as_tuple() for edge in self.edges)
