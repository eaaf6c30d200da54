"""
Module: spanning.kruskal

Purpose:
    Minimum spanning tree over the included nodes of a GraphModel using
    Kruskal's algorithm. Excluded (trailing) nodes are never considered.

Key Functions:
    - candidate_edges(): All edges between included nodes
    - compute_spanning_tree(): Main entry point

Algorithm:
    1. Enumerate every (i, j) with i < j among included nodes
    2. Stable sort by weight (ties keep enumeration order)
    3. Accept an edge when its endpoints lie in different sets
    4. Stop after included_node_count - 1 accepted edges

Dependencies:
    - spanning.union_find.DisjointSet
    - core.models: GraphModel, SpanningTree, TreeEdge

Used By:
    - controller.run
"""

from __future__ import annotations

import logging
from typing import List

from mst_toolkit.core.models import GraphModel, SpanningTree, TreeEdge

from .union_find import DisjointSet

logger = logging.getLogger(__name__)


def candidate_edges(graph: GraphModel) -> List[TreeEdge]:
    """
    List every edge between two included nodes, row-major.

    Args:
        graph: Source graph

    Returns:
        Edges ``(i, j)`` with ``i < j < graph.included_node_count``
    """
    limit = graph.included_node_count
    matrix = graph.cost_matrix
    return [
        TreeEdge(i, j, matrix[i][j])
        for i in range(limit)
        for j in range(i + 1, limit)
    ]


def compute_spanning_tree(graph: GraphModel) -> SpanningTree:
    """
    Compute the minimum spanning tree of the graph's included nodes.

    The included subgraph is complete, so the result always connects
    every included node. A single included node yields an empty tree.

    Args:
        graph: Source graph; only the first ``included_node_count`` nodes
            and the costs between them are used

    Returns:
        SpanningTree with ``included_node_count - 1`` edges

    Example:
        >>> square = ((0, 1, 1, 1), (1, 0, 1, 1), (1, 1, 0, 1), (1, 1, 1, 0))
        >>> graph = GraphModel(4, ((0, 0), (0, 1), (1, 0), (1, 1)), square)
        >>> compute_spanning_tree(graph).total_weight
        3
    """
    included = graph.included_node_count
    if included == 1:
        logger.warning("Only one node is included; the spanning tree has no edges")
        return SpanningTree(edges=(), node_count=1)

    edges = sorted(candidate_edges(graph), key=lambda edge: edge.weight)
    sets = DisjointSet(included)
    accepted: List[TreeEdge] = []

    for edge in edges:
        if sets.union(edge.source, edge.target):
            accepted.append(edge)
            if len(accepted) == included - 1:
                break

    tree = SpanningTree(edges=tuple(accepted), node_count=included)
    logger.debug(
        f"Kruskal accepted {tree.edge_count} of {len(edges)} candidate edges, "
        f"total weight {tree.total_weight}"
    )
    return tree
