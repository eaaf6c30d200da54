"""
Module: spanning

Purpose:
    Minimum spanning tree computation (Kruskal + union-find), optionally
    restricted to a leading prefix of the nodes.

Key Functions:
    - compute_spanning_tree(): MST over included nodes

Key Classes:
    - DisjointSet: Union-find partition

Used By:
    - mst_toolkit.controller
"""

from .kruskal import candidate_edges, compute_spanning_tree
from .union_find import DisjointSet

__all__ = [
    "candidate_edges",
    "compute_spanning_tree",
    "DisjointSet",
]
