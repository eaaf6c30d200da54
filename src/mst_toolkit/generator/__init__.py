"""
Module: generator

Purpose:
    Random complete-graph generation: unique grid coordinates, then a dense
    rounded-Euclidean cost matrix.

Key Functions:
    - sample_coordinates(): Unique coordinates with rejection sampling
    - build_cost_matrix(): Symmetric dense cost matrix
    - generate_graph(): Both steps, wrapped in a GraphModel
    - graph_from_coordinates(): GraphModel for fixed positions

Dependencies:
    - numpy: Cost matrix computation

Used By:
    - mst_toolkit.controller
"""

from .costs import build_cost_matrix, euclidean_cost
from .factory import generate_graph, graph_from_coordinates
from .sampler import SamplingError, sample_coordinates

__all__ = [
    "build_cost_matrix",
    "euclidean_cost",
    "generate_graph",
    "graph_from_coordinates",
    "sample_coordinates",
    "SamplingError",
]
