"""
Core Models Package

Immutable, validated data models that serve as the single source of truth.

| Model | Role |
|-------|------|
| `GraphModel` | Node count, coordinates, dense cost matrix, exclusion count |
| `TreeEdge` | One `(source, target, weight)` edge with `source < target` |
| `SpanningTree` | Edge set plus derived total weight |
"""

from .graph import GraphModel
from .tree import SpanningTree, TreeEdge

__all__ = [
    "GraphModel",
    "SpanningTree",
    "TreeEdge",
]
