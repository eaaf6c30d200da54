"""
MST Toolkit Core Package

Shared data models for every pipeline stage. The generator produces a
GraphModel, the spanning engine derives a SpanningTree from it, and the
exporters only ever read these two objects.

All models are frozen dataclasses:
1. No accidental mutation between generation and export
2. Coordinates stay indexed consistently with cost matrix indices
3. Easier to reason about data flow
"""

from .models import GraphModel, SpanningTree, TreeEdge

__all__ = [
    "GraphModel",
    "SpanningTree",
    "TreeEdge",
]
