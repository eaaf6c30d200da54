"""
Module: spanning.union_find

Purpose:
    Array-backed disjoint-set structure used to reject edges that would
    close a cycle while the spanning tree is grown.

Key Classes:
    - DisjointSet: Parent list with path compression and union by rank

Used By:
    - spanning.kruskal.compute_spanning_tree
    - tests (tree validity checks)
"""

from __future__ import annotations

from typing import List


class DisjointSet:
    """
    Partition of ``range(size)`` into disjoint sets.

    Example:
        >>> sets = DisjointSet(3)
        >>> sets.union(0, 1)
        True
        >>> sets.union(1, 0)
        False
        >>> sets.component_count
        2
    """

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError(f"size must be non-negative: {size}")
        self._parent: List[int] = list(range(size))
        self._rank: List[int] = [0] * size
        self._components = size

    def __len__(self) -> int:
        return len(self._parent)

    @property
    def component_count(self) -> int:
        """Number of disjoint sets currently in the partition."""
        return self._components

    def find(self, element: int) -> int:
        """Representative of the set containing ``element``."""
        root = element
        while self._parent[root] != root:
            root = self._parent[root]
        # Path compression
        while self._parent[element] != root:
            self._parent[element], element = root, self._parent[element]
        return root

    def union(self, a: int, b: int) -> bool:
        """
        Merge the sets containing ``a`` and ``b``.

        Returns:
            True if two sets were merged, False if already in the same set
        """
        root_a = self.find(a)
        root_b = self.find(b)
        if root_a == root_b:
            return False

        if self._rank[root_a] < self._rank[root_b]:
            root_a, root_b = root_b, root_a
        self._parent[root_b] = root_a
        if self._rank[root_a] == self._rank[root_b]:
            self._rank[root_a] += 1
        self._components -= 1
        return True

    def connected(self, a: int, b: int) -> bool:
        return self.find(a) == self.find(b)
