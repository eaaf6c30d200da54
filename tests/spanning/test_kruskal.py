"""
Tests for spanning.kruskal

Verifies:
1. Edge counts for full and partial trees
2. Tree validity (acyclic, connected, only included nodes)
3. Optimality against brute force on small graphs
4. Weight invariance under renumbering of nodes
"""

import itertools
import random

import pytest

from mst_toolkit.core.models import GraphModel
from mst_toolkit.generator import generate_graph, graph_from_coordinates
from mst_toolkit.spanning import DisjointSet, candidate_edges, compute_spanning_tree


def assert_valid_tree(graph: GraphModel, tree) -> None:
    """Tree edges are acyclic and connect every included node."""
    included = graph.included_node_count
    sets = DisjointSet(included)
    for edge in tree.edges:
        assert edge.source < edge.target < included
        assert edge.weight == graph.cost(edge.source, edge.target)
        assert sets.union(edge.source, edge.target), f"cycle through {edge}"
    assert sets.component_count == 1


def brute_force_weight(graph: GraphModel) -> int:
    """Minimum weight over every (n - 1)-edge subset that forms a tree."""
    n = graph.included_node_count
    if n == 1:
        return 0
    edges = [(i, j) for i in range(n) for j in range(i + 1, n)]
    best = None
    for subset in itertools.combinations(edges, n - 1):
        sets = DisjointSet(n)
        if all(sets.union(i, j) for i, j in subset):
            weight = sum(graph.cost(i, j) for i, j in subset)
            best = weight if best is None else min(best, weight)
    return best


class TestScenarios:
    """Fixed graphs with known answers."""

    def test_unit_square_when_full_then_three_unit_edges(self, unit_square_graph):
        tree = compute_spanning_tree(unit_square_graph)

        assert tree.edge_count == 3
        assert tree.total_weight == 3
        assert_valid_tree(unit_square_graph, tree)

    def test_line_when_full_then_connects_neighbours(self, line_graph):
        """On a line the MST is the chain of consecutive points."""
        tree = compute_spanning_tree(line_graph)

        assert sorted(tree.as_tuples()) == [(0, 1, 1), (1, 2, 2), (2, 3, 3), (3, 4, 4)]
        assert tree.total_weight == 10

    def test_partial_when_two_excluded_then_excluded_never_in_tree(self):
        graph = generate_graph(5, 2, rng=random.Random(3))
        tree = compute_spanning_tree(graph)

        assert tree.edge_count == 2
        assert tree.node_count == 3
        assert tree.nodes() <= {0, 1, 2}
        assert_valid_tree(graph, tree)

    def test_partial_when_excluded_node_is_cheap_shortcut_then_ignored(self):
        """Node 2 would make a cheaper tree but is excluded."""
        graph = graph_from_coordinates([(0, 0), (10, 0), (5, 0)], excluded_node_count=1)
        tree = compute_spanning_tree(graph)

        assert tree.as_tuples() == ((0, 1, 10),)

    def test_single_node_when_computed_then_empty_tree(self):
        graph = graph_from_coordinates([(0, 0)])
        tree = compute_spanning_tree(graph)

        assert tree.edges == ()
        assert tree.total_weight == 0

    def test_single_included_node_when_rest_excluded_then_empty_tree(self):
        graph = graph_from_coordinates([(0, 0), (1, 1), (2, 2)], excluded_node_count=2)
        tree = compute_spanning_tree(graph)

        assert tree.edge_count == 0
        assert tree.total_weight == 0


class TestCandidateEdges:
    def test_candidates_when_partial_then_only_included_pairs(self):
        graph = graph_from_coordinates(
            [(0, 0), (1, 0), (2, 0), (3, 0)], excluded_node_count=1
        )
        pairs = [(e.source, e.target) for e in candidate_edges(graph)]
        assert pairs == [(0, 1), (0, 2), (1, 2)]


class TestProperties:
    """Randomised properties over seeded graphs."""

    @pytest.mark.parametrize("seed", range(20))
    def test_edge_count_when_random_exclusion_then_included_minus_one(self, seed):
        rng = random.Random(seed)
        node_count = rng.randint(1, 25)
        excluded = rng.randrange(node_count)
        graph = generate_graph(node_count, excluded, rng=rng)

        tree = compute_spanning_tree(graph)

        assert tree.edge_count == node_count - excluded - 1
        assert_valid_tree(graph, tree)

    @pytest.mark.parametrize("seed", range(15))
    def test_weight_when_small_graph_then_matches_brute_force(self, seed):
        rng = random.Random(1000 + seed)
        node_count = rng.randint(1, 6)
        excluded = rng.randrange(node_count)
        graph = generate_graph(node_count, excluded, rng=rng)

        assert compute_spanning_tree(graph).total_weight == brute_force_weight(graph)

    @pytest.mark.parametrize("seed", range(10))
    def test_weight_when_nodes_renumbered_then_unchanged(self, seed):
        rng = random.Random(seed)
        graph = generate_graph(12, rng=rng)
        shuffled = list(graph.coordinates)
        rng.shuffle(shuffled)

        original = compute_spanning_tree(graph).total_weight
        renumbered = compute_spanning_tree(graph_from_coordinates(shuffled)).total_weight

        assert original == renumbered
