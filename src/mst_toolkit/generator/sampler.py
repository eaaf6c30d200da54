"""
Module: generator.sampler

Purpose:
    Draw unique integer node positions on a square grid. Positions are
    drawn uniformly and a candidate that collides with an earlier node is
    rejected and redrawn.

Key Functions:
    - sample_coordinates(): Draw node_count distinct (x, y) pairs

Key Classes:
    - SamplingError: Grid cannot hold the requested number of points

Dependencies:
    - random (std): Injected random.Random instance

Used By:
    - generator.factory.generate_graph
"""

from __future__ import annotations

import logging
import random
from typing import Optional, Set, Tuple

logger = logging.getLogger(__name__)


class SamplingError(ValueError):
    """Requested points cannot be placed on the grid."""
    pass


def sample_coordinates(
    node_count: int,
    rng: random.Random,
    *,
    grid_size: Optional[int] = None,
) -> Tuple[Tuple[int, int], ...]:
    """
    Draw ``node_count`` distinct coordinates on a ``grid_size`` square grid.

    Both components are uniform in ``[0, grid_size)``. ``grid_size``
    defaults to ``node_count`` so the grid holds ``node_count ** 2``
    points and collisions stay rare.

    Args:
        node_count: Number of points to draw (>= 1)
        rng: Source of randomness; a seeded instance gives repeatable output
        grid_size: Side length of the grid (default: node_count)

    Returns:
        Tuple of (x, y) pairs where index i is the position of node i

    Raises:
        SamplingError: If node_count < 1 or the grid has fewer than
            node_count points

    Example:
        >>> coords = sample_coordinates(4, random.Random(7))
        >>> len(set(coords))
        4
    """
    if node_count < 1:
        raise SamplingError(f"node_count must be >= 1: {node_count}")
    size = node_count if grid_size is None else grid_size
    if size < 1 or size * size < node_count:
        raise SamplingError(
            f"A {size}x{size} grid cannot hold {node_count} distinct points"
        )

    used: Set[Tuple[int, int]] = set()
    coordinates = []
    rejected = 0
    while len(coordinates) < node_count:
        candidate = (rng.randrange(size), rng.randrange(size))
        if candidate in used:
            rejected += 1
            continue
        used.add(candidate)
        coordinates.append(candidate)

    logger.debug(
        f"Sampled {node_count} coordinates on a {size}x{size} grid "
        f"({rejected} rejected draws)"
    )
    return tuple(coordinates)
