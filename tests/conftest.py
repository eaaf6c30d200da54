import random
import sys
from pathlib import Path

import pytest

# Add src to sys.path so we can import mst_toolkit
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

from mst_toolkit.generator import graph_from_coordinates


# Common test fixtures
@pytest.fixture
def rng():
    """Return a seeded random source."""
    return random.Random(1234)


@pytest.fixture
def unit_square_graph():
    """Four nodes on the corners of a unit square, indices 0..3."""
    return graph_from_coordinates([(0, 0), (0, 1), (1, 0), (1, 1)])


@pytest.fixture
def line_graph():
    """Five nodes on a horizontal line at x = 0, 1, 3, 6, 10."""
    return graph_from_coordinates([(0, 0), (1, 0), (3, 0), (6, 0), (10, 0)])
