"""
conftest.py - Shared test fixtures for spatnet

pytest reads this file before running any test. Every fixture defined
here is injected into a test that names it as an argument.

    @pytest.fixture
    def my_fixture():
        return something_useful

    def test_something(my_fixture):
        assert my_fixture == expected
"""

import numpy as np
import pytest
from shapely.geometry import Polygon

from spatnet.data.boundary import Boundary
from spatnet.spatial.point.sampling import PointPattern, PointSet, simulate_poisson

# ===========================================================================
# Constants
# ===========================================================================

N_POINTS = 40  # default size of simulated point patterns
SEED = 42


# ===========================================================================
# Fixture 1: boundaries
# ===========================================================================


@pytest.fixture
def square():
    """A 10 x 10 square with no CRS."""
    return Boundary.from_bounds(0, 0, 10, 10)


@pytest.fixture
def square_with_hole():
    """
    A 10 x 10 square with a 6 x 6 hole in the middle.

    The hole covers 36% of the bounding box, so rejection sampling and
    Halton filtering both have real work to do.
    """
    shell = [(0, 0), (10, 0), (10, 10), (0, 10)]
    hole = [(2, 2), (8, 2), (8, 8), (2, 8)]
    return Boundary(geometry=Polygon(shell, [hole]), crs=32619)


@pytest.fixture
def hole_polygon():
    """The hole of square_with_hole as its own polygon."""
    return Polygon([(2, 2), (8, 2), (8, 8), (2, 8)])


@pytest.fixture
def flat_boundary():
    """A zero-area polygon (collinear vertices)."""
    return Boundary(geometry=Polygon([(0, 0), (1, 1), (2, 2)]))


# ===========================================================================
# Fixture 2: point sets
# ===========================================================================


@pytest.fixture
def poisson_points(square):
    """40 seeded Poisson points in the 10 x 10 square."""
    return simulate_poisson(square, N_POINTS, seed=SEED)


@pytest.fixture
def tiny_points():
    """
    Three hand-placed points in a unit square:

        node 0 at (0, 0)
        node 1 at (1, 0)   distance 1 from node 0
        node 2 at (0, 0.5) distance 0.5 from node 0
    """
    return PointSet(
        coords=np.array([[0.0, 0.0], [1.0, 0.0], [0.0, 0.5]]),
        boundary=Boundary.from_bounds(0, 0, 1, 1),
        pattern=PointPattern.POISSON,
        n_requested=3,
    )


@pytest.fixture
def clustered_points():
    """Ten points packed in a 0.01 x 0.01 box: every pair is tied."""
    box = Boundary.from_bounds(0, 0, 0.01, 0.01)
    return simulate_poisson(box, 10, seed=SEED)


@pytest.fixture
def scattered_points():
    """Five Halton points spread over a 1000 x 1000 box: no pair is tied."""
    from spatnet.spatial.point.sampling import simulate_halton

    return simulate_halton(Boundary.from_bounds(0, 0, 1000, 1000), 5)
