import numpy as np
import pytest
from lofrank import reachability as rch
from lofrank.neighbors import build_neighborhoods
from lofrank.datatypes.point import Point
from lofrank.exceptions import DegenerateDensityError, ConsistencyError

line = [Point(str(x), [x]) for x in (0, 1, 2, 3, 4, 100)]
same = [Point(str(i), [1., 1.]) for i in range(10)]


def test_reachability_distance():
    assert rch.reachability_distance(2., 1.) == 2.
    assert rch.reachability_distance(1., 3.) == 3.


def test_compute_reachability():
    scored = rch.compute_reachability(build_neighborhoods(line, 3), 3)
    reach = [[nb.reachability_distance for nb in sp.neighbors]
             for sp in scored]
    np.testing.assert_almost_equal(reach, [[1., 2.], [2., 1.], [1., 1.],
                                           [1., 2.], [1., 2.], [96., 97.]])
    dens = [sp.reachability_density for sp in scored]
    np.testing.assert_almost_equal(dens, [1., 1., 1.5, 1., 1., 3/193])


def test_reachability_is_per_edge():
    scored = rch.compute_reachability(build_neighborhoods(line, 3), 3)
    # point 2 is a neighbor of 0 (distance 2) and of 1 (distance 1)
    assert scored[0].neighbors[1].id == "2"
    assert scored[1].neighbors[1].id == "2"
    assert scored[0].neighbors[1].reachability_distance == 2.
    assert scored[1].neighbors[1].reachability_distance == 1.


def test_degenerate_density():
    scored = rch.compute_reachability(build_neighborhoods(same, 3), 3)
    assert all(np.isinf(sp.reachability_density) for sp in scored)
    with pytest.raises(DegenerateDensityError):
        rch.compute_reachability(build_neighborhoods(same, 3), 3,
                                 on_degenerate="raise")
    with pytest.raises(ValueError):
        rch.compute_reachability(build_neighborhoods(same, 3), 3,
                                 on_degenerate="ignore")


def test_missing_neighbor():
    scored = build_neighborhoods(line, 3)
    with pytest.raises(ConsistencyError):
        rch.compute_reachability(scored[1:], 3)
