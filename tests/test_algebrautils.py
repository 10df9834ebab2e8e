import numpy as np
import pytest
from lofrank import algebrautils as au
from lofrank.exceptions import DimensionMismatchError

xy = np.array([[0, 0],
               [4, 0],
               [0, 3],
               ])

rng = np.random.default_rng(42)
cloud = rng.normal(size=(15, 4))


def test_distance():
    assert au.distance([0, 0], [3, 4]) == 5.
    assert au.distance([1.5], [1.5]) == 0.
    assert au.distance([1, 2, 3], [1, 2, 3]) == 0.


def test_distance_symmetry():
    for a in cloud:
        for b in cloud:
            assert au.distance(a, b) == au.distance(b, a)


def test_distance_dimension_mismatch():
    with pytest.raises(DimensionMismatchError):
        au.distance([0, 0], [1])
    with pytest.raises(ValueError):
        au.distance([0, 0, 0], [1, 2])


def test_pairwise_distances():
    ans = au.pairwise_distances(xy)
    exp = np.array([[0., 4., 3.],
                    [4., 0., 5.],
                    [3., 5., 0.]])
    np.testing.assert_almost_equal(ans, exp)


def test_pairwise_distances_cloud():
    d = au.pairwise_distances(cloud)
    assert d.shape == (15, 15)
    np.testing.assert_array_equal(d, d.T)
    np.testing.assert_array_equal(np.diag(d), np.zeros(15))
    np.testing.assert_almost_equal(d[3, 7], au.distance(cloud[3], cloud[7]))
    with pytest.raises(ValueError):
        au.pairwise_distances(np.arange(5))
