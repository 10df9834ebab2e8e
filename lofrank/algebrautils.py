"""
This module contains the distance functions used to build
neighborhoods of points
"""
import numpy as np
from scipy.spatial import distance_matrix

from .exceptions import DimensionMismatchError


def distance(a, b):
    """
    Get the euclidian distance between two coordinate vectors

    Parameters
    ----------
    a : array-like, D
        Coordinates of the first point
    b : array-like, D
        Coordinates of the second point

    Returns
    -------
    le : float
        sqrt(sum((a-b)**2))

    Raises
    ------
    DimensionMismatchError
        If a and b do not have the same number of coordinates
    """
    a = np.asarray(a, dtype=float)
    b = np.asarray(b, dtype=float)
    if a.shape != b.shape:
        raise DimensionMismatchError(a.size, b.size)
    le = np.sqrt(((a-b)**2).sum())
    return float(le)


def pairwise_distances(coords):
    """
    Calculate the distance between all pairs of points

    Parameters
    ----------
    coords : array, PxD
        rows represent coordinates of individual points, with P the number
        of points and D the point space dimensionality

    Returns
    -------
    d : array, PxP
        Symmetric matrix, d[i, j] is the distance between point i and j.
        The diagonal is 0.

    Examples
    --------
    >>>pairwise_distances(np.array([[0, 0], [4, 0], [0, 3]]))
    array([[0., 4., 3.],
           [4., 0., 5.],
           [3., 5., 0.]])
    """
    coords = np.asarray(coords, dtype=float)
    if coords.ndim != 2:
        raise ValueError("Coordinates must be a 2D array, one row per point")
    d = distance_matrix(coords, coords)
    # distance_matrix is not guaranteed to be bitwise symmetric
    d = np.minimum(d, d.T)
    np.fill_diagonal(d, 0.)
    return d
