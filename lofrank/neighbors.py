"""
Construction of the k-neighborhood of every point in a dataset

Functions
---------
check_points
    Validate a dataset before it enters the pipeline
check_k
    Validate the neighborhood size against the dataset size
build_neighborhoods
    Find the nearest neighbors and the k-distance of every point
index_by_id
    Map identifiers to scored points for constant time lookups
lookup
    Resolve a neighbor identifier against such a mapping
"""
import logging

import numpy as np

from .algebrautils import pairwise_distances
from .datatypes.point import Point, Neighbor, ScoredPoint
from .exceptions import (ConfigurationError, DimensionMismatchError,
                         InvalidPointError, ConsistencyError)

logger = logging.getLogger(__name__)


def check_points(points):
    """
    Validate a collection of points and return it as a list

    Parameters
    ----------
    points : iterable of Point
        The dataset

    Returns
    -------
    points : list of Point

    Raises
    ------
    ConfigurationError
        If there are no points
    InvalidPointError
        If an element is not a Point or an identifier occurs twice
    DimensionMismatchError
        If not all points have the same number of coordinates
    """
    points = list(points)
    if not points:
        raise ConfigurationError("The dataset does not contain any points")
    seen = set()
    dim = None
    for p in points:
        if not isinstance(p, Point):
            raise InvalidPointError(f"Expected a Point, got "
                                    f"{type(p).__name__}")
        if p.id in seen:
            raise InvalidPointError(f"Duplicate point identifier {p.id}")
        seen.add(p.id)
        if dim is None:
            dim = p.dimension
        elif p.dimension != dim:
            raise DimensionMismatchError(dim, p.dimension, point_id=p.id)
    return points


def check_k(k, n):
    """
    Check that k is a usable neighborhood size for n points

    k must be an integer with 2 <= k < n.
    """
    if isinstance(k, bool) or not isinstance(k, (int, np.integer)):
        raise ConfigurationError(f"k must be an integer, got {k!r}")
    if k < 2:
        raise ConfigurationError(f"k must be at least 2, got {k}")
    if k >= n:
        raise ConfigurationError(f"k must be smaller than the number of "
                                 f"points ({n}), got {k}")
    return int(k)


def build_neighborhoods(points, k):
    """
    Find the neighborhood and the k-distance of each point

    Parameters
    ----------
    points : iterable of Point
        The dataset. All points must have the same dimension and a
        unique identifier.
    k : int
        Neighborhood parameter, 2 <= k < len(points)

    Returns
    -------
    scored : list of ScoredPoint
        One record per point in input order. Each holds the k-1 nearest
        other points as Neighbor edges, nearest first, and the distance
        to the last of them as k_distance.

    Notes
    -----
    A point is never its own neighbor, but other points with the same
    coordinates are. Equal distances are ordered by input position.
    """
    points = check_points(points)
    k = check_k(k, len(points))
    coords = np.vstack([p.coordinates for p in points])
    d = pairwise_distances(coords)
    # exclude each point from its own candidates
    np.fill_diagonal(d, np.inf)
    # stable sort keeps input order for equal distances
    indx = np.argsort(d, axis=1, kind="stable")[:, :k-1]
    scored = []
    for i, p in enumerate(points):
        sp = ScoredPoint(p)
        neighbors = [Neighbor(points[j], d[i, j]) for j in indx[i]]
        sp.set_neighborhood(neighbors, d[i, indx[i, -1]])
        scored.append(sp)
    logger.debug(f"Built neighborhoods of {len(scored)} points "
                 f"({coords.shape[1]}D) with k={k}")
    return scored


def index_by_id(scored):
    """Map the identifier of every scored point to the record"""
    return {sp.id: sp for sp in scored}


def lookup(index, point_id):
    """Get a scored point by identifier, failing loudly if it is missing"""
    try:
        return index[point_id]
    except KeyError:
        raise ConsistencyError(f"Neighbor {point_id} is not part of "
                               f"this run") from None
