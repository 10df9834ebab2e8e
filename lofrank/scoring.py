"""
Local outlier factor scoring and ranking

Algorithm: density based local outlier detection (LOF)
Input: a set of points, positive integer k
Output: the points ranked by local outlier factor, largest first

1) Calculate the euclidian distance between every pair of points
2) Sort the distances and find the neighborhood and k-distance of
   every point
3) Calculate the local reachability density of every point
4) Calculate the local outlier factor of every point
5) Sort the points by local outlier factor

Functions
---------
compute_lof
    Step 4, on records prepared by the previous stages
rank
    Step 5
score_points
    Steps 1-4, returning the full records
compute_outlier_scores
    The complete pipeline, returning (id, lof) pairs

Classes
-------
LocalOutlierFactor
    Keeps a configured k and scores datasets with it
"""
import logging

import numpy as np

from .neighbors import build_neighborhoods, check_k, index_by_id, lookup
from .reachability import compute_reachability, check_policy

logger = logging.getLogger(__name__)

DEFAULT_K = 4


def compute_lof(scored, k):
    """
    Set the local outlier factor of every point

    lof(A) = sum(density(O) / density(A) for O in neighbors(A)) / k

    A point with an infinite density (it coincides with all of its
    neighbors) gets a lof of exactly 1. A point with a finite density
    next to such a point gets an infinite lof.

    Parameters
    ----------
    scored : list of ScoredPoint
        Records with reachability densities computed
    k : int
        The neighborhood parameter

    Returns
    -------
    scored : list of ScoredPoint
        The same records, updated in place
    """
    index = index_by_id(scored)
    for sp in scored:
        own = sp.reachability_density
        if np.isinf(own):
            sp.lof = 1.
            continue
        total = 0.
        for nb in sp.neighbors:
            total += lookup(index, nb.id).reachability_density / own
        sp.lof = total / k
    return scored


def rank(scored):
    """
    Sort scored points by descending lof

    Equal scores are ordered by identifier.

    Returns
    -------
    scores : list of (str, float)
        (id, lof) pairs, most outlying first
    """
    ordered = sorted(scored, key=lambda sp: (-sp.lof, sp.id))
    return [(sp.id, sp.lof) for sp in ordered]


def score_points(points, k, on_degenerate="inf"):
    """
    Run the pipeline up to the lof computation

    Parameters
    ----------
    points : iterable of Point
        The dataset
    k : int
        Neighborhood parameter, 2 <= k < number of points
    on_degenerate : str, optional
        "inf" or "raise", see reachability.compute_reachability

    Returns
    -------
    scored : list of ScoredPoint
        One fully computed record per point, in input order
    """
    check_policy(on_degenerate)
    scored = build_neighborhoods(points, k)
    compute_reachability(scored, k, on_degenerate=on_degenerate)
    compute_lof(scored, k)
    return scored


def compute_outlier_scores(points, k, on_degenerate="inf"):
    """
    Rank points by their local outlier factor

    Parameters
    ----------
    points : iterable of Point
        The dataset. Must have more than k points, all of the same
        dimension and with unique identifiers.
    k : int
        Neighborhood parameter, 2 <= k < number of points
    on_degenerate : str, optional
        "inf" (default) or "raise", see reachability.compute_reachability

    Returns
    -------
    scores : list of (str, float)
        (id, lof) pairs sorted by descending lof

    Examples
    --------
    >>>pts = [Point(str(x), [x]) for x in (0, 1, 2, 3, 4, 100)]
    >>>compute_outlier_scores(pts, 3)[0][0]
    '100'
    """
    scored = score_points(points, k, on_degenerate=on_degenerate)
    scores = rank(scored)
    logger.debug(f"Scored {len(scores)} points with k={k}, "
                 f"top lof {scores[0][1]:.4f} ({scores[0][0]})")
    return scores


class LocalOutlierFactor(object):
    """
    Outlier ranker with a fixed neighborhood size

    The only state kept between runs is k.

    Parameters
    ----------
    k : int, optional
        Neighborhood parameter, at least 2. Defaults to 4.
    on_degenerate : str, optional
        "inf" (default) or "raise"
    """
    def __init__(self, k=DEFAULT_K, on_degenerate="inf"):
        self.k = k
        self.on_degenerate = on_degenerate

    @property
    def k(self):
        return self.__k

    @k.setter
    def k(self, value):
        # the upper bound depends on the dataset and is checked per run
        self.__k = check_k(value, np.inf)

    def score_points(self, points):
        """Full ScoredPoint records, in input order"""
        return score_points(points, self.k, on_degenerate=self.on_degenerate)

    def score(self, points):
        """(id, lof) pairs sorted by descending lof"""
        return compute_outlier_scores(points, self.k,
                                      on_degenerate=self.on_degenerate)

    def __repr__(self):
        return f"LocalOutlierFactor(k={self.k})"
