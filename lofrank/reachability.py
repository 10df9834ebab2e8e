"""
Reachability distances and local reachability densities
"""
import logging

import numpy as np

from .neighbors import index_by_id, lookup
from .exceptions import DegenerateDensityError

logger = logging.getLogger(__name__)

DEGENERATE_POLICIES = ("inf", "raise")


def check_policy(on_degenerate):
    if on_degenerate not in DEGENERATE_POLICIES:
        raise ValueError(f"on_degenerate must be one of "
                         f"{DEGENERATE_POLICIES}, got {on_degenerate!r}")


def reachability_distance(k_distance, distance):
    """reach-dist(p, o) = max(k-distance(o), d(p, o))"""
    return max(k_distance, distance)


def compute_reachability(scored, k, on_degenerate="inf"):
    """
    Set the reachability distance of every neighbor edge and the
    local reachability density of every point

    Parameters
    ----------
    scored : list of ScoredPoint
        Output of neighbors.build_neighborhoods
    k : int
        The neighborhood parameter used to build the neighborhoods
    on_degenerate : str, optional
        What to do when the reachability distances of a point sum to
        zero, which happens when it coincides with all its neighbors.
        "inf" (default) sets the density to numpy.inf, "raise" raises
        DegenerateDensityError.

    Returns
    -------
    scored : list of ScoredPoint
        The same records, updated in place
    """
    check_policy(on_degenerate)
    index = index_by_id(scored)
    for sp in scored:
        for nb in sp.neighbors:
            other = lookup(index, nb.id)
            nb.reachability_distance = reachability_distance(
                other.k_distance, nb.distance)
    degenerate = 0
    for sp in scored:
        total = sum(nb.reachability_distance for nb in sp.neighbors)
        if total == 0:
            if on_degenerate == "raise":
                raise DegenerateDensityError(sp.id)
            degenerate += 1
            sp.reachability_density = np.inf
        else:
            sp.reachability_density = k / total
    if degenerate:
        logger.warning(f"{degenerate} point(s) coincide with their whole "
                       f"neighborhood, their density is set to inf")
    return scored
