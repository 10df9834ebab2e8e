"""
Running the outlier ranking for several neighborhood sizes

Functions
---------
sweep_k
    Rank a dataset once per candidate k and time each run
"""
import logging
import time

from tqdm import tqdm

from .neighbors import check_points, check_k
from .scoring import compute_outlier_scores
from .exceptions import ConfigurationError
from ._decorators import timeit

logger = logging.getLogger(__name__)

DEFAULT_SWEEP = (5, 6, 7, 9, 12, 15, 20, 25)


class SweepResult(object):
    """
    Rankings and run times of a k sweep

    Attributes
    ----------
    scores : dict
        k -> list of (id, lof), sorted by descending lof
    timings : dict
        k -> wall time of the run in seconds
    total : float
        Wall time of the whole sweep in seconds
    """
    def __init__(self):
        self.scores = {}
        self.timings = {}
        self.total = 0.

    @property
    def ks(self):
        """The k values that were run, in order"""
        return list(self.scores)

    @property
    def last(self):
        """The ranking of the last k that was run"""
        return self.scores[self.ks[-1]]

    def __len__(self):
        return len(self.scores)

    def __repr__(self):
        return f"SweepResult(ks={self.ks}, total={self.total:.4f}s)"


_timed_scores = timeit(compute_outlier_scores)


def sweep_k(points, ks=DEFAULT_SWEEP, on_degenerate="inf", progress=False):
    """
    Rank the same dataset with several values of k

    Parameters
    ----------
    points : iterable of Point
        The dataset
    ks : iterable of int, optional
        Candidate neighborhood sizes. Values that are not valid for the
        size of the dataset are skipped with a warning.
    on_degenerate : str, optional
        "inf" (default) or "raise", see scoring.compute_outlier_scores
    progress : bool, optional
        Show a progress bar over the k values

    Returns
    -------
    result : SweepResult

    Raises
    ------
    ConfigurationError
        If none of the candidate k values can be used
    """
    points = check_points(points)
    ks = list(ks)
    valid = []
    for k in ks:
        try:
            valid.append(check_k(k, len(points)))
        except ConfigurationError as e:
            logger.warning(f"Skipping k={k}: {e}")
    if not valid:
        raise ConfigurationError(f"None of the k values {ks} can be "
                                 f"used with {len(points)} points")
    result = SweepResult()
    ts = time.perf_counter()
    for k in tqdm(valid, disable=not progress):
        result.scores[k] = _timed_scores(points, k,
                                         on_degenerate=on_degenerate,
                                         log_time=result.timings,
                                         log_name=k)
        logger.debug(f"k={k} took {result.timings[k]:.4f} s")
    result.total = time.perf_counter() - ts
    return result
