import logging

_logger = logging.getLogger(__name__)

__doc__ = """
lofrank: density based local outlier ranking of n-dimensional points
====================================================================
"""

from .exceptions import (LOFError, ConfigurationError,
                         DimensionMismatchError, InvalidPointError,
                         DegenerateDensityError, ConsistencyError)
from .datatypes.point import Point, Neighbor, ScoredPoint
from .scoring import compute_outlier_scores, LocalOutlierFactor

__version__ = "0.1.0"

__all__ = ["Point", "Neighbor", "ScoredPoint", "compute_outlier_scores",
           "LocalOutlierFactor", "LOFError", "ConfigurationError",
           "DimensionMismatchError", "InvalidPointError",
           "DegenerateDensityError", "ConsistencyError"]
