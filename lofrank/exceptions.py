"""
Errors raised by the outlier scoring pipeline

All of them derive from ValueError, so callers that only care about bad
input can keep catching that.
"""


class LOFError(ValueError):
    """Base class for all errors raised by lofrank"""


class ConfigurationError(LOFError):
    """Invalid neighborhood size or an empty/too small dataset"""


class DimensionMismatchError(LOFError):
    """Coordinate vectors of different length were combined"""

    def __init__(self, expected, found, point_id=None):
        self.expected = expected
        self.found = found
        self.point_id = point_id
        where = "" if point_id is None else f" (point {point_id})"
        super().__init__(f"Expected {expected} coordinates, "
                         f"got {found}{where}")


class InvalidPointError(LOFError):
    """A point can not be used: bad coordinates or a duplicate id"""


class DegenerateDensityError(LOFError):
    """The reachability distances around a point sum to zero"""

    def __init__(self, point_id):
        self.point_id = point_id
        super().__init__(f"Point {point_id} coincides with all of its "
                         f"neighbors, its reachability density is infinite")


class ConsistencyError(LOFError):
    """A neighbor refers to a point that is not part of the run"""
