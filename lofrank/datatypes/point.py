"""
Point records that flow through the outlier scoring pipeline

Classes
-------
Point
    An identifier and an immutable coordinate vector
Neighbor
    Edge from a point to one of its nearest neighbors
ScoredPoint
    Per run record of a point and everything computed for it
"""
import numpy as np

from ..exceptions import InvalidPointError


class Point(object):
    """
    Represents one sample in n-dimensional space

    Parameters
    ----------
    id : str
        Identifier, must be unique within a dataset. Converted with str().
    coordinates : array-like, D
        Coordinates of the point. Must be 1D, non-empty and finite.
    """
    def __init__(self, id, coordinates):
        try:
            coords = np.array(coordinates, dtype=float)
        except (TypeError, ValueError) as e:
            raise InvalidPointError(f"Point {id}: coordinates are not "
                                    f"numeric ({e})") from e
        if coords.ndim != 1:
            raise InvalidPointError(f"Point {id}: coordinates must be a "
                                    f"1D sequence, got {coords.ndim}D")
        if coords.size == 0:
            raise InvalidPointError(f"Point {id} has no coordinates")
        if not np.all(np.isfinite(coords)):
            raise InvalidPointError(f"Point {id} has non-finite "
                                    f"coordinates")
        coords.setflags(write=False)
        self.__id = str(id)
        self.__coordinates = coords

    @property
    def id(self):
        return self.__id

    @property
    def coordinates(self):
        """Read-only numpy array of the coordinates"""
        return self.__coordinates

    @property
    def dimension(self):
        return self.__coordinates.size

    def __eq__(self, other):
        if not isinstance(other, Point):
            return NotImplemented
        return (self.id == other.id and
                np.array_equal(self.coordinates, other.coordinates))

    def __hash__(self):
        return hash((self.id, self.coordinates.tobytes()))

    def __repr__(self):
        return f"Point({self.id!r}, {self.coordinates.tolist()})"


class Neighbor(object):
    """
    One of the nearest neighbors of a point

    The reachability distance is a property of the edge: it is the
    reachability distance from the owning point to this neighbor, so the
    same point can have different values in different neighborhoods.
    """
    def __init__(self, point, distance):
        self.__point = point
        self.__distance = float(distance)
        self.reachability_distance = None

    @property
    def point(self):
        return self.__point

    @property
    def id(self):
        return self.__point.id

    @property
    def distance(self):
        """Euclidean distance to the owning point"""
        return self.__distance

    def __repr__(self):
        return (f"Neighbor({self.id!r}, distance={self.distance}, "
                f"reachability_distance={self.reachability_distance})")


class ScoredPoint(object):
    """
    Everything computed for one point during a single run

    The neighborhood is filled in once by the neighborhood builder, the
    density by the reachability stage and the lof by the scorer. Fields
    that have not been computed yet are None.
    """
    def __init__(self, point):
        self.__point = point
        self.__neighbors = None
        self.__k_distance = None
        self.reachability_density = None
        self.lof = None

    @property
    def point(self):
        return self.__point

    @property
    def id(self):
        return self.__point.id

    @property
    def neighbors(self):
        """Tuple of Neighbor edges, nearest first"""
        return self.__neighbors

    @property
    def k_distance(self):
        """Distance to the furthest neighbor in the neighborhood"""
        return self.__k_distance

    def set_neighborhood(self, neighbors, k_distance):
        if self.__neighbors is not None:
            raise RuntimeError(f"Neighborhood of point {self.id} "
                               f"is already set")
        self.__neighbors = tuple(neighbors)
        self.__k_distance = float(k_distance)

    def __repr__(self):
        return (f"ScoredPoint({self.id!r}, k_distance={self.k_distance}, "
                f"reachability_density={self.reachability_density}, "
                f"lof={self.lof})")
