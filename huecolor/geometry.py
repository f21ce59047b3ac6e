"""Two dimensional geometry in the CIE xy chromaticity plane."""
from __future__ import annotations

import math
from typing import NamedTuple


class Point(NamedTuple):
    """A location (or vector) in the chromaticity plane."""

    x: float
    y: float

    def __sub__(self, other: tuple[float, float]) -> Point:
        """Return the vector from other to self."""
        return Point(self.x - other[0], self.y - other[1])


def cross(a: Point, b: Point) -> float:
    """Return the z component of the cross product of two vectors."""
    return a.x * b.y - a.y * b.x


def dot(a: Point, b: Point) -> float:
    """Return the dot product of two vectors."""
    return a.x * b.x + a.y * b.y


def distance(a: Point, b: Point) -> float:
    """Return the Euclidean distance between two points."""
    return math.hypot(a.x - b.x, a.y - b.y)


def closest_point_on_segment(a: Point, b: Point, p: Point) -> Point:
    """Return the point on the segment a-b that is closest to p."""
    # pylint: disable=invalid-name
    ab = b - a
    t = dot(p - a, ab) / dot(ab, ab)
    t = max(0.0, min(t, 1.0))
    return Point(a.x + ab.x * t, a.y + ab.y * t)
