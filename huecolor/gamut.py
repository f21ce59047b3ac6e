"""Color gamuts of the supported light models.

A gamut is the triangle in the CIE xy chromaticity plane spanned by the
red, green and blue primaries of a light. Colors outside of the triangle
cannot be reproduced by the light, so they are moved to the closest point
on the triangle before being sent to (or after being read from) a bulb.
"""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from enum import Enum

from .exceptions import DegenerateGamutError
from .geometry import Point, closest_point_on_segment, cross, distance

LOG = logging.getLogger(__name__)


@dataclass(frozen=True)
class Gamut:
    """Triangle of chromaticities reachable by a class of lights."""

    red: Point
    green: Point
    blue: Point
    name: str = field(default="", compare=False)

    def __post_init__(self) -> None:
        """Validate that the primaries form a proper triangle."""
        for attr in ("red", "green", "blue"):
            object.__setattr__(self, attr, Point(*getattr(self, attr)))
        area = cross(self.green - self.red, self.blue - self.red)
        if not math.isfinite(area) or area == 0.0:
            raise DegenerateGamutError(
                f"Gamut {self.name or '(unnamed)'} vertices do not form a "
                "triangle: "
                f"{self.red}, {self.green}, {self.blue}"
            )

    @property
    def vertices(self) -> tuple[Point, Point, Point]:
        """Return the (red, green, blue) vertices."""
        return self.red, self.green, self.blue

    def contains(self, point: tuple[float, float]) -> bool:
        """Return True if point lies inside (or on the edge of) the gamut."""
        # pylint: disable=invalid-name
        v1 = self.green - self.red
        v2 = self.blue - self.red
        q = Point(*point) - self.red
        denominator = cross(v1, v2)
        s = cross(q, v2) / denominator
        t = cross(v1, q) / denominator
        return s >= 0.0 and t >= 0.0 and s + t <= 1.0

    def closest_point(self, point: tuple[float, float]) -> Point:
        """Return the point on the edge of the gamut closest to point.

        Edges are tried in the order red-green, blue-red, green-blue and the
        first one at the minimum distance wins.
        """
        point = Point(*point)
        candidates = [
            closest_point_on_segment(self.red, self.green, point),
            closest_point_on_segment(self.blue, self.red, point),
            closest_point_on_segment(self.green, self.blue, point),
        ]
        distances = [distance(point, c) for c in candidates]
        return candidates[distances.index(min(distances))]

    def limit(self, point: tuple[float, float]) -> Point:
        """Return point if it is reachable, otherwise the closest one."""
        point = Point(*point)
        if self.contains(point):
            return point
        closest = self.closest_point(point)
        LOG.debug(
            "%s is outside of gamut %s, using %s", point, self.name, closest
        )
        return closest


class GamutType(Enum):
    """Named gamut variants."""

    A = "A"
    B = "B"
    C = "C"
    D = "D"


GAMUTS: dict[GamutType, Gamut] = {
    # LivingColors Iris, Bloom, Aura, LightStrips
    GamutType.A: Gamut(
        Point(0.704, 0.296), Point(0.2151, 0.7106), Point(0.138, 0.08), "A"
    ),
    # Original Hue bulbs
    GamutType.B: Gamut(
        Point(0.675, 0.322), Point(0.4091, 0.518), Point(0.167, 0.04), "B"
    ),
    # Hue Gen 3, Hue Go, LightStrips plus, BR30
    GamutType.C: Gamut(
        Point(0.692, 0.308), Point(0.17, 0.7), Point(0.153, 0.048), "C"
    ),
    # Default for lights without a known gamut
    GamutType.D: Gamut(
        Point(1.0, 0.0), Point(0.0, 1.0), Point(0.0, 0.0), "D"
    ),
}

GAMUT_A = GAMUTS[GamutType.A]
GAMUT_B = GAMUTS[GamutType.B]
GAMUT_C = GAMUTS[GamutType.C]
GAMUT_D = GAMUTS[GamutType.D]
DEFAULT_GAMUT_TYPE = GamutType.D

MODEL_GAMUTS: dict[str, GamutType] = dict(
    (model, gamut_type)
    for models, gamut_type in (
        (
            [
                "LST001",
                "LLC010",
                "LLC011",
                "LLC012",
                "LLC006",
                "LLC007",
                "LLC013",
            ],
            GamutType.A,
        ),
        (["LCT001", "LCT007", "LCT002", "LCT003", "LLM001"], GamutType.B),
        (["LCT010", "LCT014", "LCT011", "LLC020", "LST002"], GamutType.C),
    )
    for model in models
)


def gamut_type(model: str) -> GamutType:
    """Return the gamut variant used by a light model."""
    try:
        return MODEL_GAMUTS[model]
    except KeyError:
        LOG.debug("No gamut known for model %r, using default", model)
        return DEFAULT_GAMUT_TYPE


def get_gamut(model: str) -> Gamut:
    """Return the color gamut for a light model.

    Unknown models get the default gamut, which covers the whole
    (0, 0), (1, 0), (0, 1) triangle.
    """
    return GAMUTS[gamut_type(model)]
