"""Gamut aware color conversions for smart lights."""
# flake8: noqa F401

from .color import (
    HSL,
    RGB,
    ColorSample,
    hsl_to_rgb,
    hsl_to_xyy,
    rgb_to_hsl,
    rgb_to_xy,
    rgb_to_xyy,
    xyy_to_hsl,
    xyy_to_rgb,
)
from .exceptions import DegenerateGamutError, HueColorException
from .gamut import (
    GAMUT_A,
    GAMUT_B,
    GAMUT_C,
    GAMUT_D,
    GAMUTS,
    MODEL_GAMUTS,
    Gamut,
    GamutType,
    gamut_type,
    get_gamut,
)
from .geometry import Point

__version__ = "0.1.0"
