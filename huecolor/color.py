"""Conversions between RGB, HSL and the xy + brightness used by lights.

The RGB <-> XYZ conversion uses the sRGB transfer function together with
the Wide RGB D65 matrices recommended for Hue lights:
https://github.com/PhilipsHue/PhilipsHueSDK-iOS-OSX/blob/master/ApplicationDesignNotes/RGB%20to%20xy%20Color%20conversion.md

Chromaticities are always limited to the gamut of the light, in both
directions.
"""
from __future__ import annotations

import logging
import math
from typing import NamedTuple, Sequence, Tuple

from .gamut import Gamut
from .geometry import Point

LOG = logging.getLogger(__name__)

Matrix = Tuple[
    Tuple[float, float, float],
    Tuple[float, float, float],
    Tuple[float, float, float],
]

# Linear Wide RGB D65 -> CIE XYZ.
RGB_TO_XYZ: Matrix = (
    (0.664511, 0.154324, 0.162028),
    (0.283881, 0.668433, 0.047685),
    (0.000088, 0.072310, 0.986039),
)

# CIE XYZ -> linear Wide RGB D65.
XYZ_TO_RGB: Matrix = (
    (1.656492, -0.354851, -0.255038),
    (-0.707196, 1.655397, 0.036152),
    (0.051713, -0.121364, 1.011530),
)

MAX_VALUE = 255


class ColorSample(NamedTuple):
    """Color as it is sent to or read from a light."""

    x: float
    y: float
    brightness: int


class RGB(NamedTuple):
    """24-bit RGB color."""

    r: int
    g: int
    b: int


class HSL(NamedTuple):
    """Hue in [0, 360), saturation and lightness in [0, 1]."""

    h: float
    s: float
    l: float  # noqa: E741


def limit(value: int, min_val: int, max_val: int) -> int:
    """Return a value clipped to the range [min_val, max_val]."""
    return max(min_val, min(value, max_val))


def srgb_to_linear(value: float) -> float:
    """Remove the sRGB gamma from a channel in [0, 1]."""
    if value > 0.04045:
        return ((value + 0.055) / 1.055) ** 2.4
    return value / 12.92


def linear_to_srgb(value: float) -> float:
    """Apply the sRGB gamma to a linear channel."""
    if value <= 0.0031308:
        return value * 12.92
    return 1.055 * value ** (1.0 / 2.4) - 0.055


def _transform(
    matrix: Matrix, vector: Sequence[float]
) -> tuple[float, float, float]:
    first, second, third = (
        sum(coefficient * value for coefficient, value in zip(row, vector))
        for row in matrix
    )
    return first, second, third


def to_byte(value: float) -> int:
    """Scale a [0, 1] value to an integer in [0, 255].

    Rounding is ceil(value * 255 - 0.5), which rounds halves down.
    """
    return limit(math.ceil(value * MAX_VALUE - 0.5), 0, MAX_VALUE)


def rgb_to_xyy(gamut: Gamut, r: int, g: int, b: int) -> ColorSample:
    """Convert a 24-bit RGB color to xy chromaticity and brightness."""
    # pylint: disable=invalid-name
    linear = [
        srgb_to_linear(limit(int(channel), 0, MAX_VALUE) / MAX_VALUE)
        for channel in (r, g, b)
    ]
    X, Y, Z = _transform(RGB_TO_XYZ, linear)

    total = X + Y + Z
    if total == 0.0:
        x, y = 0.0, 0.0
    else:
        x, y = X / total, Y / total

    x, y = gamut.limit((x, y))
    return ColorSample(x, y, to_byte(Y))


def rgb_to_xy(gamut: Gamut, r: int, g: int, b: int) -> Point:
    """Return only the (gamut limited) chromaticity of an RGB color."""
    sample = rgb_to_xyy(gamut, r, g, b)
    return Point(sample.x, sample.y)


def xyy_to_rgb(gamut: Gamut, x: float, y: float, brightness: int) -> RGB:
    """Convert xy chromaticity and brightness to a 24-bit RGB color.

    Raises ValueError when x or y is not a finite number.
    """
    # pylint: disable=invalid-name
    if not (math.isfinite(x) and math.isfinite(y)):
        raise ValueError(f"Invalid chromaticity: ({x!r}, {y!r})")

    x, y = gamut.limit((x, y))
    Y = limit(int(brightness), 0, MAX_VALUE) / MAX_VALUE
    scale = Y / y if y > 0.0 else math.inf
    X = scale * x
    Z = scale * (1.0 - x - y)

    linear = _transform(XYZ_TO_RGB, (X, Y, Z))
    if not all(math.isfinite(c) for c in linear):
        LOG.debug("Chromaticity (%s, %s) has no luminance, using black", x, y)
        return RGB(0, 0, 0)

    channels = [linear_to_srgb(c) for c in linear]

    # Scale down uniformly to keep the hue when a channel is out of range.
    maximum = max(channels)
    if maximum > 1.0:
        channels = [c / maximum for c in channels]

    return RGB(*(to_byte(c) for c in channels))


def rgb_to_hsl(r: int, g: int, b: int) -> HSL:
    """Convert a 24-bit RGB color to HSL."""
    # pylint: disable=invalid-name
    rf, gf, bf = (limit(int(c), 0, MAX_VALUE) / MAX_VALUE for c in (r, g, b))
    maximum = max(rf, gf, bf)
    minimum = min(rf, gf, bf)
    lightness = (maximum + minimum) / 2.0

    if maximum == minimum:
        return HSL(0.0, 0.0, lightness)

    d = maximum - minimum
    if lightness > 0.5:
        saturation = d / (2.0 - maximum - minimum)
    else:
        saturation = d / (maximum + minimum)

    if maximum == rf:
        h = (gf - bf) / d
        if gf < bf:
            h += 6.0
    elif maximum == gf:
        h = (bf - rf) / d + 2.0
    else:
        h = (rf - gf) / d + 4.0

    return HSL(h * 60.0, saturation, lightness)


def _hue_to_channel(p: float, q: float, t: float) -> float:
    # pylint: disable=invalid-name
    t %= 1.0
    if t < 1.0 / 6.0:
        return p + (q - p) * 6.0 * t
    if t < 0.5:
        return q
    if t < 2.0 / 3.0:
        return p + (q - p) * (2.0 / 3.0 - t) * 6.0
    return p


def hsl_to_rgb(h: float, s: float, l: float) -> RGB:  # noqa: E741
    """Convert HSL to a 24-bit RGB color.

    The hue wraps around at 360, saturation and lightness are clipped to
    [0, 1].
    """
    # pylint: disable=invalid-name
    hue = (h % 360.0) / 360.0
    saturation = max(0.0, min(s, 1.0))
    lightness = max(0.0, min(l, 1.0))

    if saturation == 0.0:
        gray = to_byte(lightness)
        return RGB(gray, gray, gray)

    if lightness < 0.5:
        q = lightness * (1.0 + saturation)
    else:
        q = lightness + saturation - lightness * saturation
    p = 2.0 * lightness - q

    return RGB(
        to_byte(_hue_to_channel(p, q, hue + 1.0 / 3.0)),
        to_byte(_hue_to_channel(p, q, hue)),
        to_byte(_hue_to_channel(p, q, hue - 1.0 / 3.0)),
    )


def xyy_to_hsl(gamut: Gamut, x: float, y: float, brightness: int) -> HSL:
    """Convert xy chromaticity and brightness to HSL."""
    return rgb_to_hsl(*xyy_to_rgb(gamut, x, y, brightness))


def hsl_to_xyy(
    gamut: Gamut, h: float, s: float, l: float  # noqa: E741
) -> ColorSample:
    """Convert HSL to xy chromaticity and brightness."""
    return rgb_to_xyy(gamut, *hsl_to_rgb(h, s, l))
