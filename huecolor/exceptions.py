"""Exceptions raised by huecolor."""


class HueColorException(Exception):
    """Base exception class for huecolor exceptions."""


class DegenerateGamutError(HueColorException, ValueError):
    """Raised when the vertices of a gamut do not form a triangle."""
