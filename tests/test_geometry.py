"""Tests for huecolor.geometry."""

import math

import pytest

from huecolor.geometry import (
    Point,
    closest_point_on_segment,
    cross,
    distance,
    dot,
)


def test_point_subtraction():
    assert Point(0.5, 0.25) - Point(0.25, 0.5) == Point(0.25, -0.25)
    assert Point(1.0, 1.0) - (0.5, 0.5) == Point(0.5, 0.5)


def test_cross():
    assert cross(Point(1.0, 0.0), Point(0.0, 1.0)) == 1.0
    assert cross(Point(0.0, 1.0), Point(1.0, 0.0)) == -1.0
    assert cross(Point(2.0, 2.0), Point(1.0, 1.0)) == 0.0


def test_dot_and_distance():
    assert dot(Point(1.0, 2.0), Point(3.0, 4.0)) == 11.0
    assert distance(Point(0.0, 0.0), Point(3.0, 4.0)) == 5.0
    assert distance(Point(0.1, 0.2), Point(0.1, 0.2)) == 0.0


@pytest.mark.parametrize(
    "p,expected",
    [
        # Projects onto the middle of the segment.
        (Point(0.5, 1.0), Point(0.5, 0.0)),
        # Before the start of the segment.
        (Point(-1.0, 0.5), Point(0.0, 0.0)),
        # After the end of the segment.
        (Point(3.0, -2.0), Point(1.0, 0.0)),
        # On the segment.
        (Point(0.25, 0.0), Point(0.25, 0.0)),
    ],
)
def test_closest_point_on_segment(p, expected):
    result = closest_point_on_segment(Point(0.0, 0.0), Point(1.0, 0.0), p)
    assert result == pytest.approx(expected)


def test_closest_point_on_diagonal_segment():
    result = closest_point_on_segment(
        Point(1.0, 0.0), Point(0.0, 1.0), Point(1.0, 1.0)
    )
    assert result == pytest.approx((0.5, 0.5))
    assert distance(result, Point(1.0, 1.0)) == pytest.approx(
        math.sqrt(0.5)
    )
