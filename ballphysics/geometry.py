"""Rotation matrices and line-section helpers."""

from __future__ import annotations

import math
from dataclasses import dataclass

from ballphysics.matrix import Matrix2D
from ballphysics.vector import Vec2, length

PI = 3.1415


@dataclass(frozen=True)
class Line:
    """A section between two points."""

    point1: Vec2
    point2: Vec2


def rotate(angle: float) -> Matrix2D:
    """Return the counter-clockwise rotation matrix for ``angle`` radians."""
    return Matrix2D(
        math.cos(angle), -math.sin(angle),
        math.sin(angle), math.cos(angle),
    )


def check_intersect_sections(section1: Line, section2: Line) -> bool:
    """Tell whether two sections intersect.

    Sections that are vertical, or parallel to each other, are reported
    as not intersecting.
    """
    ax, ay = section1.point1
    bx, by = section1.point2
    cx, cy = section2.point1
    dx, dy = section2.point2

    try:
        slope1 = (by - ay) / (bx - ax)
        slope2 = (dy - cy) / (dx - cx)
        x = (ax * slope1 - cx * slope2 + cy - ay) / (slope1 - slope2)
        t1 = (x - ax) / (bx - ax)
        t2 = (x - cx) / (dx - cx)
    except ZeroDivisionError:
        return False

    return 0 <= t1 <= 1 and 0 <= t2 <= 1


def nearest_point(point: Vec2, line: Line) -> Vec2:
    """Find the point on ``line`` nearest to ``point``.

    Raises ValueError for lines parallel to either axis.
    """
    ax, ay = line.point1
    bx, by = line.point2
    ux, uy = bx - ax, by - ay
    if ux == 0 or uy == 0:
        raise ValueError("line must not be parallel to an axis")

    ratio = ux / uy
    x = (ratio * ax + ratio * point.x + point.y - ay) / (2 * ratio)
    y = ratio * x - ratio * ax + ay
    return Vec2(x, y)


def distance_from_point_to_line(point: Vec2, line: Line) -> float:
    """Return the distance from ``point`` to its nearest point on ``line``."""
    return length(point - nearest_point(point, line))