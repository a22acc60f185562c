# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
2D/3D geometry: points, circles, triangles, planes
"""

import math
from dataclasses import dataclass

from .errors import DegenerateEquationError
from .trig import PI


@dataclass(frozen=True)
class Point2D:
    x: float
    y: float


@dataclass(frozen=True)
class Point3D:
    x: float
    y: float
    z: float


@dataclass(frozen=True)
class Circle:
    center: Point2D
    radius: float


@dataclass(frozen=True)
class Plane:
    """The plane normal . p + d = 0."""

    normal: Point3D
    d: float


def distance2d(a: Point2D, b: Point2D) -> float:
    dx = a.x - b.x
    dy = a.y - b.y
    return math.sqrt(dx * dx + dy * dy)


def distance3d(a: Point3D, b: Point3D) -> float:
    dx = a.x - b.x
    dy = a.y - b.y
    dz = a.z - b.z
    return math.sqrt(dx * dx + dy * dy + dz * dz)


def circle_area(c: Circle) -> float:
    return PI * c.radius * c.radius


def circle_circumference(c: Circle) -> float:
    return 2.0 * PI * c.radius


def point_in_circle(p: Point2D, c: Circle) -> bool:
    """True if p lies inside the circle or on its boundary."""
    return distance2d(p, c.center) <= c.radius


def triangle_area(a: Point2D, b: Point2D, c: Point2D) -> float:
    """
    Unsigned area by the shoelace formula; collinear points give 0.0.
    """
    return abs(0.5 * (a.x * (b.y - c.y) + b.x * (c.y - a.y) + c.x * (a.y - b.y)))


def triangle_perimeter(a: Point2D, b: Point2D, c: Point2D) -> float:
    return distance2d(a, b) + distance2d(b, c) + distance2d(c, a)


def translate2d(p: Point2D, dx: float, dy: float) -> Point2D:
    return Point2D(x=p.x + dx, y=p.y + dy)


def scale2d(p: Point2D, sx: float, sy: float) -> Point2D:
    return Point2D(x=p.x * sx, y=p.y * sy)


def rotate2d(p: Point2D, angle_rad: float) -> Point2D:
    """Rotate p counter-clockwise about the origin."""
    cos_a = math.cos(angle_rad)
    sin_a = math.sin(angle_rad)
    return Point2D(
        x=p.x * cos_a - p.y * sin_a,
        y=p.x * sin_a + p.y * cos_a,
    )


def point_plane_distance(p: Point3D, plane: Plane) -> float:
    """
    Shortest distance |n . p + d| / |n| from p to the plane.
    """
    n = plane.normal
    denom = math.sqrt(n.x * n.x + n.y * n.y + n.z * n.z)
    if denom == 0:
        raise DegenerateEquationError("plane normal has zero length")
    return abs(n.x * p.x + n.y * p.y + n.z * p.z + plane.d) / denom
