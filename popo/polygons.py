"""Polygon helpers: winding order, signed area and offsetting."""

from __future__ import annotations

import math
from collections.abc import Sequence
from enum import IntEnum

from popo.vectors import Vec2

Polygon = list[Vec2]


class Winding(IntEnum):
    """Winding order of a polygon's vertices."""

    CLOCKWISE = -1
    COLINEAR = 0
    COUNTER_CLOCKWISE = 1


def _ieee_divide(numerator: float, denominator: float) -> float:
    if denominator:
        return numerator / denominator
    if numerator == 0.0 or math.isnan(numerator):
        return math.nan
    return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)


def offset(polygon: Sequence[Vec2], value: float) -> Polygon:
    """Offset a polygon by ``value``.

    The vertices are first put in counter-clockwise order. A positive value
    expands the polygon, a negative value shrinks it.
    """
    points = sort_ccw(polygon)
    count = len(points)
    result: Polygon = []
    for i, current in enumerate(points):
        previous = points[i - 1]
        following = points[(i + 1) % count]

        l1 = (current - previous).normalize()
        l2 = (following - current).normalize()
        n1 = Vec2(l1.y, -l1.x)
        n2 = Vec2(l2.y, -l2.x)

        bisector = (n1 + n2).normalize()
        cosine = min(max((l1 * -1.0).dot(l2), -1.0), 1.0)
        theta = math.acos(cosine)
        offset_length = _ieee_divide(value, math.sin(theta / 2.0))
        result.append(current + bisector * offset_length)
    return result


def sort_ccw(polygon: Sequence[Vec2]) -> Polygon:
    """Return the vertices in counter-clockwise order.

    Polygons with fewer than three vertices, and colinear or already
    counter-clockwise ones, are returned in their given order.
    """
    points = list(polygon)
    if len(points) < 3:
        return points
    if find_winding_order(points) >= Winding.COLINEAR:
        return points
    return points[::-1]


def find_winding_order(polygon: Sequence[Vec2]) -> Winding:
    """Classify the winding order by the sign of the signed area."""
    area = find_signed_area(polygon)
    if math.isnan(area) or area == 0.0:
        positive = math.copysign(1.0, area) > 0
        if not positive:
            return Winding.CLOCKWISE
        return Winding.COUNTER_CLOCKWISE if math.isnan(area) else Winding.COLINEAR
    return Winding.COUNTER_CLOCKWISE if area > 0 else Winding.CLOCKWISE


def find_signed_area(polygon: Sequence[Vec2]) -> float:
    """Return the signed area of the polygon (shoelace formula)."""
    points = list(polygon)
    area = 0.0
    for current, following in zip(points, points[1:] + points[:1]):
        area += current.x * following.y - following.x * current.y
    return area / 2.0