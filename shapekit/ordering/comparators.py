"""
Orderings for shapes and points.

Each ordering exists in two forms: a key function for ``sorted(key=...)``
and a comparator returning -1, 0 or 1 (usable with
``functools.cmp_to_key``). Natural order needs neither: ``sorted(shapes)``
is area ascending and ``sorted(points)`` is |x| ascending.
"""

from functools import cmp_to_key
from typing import Protocol

import numpy as np

from shapekit.geometry.base import TwoDShape
from shapekit.geometry.points import Point


class HasLeastX(Protocol):
    @property
    def least_x(self) -> float: ...


def _sign(value: float) -> int:
    return (value > 0) - (value < 0)


def least_x_key(item: HasLeastX) -> float:
    """
    Sort key on ``least_x``.

    Meaningful for shapes. Bare points report a least_x of 0, so sorting
    points with this key keeps their existing order; use ``x_key`` to order
    points by their x-value.
    """
    return item.least_x


def x_key(point: Point) -> float:
    """Sort key on a point's signed x-value."""
    return point.x


def area_key(shape: TwoDShape) -> float:
    return shape.area()


def distance_from_origin_key(point: Point) -> float:
    """Euclidean distance from the origin, over all of the point's dimensions."""
    return float(np.linalg.norm(point.as_array()))


def compare_shapes_by_least_x(first: TwoDShape, second: TwoDShape) -> int:
    return _sign(first.least_x - second.least_x)


def compare_points_by_least_x(first: Point, second: Point) -> int:
    """Always 0 for bare points (see ``least_x_key``)."""
    return _sign(first.least_x - second.least_x)


def compare_points_by_x(first: Point, second: Point) -> int:
    return _sign(first.x - second.x)


def compare_by_area(first: TwoDShape, second: TwoDShape) -> int:
    return first.compare_to(second)


def compare_by_distance_from_origin(first: Point, second: Point) -> int:
    return _sign(distance_from_origin_key(first) - distance_from_origin_key(second))


XLocationShapeOrder = cmp_to_key(compare_shapes_by_least_x)
XLocationPointOrder = cmp_to_key(compare_points_by_least_x)
DistanceFromOriginOrder = cmp_to_key(compare_by_distance_from_origin)
