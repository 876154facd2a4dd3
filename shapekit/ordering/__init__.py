"""
Ordering Layer
==============

Bounded Context: Sorting and collecting shapes and points.

Responsibilities:
- Comparators and sort keys (least-x, x, area, distance from origin)
- Variance-safe copying between containers
- Picking the least shape by natural order
"""

from shapekit.ordering.comparators import (
    least_x_key,
    x_key,
    area_key,
    distance_from_origin_key,
    compare_shapes_by_least_x,
    compare_points_by_least_x,
    compare_points_by_x,
    compare_by_area,
    compare_by_distance_from_origin,
    XLocationShapeOrder,
    XLocationPointOrder,
    DistanceFromOriginOrder,
)
from shapekit.ordering.containers import copy, least

__all__ = [
    "least_x_key",
    "x_key",
    "area_key",
    "distance_from_origin_key",
    "compare_shapes_by_least_x",
    "compare_points_by_least_x",
    "compare_points_by_x",
    "compare_by_area",
    "compare_by_distance_from_origin",
    "XLocationShapeOrder",
    "XLocationPointOrder",
    "DistanceFromOriginOrder",
    "copy",
    "least",
]
