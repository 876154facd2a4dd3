"""
Geometric Shapes Module
=======================

Concrete two-dimensional shapes: Circle, Triangle and Quadrilateral.

Design:
- Each shape owns its geometry exclusively. Incoming points are copied,
  outgoing points are fresh objects, so callers never alias shape state.
- Polygons keep vertices as a read-only Nx2 numpy array in canonical order:
  clockwise, starting at the least-x vertex (lower y on ties).
- Validate-then-commit: a rejected ``set_position`` or ``snap`` leaves the
  shape exactly as it was.
"""

import math
from typing import List, Sequence

import numpy as np

from shapekit.errors import InvalidArgumentError
from shapekit.geometry import primitives
from shapekit.geometry.base import Positionable, TwoDShape
from shapekit.geometry.points import Point, TwoDPoint
from shapekit.logging import LogEvent, create_logger


class Circle(TwoDShape, Positionable):
    """
    Circle given by a center point and a radius.

    A circle with radius <= 0 can exist but is not a member of the valid
    circle predicate (see ``is_member``).

    Example:
        >>> c = Circle(5, 5, 5)
        >>> str(c)
        'Circle[center: (5.00,5.00); radius: 5.0]'
    """

    _logger = create_logger("circle")

    def __init__(self, x: float, y: float, radius: float):
        self._center = TwoDPoint(x, y)
        self._radius = float(radius)
        self._least_x = self._center.x - self._radius

    @classmethod
    def from_points(cls, points: Sequence[Point], radius: float) -> "Circle":
        """Circle centered at the first of ``points``."""
        circle = cls(0.0, 0.0, radius)
        circle.set_position(points)
        return circle

    @property
    def center(self) -> TwoDPoint:
        return self._center.copy()

    @property
    def radius(self) -> float:
        return self._radius

    def set_position(self, points: Sequence[Point]) -> None:
        """
        Center this circle at the first element of ``points``.

        Raises:
            InvalidArgumentError: If ``points`` is empty or its first element
                is not a TwoDPoint. The circle is left unchanged.
        """
        if len(points) == 0 or not isinstance(points[0], TwoDPoint):
            received = type(points[0]).__name__ if len(points) else None
            error = InvalidArgumentError("The list must consist of TwoDPoint instances")
            self._logger.error(
                event=LogEvent.SHAPE_POSITION_REJECTED,
                message=str(error),
                metadata={'received': received},
                exc_info=error,
            )
            raise error

        self._center = points[0].copy()
        self._least_x = self._center.x - self._radius
        self._logger.debug(
            event=LogEvent.SHAPE_POSITION_SET,
            message="Circle center moved",
            metadata={'center': self._center.coordinates(), 'least_x': self._least_x},
        )

    def get_position(self) -> List[TwoDPoint]:
        return [self._center.copy()]

    def num_sides(self) -> float:
        return math.inf

    def is_member(self, centers: Sequence[Point]) -> bool:
        """
        True if and only if ``centers`` is a single TwoDPoint and this
        circle's radius is positive.
        """
        return (
            len(centers) == 1
            and isinstance(centers[0], TwoDPoint)
            and self._radius > 0
        )

    @property
    def least_x(self) -> float:
        return self._least_x

    def area(self) -> float:
        return math.pi * self._radius * self._radius

    def perimeter(self) -> float:
        return 2 * math.pi * self._radius

    def __str__(self) -> str:
        return (
            f"Circle[center: ({self._center.x:.2f},{self._center.y:.2f}); "
            f"radius: {self._radius}]"
        )

    __repr__ = __str__


class Polygon(TwoDShape, Positionable):
    """
    Shared machinery for shapes with a fixed number of vertices.

    Subclasses set ``vertex_count`` and implement ``area``.
    """

    vertex_count = 0

    def __init__(self, vertices: Sequence[Point]):
        self._vertices = np.zeros((0, 2), dtype=float)
        self._least_x = 0.0
        self.set_position(vertices)

    def _reject(self, message: str, metadata: dict) -> InvalidArgumentError:
        error = InvalidArgumentError(message)
        self._logger.error(
            event=LogEvent.SHAPE_POSITION_REJECTED,
            message=message,
            metadata=metadata,
            exc_info=error,
        )
        return error

    def _canonical(self, points: Sequence[Point]) -> np.ndarray:
        """First ``vertex_count`` points as a canonical vertex array."""
        vertices = primitives.to_array(points[:self.vertex_count])
        return vertices[primitives.canonical_order(vertices)]

    def _commit(self, vertices: np.ndarray) -> None:
        vertices.flags.writeable = False
        self._vertices = vertices
        self._least_x = float(vertices[0, 0])

    def set_position(self, points: Sequence[Point]) -> None:
        """
        Position this shape on the first ``vertex_count`` points.

        Further points are ignored. The vertices are stored clockwise,
        starting at the least-x vertex (lower y on ties).

        Raises:
            InvalidArgumentError: If too few points are given, any of them is
                not a TwoDPoint, or they are degenerate. The shape is left
                unchanged.
        """
        name = type(self).__name__
        if len(points) < self.vertex_count:
            raise self._reject(
                f"A {name} needs {self.vertex_count} points",
                {'received': len(points)},
            )

        kinds = [type(p).__name__ for p in points[:self.vertex_count]]
        if not all(isinstance(p, TwoDPoint) for p in points[:self.vertex_count]):
            raise self._reject(
                "The list must consist of TwoDPoint instances",
                {'received': kinds},
            )

        candidate = self._canonical(points)
        if primitives.is_degenerate(candidate):
            raise self._reject(
                f"The points do not form a valid {name}",
                {'vertices': candidate.tolist()},
            )

        self._commit(candidate)
        self._logger.debug(
            event=LogEvent.SHAPE_POSITION_SET,
            message=f"{name} vertices canonicalized",
            metadata={'vertices': candidate.tolist(), 'least_x': self._least_x},
        )

    def get_position(self) -> List[TwoDPoint]:
        return [TwoDPoint(x, y) for x, y in self._vertices.tolist()]

    def num_sides(self) -> int:
        return self.vertex_count

    def is_member(self, vertices: Sequence[Point]) -> bool:
        """
        Whether the first ``vertex_count`` points form a valid shape.

        Invalid when points are missing or not TwoDPoints, when all share
        one x or one y value, or when any corner is collinear.
        """
        if len(vertices) < self.vertex_count:
            return False
        if not all(isinstance(p, TwoDPoint) for p in vertices[:self.vertex_count]):
            return False
        return not primitives.is_degenerate(self._canonical(vertices))

    @property
    def least_x(self) -> float:
        return self._least_x

    def perimeter(self) -> float:
        return float(np.sum(primitives.edge_lengths(self._vertices)))

    def snap(self) -> bool:
        """
        Snap every vertex to its nearest integer-valued coordinates.

        For example a corner at (0.8, -0.1) moves to (1, 0). If the snapped
        vertices would be degenerate the shape is left unchanged.

        Returns:
            True if the snapped vertices were committed
        """
        rounded = primitives.round_half_up(self._vertices)
        candidate = rounded[primitives.canonical_order(rounded)]
        if primitives.is_degenerate(candidate):
            self._logger.debug(
                event=LogEvent.SHAPE_SNAP_SKIPPED,
                message=f"Snapped {type(self).__name__} would be degenerate",
                metadata={'vertices': candidate.tolist()},
            )
            return False

        self._commit(candidate)
        self._logger.debug(
            event=LogEvent.SHAPE_SNAP_COMMITTED,
            message=f"{type(self).__name__} snapped to grid",
            metadata={'vertices': candidate.tolist(), 'least_x': self._least_x},
        )
        return True

    def __str__(self) -> str:
        corners = ", ".join(f"({x:.2f},{y:.2f})" for x, y in self._vertices.tolist())
        return f"{type(self).__name__}[{corners}]"

    __repr__ = __str__


class Triangle(Polygon):
    """
    Triangle from the first three of a list of points.

    Example:
        >>> t = Triangle(TwoDPoint.of_doubles([0, 0, 0, 3, 2, 0]))
        >>> round(t.area(), 6)
        3.0
    """

    vertex_count = 3
    _logger = create_logger("triangle")

    def area(self) -> float:
        """Heron's formula over the three side lengths."""
        a, b, c = self._vertices
        return primitives.heron_area(a, b, c)


class Quadrilateral(Polygon):
    """
    Quadrilateral from the first four of a list of points.

    The area is the sum of the two triangles on either side of an interior
    diagonal: 0-2 when it separates vertices 1 and 3, otherwise 1-3.
    """

    vertex_count = 4
    _logger = create_logger("quadrilateral")

    def area(self) -> float:
        return primitives.quadrilateral_area(self._vertices)
