"""
Point Types
===========

Value types for locations in two- and three-dimensional space.

Design:
- ``Point`` is the shared capability (coordinates + ordering)
- Mutable dataclasses: setters change coordinates in place
- Natural order is by magnitude of x only (|x| ascending); y and z never
  take part. Use ``shapekit.ordering.distance_from_origin_key`` for a full
  Euclidean ordering.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Sequence, Tuple

import numpy as np

from shapekit.errors import InvalidArgumentError
from shapekit.logging import LogEvent, create_logger


logger = create_logger("points")


class Point(ABC):
    """
    A single point in a geometric space.

    Concrete points provide an ``x`` attribute and ``coordinates()``.
    """

    x: float

    @abstractmethod
    def coordinates(self) -> Tuple[float, ...]:
        """Return the coordinates of this point, one entry per dimension."""

    def get_x(self) -> float:
        return self.x

    @property
    def least_x(self) -> float:
        """Shape-ordering hook. Always 0 for a bare point."""
        return 0.0

    def get_least_x(self) -> float:
        return self.least_x

    def compare_to(self, other: "Point") -> int:
        """Compare by absolute x-value: -1, 0 or 1."""
        mine, theirs = abs(self.x), abs(other.x)
        if mine < theirs:
            return -1
        if mine > theirs:
            return 1
        return 0

    def as_array(self) -> np.ndarray:
        """Coordinates as a float numpy vector."""
        return np.asarray(self.coordinates(), dtype=float)

    def __lt__(self, other: "Point") -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return self.compare_to(other) < 0

    def __le__(self, other: "Point") -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return self.compare_to(other) <= 0

    def __gt__(self, other: "Point") -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return self.compare_to(other) > 0

    def __ge__(self, other: "Point") -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return self.compare_to(other) >= 0


@dataclass
class TwoDPoint(Point):
    """
    A point in the two-dimensional Euclidean plane.

    Attributes:
        x: Horizontal coordinate
        y: Vertical coordinate

    Example:
        >>> TwoDPoint(3, -4).coordinates()
        (3.0, -4.0)
    """

    x: float
    y: float

    def __post_init__(self):
        self.x = float(self.x)
        self.y = float(self.y)

    def coordinates(self) -> Tuple[float, float]:
        return self.x, self.y

    def get_y(self) -> float:
        return self.y

    def set_x(self, x: float) -> None:
        self.x = float(x)

    def set_y(self, y: float) -> None:
        self.y = float(y)

    def copy(self) -> "TwoDPoint":
        return TwoDPoint(self.x, self.y)

    @classmethod
    def of_doubles(cls, coordinates: Sequence[float]) -> List["TwoDPoint"]:
        """
        Build points from a flat coordinate sequence by consecutive pairing.

        Args:
            coordinates: x0, y0, x1, y1, ... (even length)

        Returns:
            One TwoDPoint per pair, in input order

        Raises:
            InvalidArgumentError: If the sequence has an odd length. No
                partially built list is returned.

        Example:
            >>> TwoDPoint.of_doubles([0, 0, 2, 1])
            [TwoDPoint(x=0.0, y=0.0), TwoDPoint(x=2.0, y=1.0)]
        """
        values = list(coordinates)
        if len(values) % 2 != 0:
            error = InvalidArgumentError(
                f"The array of doubles must have an even length, got {len(values)}"
            )
            logger.error(
                event=LogEvent.POINT_FACTORY_REJECTED,
                message="The array of doubles must have an even length",
                metadata={'length': len(values)},
                exc_info=error,
            )
            raise error

        points = [cls(values[i], values[i + 1]) for i in range(0, len(values), 2)]
        logger.debug(
            event=LogEvent.POINT_FACTORY_BUILT,
            message=f"Built {len(points)} points",
            metadata={'count': len(points)},
        )
        return points


@dataclass
class ThreeDPoint(Point):
    """
    A point in three-dimensional space.

    Ordering follows the same |x|-only contract as TwoDPoint.
    """

    x: float
    y: float
    z: float

    def __post_init__(self):
        self.x = float(self.x)
        self.y = float(self.y)
        self.z = float(self.z)

    def coordinates(self) -> Tuple[float, float, float]:
        return self.x, self.y, self.z

    def get_y(self) -> float:
        return self.y

    def get_z(self) -> float:
        return self.z

    def set_x(self, x: float) -> None:
        self.x = float(x)

    def set_y(self, y: float) -> None:
        self.y = float(y)

    def set_z(self, z: float) -> None:
        self.z = float(z)
