"""
Shape Capabilities
==================

Abstract contracts shared by every two-dimensional shape.

- Positionable: get/set the defining point set of a shape
- TwoDShape: side count, membership, least-x, area/perimeter, natural order

Natural order of shapes is area ascending. Equality is left as identity:
two distinct shapes of equal area compare neither less nor greater.
"""

from abc import ABC, abstractmethod
from typing import List, Sequence

from shapekit.geometry.points import Point, TwoDPoint


class Positionable(ABC):
    """Something whose location is given by a list of points."""

    @abstractmethod
    def set_position(self, points: Sequence[Point]) -> None:
        """
        Replace the defining points.

        Raises:
            InvalidArgumentError: If the points cannot position this object.
                The previous position is kept.
        """

    @abstractmethod
    def get_position(self) -> List[TwoDPoint]:
        """Defining points, clockwise from the least-x (then least-y) vertex."""


class TwoDShape(ABC):
    """A closed shape in the plane."""

    @abstractmethod
    def num_sides(self) -> float:
        """Number of sides (``math.inf`` for a circle)."""

    @abstractmethod
    def is_member(self, points: Sequence[Point]) -> bool:
        """Whether ``points`` would form a valid instance of this shape kind."""

    @property
    @abstractmethod
    def least_x(self) -> float:
        """Smallest x-value covered by the shape, cached on positioning."""

    def get_least_x(self) -> float:
        return self.least_x

    @abstractmethod
    def area(self) -> float:
        pass

    @abstractmethod
    def perimeter(self) -> float:
        pass

    def compare_to(self, other: "TwoDShape") -> int:
        """Compare by area: -1, 0 or 1."""
        mine, theirs = self.area(), other.area()
        if mine < theirs:
            return -1
        if mine > theirs:
            return 1
        return 0

    def __lt__(self, other: "TwoDShape") -> bool:
        if not isinstance(other, TwoDShape):
            return NotImplemented
        return self.compare_to(other) < 0

    def __le__(self, other: "TwoDShape") -> bool:
        if not isinstance(other, TwoDShape):
            return NotImplemented
        return self.compare_to(other) <= 0

    def __gt__(self, other: "TwoDShape") -> bool:
        if not isinstance(other, TwoDShape):
            return NotImplemented
        return self.compare_to(other) > 0

    def __ge__(self, other: "TwoDShape") -> bool:
        if not isinstance(other, TwoDShape):
            return NotImplemented
        return self.compare_to(other) >= 0
