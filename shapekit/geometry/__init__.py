"""
Geometry Layer
==============

Bounded Context: Points, shapes and the planar math behind them.

Responsibilities:
- Point value types (TwoDPoint, ThreeDPoint)
- Shape capabilities (Positionable, TwoDShape)
- Concrete shapes (Circle, Triangle, Quadrilateral)
- Canonical vertex order, degeneracy checks, snapping

Design Philosophy:
- Validate before mutating
- Exclusive ownership of vertex storage
- Pure numpy helpers in ``primitives``
"""

from shapekit.geometry.points import Point, TwoDPoint, ThreeDPoint
from shapekit.geometry.base import Positionable, TwoDShape
from shapekit.geometry.shapes import Circle, Polygon, Triangle, Quadrilateral

__all__ = [
    "Point",
    "TwoDPoint",
    "ThreeDPoint",
    "Positionable",
    "TwoDShape",
    "Circle",
    "Polygon",
    "Triangle",
    "Quadrilateral",
]
