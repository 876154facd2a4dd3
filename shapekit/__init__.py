"""
shapekit
========

Bounded Context: Planar shape value types and their orderings.

Design Philosophy:
- Separation of Concerns: geometry, ordering, config and logging separated
- Validate before mutating: a rejected update never changes a shape
- Exclusive ownership: shapes copy points in and out

Architecture:

    shapekit/
    ├── geometry/          # Points, capabilities, shapes
    │   ├── points.py      # Point, TwoDPoint, ThreeDPoint
    │   ├── base.py        # Positionable, TwoDShape
    │   ├── primitives.py  # numpy helpers (orientation, canonical order, Heron)
    │   └── shapes.py      # Circle, Triangle, Quadrilateral
    │
    ├── ordering/          # Comparators, sort keys, copy()
    ├── logging/           # Structured JSON logging
    ├── config.py          # YAML shape catalogs
    └── errors.py          # InvalidArgumentError

Usage:

    from shapekit import Circle, Triangle, Quadrilateral, TwoDPoint
    from shapekit.ordering import least_x_key, copy

    shapes = [
        Circle(5, 5, 5),
        Triangle(TwoDPoint.of_doubles([0, 0, 0, 3, 2, 0])),
        Quadrilateral(TwoDPoint.of_doubles([0, 0, 0, 2, 4, 2, 4, 0])),
    ]

    shapes.sort(key=least_x_key)   # by least x-value
    shapes.sort()                  # by area

    print(shapes[0])               # Triangle[(0.00,0.00), (0.00,3.00), (2.00,0.00)]
"""

from shapekit.errors import InvalidArgumentError

# Geometry Layer
from shapekit.geometry import (
    Point,
    TwoDPoint,
    ThreeDPoint,
    Positionable,
    TwoDShape,
    Circle,
    Triangle,
    Quadrilateral,
)

# Configuration
from shapekit.config import CatalogConfig, ShapeConfig, LoggingConfig

__all__ = [
    "InvalidArgumentError",
    # Geometry
    "Point",
    "TwoDPoint",
    "ThreeDPoint",
    "Positionable",
    "TwoDShape",
    "Circle",
    "Triangle",
    "Quadrilateral",
    # Configuration
    "CatalogConfig",
    "ShapeConfig",
    "LoggingConfig",
]

__version__ = "1.0.0"
