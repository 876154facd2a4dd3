"""
Configuration schema for shape catalogs.

A catalog is a YAML file naming the shapes to build plus the logging level
for the library. Every section is a frozen dataclass validated at
construction, so a loaded catalog is always buildable.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import yaml

from shapekit.errors import InvalidArgumentError
from shapekit.geometry import Circle, Quadrilateral, Triangle, TwoDPoint, TwoDShape
from shapekit.logging import LogEvent, create_logger
from shapekit.logging.structured import ROOT_LOGGER_NAME


logger = create_logger("config")

# shape_type -> minimum number of coordinate pairs
MIN_POINTS = {
    "circle": 1,
    "triangle": 3,
    "quadrilateral": 4,
}


def _invalid(message: str, metadata: Optional[Dict[str, Any]] = None) -> InvalidArgumentError:
    error = InvalidArgumentError(message)
    logger.error(
        event=LogEvent.CONFIG_INVALID,
        message=message,
        metadata=metadata,
        exc_info=error,
    )
    return error


@dataclass(frozen=True)
class ShapeConfig:
    """One catalog entry (circle, triangle or quadrilateral)."""

    shape_id: str
    shape_type: str  # "circle", "triangle" or "quadrilateral"
    coordinates: List[Tuple[float, float]]
    radius: Optional[float] = None  # circles only
    enabled: bool = True

    def __post_init__(self):
        """Validate shape configuration."""
        if not self.shape_id:
            raise _invalid("shape_id cannot be empty")

        if self.shape_type not in MIN_POINTS:
            raise _invalid(
                f"Invalid shape_type: {self.shape_type}. "
                f"Must be one of {sorted(MIN_POINTS)}",
                {'shape_id': self.shape_id},
            )

        for coord in self.coordinates:
            if len(coord) != 2:
                raise _invalid(
                    f"Shape '{self.shape_id}' coordinates must be [x, y] pairs, got {list(coord)}",
                    {'shape_id': self.shape_id},
                )

        needed = MIN_POINTS[self.shape_type]
        if self.shape_type == "circle":
            if len(self.coordinates) != 1:
                raise _invalid(
                    f"Circle '{self.shape_id}' must have exactly 1 center point, "
                    f"got {len(self.coordinates)}",
                    {'shape_id': self.shape_id},
                )
            if self.radius is None:
                raise _invalid(
                    f"Circle '{self.shape_id}' requires a radius",
                    {'shape_id': self.shape_id},
                )
        else:
            if len(self.coordinates) < needed:
                raise _invalid(
                    f"{self.shape_type.capitalize()} '{self.shape_id}' must have at least "
                    f"{needed} points, got {len(self.coordinates)}",
                    {'shape_id': self.shape_id},
                )
            if self.radius is not None:
                raise _invalid(
                    f"Only circles take a radius, '{self.shape_id}' is a {self.shape_type}",
                    {'shape_id': self.shape_id},
                )

    def points(self) -> List[TwoDPoint]:
        return [TwoDPoint(x, y) for x, y in self.coordinates]

    def build(self) -> TwoDShape:
        """
        Construct the configured shape.

        Raises:
            InvalidArgumentError: If the polygon vertices are degenerate
        """
        if self.shape_type == "circle":
            return Circle.from_points(self.points(), self.radius)
        if self.shape_type == "triangle":
            return Triangle(self.points())
        return Quadrilateral(self.points())


@dataclass(frozen=True)
class LoggingConfig:
    """Logging level for every ``shapekit.*`` logger."""

    level: str = "INFO"

    def __post_init__(self):
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if self.level not in valid_levels:
            raise _invalid(
                f"Invalid logging level: {self.level}. "
                f"Must be one of {sorted(valid_levels)}"
            )

    def apply(self) -> None:
        logging.getLogger(ROOT_LOGGER_NAME).setLevel(getattr(logging, self.level))


@dataclass(frozen=True)
class CatalogConfig:
    """
    Main configuration: the shapes to build and how to log.

    Immutable after construction (frozen dataclass).
    """

    shapes: List[ShapeConfig] = field(default_factory=list)
    logging_config: LoggingConfig = field(default_factory=LoggingConfig)

    def __post_init__(self):
        """Validate catalog configuration."""
        seen = set()
        for shape in self.shapes:
            if shape.shape_id in seen:
                raise _invalid(
                    f"Duplicate shape_id: {shape.shape_id}",
                    {'shape_id': shape.shape_id},
                )
            seen.add(shape.shape_id)

    def build_shapes(self) -> Dict[str, TwoDShape]:
        """Build every enabled shape, keyed by shape_id, in catalog order."""
        return {
            shape.shape_id: shape.build()
            for shape in self.shapes
            if shape.enabled
        }

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "CatalogConfig":
        """Build a catalog from already-parsed YAML/JSON data."""
        data = data or {}

        logging_config = LoggingConfig(**data.get("logging_config", {}))

        shapes = []
        for entry in data.get("shapes", []):
            try:
                shape_id = entry["shape_id"]
                shape_type = entry["shape_type"]
                coordinates = entry["coordinates"]
            except KeyError as e:
                raise _invalid(f"Missing required shape field: {e}") from None

            radius = entry.get("radius")
            shapes.append(
                ShapeConfig(
                    shape_id=shape_id,
                    shape_type=shape_type,
                    coordinates=[tuple(coord) for coord in coordinates],
                    radius=float(radius) if radius is not None else None,
                    enabled=entry.get("enabled", True),
                )
            )

        return cls(shapes=shapes, logging_config=logging_config)

    @classmethod
    def from_yaml(cls, yaml_path: Path) -> "CatalogConfig":
        """
        Load configuration from YAML file.

        Example YAML:
            logging_config:
              level: "INFO"

            shapes:
              - shape_id: "sun"
                shape_type: "circle"
                coordinates: [[5, 5]]
                radius: 5

              - shape_id: "sail"
                shape_type: "triangle"
                coordinates: [[0, 0], [0, 3], [2, 0]]

              - shape_id: "deck"
                shape_type: "quadrilateral"
                coordinates: [[0, 0], [0, 2], [4, 2], [4, 0]]
                enabled: true
        """
        with open(yaml_path) as f:
            data = yaml.safe_load(f)

        catalog = cls.from_dict(data)
        logger.info(
            event=LogEvent.CONFIG_LOADED,
            message=f"Loaded {len(catalog.shapes)} shapes",
            metadata={'path': str(yaml_path)},
        )
        return catalog
