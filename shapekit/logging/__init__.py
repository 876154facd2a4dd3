"""
Structured Logging for shapekit
===============================

Bounded Context: Observability

JSON-structured logging shared by the geometry, ordering and config layers.

Public API
----------
    LogEvent: Typed event names (enum)
    StructuredLogger: JSON logger implementation
    create_logger: Factory function

Example:
    >>> from shapekit.logging import create_logger, LogEvent
    >>> logger = create_logger("triangle")
    >>> logger.debug(
    ...     event=LogEvent.SHAPE_POSITION_SET,
    ...     message="Vertices canonicalized",
    ...     metadata={'least_x': 0.0}
    ... )

Output:
    {
        "timestamp": "2026-10-19T15:30:45.123456+00:00",
        "level": "DEBUG",
        "component": "triangle",
        "event": "shape.position.set",
        "message": "Vertices canonicalized",
        "metadata": {"least_x": 0.0}
    }
"""

from .events import LogEvent
from .structured import StructuredLogger, create_logger

__all__ = [
    'LogEvent',
    'StructuredLogger',
    'create_logger',
]
