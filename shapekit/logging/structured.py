"""
Structured JSON Logger
=====================

Bounded Context: Observability Infrastructure

Structured logger that outputs one JSON object per record.

Design:
- JSON output (greppable, parseable by jq or a log aggregator)
- Wraps Python's logging module
- Contextual metadata (component, shape_id, least_x, etc.)
- Type-safe events (LogEvent enum)

Loggers are named ``shapekit.<component>`` so the whole library can be tuned
through the ``shapekit`` parent logger (see ``shapekit.config.LoggingConfig``).
"""

import json
import logging
from datetime import datetime, timezone
from typing import Dict, Any, Optional
from .events import LogEvent


ROOT_LOGGER_NAME = "shapekit"


class StructuredLogger:
    """
    JSON structured logger.

    Attributes:
        component: Component name (e.g., "triangle", "config")
        logger: Underlying Python logger instance

    Example:
        >>> logger = StructuredLogger("circle")
        >>> logger.error(
        ...     event=LogEvent.SHAPE_POSITION_REJECTED,
        ...     message="The list must consist of TwoDPoint instances",
        ...     metadata={'received': 'ThreeDPoint'}
        ... )
    """

    def __init__(
        self,
        component: str,
        level: Optional[int] = None,
        logger_name: Optional[str] = None
    ):
        """
        Initialize structured logger.

        Args:
            component: Component identifier (e.g., "triangle")
            level: Logging level (default: inherit from the ``shapekit`` logger)
            logger_name: Custom logger name (default: shapekit.<component>)
        """
        self.component = component
        self.logger_name = logger_name or f"{ROOT_LOGGER_NAME}.{component}"
        self.logger = logging.getLogger(self.logger_name)
        if level is not None:
            self.logger.setLevel(level)

        # Configure JSON formatter if not already configured
        if not self.logger.handlers:
            handler = logging.StreamHandler()
            handler.setFormatter(JSONFormatter())
            self.logger.addHandler(handler)

    def _log(
        self,
        level: str,
        event: LogEvent,
        message: str,
        metadata: Optional[Dict[str, Any]] = None,
        exc_info: Optional[Exception] = None
    ) -> None:
        """
        Internal log method with structured format.

        Args:
            level: Log level name (DEBUG, INFO, WARNING, ERROR)
            event: Typed log event
            message: Human-readable message
            metadata: Additional context
            exc_info: Exception attached to ERROR logs
        """
        log_level = getattr(logging, level)
        if not self.logger.isEnabledFor(log_level):
            return

        log_entry = {
            'timestamp': datetime.now(timezone.utc).isoformat(),
            'level': level,
            'component': self.component,
            'event': event.value,
            'message': message,
        }

        if metadata:
            log_entry['metadata'] = metadata

        if exc_info:
            log_entry['exception'] = {
                'type': type(exc_info).__name__,
                'message': str(exc_info)
            }

        self.logger.log(log_level, json.dumps(log_entry, default=str))

    def debug(
        self,
        event: LogEvent,
        message: str,
        metadata: Optional[Dict[str, Any]] = None
    ) -> None:
        """Log DEBUG level message."""
        self._log('DEBUG', event, message, metadata)

    def info(
        self,
        event: LogEvent,
        message: str,
        metadata: Optional[Dict[str, Any]] = None
    ) -> None:
        """
        Log INFO level message.

        Example:
            >>> logger.info(
            ...     event=LogEvent.CONFIG_LOADED,
            ...     message="Loaded 3 shapes",
            ...     metadata={'path': 'shapes.yaml'}
            ... )
        """
        self._log('INFO', event, message, metadata)

    def error(
        self,
        event: LogEvent,
        message: str,
        metadata: Optional[Dict[str, Any]] = None,
        exc_info: Optional[Exception] = None
    ) -> None:
        """
        Log ERROR level message.

        Args:
            event: Typed log event
            message: Human-readable message
            metadata: Additional context
            exc_info: Exception instance being reported

        Example:
            >>> error = InvalidArgumentError("odd length")
            >>> logger.error(
            ...     event=LogEvent.POINT_FACTORY_REJECTED,
            ...     message="The array of doubles must have an even length",
            ...     exc_info=error,
            ...     metadata={'length': 3}
            ... )
        """
        self._log('ERROR', event, message, metadata, exc_info)

class JSONFormatter(logging.Formatter):
    """
    Formatter used internally by StructuredLogger.

    The message from StructuredLogger is already JSON, so it is passed through.
    """

    def format(self, record: logging.LogRecord) -> str:
        return record.getMessage()


def create_logger(
    component: str,
    level: Optional[int] = None
) -> StructuredLogger:
    """
    Factory function to create configured StructuredLogger.

    Args:
        component: Component identifier
        level: Logging level (default: inherit)

    Returns:
        Configured StructuredLogger instance

    Example:
        >>> logger = create_logger("quadrilateral", level=logging.DEBUG)
    """
    return StructuredLogger(component=component, level=level)
