"""
Structured Log Event Types
==========================

Bounded Context: Observability Event Taxonomy

Typed event names for the structured logger.

Event Naming Convention:
    <component>.<category>.<action>

    component: shape, point, config
    category: position, snap, factory
    action: set, rejected, committed, skipped, built

Example Log Query (jq):
    jq 'select(.event == "shape.position.rejected")' shapes.log
"""

from enum import Enum


class LogEvent(str, Enum):
    """
    Typed log event names for structured logging.

    Categories:
    - shape.*: Shape positioning and snapping
    - point.*: Point construction helpers
    - config.*: Catalog loading
    """

    # ========== Shape Events ==========
    SHAPE_POSITION_SET = "shape.position.set"
    """Shape vertices (or center) replaced and canonicalized."""

    SHAPE_POSITION_REJECTED = "shape.position.rejected"
    """Candidate position refused; shape left unchanged."""

    SHAPE_SNAP_COMMITTED = "shape.snap.committed"
    """Snapped vertices remained valid and were committed."""

    SHAPE_SNAP_SKIPPED = "shape.snap.skipped"
    """Snapped vertices were degenerate; shape left unchanged."""

    # ========== Point Events ==========
    POINT_FACTORY_BUILT = "point.factory.built"
    """Points built from a flat coordinate sequence."""

    POINT_FACTORY_REJECTED = "point.factory.rejected"
    """Flat coordinate sequence had an odd length."""

    # ========== Config Events ==========
    CONFIG_LOADED = "config.loaded"
    """Shape catalog parsed and validated."""

    CONFIG_INVALID = "config.invalid"
    """Shape catalog entry failed validation."""

