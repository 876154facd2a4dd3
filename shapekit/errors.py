"""Exceptions raised by shapekit."""


class InvalidArgumentError(ValueError):
    """
    Raised when an operation receives an argument it cannot accept.

    Covers points of the wrong kind handed to ``set_position``, too few
    vertices, degenerate polygon vertex sets, odd-length coordinate sequences
    handed to ``TwoDPoint.of_doubles`` and malformed catalog entries.

    The receiving object is left in its last valid state.
    """
    pass
