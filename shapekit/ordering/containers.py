"""
Container helpers that respect element-type variance.

``copy`` reads from an ``Iterable`` (covariant) and writes to a
``MutableSequence`` (invariant), so a static type checker accepts copying
triangles into a list of shapes and rejects the reverse:

    shapes: List[TwoDShape] = []
    circles: List[Circle] = [Circle(0, 0, 1)]
    copy(circles, shapes)      # ok
    copy(shapes, circles)      # mypy: incompatible type "List[TwoDShape]"
"""

from typing import Iterable, MutableSequence, TypeVar

from shapekit.errors import InvalidArgumentError
from shapekit.geometry.base import TwoDShape


T = TypeVar("T")
S = TypeVar("S", bound=TwoDShape)


def copy(source: Iterable[T], destination: MutableSequence[T]) -> None:
    """Append every element of ``source`` to ``destination``, in source order."""
    destination.extend(source)


def least(shapes: Iterable[S]) -> S:
    """
    Smallest shape by natural (area) order. The first one wins on ties.

    Raises:
        InvalidArgumentError: If ``shapes`` is empty
    """
    iterator = iter(shapes)
    try:
        smallest = next(iterator)
    except StopIteration:
        raise InvalidArgumentError("least() requires at least one shape") from None
    for shape in iterator:
        if shape < smallest:
            smallest = shape
    return smallest
