"""
Planar Primitives
=================

Pure vector helpers over ``(N, 2)`` numpy vertex arrays.

Design:
- Pure functions (no state, no logging)
- Cross product for orientation and collinearity (exact, no slopes)
- Shoelace signed area for winding; negative = clockwise (y axis up)
"""

import itertools
import math
from typing import List, Sequence

import numpy as np


def to_array(points: Sequence) -> np.ndarray:
    """Stack 2-D points (anything with ``coordinates()``) into an Nx2 array."""
    if len(points) == 0:
        return np.zeros((0, 2), dtype=float)
    return np.array([p.coordinates()[:2] for p in points], dtype=float)


def distance(a: np.ndarray, b: np.ndarray) -> float:
    """Euclidean distance between two 2-D vectors."""
    return float(np.hypot(b[0] - a[0], b[1] - a[1]))


def orientation(a: np.ndarray, b: np.ndarray, c: np.ndarray) -> float:
    """
    Cross product (b - a) x (c - a).

    Returns:
        > 0: a, b, c turn counter-clockwise
        < 0: a, b, c turn clockwise
        0: collinear (or coincident)
    """
    return float((b[0] - a[0]) * (c[1] - a[1]) - (b[1] - a[1]) * (c[0] - a[0]))


def signed_area(vertices: np.ndarray) -> float:
    """Shoelace area of a closed vertex walk. Negative when clockwise."""
    x = vertices[:, 0]
    y = vertices[:, 1]
    return float(0.5 * np.sum(x * np.roll(y, -1) - np.roll(x, -1) * y))


def edge_lengths(vertices: np.ndarray) -> np.ndarray:
    """Length of every edge of the closed walk, edge i runs from vertex i to i+1."""
    deltas = np.roll(vertices, -1, axis=0) - vertices
    return np.hypot(deltas[:, 0], deltas[:, 1])


def segments_cross(a: np.ndarray, b: np.ndarray, c: np.ndarray, d: np.ndarray) -> bool:
    """True when segments ab and cd properly intersect (interiors cross)."""
    o1 = orientation(a, b, c)
    o2 = orientation(a, b, d)
    o3 = orientation(c, d, a)
    o4 = orientation(c, d, b)
    return (o1 * o2 < 0) and (o3 * o4 < 0)


def is_simple(vertices: np.ndarray) -> bool:
    """True when no two non-adjacent edges of the closed walk cross."""
    n = len(vertices)
    for i in range(n):
        for j in range(i + 2, n):
            if i == 0 and j == n - 1:
                continue
            if segments_cross(vertices[i], vertices[(i + 1) % n],
                              vertices[j], vertices[(j + 1) % n]):
                return False
    return True


def anchor_index(vertices: np.ndarray) -> int:
    """Index of the least-x vertex; ties go to the lower y."""
    # lexsort uses the last key as primary
    return int(np.lexsort((vertices[:, 1], vertices[:, 0]))[0])


def canonical_order(vertices: np.ndarray) -> List[int]:
    """
    Indices that walk the vertices clockwise from the least-x vertex.

    The walk starts at the least-x vertex (lower y on ties). Among the cyclic
    orderings of the remaining vertices, the non-self-intersecting walk with
    the largest enclosed area is chosen, then oriented clockwise. The result
    depends only on coordinates, never on input order, so it is idempotent.

    Example:
        >>> canonical_order(np.array([[4, 0], [0, 2], [0, 0], [4, 2]]))
        [2, 1, 3, 0]
    """
    n = len(vertices)
    start = anchor_index(vertices)
    rest = [i for i in range(n) if i != start]
    rest.sort(key=lambda i: (vertices[i, 0], vertices[i, 1]))

    best = None
    best_area = -1.0
    for perm in itertools.permutations(range(len(rest))):
        # each cycle and its reversal describe the same boundary
        if len(perm) > 1 and perm[0] > perm[-1]:
            continue
        walk = [start, *(rest[k] for k in perm)]
        candidate = vertices[walk]
        if not is_simple(candidate):
            continue
        area = abs(signed_area(candidate))
        if area > best_area:
            best, best_area = walk, area

    if best is None:
        best = [start, *rest]

    if signed_area(vertices[best]) > 0:
        best = [best[0], *reversed(best[1:])]
    return best


def is_degenerate(vertices: np.ndarray) -> bool:
    """
    True when the closed walk cannot bound a proper polygon.

    Degenerate means all x equal, all y equal, or any corner (three
    consecutive vertices, cyclically) collinear. Coincident vertices produce
    a collinear corner.
    """
    if np.all(vertices[:, 0] == vertices[0, 0]):
        return True
    if np.all(vertices[:, 1] == vertices[0, 1]):
        return True
    n = len(vertices)
    for i in range(n):
        if orientation(vertices[i - 1], vertices[i], vertices[(i + 1) % n]) == 0:
            return True
    return False


def heron_area(a: np.ndarray, b: np.ndarray, c: np.ndarray) -> float:
    """Triangle area from its three side lengths."""
    ab = distance(a, b)
    bc = distance(b, c)
    ca = distance(c, a)
    s = (ab + bc + ca) / 2
    radicand = s * (s - ab) * (s - bc) * (s - ca)
    # only valid triangles reach here; rounding may leave a tiny negative
    assert not math.isnan(radicand) and radicand > -1e-9 * max(1.0, s ** 4)
    return math.sqrt(max(radicand, 0.0))


def quadrilateral_area(vertices: np.ndarray) -> float:
    """
    Area of a simple quadrilateral as two triangles on an interior diagonal.

    The 0-2 diagonal is interior only when vertices 1 and 3 lie on opposite
    sides of it. Otherwise the reflex corner sits at 1 or 3 and the 1-3
    diagonal is used.
    """
    v0, v1, v2, v3 = vertices
    if orientation(v0, v2, v1) * orientation(v0, v2, v3) < 0:
        return heron_area(v0, v1, v2) + heron_area(v0, v3, v2)
    return heron_area(v1, v2, v3) + heron_area(v1, v0, v3)


def round_half_up(vertices: np.ndarray) -> np.ndarray:
    """Round every coordinate to the nearest integer, halves away from -inf."""
    return np.floor(vertices + 0.5)
