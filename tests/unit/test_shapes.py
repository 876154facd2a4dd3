import math

import numpy as np
import pytest

from shapekit import (
    Circle,
    InvalidArgumentError,
    Quadrilateral,
    ThreeDPoint,
    Triangle,
    TwoDPoint,
)
from shapekit.geometry import primitives


def pts(*coords):
    return [TwoDPoint(x, y) for x, y in coords]


def shoelace(points) -> float:
    total = 0.0
    for i, p in enumerate(points):
        q = points[(i + 1) % len(points)]
        total += p.x * q.y - q.x * p.y
    return abs(total) / 2


# ---------------------------------------------------------------- Circle


def test_circle_string_area_and_perimeter() -> None:
    circle = Circle(5, 5, 5)

    assert str(circle) == "Circle[center: (5.00,5.00); radius: 5.0]"
    assert circle.area() == pytest.approx(78.5398, abs=1e-4)
    assert circle.perimeter() == pytest.approx(10 * math.pi)
    assert circle.num_sides() == math.inf
    assert circle.least_x == 0.0
    assert circle.get_least_x() == 0.0


def test_circle_set_position_moves_center_and_least_x() -> None:
    circle = Circle(0, 0, 5)
    circle.set_position(pts((10, 1), (99, 99)))

    assert circle.get_position() == [TwoDPoint(10, 1)]
    assert circle.least_x == 5.0
    assert str(circle) == "Circle[center: (10.00,1.00); radius: 5.0]"


@pytest.mark.parametrize("points", [[ThreeDPoint(1, 2, 3)], []])
def test_circle_rejects_bad_position_and_keeps_state(points) -> None:
    circle = Circle(1, 2, 3)

    with pytest.raises(InvalidArgumentError):
        circle.set_position(points)

    assert circle.get_position() == [TwoDPoint(1, 2)]
    assert circle.least_x == -2.0


def test_circle_membership() -> None:
    assert Circle(0, 0, 2).is_member(pts((4, 4)))
    assert not Circle(0, 0, 2).is_member(pts((4, 4), (1, 1)))
    assert not Circle(0, 0, 2).is_member([ThreeDPoint(4, 4, 4)])
    assert not Circle(0, 0, 0).is_member(pts((4, 4)))
    assert not Circle(0, 0, -1).is_member(pts((4, 4)))


def test_circle_does_not_share_its_center() -> None:
    given = TwoDPoint(3, 3)
    circle = Circle.from_points([given], radius=1)

    given.set_x(100)
    circle.center.set_x(-100)
    circle.get_position()[0].set_y(-100)

    assert str(circle) == "Circle[center: (3.00,3.00); radius: 1.0]"


# -------------------------------------------------------------- Triangle


def test_triangle_example() -> None:
    triangle = Triangle(pts((0, 0), (0, 3), (2, 0)))

    assert str(triangle) == "Triangle[(0.00,0.00), (0.00,3.00), (2.00,0.00)]"
    assert triangle.area() == pytest.approx(3.0)
    assert triangle.perimeter() == pytest.approx(5 + math.sqrt(13))
    assert triangle.least_x == 0.0
    assert triangle.num_sides() == 3


@pytest.mark.parametrize(
    "coords",
    [
        ((2, 0), (0, 0), (0, 3)),
        ((0, 0), (2, 0), (0, 3)),
        ((0, 3), (2, 0), (0, 0)),
    ],
)
def test_triangle_canonical_order_is_clockwise_from_least_x(coords) -> None:
    triangle = Triangle(pts(*coords))
    assert str(triangle) == "Triangle[(0.00,0.00), (0.00,3.00), (2.00,0.00)]"


def test_triangle_least_x_tie_goes_to_lower_y() -> None:
    triangle = Triangle(pts((0, 4), (3, 2), (0, 0)))

    assert triangle.get_position() == pts((0, 0), (0, 4), (3, 2))
    assert triangle.least_x == 0.0


def test_triangle_canonical_order_is_idempotent() -> None:
    triangle = Triangle(pts((3.5, -1), (-2, 0.25), (1, 4)))
    before = triangle.get_position()

    triangle.set_position(triangle.get_position())

    assert triangle.get_position() == before
    assert triangle.least_x == before[0].x == -2.0


def test_triangle_ignores_extra_points() -> None:
    triangle = Triangle(pts((0, 0), (0, 3), (2, 0), (50, 50)))
    assert len(triangle.get_position()) == 3
    assert triangle.area() == pytest.approx(3.0)


def test_triangle_area_matches_heron_and_shoelace() -> None:
    vertices = pts((0.5, 0.5), (3.2, 1.1), (1.4, 4.7))
    triangle = Triangle(vertices)

    a = math.dist((0.5, 0.5), (3.2, 1.1))
    b = math.dist((3.2, 1.1), (1.4, 4.7))
    c = math.dist((1.4, 4.7), (0.5, 0.5))
    s = (a + b + c) / 2
    heron = math.sqrt(s * (s - a) * (s - b) * (s - c))

    assert triangle.area() >= 0
    assert triangle.area() == pytest.approx(heron)
    assert triangle.area() == pytest.approx(shoelace(vertices))


@pytest.mark.parametrize(
    "points",
    [
        [ThreeDPoint(0, 0, 0), TwoDPoint(0, 3), TwoDPoint(2, 0)],
        pts((0, 0), (1, 1)),
        pts((0, 0), (1, 1), (2, 2)),
        pts((1, 1), (1, 1), (1, 1)),
    ],
)
def test_triangle_rejected_position_keeps_previous_state(points) -> None:
    triangle = Triangle(pts((0, 0), (0, 3), (2, 0)))

    with pytest.raises(InvalidArgumentError):
        triangle.set_position(points)

    assert str(triangle) == "Triangle[(0.00,0.00), (0.00,3.00), (2.00,0.00)]"
    assert triangle.least_x == 0.0


def test_triangle_constructor_fails_outright_on_degenerate_points() -> None:
    with pytest.raises(InvalidArgumentError):
        Triangle(pts((0, 0), (0, 1), (0, 2)))


def test_triangle_membership_is_independent_of_state() -> None:
    triangle = Triangle(pts((0, 0), (0, 3), (2, 0)))

    assert triangle.is_member(pts((5, 5), (6, 9), (9, 5)))
    assert not triangle.is_member(pts((0, 0), (1, 1), (2, 2)))
    assert not triangle.is_member(pts((4, 4), (4, 4), (4, 4)))
    assert not triangle.is_member(pts((1, 0), (1, 5), (1, 9)))
    assert not triangle.is_member(pts((0, 3), (4, 3), (9, 3)))
    assert not triangle.is_member(pts((0, 0), (1, 1)))
    assert not triangle.is_member([ThreeDPoint(0, 0, 0), TwoDPoint(0, 3), TwoDPoint(2, 0)])
    assert str(triangle) == "Triangle[(0.00,0.00), (0.00,3.00), (2.00,0.00)]"


def test_triangle_does_not_alias_input_points() -> None:
    given = pts((0, 0), (0, 3), (2, 0))
    triangle = Triangle(given)

    given[1].set_y(30)
    triangle.get_position()[2].set_x(20)

    assert str(triangle) == "Triangle[(0.00,0.00), (0.00,3.00), (2.00,0.00)]"


def test_triangle_snap_commits_integer_vertices() -> None:
    triangle = Triangle(pts((0.2, 0.1), (0.4, 2.8), (3.1, -0.2)))

    assert triangle.snap() is True
    assert str(triangle) == "Triangle[(0.00,0.00), (0.00,3.00), (3.00,0.00)]"
    assert triangle.least_x == 0.0
    assert triangle.is_member(triangle.get_position())
    assert all(float(c).is_integer() for p in triangle.get_position() for c in p.coordinates())


def test_triangle_snap_recanonicalizes_and_updates_least_x() -> None:
    triangle = Triangle(pts((0.6, 0.0), (0.4, 3.0), (3.0, 0.0)))
    assert triangle.least_x == 0.4

    assert triangle.snap() is True
    assert str(triangle) == "Triangle[(0.00,3.00), (3.00,0.00), (1.00,0.00)]"
    assert triangle.least_x == 0.0


def test_triangle_snap_is_noop_when_result_degenerate() -> None:
    triangle = Triangle(pts((0.1, 0.1), (0.3, 0.2), (0.2, 0.4)))
    before = str(triangle)

    assert triangle.snap() is False
    assert str(triangle) == before
    assert triangle.least_x == 0.1


# --------------------------------------------------------- Quadrilateral


def test_quadrilateral_example() -> None:
    quad = Quadrilateral(pts((0, 0), (0, 2), (4, 2), (4, 0)))

    assert str(quad) == "Quadrilateral[(0.00,0.00), (0.00,2.00), (4.00,2.00), (4.00,0.00)]"
    assert quad.area() == pytest.approx(8.0)
    assert quad.perimeter() == pytest.approx(12.0)
    assert quad.num_sides() == 4
    assert quad.least_x == 0.0


def test_quadrilateral_area_is_sum_of_diagonal_halves() -> None:
    quad = Quadrilateral(pts((1, 1), (5, 2), (4, 6), (0, 4)))
    v0, v1, v2, v3 = quad.get_position()

    halves = Triangle([v0, v1, v2]).area() + Triangle([v0, v3, v2]).area()

    assert quad.area() == pytest.approx(halves)
    assert quad.area() == pytest.approx(shoelace(quad.get_position()))


@pytest.mark.parametrize(
    "coords",
    [
        ((1, 1), (5, 2), (4, 6), (0, 4)),
        ((0, 0), (2, 1), (4, 0), (2, 4)),
        ((0, 0), (0, 4), (1, 2), (4, 2)),
    ],
)
def test_quadrilateral_area_invariant_under_cyclic_relabeling(coords) -> None:
    quad = Quadrilateral(pts(*coords))
    walk = np.array([p.coordinates() for p in quad.get_position()])
    expected = shoelace(quad.get_position())

    assert quad.area() == pytest.approx(expected)
    for shift in range(4):
        rotated = np.roll(walk, -shift, axis=0)
        assert primitives.quadrilateral_area(rotated) == pytest.approx(expected)


def test_concave_quadrilateral_area_uses_interior_diagonal() -> None:
    quad = Quadrilateral(pts((0, 0), (2, 1), (4, 0), (2, 4)))

    assert quad.get_position() == pts((0, 0), (2, 4), (4, 0), (2, 1))
    assert quad.area() == pytest.approx(6.0)


def test_quadrilateral_untangles_crossed_input() -> None:
    quad = Quadrilateral(pts((0, 0), (4, 2), (0, 2), (4, 0)))

    assert str(quad) == "Quadrilateral[(0.00,0.00), (0.00,2.00), (4.00,2.00), (4.00,0.00)]"
    assert quad.area() == pytest.approx(8.0)


def test_quadrilateral_membership() -> None:
    quad = Quadrilateral(pts((0, 0), (0, 2), (4, 2), (4, 0)))

    assert quad.is_member(pts((0, 0), (1, 5), (6, 6), (5, 0)))
    assert not quad.is_member(pts((1, 0), (1, 1), (1, 2), (1, 3)))
    assert not quad.is_member(pts((0, 7), (1, 7), (2, 7), (3, 7)))
    assert not quad.is_member(pts((0, 0), (1, 0), (2, 0), (1, 5)))
    assert not quad.is_member(pts((2, 2), (2, 2), (2, 2), (2, 2)))
    assert not quad.is_member(pts((0, 0), (0, 2), (4, 2)))


def test_quadrilateral_rejects_three_d_points() -> None:
    quad = Quadrilateral(pts((0, 0), (0, 2), (4, 2), (4, 0)))

    with pytest.raises(InvalidArgumentError):
        quad.set_position(pts((0, 0), (0, 2), (4, 2)) + [ThreeDPoint(4, 0, 0)])

    assert quad.area() == pytest.approx(8.0)


def test_quadrilateral_set_position_is_idempotent() -> None:
    quad = Quadrilateral(pts((4.5, 1), (0.5, 3), (2, -1), (3, 5)))
    before = quad.get_position()

    quad.set_position(before)

    assert quad.get_position() == before
    assert quad.least_x == 0.5


def test_quadrilateral_snap_commits() -> None:
    quad = Quadrilateral(pts((0.1, -0.2), (0.2, 1.9), (3.8, 2.2), (4.4, 0.3)))

    assert quad.snap() is True
    assert str(quad) == "Quadrilateral[(0.00,0.00), (0.00,2.00), (4.00,2.00), (4.00,0.00)]"
    assert quad.area() == pytest.approx(8.0)
    assert quad.least_x == 0.0


def test_quadrilateral_snap_is_noop_when_collapsed() -> None:
    quad = Quadrilateral(pts((0.1, 0.1), (0.1, 0.3), (0.3, 0.4), (0.4, 0.1)))
    before = quad.get_position()

    assert quad.snap() is False
    assert quad.get_position() == before
    assert quad.least_x == 0.1


def test_natural_order_is_by_area() -> None:
    triangle = Triangle(pts((0, 0), (0, 3), (2, 0)))
    quad = Quadrilateral(pts((0, 0), (0, 2), (4, 2), (4, 0)))
    circle = Circle(0, 0, 1)

    assert triangle.compare_to(quad) == -1
    assert quad.compare_to(triangle) == 1
    assert triangle.compare_to(Triangle(pts((5, 5), (5, 8), (7, 5)))) == 0
    assert sorted([quad, circle, triangle]) == [triangle, circle, quad]
