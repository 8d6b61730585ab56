"""Triangle shape のテスト。"""

from __future__ import annotations

from vecshape.core.geometry import Point, Rect
from vecshape.core.path import LineTo, MoveTo
from vecshape.core.shape import generate
from vecshape.core.shapes.triangle import Triangle


def test_triangle_visits_top_mid_then_bottom_corners() -> None:
    path = generate(Triangle(), Rect.of_size(300.0, 300.0))

    assert [type(c) for c in path] == [MoveTo, LineTo, LineTo, LineTo]
    points = [c.point for c in path]  # type: ignore[union-attr]
    assert points == [
        Point(150.0, 0.0),
        Point(0.0, 300.0),
        Point(300.0, 300.0),
        Point(150.0, 0.0),
    ]


def test_triangle_is_deterministic_and_follows_rect_origin() -> None:
    rect = Rect(10.0, 20.0, 40.0, 30.0)
    assert Triangle().path(rect) == Triangle().path(rect)
    assert Triangle().path(rect).commands[0] == MoveTo(Point(30.0, 20.0))


def test_triangle_on_degenerate_rect_does_not_raise() -> None:
    path = Triangle().path(Rect.of_size(0.0, 0.0))
    assert len(path) == 4
