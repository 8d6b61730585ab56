"""Arc shape（角度の向き変換と inset）のテスト。"""

from __future__ import annotations

import math

import pytest

from vecshape.core.animatable import AnimatablePair
from vecshape.core.geometry import Point, Rect
from vecshape.core.path import ArcTo
from vecshape.core.shape import inset, stroke_border
from vecshape.core.shapes.arc import Arc


def _arc_command(shape: Arc, rect: Rect) -> ArcTo:
    path = shape.path(rect)
    assert len(path) == 1
    command = path.commands[0]
    assert isinstance(command, ArcTo)
    return command


def test_arc_shifts_angles_and_inverts_direction() -> None:
    """上が 0° の角度を、右が 0° のパス角度へ 90° ずらして渡す。"""
    command = _arc_command(Arc(start_angle=0.0, end_angle=110.0, clockwise=True), Rect.of_size(300.0, 300.0))

    assert command.center == Point(150.0, 150.0)
    assert command.radius == pytest.approx(150.0)
    assert command.start_angle == pytest.approx(math.radians(-90.0))
    assert command.end_angle == pytest.approx(math.radians(20.0))
    assert command.clockwise is False


def test_arc_start_point_is_top_of_circle() -> None:
    command = _arc_command(Arc(), Rect.of_size(300.0, 300.0))
    start = command.start_point
    assert (start.x, start.y) == (pytest.approx(150.0), pytest.approx(0.0, abs=1e-9))


def test_arc_counter_clockwise_request_maps_to_clockwise_path() -> None:
    command = _arc_command(Arc(clockwise=False), Rect.of_size(100.0, 100.0))
    assert command.clockwise is True


def test_arc_inset_is_additive_and_shrinks_radius() -> None:
    rect = Rect.of_size(200.0, 100.0)
    shape = inset(inset(Arc(), 5.0), 7.5)

    assert shape.inset_amount == pytest.approx(12.5)
    assert _arc_command(shape, rect).radius == pytest.approx(100.0 - 12.5)
    assert Arc().inset_amount == 0.0


def test_arc_stroke_border_insets_by_half_line_width() -> None:
    shape = stroke_border(Arc(), 10.0)
    assert shape.inset_amount == pytest.approx(5.0)


def test_arc_radius_is_kept_even_when_negative() -> None:
    command = _arc_command(Arc(inset_amount=80.0), Rect.of_size(100.0, 100.0))
    assert command.radius == pytest.approx(-30.0)


def test_arc_animatable_data_is_angle_pair() -> None:
    shape = Arc(start_angle=10.0, end_angle=200.0)
    assert shape.animatable_data == AnimatablePair(10.0, 200.0)
    moved = shape.with_animatable_data(AnimatablePair(0.0, 360.0))
    assert (moved.start_angle, moved.end_angle) == (0.0, 360.0)
    assert moved.clockwise is True
