"""Point / Rect 値型のテスト。"""

from __future__ import annotations

import math

import pytest

from vecshape.core.geometry import Point, Rect


def test_rect_exposes_min_mid_max() -> None:
    rect = Rect(10.0, 20.0, 100.0, 50.0)
    assert (rect.min_x, rect.mid_x, rect.max_x) == (10.0, 60.0, 110.0)
    assert (rect.min_y, rect.mid_y, rect.max_y) == (20.0, 45.0, 70.0)
    assert rect.center == Point(60.0, 45.0)


def test_rect_inset_keeps_center_and_clamps_at_zero() -> None:
    """inset は中心を保ったまま縮め、負の寸法にはならない。"""
    rect = Rect.of_size(100.0, 40.0)

    inner = rect.inset(10.0)
    assert inner == Rect(10.0, 10.0, 80.0, 20.0)

    collapsed = rect.inset(30.0)
    assert collapsed.width == 40.0
    assert collapsed.height == 0.0
    assert collapsed.center == rect.center


def test_zero_size_rect_is_empty_but_valid() -> None:
    assert Rect.of_size(0.0, 10.0).is_empty
    assert not Rect.of_size(1.0, 1.0).is_empty


@pytest.mark.parametrize("bad", [math.nan, math.inf, -math.inf])
def test_non_finite_coordinates_are_rejected(bad: float) -> None:
    with pytest.raises(ValueError):
        Point(bad, 0.0)
    with pytest.raises(ValueError):
        Rect(0.0, 0.0, bad, 1.0)


def test_negative_zero_is_normalized() -> None:
    p = Point(-0.0, 0.0)
    assert math.copysign(1.0, p.x) == 1.0
