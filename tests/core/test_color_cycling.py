"""ColorCyclingCircle（同心円 + 縦グラデーション）のテスト。"""

from __future__ import annotations

import pytest

from vecshape.core.color import HSBColor
from vecshape.core.color_cycling import RING_LINE_WIDTH, ColorCyclingCircle
from vecshape.core.geometry import Point, Rect
from vecshape.core.path import ArcTo


def _radius(ring) -> float:
    command = ring.path.commands[0]
    assert isinstance(command, ArcTo)
    return command.radius


def test_rings_step_inward_by_one_unit() -> None:
    rect = Rect.of_size(300.0, 300.0)
    rings = ColorCyclingCircle(amount=0.0, steps=100).rings(rect)

    assert len(rings) == 100
    assert [r.index for r in rings] == list(range(100))
    assert _radius(rings[0]) == pytest.approx(150.0 - RING_LINE_WIDTH / 2.0)
    assert _radius(rings[1]) == pytest.approx(_radius(rings[0]) - 1.0)
    assert all(r.line_width == RING_LINE_WIDTH for r in rings)


def test_gradient_runs_top_to_bottom_and_darkens() -> None:
    rect = Rect.of_size(300.0, 300.0)
    gradient = ColorCyclingCircle(amount=0.6, steps=100).gradient_for(50, rect)

    assert gradient.start_point == Point(150.0, 0.0)
    assert gradient.end_point == Point(150.0, 300.0)
    assert gradient.start_color.hue == pytest.approx(0.1)
    assert gradient.start_color.brightness == 1.0
    assert gradient.end_color.brightness == 0.5
    assert gradient.end_color.hue == pytest.approx(gradient.start_color.hue)


def test_first_ring_without_rotation_starts_red() -> None:
    ring = ColorCyclingCircle().rings(Rect.of_size(100.0, 100.0))[0]
    assert ring.gradient.start_color == HSBColor(0.0, 1.0, 1.0)


def test_rings_past_center_become_empty() -> None:
    rings = ColorCyclingCircle(steps=10).rings(Rect.of_size(10.0, 10.0))
    # 半径は 4, 3, 2, 1, 0, ... と減り、0 以下は空パス。
    assert not rings[3].path.is_empty
    assert all(r.path.is_empty for r in rings[4:])


def test_zero_steps_draws_nothing() -> None:
    assert ColorCyclingCircle(steps=0).rings(Rect.of_size(100.0, 100.0)) == ()


def test_amount_is_the_animatable_scalar() -> None:
    shape = ColorCyclingCircle(amount=0.2, steps=5)
    assert shape.animatable_data == pytest.approx(0.2)
    assert shape.with_animatable_data(0.7) == ColorCyclingCircle(amount=0.7, steps=5)
