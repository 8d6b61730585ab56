"""チュートリアル画面のシーン組み立て（`vecshape.api.scenes`）のテスト。"""

from __future__ import annotations

import pytest

from vecshape.api import SCENES, build_scene, scene_from_sliders
from vecshape.api.scenes import BLUE, RED, framed_rect
from vecshape.core.path import ArcTo


def test_every_scene_builds_with_defaults() -> None:
    for name in SCENES:
        layers = build_scene(name)
        assert layers, name


def test_arrow_scene_uses_inset_amount_as_line_width() -> None:
    (layer,) = build_scene("arrow", inset_amount=12.0)
    assert layer.stroke == RED
    assert layer.line_width == 12.0
    assert len(layer.path) == 9


def test_arc_scene_is_thick_blue_stroke() -> None:
    (layer,) = build_scene("arc")
    assert layer.stroke == BLUE
    assert layer.line_width == 10.0
    assert isinstance(layer.path.commands[0], ArcTo)


def test_flower_scene_even_odd_fill() -> None:
    (layer,) = build_scene("flower", even_odd_fill=True)
    assert layer.fill == RED
    assert layer.stroke is None
    assert layer.even_odd


def test_color_cycling_scene_has_one_gradient_layer_per_step() -> None:
    layers = build_scene("color_cycling", amount=0.5, steps=12)
    assert [layer.name for layer in layers] == [f"ring:{i}" for i in range(12)]
    assert all(layer.gradient is not None for layer in layers)


def test_framed_rect_is_centered_on_canvas() -> None:
    rect = framed_rect(200.0, 100.0)
    assert (rect.x, rect.y, rect.width, rect.height) == (50.0, 100.0, 200.0, 100.0)


def test_scene_from_sliders_maps_positions_to_ranges() -> None:
    (layer,) = scene_from_sliders("trapezoid", {"inset_amount": 1.0})
    top_left = layer.path.commands[1].point  # type: ignore[union-attr]
    assert top_left.x == pytest.approx(50.0 + 90.0)

    (board,) = scene_from_sliders("checkerboard", {"rows": 0.0, "columns": 0.0})
    assert len(board.path.subpaths()) == 1


def test_scene_from_sliders_rejects_unknown_argument() -> None:
    with pytest.raises(KeyError):
        scene_from_sliders("triangle", {"size": 0.5})
    with pytest.raises(KeyError):
        build_scene("hexagon")


def test_scene_from_sliders_switches_arc_direction() -> None:
    (cw,) = scene_from_sliders("arc", {"clockwise": 1.0})
    (ccw,) = scene_from_sliders("arc", {"clockwise": 0.0})

    # 呼び出し側の向きは反転してパスへ渡る。
    assert cw.path.commands[0].clockwise is False  # type: ignore[union-attr]
    assert ccw.path.commands[0].clockwise is True  # type: ignore[union-attr]


def test_arrow_scene_with_negative_width_draws_zero_width() -> None:
    (layer,) = build_scene("arrow", inset_amount=-1.0)
    assert layer.line_width == 0.0
    assert len(layer.path) == 9
