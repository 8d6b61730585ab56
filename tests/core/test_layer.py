"""Layer モデルとシーン正規化のテスト。"""

from __future__ import annotations

import pytest

from vecshape.core.geometry import Rect
from vecshape.core.layer import Layer, normalize_scene
from vecshape.core.path import PathBuilder


def _path():
    return PathBuilder().add_rect(Rect.of_size(10.0, 10.0)).build()


def test_layer_defaults_to_black_unit_stroke() -> None:
    layer = Layer(path=_path())
    assert layer.stroke == (0.0, 0.0, 0.0)
    assert layer.fill is None
    assert layer.line_width == 1.0
    assert layer.gradient is None


def test_layer_rejects_negative_line_width() -> None:
    with pytest.raises(ValueError):
        Layer(path=_path(), line_width=-1.0)


def test_normalize_scene_wraps_paths_and_flattens_nesting() -> None:
    a = _path()
    styled = Layer(path=a, stroke=None, fill=(1.0, 0.0, 0.0))

    layers = normalize_scene([a, [styled, (a,)]])

    assert len(layers) == 3
    assert layers[0] == Layer(path=a)
    assert layers[1] is styled
    assert layers[2].path == a


def test_normalize_scene_rejects_unknown_items() -> None:
    with pytest.raises(TypeError):
        normalize_scene([_path(), 42])  # type: ignore[list-item]
    with pytest.raises(TypeError):
        normalize_scene("M 0 0")  # type: ignore[arg-type]
