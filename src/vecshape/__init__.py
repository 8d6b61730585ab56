# どこで: `src/vecshape/__init__.py`。
# 何を: ルート `vecshape` パッケージを定義し、よく使う公開名を再エクスポートする。
# なぜ: import 起点を `vecshape` に統一するため。

from __future__ import annotations

from vecshape.api import S, build_scene, scene_from_sliders, shape
from vecshape.core.animatable import AnimatablePair, interpolate, interpolate_shape, lerp
from vecshape.core.color import HSBColor, color
from vecshape.core.geometry import Point, Rect
from vecshape.core.path import Path, PathBuilder
from vecshape.core.shape import generate, inset, stroke_border
from vecshape.core.transition import Transition, animate

__all__ = [
    "AnimatablePair",
    "HSBColor",
    "Path",
    "PathBuilder",
    "Point",
    "Rect",
    "S",
    "Transition",
    "animate",
    "build_scene",
    "color",
    "generate",
    "inset",
    "interpolate",
    "interpolate_shape",
    "lerp",
    "scene_from_sliders",
    "shape",
    "stroke_border",
]
