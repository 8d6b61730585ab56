"""
どこで: `src/vecshape/api/scenes.py`。
何を: チュートリアル画面（矢印・市松・台形・花・円弧・三角形・色相回転サークル）を
     パラメータ値から Layer 列として組み立てる関数と、スライダー位置からの生成を提供する。
なぜ: 「スライダー → shape パラメータ → パス」という薄い結線を、UI フレームワークなしで再現するため。
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Callable

from vecshape.core.color_cycling import ColorCyclingCircle, color_cycling_meta
from vecshape.core.geometry import Rect
from vecshape.core.layer import ColorRGB, Layer
from vecshape.core.parameters.meta import ParamMeta, slider_value
from vecshape.core.runtime_config import runtime_config
from vecshape.core.shape_registry import shape_registry
from vecshape.core.shapes.arc import Arc
from vecshape.core.shapes.arrow import Arrow
from vecshape.core.shapes.checkerboard import CheckerBoard
from vecshape.core.shapes.flower import Flower
from vecshape.core.shapes.trapezoid import Trapezoid
from vecshape.core.shapes.triangle import Triangle

_logger = logging.getLogger(__name__)

RED: ColorRGB = (1.0, 0.0, 0.0)
BLUE: ColorRGB = (0.0, 0.0, 1.0)
BLACK: ColorRGB = (0.0, 0.0, 0.0)

SceneFunc = Callable[..., list[Layer]]


def canvas_rect() -> Rect:
    """config の canvas.size 全体を覆う矩形を返す。"""
    w, h = runtime_config().canvas_size
    return Rect.of_size(w, h)


def framed_rect(width: float, height: float) -> Rect:
    """キャンバス中央に置いた width x height の矩形を返す。"""
    canvas = canvas_rect()
    return Rect(canvas.mid_x - width / 2.0, canvas.mid_y - height / 2.0, width, height)


def arrow_scene(*, inset_amount: float = 2.0) -> list[Layer]:
    """矢印を inset_amount の線幅で赤く縁取る。負の線幅は 0 として扱う。"""
    arrow = Arrow(inset_amount=inset_amount)
    path = arrow.path(framed_rect(300.0, 300.0))
    line_width = max(arrow.line_width, 0.0)
    return [Layer(path=path, stroke=RED, line_width=line_width, name="arrow")]


def checkerboard_scene(*, rows: int = 4, columns: int = 4) -> list[Layer]:
    path = CheckerBoard(rows=rows, columns=columns).path(canvas_rect())
    return [Layer(path=path, stroke=None, fill=BLACK, name="checkerboard")]


def trapezoid_scene(*, inset_amount: float = 50.0) -> list[Layer]:
    path = Trapezoid(inset_amount=inset_amount).path(framed_rect(200.0, 100.0))
    return [Layer(path=path, stroke=None, fill=BLACK, name="trapezoid")]


def flower_scene(
    *,
    petal_offset: float = -20.0,
    petal_width: float = 100.0,
    even_odd_fill: bool = False,
) -> list[Layer]:
    """花を線幅 1 で赤く描く。even_odd_fill なら偶奇規則で塗る。"""
    path = Flower(petal_offset=petal_offset, petal_width=petal_width).path(canvas_rect())
    if even_odd_fill:
        return [Layer(path=path, stroke=None, fill=RED, even_odd=True, name="flower")]
    return [Layer(path=path, stroke=RED, line_width=1.0, name="flower")]


def arc_scene(
    *,
    start_angle: float = 0.0,
    end_angle: float = 110.0,
    clockwise: bool = True,
) -> list[Layer]:
    arc = Arc(start_angle=start_angle, end_angle=end_angle, clockwise=clockwise)
    path = arc.path(framed_rect(300.0, 300.0))
    return [Layer(path=path, stroke=BLUE, line_width=10.0, name="arc")]


def triangle_scene() -> list[Layer]:
    path = Triangle().path(framed_rect(300.0, 300.0))
    return [Layer(path=path, stroke=RED, line_width=10.0, name="triangle")]


def color_cycling_scene(*, amount: float = 0.0, steps: int = 100) -> list[Layer]:
    """同心円をそれぞれ縦グラデーションで縁取る。"""
    circle = ColorCyclingCircle(amount=amount, steps=steps)
    return [
        Layer(
            path=ring.path,
            line_width=ring.line_width,
            gradient=ring.gradient,
            name=f"ring:{ring.index}",
        )
        for ring in circle.rings(framed_rect(300.0, 300.0))
    ]


SCENES: dict[str, tuple[SceneFunc, dict[str, ParamMeta]]] = {
    "arrow": (arrow_scene, shape_registry.get_meta("arrow")),
    "checkerboard": (checkerboard_scene, shape_registry.get_meta("checkerboard")),
    "trapezoid": (trapezoid_scene, shape_registry.get_meta("trapezoid")),
    "flower": (flower_scene, shape_registry.get_meta("flower")),
    "arc": (arc_scene, shape_registry.get_meta("arc")),
    "triangle": (triangle_scene, {}),
    "color_cycling": (color_cycling_scene, dict(color_cycling_meta)),
}
"""シーン名 → (組み立て関数, スライダー用 meta)。"""


def build_scene(name: str, **params: Any) -> list[Layer]:
    """名前とパラメータ値からシーンを組み立てる。

    Raises
    ------
    KeyError
        未知のシーン名が指定された場合。
    """
    func, _meta = SCENES[name]
    layers = func(**params)
    _logger.debug("scene '%s' built: %d layers", name, len(layers))
    return layers


def scene_from_sliders(name: str, positions: Mapping[str, float]) -> list[Layer]:
    """スライダー位置（0..1）からシーンを組み立てる。

    位置は各パラメータの ui_min..ui_max に写してから渡す（bool は 0.5 以上で True）。

    Raises
    ------
    KeyError
        シーンがスライダーを持たない引数名が指定された場合。
    """
    _func, meta = SCENES[name]
    params: dict[str, Any] = {}
    for arg, position in positions.items():
        arg_meta = meta.get(arg)
        if arg_meta is None:
            raise KeyError(f"scene '{name}' にスライダー引数 {arg!r} はない")
        params[arg] = slider_value(position, arg_meta)
    return build_scene(name, **params)


__all__ = [
    "SCENES",
    "arc_scene",
    "arrow_scene",
    "build_scene",
    "canvas_rect",
    "checkerboard_scene",
    "color_cycling_scene",
    "flower_scene",
    "framed_rect",
    "scene_from_sliders",
    "trapezoid_scene",
    "triangle_scene",
]
