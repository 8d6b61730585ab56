"""
どこで: `src/vecshape/core/color_cycling.py`。色相回転サークルの合成。
何を: steps 本の同心円を index ずつ inset し、上→下の縦グラデーション（明度 1 → 0.5）で縁取る記述を返す。
なぜ: パス生成（Circle）と色関数（color）を組み合わせる合成を、描画フレームワークに依存せず表現するため。
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from vecshape.core.color import HSBColor, color
from vecshape.core.geometry import Point, Rect
from vecshape.core.parameters.meta import ParamMeta
from vecshape.core.path import Path
from vecshape.core.shape import stroke_border
from vecshape.core.shapes.circle import Circle

RING_LINE_WIDTH = 2.0

color_cycling_meta = {
    "amount": ParamMeta(kind="float", ui_min=0.0, ui_max=1.0),
    "steps": ParamMeta(kind="int", ui_min=1, ui_max=200),
}


@dataclass(frozen=True, slots=True)
class LinearGradient:
    """start 点の色から end 点の色へ変化する線形グラデーション。"""

    start_color: HSBColor
    end_color: HSBColor
    start_point: Point
    end_point: Point


@dataclass(frozen=True, slots=True)
class GradientRing:
    """グラデーションで縁取る 1 本のリング。"""

    index: int
    path: Path
    gradient: LinearGradient
    line_width: float


@dataclass(frozen=True, slots=True)
class ColorCyclingCircle:
    """色相を amount だけ回した同心円の集合。

    Parameters
    ----------
    amount : float
        全体の色相回転量。アニメーション対象のスカラー。
    steps : int
        同心円の本数。0 以下なら何も描かない。
    """

    amount: float = 0.0
    steps: int = 100

    def gradient_for(self, index: int, rect: Rect) -> LinearGradient:
        return LinearGradient(
            start_color=color(index, self.steps, self.amount, brightness=1.0),
            end_color=color(index, self.steps, self.amount, brightness=0.5),
            start_point=Point(rect.mid_x, rect.min_y),
            end_point=Point(rect.mid_x, rect.max_y),
        )

    def rings(self, rect: Rect) -> tuple[GradientRing, ...]:
        """外側から順にリングを返す。半径が尽きたリングは空パスになる。"""
        out: list[GradientRing] = []
        for index in range(max(int(self.steps), 0)):
            ring = stroke_border(Circle().inset(float(index)), RING_LINE_WIDTH)
            out.append(
                GradientRing(
                    index=index,
                    path=ring.path(rect),
                    gradient=self.gradient_for(index, rect),
                    line_width=RING_LINE_WIDTH,
                )
            )
        return tuple(out)

    @property
    def animatable_data(self) -> float:
        return float(self.amount)

    def with_animatable_data(self, value: float) -> "ColorCyclingCircle":
        return replace(self, amount=float(value))


__all__ = [
    "ColorCyclingCircle",
    "GradientRing",
    "LinearGradient",
    "color_cycling_meta",
]
