"""
どこで: `src/vecshape/core/shapes/trapezoid.py`。台形 shape の実体生成。
何を: 上辺の両端を inset_amount だけ内側へ寄せた台形パスを構築する。
なぜ: 単一スカラーをアニメーションさせる最小の shape として使うため。
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from vecshape.core.geometry import Rect
from vecshape.core.parameters.meta import ParamMeta
from vecshape.core.path import Path, PathBuilder
from vecshape.core.shape_registry import shape

trapezoid_meta = {
    "inset_amount": ParamMeta(kind="float", ui_min=10.0, ui_max=90.0),
}


@shape(meta=trapezoid_meta)
@dataclass(frozen=True, slots=True)
class Trapezoid:
    """上辺を左右から inset_amount ずつ縮めた台形。"""

    inset_amount: float = 50.0

    def path(self, rect: Rect) -> Path:
        """左下 → 左上(inset) → 右上(inset) → 右下 → 左下 のパスを返す。"""
        builder = PathBuilder()
        builder.move_to(rect.min_x, rect.max_y)
        builder.line_to(rect.min_x + self.inset_amount, rect.min_y)
        builder.line_to(rect.max_x - self.inset_amount, rect.min_y)
        builder.line_to(rect.max_x, rect.max_y)
        builder.line_to(rect.min_x, rect.max_y)
        return builder.build()

    @property
    def animatable_data(self) -> float:
        return float(self.inset_amount)

    def with_animatable_data(self, value: float) -> "Trapezoid":
        return replace(self, inset_amount=float(value))
