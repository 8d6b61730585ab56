"""
どこで: `src/vecshape/core/shapes/arrow.py`。矢印 shape の実体生成。
何を: 矩形中点からの固定オフセットで、上向きの矢印の閉多角形を構築する。
なぜ: パス形状は固定のまま、線幅（inset_amount）だけをアニメーションさせる例にするため。
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from vecshape.core.geometry import Rect
from vecshape.core.parameters.meta import ParamMeta
from vecshape.core.path import Path, PathBuilder
from vecshape.core.shape_registry import shape

# 矩形サイズに比例させない固定オフセット。
SHAFT_HALF_WIDTH = 20.0
HEAD_HALF_WIDTH = 70.0
HEAD_HEIGHT = 100.0
SHAFT_LENGTH = 200.0

arrow_meta = {
    "inset_amount": ParamMeta(kind="float", ui_min=2.0, ui_max=20.0),
}


@shape(meta=arrow_meta)
@dataclass(frozen=True, slots=True)
class Arrow:
    """上向きの矢印。

    inset_amount はパスには使わず、ホストが線幅として使う。
    """

    inset_amount: float = 2.0

    @property
    def line_width(self) -> float:
        return float(self.inset_amount)

    def path(self, rect: Rect) -> Path:
        """軸の左肩から始めて一周する 9 命令の閉パスを返す。"""
        mx, my = rect.mid_x, rect.mid_y
        builder = PathBuilder()
        builder.move_to(mx - SHAFT_HALF_WIDTH, my)
        builder.line_to(mx - HEAD_HALF_WIDTH, my)
        builder.line_to(mx, my - HEAD_HEIGHT)
        builder.line_to(mx + HEAD_HALF_WIDTH, my)
        builder.line_to(mx + SHAFT_HALF_WIDTH, my)
        builder.line_to(mx + SHAFT_HALF_WIDTH, my + SHAFT_LENGTH)
        builder.line_to(mx - SHAFT_HALF_WIDTH, my + SHAFT_LENGTH)
        builder.line_to(mx - SHAFT_HALF_WIDTH, my)
        builder.close()
        return builder.build()

    @property
    def animatable_data(self) -> float:
        return float(self.inset_amount)

    def with_animatable_data(self, value: float) -> "Arrow":
        return replace(self, inset_amount=float(value))
