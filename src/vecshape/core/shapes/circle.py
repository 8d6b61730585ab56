"""
どこで: `src/vecshape/core/shapes/circle.py`。円 shape の実体生成。
何を: 矩形に内接する円を inset_amount だけ縮めた 1 周の円弧パスを構築する。
なぜ: 色相回転サークルのように、同心円を inset で並べる合成の部品にするため。
"""

from __future__ import annotations

import math
from dataclasses import dataclass, replace

from vecshape.core.geometry import Rect
from vecshape.core.parameters.meta import ParamMeta
from vecshape.core.path import Path, PathBuilder
from vecshape.core.shape_registry import shape

circle_meta = {
    "inset_amount": ParamMeta(kind="float", ui_min=0.0, ui_max=150.0),
}


@shape(meta=circle_meta)
@dataclass(frozen=True, slots=True)
class Circle:
    """inset 可能な円。半径は min(width, height)/2 - inset_amount。"""

    inset_amount: float = 0.0

    def radius(self, rect: Rect) -> float:
        return min(rect.width, rect.height) / 2.0 - self.inset_amount

    def path(self, rect: Rect) -> Path:
        """半径が 0 以下なら空パスを返す。"""
        r = self.radius(rect)
        if r <= 0.0:
            return Path()
        builder = PathBuilder()
        builder.add_arc(rect.center, r, 0.0, 2.0 * math.pi, clockwise=False)
        builder.close()
        return builder.build()

    def inset(self, amount: float) -> "Circle":
        return replace(self, inset_amount=self.inset_amount + float(amount))
