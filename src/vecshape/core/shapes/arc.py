"""
どこで: `src/vecshape/core/shapes/arc.py`。円弧 shape の実体生成。
何を: 上向きを 0° とする角度指定から、矩形中心・半径 width/2 - inset の円弧パスを構築する。
なぜ: inset 可能な shape として、同じ円弧を複数の半径で描く合成に使えるようにするため。
"""

from __future__ import annotations

import math
from dataclasses import dataclass, replace

from vecshape.core.animatable import AnimatablePair
from vecshape.core.geometry import Rect
from vecshape.core.parameters.meta import ParamMeta
from vecshape.core.path import Path, PathBuilder
from vecshape.core.shape_registry import shape

# 呼び出し側は「上が 0°」、パス側は「右が 0°」なので 90° ずらす。
ROTATION_ADJUSTMENT_DEG = 90.0

arc_meta = {
    "start_angle": ParamMeta(kind="float", ui_min=0.0, ui_max=360.0),
    "end_angle": ParamMeta(kind="float", ui_min=0.0, ui_max=360.0),
    "clockwise": ParamMeta(kind="bool"),
    "inset_amount": ParamMeta(kind="float", ui_min=0.0, ui_max=100.0),
}


@shape(meta=arc_meta)
@dataclass(frozen=True, slots=True)
class Arc:
    """inset 可能な円弧。

    Parameters
    ----------
    start_angle, end_angle : float
        開始角・終了角 [deg]。0° が上、範囲の強制はしない。
    clockwise : bool
        呼び出し側から見た回転向き。
    inset_amount : float
        半径から差し引く量。
    """

    start_angle: float = 0.0
    end_angle: float = 110.0
    clockwise: bool = True
    inset_amount: float = 0.0

    def path(self, rect: Rect) -> Path:
        """単一の円弧命令からなるパスを返す。

        Notes
        -----
        角度から 90° を引き、clockwise を反転してからパスへ渡す。
        この組は固定の変換規則で、設定では変えない。
        """
        start = math.radians(self.start_angle - ROTATION_ADJUSTMENT_DEG)
        end = math.radians(self.end_angle - ROTATION_ADJUSTMENT_DEG)
        builder = PathBuilder()
        builder.add_arc(
            rect.center,
            rect.width / 2.0 - self.inset_amount,
            start,
            end,
            clockwise=not self.clockwise,
        )
        return builder.build()

    def inset(self, amount: float) -> "Arc":
        return replace(self, inset_amount=self.inset_amount + float(amount))

    @property
    def animatable_data(self) -> AnimatablePair:
        return AnimatablePair(self.start_angle, self.end_angle)

    def with_animatable_data(self, value: AnimatablePair) -> "Arc":
        return replace(self, start_angle=value.first, end_angle=value.second)
