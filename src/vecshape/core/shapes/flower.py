"""
どこで: `src/vecshape/core/shapes/flower.py`。花 shape の実体生成。
何を: 基準楕円（花弁）を π/8 ごとに回転し、矩形中心へ平行移動した複製を重ねる。
なぜ: アフィン変換でパスを複製する例として、花弁のオフセット/幅をスライダーで操作できるようにするため。
"""

from __future__ import annotations

import math
from dataclasses import dataclass, replace

import numpy as np

from vecshape.core.affine import AffineTransform
from vecshape.core.animatable import AnimatablePair
from vecshape.core.geometry import Rect
from vecshape.core.parameters.meta import ParamMeta
from vecshape.core.path import Path, PathBuilder
from vecshape.core.shape_registry import shape

PETAL_STEP = math.pi / 8.0

flower_meta = {
    "petal_offset": ParamMeta(kind="float", ui_min=-40.0, ui_max=40.0),
    "petal_width": ParamMeta(kind="float", ui_min=0.0, ui_max=100.0),
}


def petal_angles() -> np.ndarray:
    """花弁の回転角 [rad] 列を返す。

    0 から 2π まで終端を含めて π/8 刻みにとるため 17 個になり、
    0 と 2π の花弁は同じ位置に重なる。
    """
    return np.arange(17, dtype=np.float64) * PETAL_STEP


@shape(meta=flower_meta)
@dataclass(frozen=True, slots=True)
class Flower:
    """回転複製した楕円を重ねた花。

    Parameters
    ----------
    petal_offset : float
        花弁楕円の x 原点。負なら中心側へはみ出す。
    petal_width : float
        花弁楕円の幅。
    """

    petal_offset: float = -20.0
    petal_width: float = 100.0

    def path(self, rect: Rect) -> Path:
        petal = (
            PathBuilder()
            .add_ellipse(Rect(self.petal_offset, 0.0, self.petal_width, rect.width / 2.0))
            .build()
        )
        to_center = AffineTransform.translation(rect.mid_x, rect.mid_y)

        builder = PathBuilder()
        for angle in petal_angles():
            position = AffineTransform.rotation(float(angle)).concatenating(to_center)
            builder.add_path(petal.transformed(position))
        return builder.build()

    @property
    def animatable_data(self) -> AnimatablePair:
        return AnimatablePair(self.petal_offset, self.petal_width)

    def with_animatable_data(self, value: AnimatablePair) -> "Flower":
        return replace(self, petal_offset=value.first, petal_width=value.second)
