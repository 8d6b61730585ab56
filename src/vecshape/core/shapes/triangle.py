"""
どこで: `src/vecshape/core/shapes/triangle.py`。三角形 shape の実体生成。
何を: 外接矩形の上辺中点・左下・右下を結ぶ三角形パスを構築する。
なぜ: パス命令の最小例として、他の shape の基準にするため。
"""

from __future__ import annotations

from dataclasses import dataclass

from vecshape.core.geometry import Rect
from vecshape.core.path import Path, PathBuilder
from vecshape.core.shape_registry import shape


@shape(meta={})
@dataclass(frozen=True, slots=True)
class Triangle:
    """パラメータを持たない三角形。"""

    def path(self, rect: Rect) -> Path:
        """上辺中点 → 左下 → 右下 → 上辺中点の 4 命令パスを返す。

        最後の直線で開始点へ戻るため、先頭と末尾の点は一致する。
        """
        builder = PathBuilder()
        builder.move_to(rect.mid_x, rect.min_y)
        builder.line_to(rect.min_x, rect.max_y)
        builder.line_to(rect.max_x, rect.max_y)
        builder.line_to(rect.mid_x, rect.min_y)
        return builder.build()
