"""
どこで: `src/vecshape/core/shapes/checkerboard.py`。チェッカーボード shape の実体生成。
何を: rows x columns のセルのうち (row + column) が偶数のセルを矩形として並べる。
なぜ: 離散値 (rows, columns) を 2 成分ペアとしてアニメーションさせる例にするため。
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from vecshape.core.animatable import AnimatablePair
from vecshape.core.geometry import Rect
from vecshape.core.parameters.meta import ParamMeta
from vecshape.core.path import Path, PathBuilder
from vecshape.core.shape_registry import shape

checkerboard_meta = {
    "rows": ParamMeta(kind="int", ui_min=1, ui_max=32),
    "columns": ParamMeta(kind="int", ui_min=1, ui_max=32),
}


@shape(name="checkerboard", meta=checkerboard_meta)
@dataclass(frozen=True, slots=True)
class CheckerBoard:
    """市松模様。

    Notes
    -----
    animatable_data は (rows, columns) の float ペア。書き戻し時は各成分を
    0 方向へ切り捨てて整数化するため、補間中はグリッドが段階的に細かくなる。
    """

    rows: int = 4
    columns: int = 4

    def cells(self, rect: Rect) -> list[Rect]:
        """塗るセルの矩形を行優先で返す。rows/columns が 0 以下なら空。"""
        rows, columns = int(self.rows), int(self.columns)
        if rows <= 0 or columns <= 0:
            return []

        row_size = rect.height / rows
        column_size = rect.width / columns
        out: list[Rect] = []
        for row in range(rows):
            for column in range(columns):
                if (row + column) % 2 == 0:
                    out.append(
                        Rect(
                            rect.min_x + column_size * column,
                            rect.min_y + row_size * row,
                            column_size,
                            row_size,
                        )
                    )
        return out

    def path(self, rect: Rect) -> Path:
        builder = PathBuilder()
        for cell in self.cells(rect):
            builder.add_rect(cell)
        return builder.build()

    @property
    def animatable_data(self) -> AnimatablePair:
        return AnimatablePair(float(self.rows), float(self.columns))

    def with_animatable_data(self, value: AnimatablePair) -> "CheckerBoard":
        return replace(self, rows=int(value.first), columns=int(value.second))
