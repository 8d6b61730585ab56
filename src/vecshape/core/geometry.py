# src/vecshape/core/geometry.py
# 形状生成の入力となる Point / Rect の値型。
# すべての shape が受け取る外接矩形と、パス頂点の座標を表現する。

from __future__ import annotations

from dataclasses import dataclass
from math import isfinite
from typing import Any


def finite_float(value: Any, *, name: str) -> float:
    """値を有限の float に変換して返す。

    Parameters
    ----------
    value : Any
        変換対象の値。
    name : str
        エラーメッセージに使う引数名。

    Returns
    -------
    float
        有限の float 値。

    Raises
    ------
    ValueError
        数値に変換できない場合、または NaN/inf の場合。
    """
    try:
        v = float(value)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"{name} は数値である必要がある: got={value!r}") from exc
    if not isfinite(v):
        raise ValueError(f"{name} に非有限の値は使用できない: got={v!r}")
    if v == 0.0:
        # -0.0 を 0.0 に揃える。
        v = 0.0
    return v


@dataclass(frozen=True, slots=True)
class Point:
    """パス頂点の 2 次元座標。"""

    x: float
    y: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", finite_float(self.x, name="Point.x"))
        object.__setattr__(self, "y", finite_float(self.y, name="Point.y"))

    def as_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)


@dataclass(frozen=True, slots=True)
class Rect:
    """shape 生成に渡す外接矩形 (x, y, width, height)。

    Notes
    -----
    y 軸は下向き（min_y が上辺）。width/height が負でも例外にはせず、
    各 shape は退化した（空または最小の）パスを返す。
    """

    x: float
    y: float
    width: float
    height: float

    def __post_init__(self) -> None:
        for field_name in ("x", "y", "width", "height"):
            value = finite_float(getattr(self, field_name), name=f"Rect.{field_name}")
            object.__setattr__(self, field_name, value)

    @classmethod
    def of_size(cls, width: float, height: float) -> "Rect":
        """原点を左上とする矩形を返す。"""
        return cls(0.0, 0.0, width, height)

    @property
    def min_x(self) -> float:
        return self.x

    @property
    def mid_x(self) -> float:
        return self.x + self.width / 2.0

    @property
    def max_x(self) -> float:
        return self.x + self.width

    @property
    def min_y(self) -> float:
        return self.y

    @property
    def mid_y(self) -> float:
        return self.y + self.height / 2.0

    @property
    def max_y(self) -> float:
        return self.y + self.height

    @property
    def center(self) -> Point:
        return Point(self.mid_x, self.mid_y)

    @property
    def is_empty(self) -> bool:
        """幅または高さが 0 以下なら True。"""
        return self.width <= 0.0 or self.height <= 0.0

    def inset(self, amount: float) -> "Rect":
        """各辺を amount だけ内側へ縮めた矩形を返す。

        幅・高さは 0 未満にならないようクランプし、中心は保つ。
        """
        a = finite_float(amount, name="amount")
        width = max(self.width - 2.0 * a, 0.0)
        height = max(self.height - 2.0 * a, 0.0)
        return Rect(
            self.mid_x - width / 2.0,
            self.mid_y - height / 2.0,
            width,
            height,
        )


__all__ = ["Point", "Rect", "finite_float"]
