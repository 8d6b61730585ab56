"""
どこで: `src/vecshape/core/color.py`。
何を: HSB 色の値型と、ステップ番号から色相を回した色を返す color 関数を提供する。
なぜ: 色相回転の規則を描画から切り離し、パス生成とは独立にテストできるようにするため。
"""

from __future__ import annotations

import colorsys
from dataclasses import dataclass

from vecshape.core.geometry import finite_float


def _clamp01(v: float) -> float:
    return 0.0 if v < 0.0 else 1.0 if v > 1.0 else v


@dataclass(frozen=True, slots=True)
class HSBColor:
    """色相・彩度・明度（各 0..1）の色。hue は 1 で折り返す。"""

    hue: float
    saturation: float = 1.0
    brightness: float = 1.0

    def __post_init__(self) -> None:
        hue = finite_float(self.hue, name="hue") % 1.0
        object.__setattr__(self, "hue", hue)
        object.__setattr__(
            self, "saturation", _clamp01(finite_float(self.saturation, name="saturation"))
        )
        object.__setattr__(
            self, "brightness", _clamp01(finite_float(self.brightness, name="brightness"))
        )

    def to_rgb01(self) -> tuple[float, float, float]:
        """0..1 float の RGB を返す。"""
        return colorsys.hsv_to_rgb(self.hue, self.saturation, self.brightness)

    def to_rgb255(self) -> tuple[int, int, int]:
        """0..255 int の RGB を返す。"""
        r, g, b = self.to_rgb01()
        return int(round(r * 255.0)), int(round(g * 255.0)), int(round(b * 255.0))

    def to_hex(self) -> str:
        """#RRGGBB 形式の文字列を返す。"""
        r, g, b = self.to_rgb255()
        return f"#{r:02X}{g:02X}{b:02X}"


def rgb01_to_hex(rgb01: tuple[float, float, float]) -> str:
    """0..1 float RGB を #RRGGBB に変換して返す。"""
    out: list[int] = []
    for v in rgb01:
        out.append(int(round(_clamp01(float(v)) * 255.0)))
    return f"#{out[0]:02X}{out[1]:02X}{out[2]:02X}"


def color(index: int, steps: int, amount: float, brightness: float) -> HSBColor:
    """index 番目のステップの色を返す。

    Parameters
    ----------
    index : int
        ステップ番号（0..steps-1）。
    steps : int
        総ステップ数。0 以下なら index による色相のずれを 0 とみなす。
    amount : float
        全体の色相回転量。アニメーション対象のスカラー。
    brightness : float
        明度。グラデーションの上端は 1、下端は 0.5 を使う。

    Returns
    -------
    HSBColor
        ``hue = (index/steps + amount) mod 1``、彩度 1 の色。
    """
    n = int(steps)
    fraction = float(index) / float(n) if n > 0 else 0.0
    return HSBColor(hue=fraction + float(amount), saturation=1.0, brightness=brightness)


__all__ = ["HSBColor", "color", "rgb01_to_hex"]
