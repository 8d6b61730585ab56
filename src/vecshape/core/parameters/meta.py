# どこで: `src/vecshape/core/parameters/meta.py`。
# 何を: ParamMeta（スライダー表示/値正規化のためのメタ情報）と kind 別の正規化を提供する。
# なぜ: shape 引数の型・スライダーレンジ情報を一元管理し、ホストのスライダー値を shape に渡せる形へ揃えるため。

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

_KINDS = ("float", "int", "bool")


@dataclass(frozen=True, slots=True)
class ParamMeta:
    """パラメータの UI/検証用メタ情報。

    ui_min/ui_max はスライダー初期レンジを示すだけで、実値をクランプしない。
    """

    kind: str  # "float" | "int" | "bool"
    ui_min: Any | None = None
    ui_max: Any | None = None

    def __post_init__(self) -> None:
        if self.kind not in _KINDS:
            raise ValueError(f"未対応の ParamMeta.kind: {self.kind!r}")


def normalize_input(value: Any, meta: ParamMeta) -> Any:
    """kind に応じて入力値を正規化して返す。

    Raises
    ------
    ValueError
        int/float に変換できない場合。
    """

    kind = meta.kind

    if kind == "bool":
        if isinstance(value, str):
            lowered = value.strip().lower()
            if lowered in {"true", "1", "on", "yes"}:
                return True
            if lowered in {"false", "0", "off", "no"}:
                return False
        return bool(value)

    if kind == "int":
        try:
            # スライダー由来の float は 0 方向へ切り捨てる。
            return int(float(value))
        except (TypeError, ValueError) as exc:
            raise ValueError(f"int に変換できない値: {value!r}") from exc

    try:
        return float(value)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"float に変換できない値: {value!r}") from exc


def slider_value(position: float, meta: ParamMeta) -> Any:
    """スライダー位置（0..1）を ui_min..ui_max の値へ写して返す。

    位置は 0..1 にクランプする。bool は位置 0.5 以上を True とする。

    Raises
    ------
    ValueError
        bool 以外で ui_min/ui_max を持たない meta の場合。
    """

    p = float(position)
    p = 0.0 if p < 0.0 else 1.0 if p > 1.0 else p
    if meta.kind == "bool":
        return p >= 0.5
    if meta.ui_min is None or meta.ui_max is None:
        raise ValueError("slider_value には ui_min/ui_max が必要")
    lo, hi = float(meta.ui_min), float(meta.ui_max)
    return normalize_input(lo + (hi - lo) * p, meta)
