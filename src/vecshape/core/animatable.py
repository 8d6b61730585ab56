"""
どこで: `src/vecshape/core/animatable.py`。
何を: アニメーション可能な値（スカラー / 2 成分ペア）の線形補間規約を定義する。
なぜ: ホストが開始値と終了値の間を毎フレーム補間し、shape がその中間値からパスを再生成できるようにするため。
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol, TypeAlias, TypeVar, runtime_checkable

from vecshape.core.geometry import finite_float


def lerp(a: float, b: float, t: float) -> float:
    """a と b の間を t（0..1）で線形補間した値を返す。"""
    a_f, b_f, t_f = float(a), float(b), float(t)
    return a_f + (b_f - a_f) * t_f


@dataclass(frozen=True, slots=True)
class AnimatablePair:
    """成分ごとに補間される 2 成分の値。

    CheckerBoard の (rows, columns) や Flower の (petal_offset, petal_width) のように、
    2 つのスカラーを同時にアニメーションさせるときに使う。
    """

    first: float
    second: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "first", finite_float(self.first, name="first"))
        object.__setattr__(self, "second", finite_float(self.second, name="second"))

    def __add__(self, other: object) -> "AnimatablePair":
        if not isinstance(other, AnimatablePair):
            return NotImplemented
        return AnimatablePair(self.first + other.first, self.second + other.second)

    def __sub__(self, other: object) -> "AnimatablePair":
        if not isinstance(other, AnimatablePair):
            return NotImplemented
        return AnimatablePair(self.first - other.first, self.second - other.second)

    def __mul__(self, k: object) -> "AnimatablePair":
        if isinstance(k, bool) or not isinstance(k, (int, float)):
            return NotImplemented
        return AnimatablePair(self.first * float(k), self.second * float(k))

    __rmul__ = __mul__

    def lerp(self, other: "AnimatablePair", t: float) -> "AnimatablePair":
        return AnimatablePair(
            lerp(self.first, other.first, t),
            lerp(self.second, other.second, t),
        )


AnimatableData: TypeAlias = float | AnimatablePair

S = TypeVar("S", bound="Animatable")


@runtime_checkable
class Animatable(Protocol):
    """アニメーション可能な値を公開する shape の規約。"""

    @property
    def animatable_data(self) -> Any: ...

    def with_animatable_data(self: S, value: Any) -> S: ...


def interpolate(start: AnimatableData, end: AnimatableData, t: float) -> AnimatableData:
    """スカラーは通常の lerp、AnimatablePair は成分ごとの lerp で補間する。

    Raises
    ------
    TypeError
        start/end の型が揃っていない、または補間できない型の場合。
    """
    if isinstance(start, AnimatablePair) and isinstance(end, AnimatablePair):
        return start.lerp(end, t)
    if _is_scalar(start) and _is_scalar(end):
        return lerp(float(start), float(end), t)  # type: ignore[arg-type]
    raise TypeError(
        f"補間できない組み合わせ: {type(start).__name__} と {type(end).__name__}"
    )


def _is_scalar(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def interpolate_shape(start: S, end: S, t: float) -> S:
    """2 つの同種 shape の animatable_data を補間した shape を返す。

    animatable_data 以外のフィールドは start のものを引き継ぐ。
    """
    if type(start) is not type(end):
        raise TypeError(
            f"異なる shape 間は補間できない: {type(start).__name__} と {type(end).__name__}"
        )
    value = interpolate(start.animatable_data, end.animatable_data, t)
    return start.with_animatable_data(value)


__all__ = [
    "Animatable",
    "AnimatableData",
    "AnimatablePair",
    "interpolate",
    "interpolate_shape",
    "lerp",
]
