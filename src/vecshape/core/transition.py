"""
どこで: `src/vecshape/core/transition.py`。
何を: 開始値→終了値の時間補間（Transition）と、shape をフレームごとに再生成する animate を提供する。
なぜ: ホストのアニメーションループが行う「補間値を毎フレーム shape に流し込む」処理を、
     描画フレームワークに依存しない純粋関数として再現・テストできるようにするため。
"""

from __future__ import annotations

from dataclasses import dataclass, field
from math import isfinite
from typing import Callable, Iterator, TypeVar

from vecshape.core.animatable import Animatable, AnimatableData, interpolate
from vecshape.core.frame_clock import FrameClock
from vecshape.core.runtime_config import runtime_config

Curve = Callable[[float], float]


def linear(t: float) -> float:
    return t


def ease_in_out(t: float) -> float:
    return 2.0 * t * t if t < 0.5 else -1.0 + (4.0 - 2.0 * t) * t


CURVES: dict[str, Curve] = {
    "linear": linear,
    "ease_in_out": ease_in_out,
}


@dataclass(frozen=True, slots=True)
class Transition:
    """start から end へ duration 秒かけて補間するタイムライン。

    Parameters
    ----------
    start, end : AnimatableData
        補間の両端。float 同士か AnimatablePair 同士。
    duration : float or None, optional
        秒数。None なら config の ``animation.duration``。0 以下なら即座に end になる。
    curve : Callable[[float], float] or str, optional
        進捗 0..1 を補間係数 0..1 に写す関数、または CURVES のキー。
    """

    start: AnimatableData
    end: AnimatableData
    duration: float | None = None
    curve: Curve | str = field(default=linear)

    def __post_init__(self) -> None:
        duration = self.duration
        if duration is None:
            duration = runtime_config().animation_duration
        duration = float(duration)
        if not isfinite(duration):
            raise ValueError("duration は有限である必要がある")
        object.__setattr__(self, "duration", duration)

        curve = self.curve
        if isinstance(curve, str):
            try:
                curve = CURVES[curve]
            except KeyError as exc:
                raise ValueError(f"未知の curve: {curve!r}") from exc
        object.__setattr__(self, "curve", curve)

    def progress(self, elapsed: float) -> float:
        """経過秒から 0..1 にクランプした進捗を返す。"""
        duration = float(self.duration)  # type: ignore[arg-type]
        if duration <= 0.0:
            return 1.0
        p = float(elapsed) / duration
        return 0.0 if p < 0.0 else 1.0 if p > 1.0 else p

    def value_at(self, elapsed: float) -> AnimatableData:
        """経過秒 elapsed 時点の補間値を返す。"""
        p = self.progress(elapsed)
        if p >= 1.0:
            return self.end
        curve: Curve = self.curve  # type: ignore[assignment]
        return interpolate(self.start, self.end, curve(p))

    def frames(self, fps: float | None = None) -> Iterator[tuple[float, AnimatableData]]:
        """固定 fps のタイムラインで (t, 値) を時刻昇順に返す。

        最初のサンプルは t=0、最後のサンプルは t=duration（値は end）。
        """
        duration = float(self.duration)  # type: ignore[arg-type]
        if duration <= 0.0:
            yield 0.0, self.end
            return

        clock = FrameClock(fps=fps if fps is not None else runtime_config().animation_fps)
        while clock.t() < duration - 1e-9:
            t = clock.t()
            yield t, self.value_at(t)
            clock.tick()
        yield duration, self.end


A = TypeVar("A", bound=Animatable)


def animate(
    shape: A,
    target: AnimatableData,
    *,
    duration: float | None = None,
    fps: float | None = None,
    curve: Curve | str = linear,
) -> Iterator[tuple[float, A]]:
    """shape の animatable_data を target へ補間し、各フレームの shape を返す。

    各フレームは補間値だけから独立に生成されるため、ホストがフレームを
    間引いても結果は変わらない。
    """
    transition = Transition(
        start=shape.animatable_data,
        end=target,
        duration=duration,
        curve=curve,
    )
    for t, value in transition.frames(fps):
        yield t, shape.with_animatable_data(value)


__all__ = ["CURVES", "Curve", "Transition", "animate", "ease_in_out", "linear"]
