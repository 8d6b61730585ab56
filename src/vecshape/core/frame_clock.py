# どこで: `src/vecshape/core/frame_clock.py`。
# 何を: 固定 fps のフレームタイムライン（フレーム番号 → 時刻 t）を提供する。
# なぜ: Transition のサンプル時刻を実時間から切り離し、決定的に列挙できるようにするため。

from __future__ import annotations


class FrameClock:
    """固定 fps のフレーム時計。

    Notes
    -----
    `t` は `t0 + frame_index/fps`。
    フレーム番号から毎回計算するため、加算誤差は蓄積しない。
    """

    def __init__(self, *, fps: float, t0: float = 0.0) -> None:
        _fps = float(fps)
        if _fps <= 0:
            raise ValueError("fps は正の値である必要がある")
        self._t0 = float(t0)
        self._fps = _fps
        self._frame_index = 0

    @property
    def fps(self) -> float:
        return float(self._fps)

    @property
    def frame_index(self) -> int:
        """現在のフレーム番号（0-based）を返す。"""

        return int(self._frame_index)

    def t(self) -> float:
        """現在のフレーム時刻 `t`（秒）を返す。"""

        return float(self._t0 + float(self._frame_index) / float(self._fps))

    def tick(self) -> None:
        """フレームを 1 つ進める。"""

        self._frame_index += 1


__all__ = ["FrameClock"]
