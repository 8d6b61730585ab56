"""Transition / animate / FrameClock のテスト。"""

from __future__ import annotations

import numpy as np
import pytest

from vecshape.core.animatable import AnimatablePair
from vecshape.core.frame_clock import FrameClock
from vecshape.core.geometry import Rect
from vecshape.core.shapes.checkerboard import CheckerBoard
from vecshape.core.shapes.trapezoid import Trapezoid
from vecshape.core.transition import Transition, animate, ease_in_out


def test_frame_clock_advances_by_fixed_fps() -> None:
    clock = FrameClock(t0=1.0, fps=60.0)
    assert clock.fps == 60.0
    assert clock.frame_index == 0
    assert clock.t() == pytest.approx(1.0)

    for _ in range(60):
        clock.tick()
    assert clock.frame_index == 60
    assert clock.t() == pytest.approx(2.0)


def test_frame_clock_rejects_non_positive_fps() -> None:
    with pytest.raises(ValueError):
        FrameClock(fps=0.0)


def test_transition_value_clamps_progress() -> None:
    tr = Transition(start=10.0, end=90.0, duration=2.0)
    assert tr.value_at(-1.0) == 10.0
    assert tr.value_at(1.0) == pytest.approx(50.0)
    assert tr.value_at(5.0) == 90.0


def test_transition_frames_cover_both_endpoints_in_order() -> None:
    tr = Transition(start=0.0, end=1.0, duration=1.0)

    frames = list(tr.frames(fps=10.0))

    times = [t for t, _v in frames]
    assert times[0] == 0.0
    assert times[-1] == 1.0
    assert times == sorted(times)
    assert len(frames) == 11
    assert frames[-1][1] == 1.0


def test_zero_duration_jumps_to_end() -> None:
    tr = Transition(start=0.0, end=5.0, duration=0.0)
    assert list(tr.frames(fps=60.0)) == [(0.0, 5.0)]


def test_curve_can_be_named() -> None:
    tr = Transition(start=0.0, end=1.0, duration=1.0, curve="ease_in_out")
    assert tr.curve is ease_in_out
    assert tr.value_at(0.25) == pytest.approx(0.125)
    with pytest.raises(ValueError):
        Transition(start=0.0, end=1.0, duration=1.0, curve="bounce")


def test_trapezoid_top_edge_changes_monotonically() -> None:
    """inset 10 → 90 の補間で上辺の幅は単調に縮み、途中で跳ばない。"""
    rect = Rect.of_size(200.0, 100.0)
    widths = []
    for _t, shape in animate(Trapezoid(inset_amount=10.0), 90.0, duration=1.0, fps=30.0):
        path = shape.path(rect)
        left = path.commands[1].point.x  # type: ignore[union-attr]
        right = path.commands[2].point.x  # type: ignore[union-attr]
        widths.append(right - left)

    diffs = np.diff(widths)
    assert widths[0] == pytest.approx(180.0)
    assert widths[-1] == pytest.approx(20.0)
    assert np.all(diffs < 0)
    # 1 フレームあたりの変化は 160 / 30 を超えない。
    assert np.max(np.abs(diffs)) <= 160.0 / 30.0 + 1e-9


def test_checkerboard_animation_yields_integer_non_decreasing_grid() -> None:
    rows_cols = [
        (board.rows, board.columns)
        for _t, board in animate(
            CheckerBoard(rows=4, columns=4),
            AnimatablePair(8.0, 16.0),
            duration=3.0,
            fps=60.0,
        )
    ]

    assert rows_cols[0] == (4, 4)
    assert rows_cols[-1] == (8, 16)
    assert all(isinstance(r, int) and isinstance(c, int) for r, c in rows_cols)
    rows = [r for r, _c in rows_cols]
    cols = [c for _r, c in rows_cols]
    assert rows == sorted(rows)
    assert cols == sorted(cols)
