"""Flower shape（花弁の回転複製）のテスト。"""

from __future__ import annotations

import math

import numpy as np
import pytest

from vecshape.core.geometry import Rect
from vecshape.core.path import Close, CurveTo, MoveTo
from vecshape.core.shapes.flower import Flower, petal_angles


def test_petal_angles_include_both_ends() -> None:
    angles = petal_angles()
    assert len(angles) == 17
    assert angles[0] == 0.0
    assert angles[-1] == pytest.approx(2.0 * math.pi)


def test_flower_has_one_closed_ellipse_per_petal() -> None:
    path = Flower().path(Rect.of_size(300.0, 300.0))

    subpaths = path.subpaths()
    assert len(subpaths) == 17
    for sub in subpaths:
        kinds = [type(c) for c in sub]
        assert kinds == [MoveTo, CurveTo, CurveTo, CurveTo, CurveTo, Close]


def test_first_petal_is_translated_to_rect_center() -> None:
    """0 rad の花弁は回転せず、楕円の右端が (mid_x + offset + width, mid_y + h/2) に来る。"""
    rect = Rect.of_size(300.0, 300.0)
    path = Flower(petal_offset=-20.0, petal_width=100.0).path(rect)

    first = path.commands[0]
    assert isinstance(first, MoveTo)
    # 楕円 Rect(-20, 0, 100, 150) の右端中点 (80, 75) を中心 (150, 150) へ移す。
    assert first.point.x == pytest.approx(230.0)
    assert first.point.y == pytest.approx(225.0)


def test_flower_points_are_finite_and_shared_by_first_and_last_petal() -> None:
    subpaths = Flower().path(Rect.of_size(300.0, 300.0)).subpaths()
    flat_first = subpaths[0].flatten(curve_segments=8).coords
    flat_last = subpaths[-1].flatten(curve_segments=8).coords

    assert np.all(np.isfinite(flat_first))
    np.testing.assert_allclose(flat_first, flat_last, atol=1e-9)


def test_zero_width_petal_still_builds() -> None:
    path = Flower(petal_width=0.0).path(Rect.of_size(100.0, 100.0))
    assert len(path.subpaths()) == 17
