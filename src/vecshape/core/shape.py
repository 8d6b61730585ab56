# src/vecshape/core/shape.py
# shape の共通規約（Shape / InsettableShape）と、ホストが呼ぶ generate / inset 関数。

from __future__ import annotations

import logging
from typing import Protocol, TypeVar, runtime_checkable

from vecshape.core.geometry import Rect
from vecshape.core.path import Path

_logger = logging.getLogger(__name__)


@runtime_checkable
class Shape(Protocol):
    """外接矩形からパスを生成する shape。"""

    def path(self, rect: Rect) -> Path: ...


I = TypeVar("I", bound="InsettableShape")


@runtime_checkable
class InsettableShape(Shape, Protocol):
    """inset 量で輪郭を内側へ縮められる shape。"""

    inset_amount: float

    def inset(self: I, amount: float) -> I: ...


def generate(shape: Shape, rect: Rect) -> Path:
    """shape を rect に当てはめたパスを返す。

    同じ入力に対しては常に同じパスを返し、呼び出し間で状態を持たない。
    """
    path = shape.path(rect)
    _logger.debug("%s: %d commands", type(shape).__name__, len(path))
    return path


def inset(shape: I, delta: float) -> I:
    """inset_amount を delta だけ増やした新しい shape を返す（元の shape は変えない）。"""
    return shape.inset(delta)


def stroke_border(shape: I, line_width: float) -> I:
    """線幅 line_width で輪郭の内側に収まるよう、半分だけ inset した shape を返す。"""
    return shape.inset(float(line_width) / 2.0)


__all__ = ["InsettableShape", "Shape", "generate", "inset", "stroke_border"]
