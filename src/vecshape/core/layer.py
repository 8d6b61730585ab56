"""
どこで: `src/vecshape/core/layer.py`。
何を: Path と描画スタイル（線色・塗り色・線幅・グラデーション）を束ねる Layer と、シーン正規化を定義する。
なぜ: パス生成とスタイルを分離し、SVG 出力やホスト描画で共通のシーン表現を扱うため。
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import TypeAlias

from vecshape.core.color_cycling import LinearGradient
from vecshape.core.path import Path

ColorRGB = tuple[float, float, float]


@dataclass(frozen=True, slots=True)
class Layer:
    """Path と RGB 色・線幅を束ねるシーン要素。

    stroke/fill が None の場合はその描画を行わない。
    gradient がある場合、線色は gradient で置き換える。
    """

    path: Path
    stroke: ColorRGB | None = (0.0, 0.0, 0.0)
    fill: ColorRGB | None = None
    line_width: float = 1.0
    gradient: LinearGradient | None = None
    even_odd: bool = False
    name: str | None = None

    def __post_init__(self) -> None:
        if self.line_width < 0:
            raise ValueError("line_width は 0 以上である必要がある")


SceneItem: TypeAlias = Path | Layer | Sequence["SceneItem"]


def normalize_scene(scene: SceneItem) -> list[Layer]:
    """Path/Layer/ネスト列を `list[Layer]` にフラット化する。

    Path は既定スタイル（黒・線幅 1）の Layer へ包む。

    Raises
    ------
    TypeError
        未対応の型が含まれる場合。
    """

    result: list[Layer] = []

    def _walk(item: SceneItem) -> None:
        if isinstance(item, Layer):
            result.append(item)
            return
        if isinstance(item, Path):
            result.append(Layer(path=item))
            return
        if isinstance(item, Sequence) and not isinstance(item, (str, bytes)):
            for child in item:
                _walk(child)  # type: ignore[arg-type]
            return
        raise TypeError(f"normalize_scene で処理できない型: {type(item)!r}")

    _walk(scene)
    return result


__all__ = ["ColorRGB", "Layer", "SceneItem", "normalize_scene"]
