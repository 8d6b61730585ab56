# どこで: `src/vecshape/api/__init__.py`。
# 何を: 公開 API パッケージのエントリポイントとして S と、ユーザー定義登録用の shape、シーン関数を再エクスポートする。
# なぜ: ユーザーコードからシンプルに API を import できるようにするため。

from __future__ import annotations

from .scenes import SCENES, build_scene, scene_from_sliders
from .shapes import S
from vecshape.core.shape_registry import shape

__all__ = ["S", "SCENES", "build_scene", "scene_from_sliders", "shape"]
