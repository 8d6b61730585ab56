# どこで: `src/vecshape/api/shapes.py`。
# 何を: 登録済み shape を名前で生成する公開名前空間 S を提供する。
# なぜ: shape クラスを直接 import せずに、スライダー値などの生入力から shape を組み立てられるようにするため。

from __future__ import annotations

from typing import Any, Callable

from vecshape.core.parameters.meta import normalize_input
from vecshape.core.shape_registry import shape_registry

# shape 実装モジュールをインポートしてレジストリに登録させる。
from vecshape.core.shapes import arc as _shape_arc  # noqa: F401
from vecshape.core.shapes import arrow as _shape_arrow  # noqa: F401
from vecshape.core.shapes import checkerboard as _shape_checkerboard  # noqa: F401
from vecshape.core.shapes import circle as _shape_circle  # noqa: F401
from vecshape.core.shapes import flower as _shape_flower  # noqa: F401
from vecshape.core.shapes import trapezoid as _shape_trapezoid  # noqa: F401
from vecshape.core.shapes import triangle as _shape_triangle  # noqa: F401


class ShapeNamespace:
    """shape インスタンスを生成する名前空間。

    Attributes
    ----------
    <name> : Callable[..., Any]
        登録済み shape 名ごとのファクトリ。
        例: S.flower(petal_width=80) -> Flower(petal_offset=-20.0, petal_width=80.0)
    """

    def __getattr__(self, name: str) -> Callable[..., Any]:
        """shape 名に対応するファクトリを返す。

        Raises
        ------
        AttributeError
            未登録の shape 名が指定された場合。
        """
        if name.startswith("_"):
            raise AttributeError(name)

        if name not in shape_registry:
            raise AttributeError(f"未登録の shape: {name!r}")

        def factory(**params: Any) -> Any:
            """meta に従って引数を正規化し、shape を生成する。

            meta を持たない引数はそのまま渡す。未知の引数は TypeError になる。
            """
            cls = shape_registry.get(name)
            meta = shape_registry.get_meta(name)
            resolved: dict[str, Any] = {}
            for arg, value in params.items():
                arg_meta = meta.get(arg)
                resolved[arg] = normalize_input(value, arg_meta) if arg_meta else value
            return cls(**resolved)

        return factory

    def __dir__(self) -> list[str]:
        return sorted(name for name, _cls in shape_registry.items())


S = ShapeNamespace()
"""shape インスタンスを生成する公開名前空間。"""

__all__ = ["S"]
