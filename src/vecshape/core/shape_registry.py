# src/vecshape/core/shape_registry.py
# shape 名から shape クラス（パラメータを持つ不変 dataclass）を引くレジストリ。
# 名前・メタ情報・デフォルト値を一元管理し、公開名前空間 S から参照させる。

from __future__ import annotations

import dataclasses
import logging
import re
from collections.abc import ItemsView
from typing import Any, Callable, TypeVar

from vecshape.core.parameters.meta import ParamMeta

_logger = logging.getLogger(__name__)

ShapeClass = TypeVar("ShapeClass", bound=type)


class ShapeRegistry:
    """shape 名と shape クラスを対応付けるレジストリ。

    Notes
    -----
    登録されるクラスは frozen dataclass で、``path(rect) -> Path`` を実装する想定。
    """

    def __init__(self) -> None:
        """空のレジストリを初期化する。"""
        self._items: dict[str, type] = {}
        self._meta: dict[str, dict[str, ParamMeta]] = {}
        self._defaults: dict[str, dict[str, Any]] = {}
        self._param_order: dict[str, tuple[str, ...]] = {}

    def _register(
        self,
        name: str,
        cls: type,
        *,
        overwrite: bool = True,
        meta: dict[str, ParamMeta] | None = None,
        defaults: dict[str, Any] | None = None,
        param_order: tuple[str, ...] | None = None,
    ) -> None:
        """shape を登録する（内部用）。

        Notes
        -----
        登録は `@shape` デコレータ経由に統一する。
        """
        if name in self._items:
            if not overwrite:
                raise ValueError(f"shape '{name}' は既に登録されている")
            _logger.warning("shape '%s' を上書き登録します: %s", name, cls.__qualname__)
        self._items[name] = cls
        self._meta[name] = dict(meta or {})
        self._defaults[name] = dict(defaults or {})
        self._param_order[name] = tuple(param_order or ())

    def get(self, name: str) -> type:
        """shape 名に対応するクラスを取得する。

        Raises
        ------
        KeyError
            未登録の shape 名が指定された場合。
        """
        return self._items[name]

    def __contains__(self, name: object) -> bool:
        return name in self._items

    def __getitem__(self, name: str) -> type:
        return self.get(name)

    def items(self) -> ItemsView[str, type]:
        """登録済みエントリの (name, cls) ビューを返す。"""
        return self._items.items()

    def get_meta(self, name: str) -> dict[str, ParamMeta]:
        """shape 名に対応する ParamMeta 辞書を取得する。"""
        return dict(self._meta.get(name, {}))

    def get_defaults(self, name: str) -> dict[str, Any]:
        """shape 名に対応するデフォルト引数辞書を取得する。"""
        return dict(self._defaults.get(name, {}))

    def get_param_order(self, name: str) -> tuple[str, ...]:
        """shape 名に対応するスライダー表示順を返す。"""
        return tuple(self._param_order.get(name, ()))


shape_registry = ShapeRegistry()
"""グローバルな shape レジストリインスタンス。"""


def _snake_case(name: str) -> str:
    return re.sub(r"(?<!^)(?=[A-Z])", "_", name).lower()


def shape(
    cls: ShapeClass | None = None,
    *,
    name: str | None = None,
    overwrite: bool = True,
    meta: dict[str, ParamMeta] | None = None,
) -> ShapeClass | Callable[[ShapeClass], ShapeClass]:
    """グローバル shape レジストリ用デコレータ。

    クラス名の snake_case（または name 指定）を shape 名として登録する。

    Examples
    --------
    @shape(meta={"inset_amount": ParamMeta(kind="float", ui_min=0.0, ui_max=100.0)})
    @dataclass(frozen=True, slots=True)
    class Trapezoid:
        inset_amount: float = 50.0
        ...
    """

    def decorator(c: ShapeClass) -> ShapeClass:
        if not dataclasses.is_dataclass(c):
            raise TypeError(f"shape は dataclass である必要がある: {c.__qualname__}")

        fields = {f.name: f for f in dataclasses.fields(c)}
        param_meta = dict(meta or {})
        defaults: dict[str, Any] = {}
        for arg in param_meta:
            field = fields.get(arg)
            if field is None:
                raise ValueError(
                    f"shape '{c.__name__}' の meta 引数がフィールドに存在しない: {arg!r}"
                )
            if field.default is dataclasses.MISSING:
                raise ValueError(
                    f"shape '{c.__name__}' の meta 引数は default 必須: {arg!r}"
                )
            defaults[arg] = field.default

        param_order = tuple(f for f in fields if f in param_meta)
        shape_registry._register(
            name or _snake_case(c.__name__),
            c,
            overwrite=overwrite,
            meta=param_meta,
            defaults=defaults,
            param_order=param_order,
        )
        return c

    if cls is None:
        return decorator
    return decorator(cls)


__all__ = ["ShapeRegistry", "shape", "shape_registry"]
