# どこで: `src/vecshape/core/parameters/__init__.py`。
# 何を: パラメータメタ情報の公開エイリアスをまとめる。
# なぜ: shape 実装や API 層から最小インポートで使えるようにするため。

from .meta import ParamMeta, normalize_input, slider_value

__all__ = ["ParamMeta", "normalize_input", "slider_value"]
