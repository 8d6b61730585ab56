"""
どこで: `src/vecshape/export/svg.py`。
何を: Path を SVG の d 属性へ、Layer 列を SVG 文書テキストへ変換する関数を提供する。
なぜ: 描画フレームワークなしで生成結果を確認・比較できる、決定的なテキスト表現を用意するため。
"""

from __future__ import annotations

import math

from vecshape.core.color import rgb01_to_hex
from vecshape.core.color_cycling import LinearGradient
from vecshape.core.layer import Layer, SceneItem, normalize_scene
from vecshape.core.path import ArcTo, Close, CurveTo, LineTo, MoveTo, Path, TAU, arc_point
from vecshape.core.runtime_config import runtime_config

_SVG_NS = "http://www.w3.org/2000/svg"


def _fmt(value: float, *, decimals: int) -> str:
    """SVG 出力向けに float を決定的な文字列へ変換して返す。"""
    text = f"{float(value):.{int(decimals)}f}"
    if text.startswith("-") and float(text) == 0.0:
        return text[1:]
    return text


def _xy(x: float, y: float, decimals: int) -> str:
    return f"{_fmt(x, decimals=decimals)} {_fmt(y, decimals=decimals)}"


def _arc_to_d(arc: ArcTo, *, has_current: bool, decimals: int) -> list[str]:
    start = arc.start_point
    parts = [f"{'L' if has_current else 'M'} {_xy(start.x, start.y, decimals)}"]
    sweep = arc.sweep
    r = max(float(arc.radius), 0.0)
    if sweep == 0.0 or r == 0.0:
        return parts

    sweep_flag = 1 if sweep > 0.0 else 0
    r_text = _fmt(r, decimals=decimals)
    if abs(sweep) >= TAU - 1e-9:
        # SVG の A は始点と終点が一致すると描かれないため、半周ずつに分ける。
        mid = arc_point(arc.center, r, arc.start_angle + sweep / 2.0)
        end = arc.end_point
        parts.append(f"A {r_text} {r_text} 0 0 {sweep_flag} {_xy(mid.x, mid.y, decimals)}")
        parts.append(f"A {r_text} {r_text} 0 0 {sweep_flag} {_xy(end.x, end.y, decimals)}")
        return parts

    large_arc = 1 if abs(sweep) > math.pi else 0
    end = arc.end_point
    parts.append(
        f"A {r_text} {r_text} 0 {large_arc} {sweep_flag} {_xy(end.x, end.y, decimals)}"
    )
    return parts


def path_to_svg_d(path: Path, *, decimals: int | None = None) -> str:
    """Path を SVG path の d 属性文字列へ変換して返す。

    Parameters
    ----------
    path : Path
        変換対象のパス。
    decimals : int or None, optional
        小数桁数。None なら config の ``export.svg.decimals``。

    Returns
    -------
    str
        空パスなら空文字列。
    """
    dec = int(decimals if decimals is not None else runtime_config().svg_decimals)
    parts: list[str] = []
    has_current = False
    for cmd in path:
        if isinstance(cmd, MoveTo):
            parts.append(f"M {_xy(cmd.point.x, cmd.point.y, dec)}")
            has_current = True
        elif isinstance(cmd, LineTo):
            op = "L" if has_current else "M"
            parts.append(f"{op} {_xy(cmd.point.x, cmd.point.y, dec)}")
            has_current = True
        elif isinstance(cmd, CurveTo):
            parts.append(
                "C "
                f"{_xy(cmd.control1.x, cmd.control1.y, dec)} "
                f"{_xy(cmd.control2.x, cmd.control2.y, dec)} "
                f"{_xy(cmd.point.x, cmd.point.y, dec)}"
            )
            has_current = True
        elif isinstance(cmd, ArcTo):
            parts.extend(_arc_to_d(cmd, has_current=has_current, decimals=dec))
            has_current = True
        elif isinstance(cmd, Close):
            parts.append("Z")
    return " ".join(parts)


def _gradient_def(gradient: LinearGradient, gradient_id: str, decimals: int) -> str:
    return (
        f'    <linearGradient id="{gradient_id}" gradientUnits="userSpaceOnUse" '
        f'x1="{_fmt(gradient.start_point.x, decimals=decimals)}" '
        f'y1="{_fmt(gradient.start_point.y, decimals=decimals)}" '
        f'x2="{_fmt(gradient.end_point.x, decimals=decimals)}" '
        f'y2="{_fmt(gradient.end_point.y, decimals=decimals)}">'
        f'<stop offset="0" stop-color="{gradient.start_color.to_hex()}" />'
        f'<stop offset="1" stop-color="{gradient.end_color.to_hex()}" />'
        "</linearGradient>"
    )


def svg_document(
    scene: SceneItem,
    *,
    canvas_size: tuple[int, int] | None = None,
    decimals: int | None = None,
) -> str:
    """シーンを SVG 文書テキストとして返す。

    Parameters
    ----------
    scene : SceneItem
        Path / Layer / それらのネスト列。
    canvas_size : tuple[int, int] or None, optional
        キャンバス寸法。None なら config の ``canvas.size``。
    decimals : int or None, optional
        小数桁数。None なら config の ``export.svg.decimals``。

    Returns
    -------
    str
        改行区切りの SVG テキスト（末尾改行付き）。

    Raises
    ------
    ValueError
        canvas_size が正の値でない場合。
    """
    cfg = runtime_config()
    canvas_w, canvas_h = canvas_size if canvas_size is not None else cfg.canvas_size
    if canvas_w <= 0 or canvas_h <= 0:
        raise ValueError("canvas_size は正の値である必要がある")
    dec = int(decimals if decimals is not None else cfg.svg_decimals)

    layers: list[Layer] = normalize_scene(scene)

    defs: list[str] = []
    body: list[str] = []
    for layer in layers:
        d = path_to_svg_d(layer.path, decimals=dec)
        if not d:
            continue

        if layer.gradient is not None:
            gradient_id = f"gradient-{len(defs) + 1}"
            defs.append(_gradient_def(layer.gradient, gradient_id, dec))
            stroke = f"url(#{gradient_id})"
        elif layer.stroke is not None:
            stroke = rgb01_to_hex(layer.stroke)
        else:
            stroke = "none"
        fill = rgb01_to_hex(layer.fill) if layer.fill is not None else "none"

        attrs = [f'd="{d}"', f'fill="{fill}"']
        if layer.even_odd:
            attrs.append('fill-rule="evenodd"')
        attrs.append(f'stroke="{stroke}"')
        if stroke != "none":
            attrs.append(f'stroke-width="{_fmt(layer.line_width, decimals=dec)}"')
            attrs.append('stroke-linecap="round"')
            attrs.append('stroke-linejoin="round"')
        body.append(f"  <path {' '.join(attrs)} />")

    lines: list[str] = []
    lines.append('<?xml version="1.0" encoding="UTF-8"?>')
    lines.append(
        (
            f'<svg xmlns="{_SVG_NS}" viewBox="0 0 {int(canvas_w)} {int(canvas_h)}" '
            f'width="{int(canvas_w)}" height="{int(canvas_h)}">'
        )
    )
    if defs:
        lines.append("  <defs>")
        lines.extend(defs)
        lines.append("  </defs>")
    lines.extend(body)
    lines.append("</svg>")
    return "\n".join(lines) + "\n"


__all__ = ["path_to_svg_d", "svg_document"]
