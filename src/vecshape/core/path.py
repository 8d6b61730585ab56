"""
どこで: `src/vecshape/core/path.py`。
何を: move/line/curve/arc/close 命令列としての Path と、それを組み立てる PathBuilder を定義する。
なぜ: すべての shape が同じ命令語彙でパスを返し、ホスト側（描画・SVG 出力）が一様に扱えるようにするため。
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, Sequence, TypeAlias

import numpy as np

from vecshape.core.affine import AffineTransform
from vecshape.core.geometry import Point, Rect, finite_float
from vecshape.core.runtime_config import runtime_config

TAU = 2.0 * math.pi

# 4 本の 3 次ベジェで楕円を近似するときの制御点係数。
KAPPA = 0.5522847498307936


@dataclass(frozen=True, slots=True)
class MoveTo:
    """新しいサブパスを point から開始する。"""

    point: Point


@dataclass(frozen=True, slots=True)
class LineTo:
    """現在点から point まで直線を引く。"""

    point: Point


@dataclass(frozen=True, slots=True)
class CurveTo:
    """現在点から point まで 3 次ベジェ曲線を引く。"""

    control1: Point
    control2: Point
    point: Point


@dataclass(frozen=True, slots=True)
class ArcTo:
    """円弧命令。

    Parameters
    ----------
    center : Point
        円弧の中心。
    radius : float
        半径。負値はそのまま保持し、平坦化時に 0 として扱う。
    start_angle, end_angle : float
        開始角・終了角 [rad]。0 が +X 方向、y 軸下向きの座標系で角度が増える向きに回る。
    clockwise : bool
        True なら角度が減る向き、False なら増える向きに掃引する。

    Notes
    -----
    現在点がある場合は円弧の始点まで暗黙の直線で結ぶ。
    現在点がない場合は円弧の始点から新しいサブパスを開始する。
    """

    center: Point
    radius: float
    start_angle: float
    end_angle: float
    clockwise: bool

    @property
    def sweep(self) -> float:
        """符号付き掃引角 [rad] を返す。"""
        return arc_sweep(self.start_angle, self.end_angle, clockwise=self.clockwise)

    @property
    def start_point(self) -> Point:
        return arc_point(self.center, self.radius, self.start_angle)

    @property
    def end_point(self) -> Point:
        return arc_point(self.center, self.radius, self.start_angle + self.sweep)


@dataclass(frozen=True, slots=True)
class Close:
    """現在のサブパスを開始点へ閉じる。"""


PathCommand: TypeAlias = MoveTo | LineTo | CurveTo | ArcTo | Close


def arc_sweep(start_angle: float, end_angle: float, *, clockwise: bool) -> float:
    """開始角・終了角・向きから符号付き掃引角 [rad] を返す。

    |end - start| が 2π 以上なら 1 周分、それ以外は指定向きに 2π で剰余をとる。
    """
    delta = float(end_angle) - float(start_angle)
    if clockwise:
        if delta <= -TAU:
            return -TAU
        return -((-delta) % TAU)
    if delta >= TAU:
        return TAU
    return delta % TAU


def _same_point(a: tuple[float, float], b: tuple[float, float]) -> bool:
    # 1 周の円弧の終点は三角関数の丸めで始点からわずかにずれる。
    return math.isclose(a[0], b[0], abs_tol=1e-9) and math.isclose(a[1], b[1], abs_tol=1e-9)


def arc_point(center: Point, radius: float, angle: float) -> Point:
    """中心・半径・角度から円周上の点を返す。負の半径は 0 として扱う。"""
    r = max(float(radius), 0.0)
    return Point(center.x + r * math.cos(angle), center.y + r * math.sin(angle))


def _arc_to_curves(arc: ArcTo) -> list[CurveTo]:
    """円弧を 90° 以下ごとの 3 次ベジェ列に変換する。"""
    sweep = arc.sweep
    r = max(float(arc.radius), 0.0)
    if sweep == 0.0 or r == 0.0:
        return []

    n = max(1, int(math.ceil(abs(sweep) / (math.pi / 2.0) - 1e-9)))
    step = sweep / n
    k = 4.0 / 3.0 * math.tan(step / 4.0)
    cx, cy = arc.center.x, arc.center.y

    curves: list[CurveTo] = []
    a0 = float(arc.start_angle)
    for i in range(n):
        a1 = float(arc.start_angle) + step * (i + 1)
        cos0, sin0 = math.cos(a0), math.sin(a0)
        cos1, sin1 = math.cos(a1), math.sin(a1)
        curves.append(
            CurveTo(
                control1=Point(cx + r * (cos0 - k * sin0), cy + r * (sin0 + k * cos0)),
                control2=Point(cx + r * (cos1 + k * sin1), cy + r * (sin1 - k * cos1)),
                point=Point(cx + r * cos1, cy + r * sin1),
            )
        )
        a0 = a1
    return curves


@dataclass(frozen=True, slots=True)
class FlattenedPath:
    """Path を折れ線列に平坦化した配列表現。

    Parameters
    ----------
    coords : np.ndarray
        float64 型 shape (N, 2) の頂点配列。
    offsets : np.ndarray
        int32 型 shape (M+1,) のポリライン開始インデックス配列。

    Notes
    -----
    不変性を契約とし、配列は writeable=False で保持する。
    """

    coords: np.ndarray
    offsets: np.ndarray

    def __post_init__(self) -> None:
        coords = np.asarray(self.coords, dtype=np.float64)
        offsets = np.asarray(self.offsets, dtype=np.int32)

        if coords.size == 0:
            coords = coords.reshape((0, 2))
        if coords.ndim != 2 or coords.shape[1] != 2:
            raise ValueError("coords は shape (N,2) の 2 次元配列である必要がある")
        if offsets.ndim != 1 or offsets.size == 0:
            raise ValueError("offsets は少なくとも 1 要素の 1 次元配列である必要がある")
        if offsets[0] != 0 or offsets[-1] != coords.shape[0]:
            raise ValueError("offsets の両端が coords と整合していない")
        if np.any(np.diff(offsets) < 0):
            raise ValueError("offsets は単調非減少である必要がある")

        coords.setflags(write=False)
        offsets.setflags(write=False)
        object.__setattr__(self, "coords", coords)
        object.__setattr__(self, "offsets", offsets)

    def __len__(self) -> int:
        """ポリライン本数を返す。"""
        return int(self.offsets.shape[0] - 1)

    def polylines(self) -> Iterator[np.ndarray]:
        """各ポリライン（shape (K, 2)）を順に返す。"""
        for start, end in zip(self.offsets[:-1], self.offsets[1:]):
            yield self.coords[int(start) : int(end)]


@dataclass(frozen=True, slots=True)
class Path:
    """描画命令の不変な順序付き列。

    Notes
    -----
    命令順は塗りつぶし規則や輪郭を決めるため意味を持つ。
    ``p1 + p2`` は命令列を連結したパス（和集合）を返す。
    """

    commands: tuple[PathCommand, ...] = ()

    def __post_init__(self) -> None:
        commands = tuple(self.commands)
        for cmd in commands:
            if not isinstance(cmd, (MoveTo, LineTo, CurveTo, ArcTo, Close)):
                raise TypeError(f"Path に使用できない命令型: {type(cmd)!r}")
        object.__setattr__(self, "commands", commands)

    def __len__(self) -> int:
        return len(self.commands)

    def __iter__(self) -> Iterator[PathCommand]:
        return iter(self.commands)

    def __add__(self, other: object) -> "Path":
        if not isinstance(other, Path):
            return NotImplemented
        return Path(self.commands + other.commands)

    @property
    def is_empty(self) -> bool:
        return not self.commands

    def subpaths(self) -> list["Path"]:
        """MoveTo ごとに分割したサブパス列を返す。"""
        out: list[Path] = []
        current: list[PathCommand] = []
        for cmd in self.commands:
            if isinstance(cmd, MoveTo) and current:
                out.append(Path(tuple(current)))
                current = []
            current.append(cmd)
        if current:
            out.append(Path(tuple(current)))
        return out

    def transformed(self, transform: AffineTransform) -> "Path":
        """アフィン変換を適用したパスを返す。

        円弧は一般のアフィン変換で円弧のまま保てないため、先に 3 次ベジェへ変換する。
        """

        def _map(p: Point) -> Point:
            x, y = transform.apply_point(p.x, p.y)
            return Point(x, y)

        out: list[PathCommand] = []
        has_current = False
        for cmd in self.commands:
            if isinstance(cmd, MoveTo):
                out.append(MoveTo(_map(cmd.point)))
                has_current = True
            elif isinstance(cmd, LineTo):
                out.append(LineTo(_map(cmd.point)))
                has_current = True
            elif isinstance(cmd, CurveTo):
                out.append(
                    CurveTo(_map(cmd.control1), _map(cmd.control2), _map(cmd.point))
                )
                has_current = True
            elif isinstance(cmd, ArcTo):
                start = _map(cmd.start_point)
                out.append(LineTo(start) if has_current else MoveTo(start))
                for curve in _arc_to_curves(cmd):
                    out.append(
                        CurveTo(
                            _map(curve.control1), _map(curve.control2), _map(curve.point)
                        )
                    )
                has_current = True
            else:
                out.append(cmd)
        return Path(tuple(out))

    def flatten(
        self,
        *,
        curve_segments: int | None = None,
        arc_segments_per_turn: int | None = None,
    ) -> FlattenedPath:
        """曲線・円弧を折れ線で近似した FlattenedPath を返す。

        Parameters
        ----------
        curve_segments : int or None, optional
            ベジェ 1 本あたりの分割数。None なら config の既定値。
        arc_segments_per_turn : int or None, optional
            円弧 1 周あたりの分割数。None なら config の既定値。

        Returns
        -------
        FlattenedPath
            2 点未満のポリラインは含まない。
        """
        cfg = runtime_config()
        n_curve = int(curve_segments if curve_segments is not None else cfg.curve_segments)
        n_turn = int(
            arc_segments_per_turn
            if arc_segments_per_turn is not None
            else cfg.arc_segments_per_turn
        )
        if n_curve < 1 or n_turn < 1:
            raise ValueError("分割数は 1 以上である必要がある")

        polylines: list[list[tuple[float, float]]] = []
        pts: list[tuple[float, float]] = []
        subpath_start: tuple[float, float] | None = None

        def _finish() -> None:
            if len(pts) >= 2:
                polylines.append(list(pts))
            pts.clear()

        def _begin(xy: tuple[float, float]) -> None:
            nonlocal subpath_start
            _finish()
            pts.append(xy)
            subpath_start = xy

        t = np.linspace(0.0, 1.0, num=n_curve + 1, dtype=np.float64)[1:]
        for cmd in self.commands:
            if isinstance(cmd, MoveTo):
                _begin(cmd.point.as_tuple())
            elif isinstance(cmd, LineTo):
                if not pts:
                    _begin(cmd.point.as_tuple())
                else:
                    pts.append(cmd.point.as_tuple())
            elif isinstance(cmd, CurveTo):
                if not pts:
                    _begin(cmd.point.as_tuple())
                    continue
                p0 = np.asarray(pts[-1], dtype=np.float64)
                p1 = np.asarray(cmd.control1.as_tuple(), dtype=np.float64)
                p2 = np.asarray(cmd.control2.as_tuple(), dtype=np.float64)
                p3 = np.asarray(cmd.point.as_tuple(), dtype=np.float64)
                u = (1.0 - t)[:, None]
                tt = t[:, None]
                samples = (
                    u**3 * p0
                    + 3.0 * u**2 * tt * p1
                    + 3.0 * u * tt**2 * p2
                    + tt**3 * p3
                )
                pts.extend((float(x), float(y)) for x, y in samples)
            elif isinstance(cmd, ArcTo):
                start = cmd.start_point.as_tuple()
                if not pts:
                    _begin(start)
                else:
                    pts.append(start)
                sweep = cmd.sweep
                if sweep == 0.0 or cmd.radius <= 0.0:
                    continue
                n = max(1, int(math.ceil(abs(sweep) / TAU * n_turn)))
                angles = cmd.start_angle + sweep * np.arange(1, n + 1) / n
                r = float(cmd.radius)
                xs = cmd.center.x + r * np.cos(angles)
                ys = cmd.center.y + r * np.sin(angles)
                pts.extend((float(x), float(y)) for x, y in zip(xs, ys))
            else:
                if pts and subpath_start is not None:
                    if not _same_point(pts[-1], subpath_start):
                        pts.append(subpath_start)
                    _finish()
                    # close 後の現在点はサブパス開始点になる。
                    pts.append(subpath_start)
        _finish()

        if not polylines:
            return FlattenedPath(
                coords=np.zeros((0, 2), dtype=np.float64),
                offsets=np.zeros((1,), dtype=np.int32),
            )
        coords = np.asarray([xy for line in polylines for xy in line], dtype=np.float64)
        counts = [len(line) for line in polylines]
        offsets = np.concatenate([[0], np.cumsum(counts)]).astype(np.int32)
        return FlattenedPath(coords=coords, offsets=offsets)

    def bounds(self) -> Rect:
        """平坦化した頂点の外接矩形を返す。空パスは原点の 0 矩形。"""
        flat = self.flatten()
        if flat.coords.shape[0] == 0:
            return Rect(0.0, 0.0, 0.0, 0.0)
        lo = flat.coords.min(axis=0)
        hi = flat.coords.max(axis=0)
        return Rect(float(lo[0]), float(lo[1]), float(hi[0] - lo[0]), float(hi[1] - lo[1]))


class PathBuilder:
    """命令を順に積み上げて Path を組み立てるビルダ。

    Notes
    -----
    検証は座標・半径・角度が有限であることのみ。
    """

    def __init__(self) -> None:
        self._commands: list[PathCommand] = []

    def __len__(self) -> int:
        return len(self._commands)

    def move_to(self, x: float, y: float) -> "PathBuilder":
        self._commands.append(MoveTo(Point(x, y)))
        return self

    def line_to(self, x: float, y: float) -> "PathBuilder":
        self._commands.append(LineTo(Point(x, y)))
        return self

    def curve_to(
        self,
        c1x: float,
        c1y: float,
        c2x: float,
        c2y: float,
        x: float,
        y: float,
    ) -> "PathBuilder":
        self._commands.append(CurveTo(Point(c1x, c1y), Point(c2x, c2y), Point(x, y)))
        return self

    def add_arc(
        self,
        center: Point,
        radius: float,
        start_angle: float,
        end_angle: float,
        *,
        clockwise: bool,
    ) -> "PathBuilder":
        """円弧命令を追加する。角度は [rad]。"""
        self._commands.append(
            ArcTo(
                center=center,
                radius=finite_float(radius, name="radius"),
                start_angle=finite_float(start_angle, name="start_angle"),
                end_angle=finite_float(end_angle, name="end_angle"),
                clockwise=bool(clockwise),
            )
        )
        return self

    def close(self) -> "PathBuilder":
        self._commands.append(Close())
        return self

    def add_rect(self, rect: Rect) -> "PathBuilder":
        """矩形を左上から時計回りの閉じたサブパスとして追加する。"""
        self.move_to(rect.min_x, rect.min_y)
        self.line_to(rect.max_x, rect.min_y)
        self.line_to(rect.max_x, rect.max_y)
        self.line_to(rect.min_x, rect.max_y)
        return self.close()

    def add_ellipse(self, rect: Rect) -> "PathBuilder":
        """rect に内接する楕円を 4 本の 3 次ベジェとして追加する。"""
        cx, cy = rect.mid_x, rect.mid_y
        rx, ry = rect.width / 2.0, rect.height / 2.0
        kx, ky = rx * KAPPA, ry * KAPPA
        self.move_to(cx + rx, cy)
        self.curve_to(cx + rx, cy + ky, cx + kx, cy + ry, cx, cy + ry)
        self.curve_to(cx - kx, cy + ry, cx - rx, cy + ky, cx - rx, cy)
        self.curve_to(cx - rx, cy - ky, cx - kx, cy - ry, cx, cy - ry)
        self.curve_to(cx + kx, cy - ry, cx + rx, cy - ky, cx + rx, cy)
        return self.close()

    def add_path(self, path: Path | Sequence[PathCommand]) -> "PathBuilder":
        self._commands.extend(path.commands if isinstance(path, Path) else tuple(path))
        return self

    def build(self) -> Path:
        return Path(tuple(self._commands))


__all__ = [
    "KAPPA",
    "ArcTo",
    "Close",
    "CurveTo",
    "FlattenedPath",
    "LineTo",
    "MoveTo",
    "Path",
    "PathBuilder",
    "PathCommand",
    "arc_point",
    "arc_sweep",
]
