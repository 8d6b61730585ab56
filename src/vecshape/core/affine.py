"""
どこで: `src/vecshape/core/affine.py`。
何を: 2 次元アフィン変換（回転・平行移動・合成）を numpy の 3x3 行列で表現する。
なぜ: Flower の花弁のように、基準パスを回転→平行移動して複製する shape で共有するため。
"""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np

from vecshape.core.geometry import finite_float


@dataclass(frozen=True, slots=True, eq=False)
class AffineTransform:
    """row-vector 規約の 2 次元アフィン変換。

    Parameters
    ----------
    matrix : np.ndarray
        float64 型 shape (3, 3) の行列。点 p は ``[x, y, 1] @ matrix`` で写る。

    Notes
    -----
    ``a.concatenating(b)`` は「a を適用してから b を適用する」変換を返す。
    """

    matrix: np.ndarray

    def __post_init__(self) -> None:
        m = np.asarray(self.matrix, dtype=np.float64)
        if m.shape != (3, 3):
            raise ValueError("matrix は shape (3,3) である必要がある")
        if not np.all(np.isfinite(m)):
            raise ValueError("matrix に非有限の値は使用できない")
        m = m.copy()
        m.setflags(write=False)
        object.__setattr__(self, "matrix", m)

    @classmethod
    def identity(cls) -> "AffineTransform":
        return cls(np.eye(3, dtype=np.float64))

    @classmethod
    def rotation(cls, angle: float) -> "AffineTransform":
        """原点まわりの回転を返す。angle は [rad]。"""
        theta = finite_float(angle, name="angle")
        c, s = math.cos(theta), math.sin(theta)
        return cls(
            np.array(
                [[c, s, 0.0], [-s, c, 0.0], [0.0, 0.0, 1.0]],
                dtype=np.float64,
            )
        )

    @classmethod
    def translation(cls, tx: float, ty: float) -> "AffineTransform":
        dx = finite_float(tx, name="tx")
        dy = finite_float(ty, name="ty")
        return cls(
            np.array(
                [[1.0, 0.0, 0.0], [0.0, 1.0, 0.0], [dx, dy, 1.0]],
                dtype=np.float64,
            )
        )

    def concatenating(self, other: "AffineTransform") -> "AffineTransform":
        """self の後に other を適用する合成変換を返す。"""
        return AffineTransform(self.matrix @ other.matrix)

    def apply(self, points: np.ndarray) -> np.ndarray:
        """shape (N, 2) の点列を変換して返す。"""
        xy = np.asarray(points, dtype=np.float64).reshape((-1, 2))
        if xy.shape[0] == 0:
            return np.zeros((0, 2), dtype=np.float64)
        ones = np.ones((xy.shape[0], 1), dtype=np.float64)
        homogeneous = np.concatenate([xy, ones], axis=1)
        return (homogeneous @ self.matrix)[:, :2]

    def apply_point(self, x: float, y: float) -> tuple[float, float]:
        out = self.apply(np.array([[x, y]], dtype=np.float64))
        return float(out[0, 0]), float(out[0, 1])

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AffineTransform):
            return NotImplemented
        return bool(np.array_equal(self.matrix, other.matrix))


__all__ = ["AffineTransform"]
