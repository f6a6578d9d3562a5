"""
geometry.py
-----------

Line segments, oriented rectangle envelopes and the 2D affine helpers that
map envelope-local points to world coordinates.
"""

from __future__ import annotations

__all__ = ["Line", "Envelope", "affine_matrix", "apply_affine",]

import math
from dataclasses import dataclass
from typing import Sequence, Tuple, Union

import numpy as np

PointXY = Tuple[float, float]


def affine_matrix(sf: float, theta: float, tx: float, ty: float) -> np.ndarray:
    """Return a 3x3 homogeneous scale-rotate-translate matrix (theta in radians)."""
    c, sn = np.cos(theta), np.sin(theta)
    return np.array(
        [[sf * c,  -sf * sn, tx],
         [sf * sn,  sf * c,  ty],
         [0.0,      0.0,     1.0]],
        dtype=np.float64
    )


def apply_affine(points: Union[np.ndarray, Sequence[PointXY]], mat: np.ndarray) -> np.ndarray:
    """Apply the affine transform to a set of 2D points of shape (N, 2)."""
    pts = np.atleast_2d(np.asarray(points, dtype=np.float64))
    pts = np.c_[pts, np.ones(len(pts))]
    return (mat @ pts.T).T[:, :2]


@dataclass(frozen=True)
class Line:
    """Straight segment from `start` to `end`."""
    start: PointXY
    end: PointXY

    def __post_init__(self):
        object.__setattr__(self, "start", (float(self.start[0]), float(self.start[1])))
        object.__setattr__(self, "end", (float(self.end[0]), float(self.end[1])))

    @property
    def vec(self) -> PointXY:
        return (self.end[0] - self.start[0], self.end[1] - self.start[1])

    @property
    def length(self) -> float:
        return math.hypot(*self.vec)

    @property
    def midpoint(self) -> PointXY:
        return ((self.start[0] + self.end[0]) / 2.0, (self.start[1] + self.end[1]) / 2.0)

    @property
    def angle(self) -> float:
        """Direction angle in radians, counter-clockwise from +x. 0 for a zero-length line."""
        vx, vy = self.vec
        return math.atan2(vy, vx)

    def to_envelope(self, width: float) -> Envelope:
        """Oriented rectangle of the given stroke width centered on this line."""
        return Envelope(
            half_extents=(self.length / 2.0, width / 2.0),
            angle=self.angle,
            center=self.midpoint,
        )

    def to_dict(self) -> dict:
        return {"start": list(self.start), "end": list(self.end)}


@dataclass(frozen=True)
class Envelope:
    """
    Oriented rectangle: `half_extents` in the local frame, where local x runs
    along the line and local y across it, rotated by `angle` and translated to
    `center` in world space.
    """
    half_extents: PointXY
    angle: float = 0.0
    center: PointXY = (0.0, 0.0)

    @property
    def area(self) -> float:
        return 4.0 * self.half_extents[0] * self.half_extents[1]

    @property
    def transform(self) -> np.ndarray:
        """Local-to-world 3x3 matrix (rotation + translation)."""
        return affine_matrix(1.0, self.angle, self.center[0], self.center[1])

    @property
    def inverse_transform(self) -> np.ndarray:
        """World-to-local matrix. A rigid transform is always invertible."""
        c, sn = math.cos(self.angle), math.sin(self.angle)
        cx, cy = self.center
        return np.array(
            [[c,   sn,  -(c * cx + sn * cy)],
             [-sn, c,   sn * cx - c * cy],
             [0.0, 0.0, 1.0]],
            dtype=np.float64
        )

    def to_world(self, points: Union[np.ndarray, Sequence[PointXY]]) -> np.ndarray:
        return apply_affine(points, self.transform)

    def to_local(self, points: Union[np.ndarray, Sequence[PointXY]]) -> np.ndarray:
        return apply_affine(points, self.inverse_transform)

    def corners(self) -> np.ndarray:
        """World-space corners, counter-clockwise starting at local (-hx, -hy)."""
        hx, hy = self.half_extents
        return self.to_world([(-hx, -hy), (hx, -hy), (hx, hy), (-hx, hy)])
