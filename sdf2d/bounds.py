"""Axis-aligned 2-D bounding boxes."""

from __future__ import annotations

from typing import NamedTuple

import numpy as np
import numpy.typing as npt

from _sdf_common import as_point2, as_points2

_Array = npt.NDArray[np.floating]


class Box2(NamedTuple):
    """Axis-aligned box ``(min, max)``; both corners are ``(2,)`` arrays."""

    min: _Array
    max: _Array

    @classmethod
    def from_points(cls, points) -> Box2:
        """Smallest box covering every point of an ``(N, 2)`` array."""
        pts = as_points2(points)
        if pts.shape[0] == 0:
            raise ValueError("cannot bound an empty point set")
        return cls(pts.min(axis=0), pts.max(axis=0))

    def extend(self, other: Box2) -> Box2:
        """Union of this box and *other*."""
        return Box2(np.minimum(self.min, other.min), np.maximum(self.max, other.max))

    def enlarge(self, margin: float) -> Box2:
        """Grow every side by *margin*."""
        return Box2(self.min - margin, self.max + margin)

    def contains(self, p, tol: float = 0.0) -> bool:
        """True if point *p* lies inside the box (borders included)."""
        q = as_point2(p)
        return bool(np.all(q >= self.min - tol) and np.all(q <= self.max + tol))

    def size(self) -> _Array:
        return self.max - self.min

    def center(self) -> _Array:
        return 0.5 * (self.min + self.max)

    def as_bounds(self) -> tuple[tuple[float, float], tuple[float, float]]:
        """``((x0, x1), (y0, y1))`` as taken by :func:`sdf2d.grid.sample_levelset_2d`."""
        return (
            (float(self.min[0]), float(self.max[0])),
            (float(self.min[1]), float(self.max[1])),
        )
