"""2D geometry wrappers for signed distance functions.

Every shape is a :class:`Geometry2D`: a callable over ``(..., 2)`` point
arrays plus an optional axis-aligned bounding box.  Spline and polygon
shapes come from :mod:`sdf2d.spline` and :mod:`sdf2d.primitives`.
"""

from __future__ import annotations

from typing import Callable, Optional, Sequence

import numpy as np
import numpy.typing as npt

from . import primitives as sdf
from .bounds import Box2
from .config import SplineConfig
from .errors import InvalidInputError
from .spline import CubicSplineSDF2

# ---------------------------------------------------------------------------
# Type aliases
# ---------------------------------------------------------------------------
_Array = npt.NDArray[np.floating]
_SDFFunc = Callable[[_Array], _Array]


# ===========================================================================
# Base class
# ===========================================================================

class Geometry2D:
    """Base class for 2D signed-distance-function geometries.

    A ``Geometry2D`` wraps a callable ``func(p) -> distances`` where *p* is
    a ``(..., 2)`` array of 2D points and the return value is a ``(...)``
    array of distances, together with an optional :class:`~sdf2d.bounds.Box2`.

    Implements:
    - Boolean operations: :meth:`union`, :meth:`subtract`, :meth:`intersect`
    - Modifiers:          :meth:`round`, :meth:`onion`
    - Transforms:         :meth:`translate`

    Each operation carries a bounding box along when one is known.
    """

    def __init__(self, func: _SDFFunc, bbox: Optional[Box2] = None) -> None:
        self._func = func
        self._bbox = bbox

    def sdf(self, p: _Array) -> _Array:
        """Evaluate distance at *p* (shape ``(..., 2)``)."""
        return self._func(p)

    def __call__(self, p: _Array) -> _Array:
        return self._func(p)

    def bounding_box(self) -> Optional[Box2]:
        """Axis-aligned bounds of the shape, or ``None`` if unknown."""
        return self._bbox

    # ------------------------------------------------------------------
    # Boolean operations
    # ------------------------------------------------------------------

    def union(self, other: Geometry2D) -> Geometry2D:
        """Return the union (min) of this shape and *other*."""
        a, b = self.bounding_box(), other.bounding_box()
        bbox = a.extend(b) if a is not None and b is not None else None
        return Geometry2D(lambda p: sdf.opUnion(self.sdf(p), other.sdf(p)), bbox)

    def subtract(self, other: Geometry2D) -> Geometry2D:
        """Subtract *other* from this shape."""
        return Geometry2D(
            lambda p: sdf.opSubtraction(other.sdf(p), self.sdf(p)), self.bounding_box()
        )

    def intersect(self, other: Geometry2D) -> Geometry2D:
        """Return the intersection (max) of this shape and *other*."""
        return Geometry2D(
            lambda p: sdf.opIntersection(self.sdf(p), other.sdf(p)), self.bounding_box()
        )

    # ------------------------------------------------------------------
    # Modifiers
    # ------------------------------------------------------------------

    def round(self, rad: float) -> Geometry2D:
        """Grow the surface outward by *rad*."""
        bbox = self.bounding_box()
        return Geometry2D(
            lambda p: sdf.opRound(p, self.sdf, rad),
            bbox.enlarge(rad) if bbox is not None else None,
        )

    def onion(self, thickness: float) -> Geometry2D:
        """Turn the shape into a band of half-width *thickness*."""
        bbox = self.bounding_box()
        return Geometry2D(
            lambda p: sdf.opOnion(self.sdf(p), thickness),
            bbox.enlarge(thickness) if bbox is not None else None,
        )

    # ------------------------------------------------------------------
    # Transforms
    # ------------------------------------------------------------------

    def translate(self, tx: float, ty: float) -> Geometry2D:
        """Translate by ``(tx, ty)``."""
        t = np.array([tx, ty], dtype=float)
        bbox = self.bounding_box()
        return Geometry2D(
            lambda p: self.sdf(p - t),
            Box2(bbox.min + t, bbox.max + t) if bbox is not None else None,
        )


# ===========================================================================
# Shapes
# ===========================================================================

class Polygon2D(Geometry2D):
    """Closed polygon from N 2-D *vertices* (negative inside)."""

    def __init__(self, vertices: Sequence[Sequence[float]] | _Array) -> None:
        v = np.array(vertices, dtype=float)
        if v.ndim != 2 or v.shape[1] != 2 or v.shape[0] < 3:
            raise InvalidInputError(f"a polygon needs at least 3 (x, y) vertices, got shape {v.shape}")
        self.vertices = v
        super().__init__(lambda p: sdf.sdPolygon2D(p, v), Box2.from_points(v))


class Polyline2D(Geometry2D):
    """Open polyline through N 2-D *vertices* (unsigned, zero-width)."""

    def __init__(self, vertices: Sequence[Sequence[float]] | _Array) -> None:
        v = np.array(vertices, dtype=float)
        if v.ndim != 2 or v.shape[1] != 2 or v.shape[0] < 2:
            raise InvalidInputError(f"a polyline needs at least 2 (x, y) vertices, got shape {v.shape}")
        self.vertices = v
        super().__init__(lambda p: sdf.sdPolyline2D(p, v), Box2.from_points(v))


class Spline2D(Geometry2D):
    """Natural cubic spline through *knots*, as an unsigned distance field.

    Parameters
    ----------
    knots:
        ``(N, 2)`` knot points, ``N >= 2``.
    config:
        Newton-Raphson settings (see :class:`sdf2d.config.SplineConfig`).
    logger:
        Optional structlog logger for solver traces.

    The curve has no interior, so distances are never negative.  Use
    :meth:`round` or :meth:`onion` to give it a thickness, or
    :meth:`poly_spline` to close it into a polygon.
    """

    def __init__(
        self,
        knots: Sequence[Sequence[float]] | _Array,
        config: Optional[SplineConfig] = None,
        logger=None,
    ) -> None:
        self.spline = CubicSplineSDF2(knots, config=config, logger=logger)
        super().__init__(self.spline.sdf, self.spline.bounding_box())

    def polygonize(self, n: int) -> _Array:
        """``(n, 2)`` vertices approximating the curve."""
        return self.spline.polygonize(n)

    def poly_spline(self, n: int) -> Polygon2D:
        """Polygon SDF through *n* points sampled along the curve."""
        return self.spline.poly_spline(n)

    def polyline(self, n: int) -> Polyline2D:
        """Open polyline SDF through *n* points sampled along the curve."""
        return Polyline2D(self.polygonize(n))
