"""
sdf2d: 2D Cubic-Spline Distance Fields
=======================================

Natural cubic splines through 2-D knots, evaluated as distance fields.

Implemented features
--------------------
- Spline engine: :class:`CubicSplineSDF2` (build from knots, locate,
  Newton-Raphson distance queries, bounding box, polygonization)
- Numerics: :func:`tridiagonal` solver, :class:`CubicPolynomial`
- Geometry wrappers: :class:`Spline2D`, :class:`Polygon2D`,
  :class:`Polyline2D` with union/subtract/intersect/round/onion/translate
- Grid sampling: :func:`sample_levelset_2d`
- Configuration: :class:`SplineConfig`; structured logging via structlog

Quick start
-----------

::

    from sdf2d import Spline2D, sample_levelset_2d

    curve = Spline2D([(0.0, 0.0), (1.0, 1.0), (2.0, 0.0)])
    curve.spline.evaluate((1.0, 0.0))       # distance to the curve
    curve.bounding_box()                    # Box2(min, max)
    outline = curve.polygonize(64)          # (64, 2) vertices

    stroke = curve.round(0.1)               # a 0.1-thick band
    phi = sample_levelset_2d(stroke, resolution=(128, 128))
"""

from .bounds import Box2
from .config import SplineConfig, get_default_config
from .errors import (
    DegenerateQueryError,
    InvalidInputError,
    SDFError,
    SingularMatrixError,
)
from .geometry import Geometry2D, Polygon2D, Polyline2D, Spline2D
from .grid import sample_levelset_2d, save_npy
from .polynomial import CubicPolynomial
from .spline import (
    CubicSpline,
    CubicSpline2D,
    CubicSplineSDF2,
    DistanceQuery,
    locate_segment,
)
from .tridiagonal import tridiagonal

__version__ = "0.3.0"

__all__ = [
    # Spline engine
    "CubicSpline",
    "CubicSpline2D",
    "CubicSplineSDF2",
    "DistanceQuery",
    "locate_segment",
    "CubicPolynomial",
    "tridiagonal",

    # Geometry
    "Box2",
    "Geometry2D",
    "Polygon2D",
    "Polyline2D",
    "Spline2D",

    # Grid utilities
    "sample_levelset_2d",
    "save_npy",

    # Configuration
    "SplineConfig",
    "get_default_config",

    # Errors
    "SDFError",
    "InvalidInputError",
    "SingularMatrixError",
    "DegenerateQueryError",
]
