"""Shared numpy helpers for the sdf2d package.

This module provides:

* **Type alias**: :data:`_F`
* **Point coercion**: :func:`as_point2`, :func:`as_points2`
* **Math helpers**: :func:`length`, :func:`dot`, :func:`dot2`, :func:`clamp`
* **Boolean/domain operators** used by :class:`sdf2d.geometry.Geometry2D`:
  :func:`opUnion`, :func:`opSubtraction`, :func:`opIntersection`,
  :func:`opRound`, :func:`opOnion`

Not meant to be imported directly by end users; import from
``sdf2d.primitives`` instead.
"""

from __future__ import annotations

import numpy as np
import numpy.typing as npt

# ---------------------------------------------------------------------------
# Type alias
# ---------------------------------------------------------------------------
_F = npt.NDArray[np.floating]

__all__ = [
    "_F",
    "as_point2", "as_points2",
    "length", "dot", "dot2", "clamp",
    "opUnion", "opSubtraction", "opIntersection",
    "opRound", "opOnion",
]


# ===========================================================================
# Point coercion
# ===========================================================================

def as_point2(p) -> _F:
    """Return *p* as a float ``(2,)`` array; raise ``ValueError`` otherwise."""
    arr = np.asarray(p, dtype=float)
    if arr.shape != (2,):
        raise ValueError(f"expected a 2-D point, got shape {arr.shape}")
    return arr


def as_points2(p) -> _F:
    """Return *p* as a float ``(N, 2)`` array; raise ``ValueError`` otherwise."""
    arr = np.asarray(p, dtype=float)
    if arr.ndim != 2 or arr.shape[1] != 2:
        raise ValueError(f"expected an (N, 2) point array, got shape {arr.shape}")
    return arr


# ===========================================================================
# Math helpers
# ===========================================================================

def length(v: _F) -> _F:
    """Euclidean length along the last axis."""
    return np.linalg.norm(v, axis=-1)


def dot(a: _F, b: _F) -> _F:
    """Dot product along the last axis."""
    return np.sum(a * b, axis=-1)


def dot2(a: _F) -> _F:
    """Squared length: ``dot(a, a)``."""
    return dot(a, a)


def clamp(x: _F, lo: float | _F, hi: float | _F) -> _F:
    """Clamp *x* element-wise to ``[lo, hi]``."""
    return np.minimum(np.maximum(x, lo), hi)


# ===========================================================================
# Boolean / domain operators
# ===========================================================================

def opUnion(d1: _F, d2: _F) -> _F:
    """Union of two SDFs: ``min(d1, d2)``."""
    return np.minimum(d1, d2)


def opSubtraction(d1: _F, d2: _F) -> _F:
    """Subtract *d1* from *d2*: ``max(-d1, d2)``."""
    return np.maximum(-d1, d2)


def opIntersection(d1: _F, d2: _F) -> _F:
    """Intersection of two SDFs: ``max(d1, d2)``."""
    return np.maximum(d1, d2)


def opRound(p: _F, primitive: "_SDFFunc", rad: float) -> _F:  # type: ignore[name-defined]
    """Grow a shape outward by *rad* (turns a curve into a stroke)."""
    return primitive(p) - rad


def opOnion(sdf_val: _F, thickness: float) -> _F:
    """Turn a solid into a shell of *thickness*."""
    return np.abs(sdf_val) - thickness
