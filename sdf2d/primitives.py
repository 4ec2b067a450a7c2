"""2-D SDF math primitives for the sdf2d package.

Re-exports all shared helpers from :mod:`_sdf_common`, then adds the
segment, polyline and polygon SDFs that consume spline polygonizations.

All functions accept and return ``numpy.ndarray`` objects and support
broadcasting over arbitrary leading batch dimensions.  A "point array" *p*
has shape ``(..., 2)``; scalar SDF results have shape ``(...,)``.

Formulas are adapted from Inigo Quilez's distance function reference:
https://iquilezles.org/articles/distfunctions2d/
"""

from __future__ import annotations

import numpy as np

from _sdf_common import *  # noqa: F401, F403


# ===========================================================================
# 2-D primitive SDFs
# ===========================================================================

def sdSegment2D(p: _F, a: _F, b: _F) -> _F:
    """2-D line segment from *a* to *b* (zero-width)."""
    pa = p - a
    ba = b - a
    l2 = dot2(ba)
    if l2 == 0:
        return length(pa)
    h = clamp(dot(pa, ba) / l2, 0.0, 1.0)
    return length(pa - ba * h[..., None])


def sdPolyline2D(p: _F, v: _F) -> _F:
    """Unsigned distance to the open polyline through *v* (shape ``(N, 2)``)."""
    d = length(p - v[0])
    for i in range(v.shape[0] - 1):
        d = np.minimum(d, sdSegment2D(p, v[i], v[i + 1]))
    return d


def sdPolygon2D(p: _F, v: _F) -> _F:
    """2-D polygon from *N* vertices *v* (shape ``(N, 2)``), negative inside."""
    N = v.shape[0]
    d = dot2(p - v[0])
    s = 1.0
    for i in range(N):
        j = (i + 1) % N
        e = v[j] - v[i]
        w = p - v[i]
        e2 = dot2(e)
        if e2 == 0:
            # repeated vertex, e.g. a closed polygonization
            continue
        b = w - e * clamp(dot(w, e) / e2, 0.0, 1.0)[..., None]
        d = np.minimum(d, dot2(b))
        cond = np.array([
            p[..., 1] >= v[i][1],
            p[..., 1] < v[j][1],
            e[0] * w[..., 1] > e[1] * w[..., 0],
        ])
        s = np.where(np.all(cond, axis=0) | np.all(~cond, axis=0), -s, s)
    return s * np.sqrt(d)
