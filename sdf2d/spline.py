"""Natural cubic splines through 2-D knots, and distance to them.

x(t) = a + bt + ct^2 + dt^3 for t in [0,1]
y(t) = a + bt + ct^2 + dt^3 for t in [0,1]

1st and 2nd derivatives are continuous across segments and the 2nd
derivative is zero at the two end knots (natural splines).
See: http://mathworld.wolfram.com/CubicSpline.html

The whole curve is addressed by one global parameter ``t ∈ [0, N-1]`` for
``N`` knots: the integer part selects the segment, the fraction is the local
parameter within it.

Distance queries minimise the squared distance from the query point with
Newton-Raphson, handing the iterate over to the neighbouring segment when it
leaves ``[0, 1]``.  This is a local descent: it returns the nearest point
reachable from the initial guess, which is not always the global one.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

import numpy as np
import numpy.typing as npt

from _sdf_common import as_point2, as_points2, clamp, length
from .bounds import Box2
from .config import SplineConfig, get_default_config
from .errors import DegenerateQueryError, InvalidInputError
from .polynomial import CubicPolynomial
from .tridiagonal import tridiagonal

_Array = npt.NDArray[np.floating]


# ===========================================================================
# Global parametrization
# ===========================================================================

def locate_segment(t: float, count: int) -> Tuple[int, float]:
    """Map global *t* onto ``(segment index, local t)`` for *count* segments.

    *t* is clamped to ``[0, count]``; ``t == count`` resolves to the last
    segment with local t = 1.
    """
    t = float(clamp(t, 0.0, float(count)))
    i = int(t)
    t -= i
    if i == count:
        i -= 1
        t = 1.0
    return i, t


# ===========================================================================
# Single segment
# ===========================================================================

@dataclass(frozen=True, eq=False)
class CubicSpline:
    """One spline segment between knots *p0* and *p1*."""

    idx: int  # index within the spline set
    p0: _Array
    p1: _Array
    px: CubicPolynomial
    py: CubicPolynomial

    def f0(self, t: float) -> _Array:
        """Curve point at local *t*."""
        return np.array([self.px.f0(t), self.py.f0(t)])

    def f1(self, t: float) -> _Array:
        """Velocity at local *t*."""
        return np.array([self.px.f1(t), self.py.f1(t)])

    def f2(self, t: float) -> _Array:
        """Acceleration at local *t*."""
        return np.array([self.px.f2(t), self.py.f2(t)])

    def bounding_box(self) -> Box2:
        """Bounding box from the end points and the x/y extrema."""
        pts = [self.p0, self.p1]
        for t in self.px.stationary_points():
            pts.append(self.f0(float(clamp(t, 0.0, 1.0))))
        for t in self.py.stationary_points():
            pts.append(self.f0(float(clamp(t, 0.0, 1.0))))
        return Box2.from_points(np.array(pts))

    def newton_step(self, t: float, p: _Array) -> float:
        """One Newton-Raphson step towards the point nearest *p*.

        We are minimising the distance squared function, i.e. looking for
        the zeroes of its first derivative:

            dx = x0 - p.x
            dy = y0 - p.y
            d1 = 2*(dx*x1 + dy*y1)
            d2 = 2*(dx*x2 + x1*x1 + dy*y2 + y1*y1)
            t_new = t - d1 / d2

        Raises :class:`DegenerateQueryError` if ``d2`` is zero or the new
        estimate is not finite.
        """
        x0, y0 = self.px.f0(t), self.py.f0(t)
        x1, y1 = self.px.f1(t), self.py.f1(t)
        x2, y2 = self.px.f2(t), self.py.f2(t)
        dx = x0 - p[0]
        dy = y0 - p[1]
        denom = dx * x2 + x1 * x1 + dy * y2 + y1 * y1
        if denom == 0:
            raise DegenerateQueryError(self.idx, t)
        t_new = t - (dx * x1 + dy * y1) / denom
        if not math.isfinite(t_new):
            raise DegenerateQueryError(self.idx, t)
        return float(t_new)


# ===========================================================================
# Spline set
# ===========================================================================

@dataclass(frozen=True, eq=False)
class DistanceQuery:
    """Outcome of a single distance query.

    ``converged`` is False when the iteration budget ran out before the
    relative tolerance was met; ``degenerate`` is True when a Newton step
    had a zero denominator and iteration stopped at the previous estimate.
    """

    distance: float
    t: float  # global parameter of the closest point found
    point: _Array
    segment: int
    iterations: int
    converged: bool
    degenerate: bool = False


def _knot_system(knots: _Array) -> Tuple[_Array, _Array]:
    """Tridiagonal rows and per-axis right-hand sides for *knots*.

    The solutions are the first derivatives at the knots.  End rows assume
    the 2nd derivative at the end points is 0.
    """
    n = knots.shape[0]
    m = np.zeros((n, 3))
    rhs = np.zeros((n, 2))
    m[1:-1] = (1.0, 4.0, 1.0)
    rhs[1:-1] = 3.0 * (knots[2:] - knots[:-2])
    m[0] = (0.0, 2.0, 1.0)
    rhs[0] = 3.0 * (knots[1] - knots[0])
    m[-1] = (1.0, 2.0, 0.0)
    rhs[-1] = 3.0 * (knots[-1] - knots[-2])
    return m, rhs


class CubicSplineSDF2:
    """Unsigned distance field of a natural cubic spline through *knots*.

    Parameters
    ----------
    knots:
        ``(N, 2)`` sequence of points, ``N >= 2``.
    config:
        Solver settings; defaults to :func:`sdf2d.config.get_default_config`.
    logger:
        Optional structlog logger receiving ``newton_step`` and
        ``distance_query`` debug events.  Nothing is logged without one.

    The spline is computed once at construction and never mutated, so one
    instance can be queried from several threads.
    """

    def __init__(
        self,
        knots: Sequence[Sequence[float]] | _Array,
        config: Optional[SplineConfig] = None,
        logger=None,
    ) -> None:
        try:
            k = as_points2(knots)
        except ValueError as exc:
            raise InvalidInputError(f"bad knots: {exc}") from exc
        if k.shape[0] < 2:
            raise InvalidInputError("cubic splines need at least 2 knots")
        if not np.all(np.isfinite(k)):
            raise InvalidInputError("knots must be finite")

        self._config = config if config is not None else get_default_config()
        self._log = logger
        self._knots = k.copy()
        self._knots.flags.writeable = False

        # solve to give the first derivatives at the knot points
        m, rhs = _knot_system(k)
        dx = tridiagonal(m, rhs[:, 0])
        dy = tridiagonal(m, rhs[:, 1])

        self._splines = tuple(
            CubicSpline(
                idx=i,
                p0=self._knots[i],
                p1=self._knots[i + 1],
                px=CubicPolynomial.fit(k[i, 0], k[i + 1, 0], dx[i], dx[i + 1]),
                py=CubicPolynomial.fit(k[i, 1], k[i + 1, 1], dy[i], dy[i + 1]),
            )
            for i in range(k.shape[0] - 1)
        )

        bb = self._splines[0].bounding_box()
        for s in self._splines[1:]:
            bb = bb.extend(s.bounding_box())
        self._bb = bb

        if self._log is not None:
            self._log.debug("spline_built", knots=k.shape[0], segments=len(self._splines))

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def knots(self) -> _Array:
        return self._knots

    @property
    def splines(self) -> Tuple[CubicSpline, ...]:
        return self._splines

    @property
    def config(self) -> SplineConfig:
        return self._config

    def __len__(self) -> int:
        return len(self._splines)

    def bounding_box(self) -> Box2:
        """Cached union of the segment bounding boxes."""
        return self._bb

    # ------------------------------------------------------------------
    # Global evaluation
    # ------------------------------------------------------------------

    def locate(self, t: float) -> Tuple[CubicSpline, float]:
        """Segment and local t for global *t*."""
        i, u = locate_segment(t, len(self._splines))
        return self._splines[i], u

    def f0(self, t: float) -> _Array:
        cs, u = self.locate(t)
        return cs.f0(u)

    def f1(self, t: float) -> _Array:
        cs, u = self.locate(t)
        return cs.f1(u)

    def f2(self, t: float) -> _Array:
        cs, u = self.locate(t)
        return cs.f2(u)

    def d0(self, t: float, p) -> float:
        """Squared distance from *p* to the curve point at global *t*."""
        d = self.f0(t) - as_point2(p)
        return float(d @ d)

    def d1(self, t: float, p) -> float:
        """First derivative of :meth:`d0` with respect to *t*."""
        d = self.f0(t) - as_point2(p)
        return float(2.0 * (d @ self.f1(t)))

    def d2(self, t: float, p) -> float:
        """Second derivative of :meth:`d0` with respect to *t*."""
        d = self.f0(t) - as_point2(p)
        v = self.f1(t)
        return float(2.0 * (d @ self.f2(t) + v @ v))

    # ------------------------------------------------------------------
    # Distance
    # ------------------------------------------------------------------

    def query(self, p) -> DistanceQuery:
        """Closest point search for *p*, with convergence diagnostics."""
        try:
            q = as_point2(p)
        except ValueError as exc:
            raise InvalidInputError(f"bad query point: {exc}") from exc
        cfg = self._config
        last = len(self._splines) - 1

        # initial estimate
        cs, t = self.locate(cfg.initial_samples / 2)

        converged = False
        degenerate = False
        iterations = 0
        while iterations < cfg.max_iterations:
            iterations += 1
            t_old = t
            try:
                t = cs.newton_step(t, q)
            except DegenerateQueryError:
                if cfg.on_degenerate == "raise":
                    raise
                t = t_old
                degenerate = True
                break
            if self._log is not None:
                self._log.debug("newton_step", segment=cs.idx, t_old=t_old, t=t)

            if t < 0:
                if cs.idx == 0:
                    # no previous segment
                    t = 0.0
                    converged = True
                    break
                cs, t = self.locate(cs.idx + t)
            elif t > 1:
                if cs.idx == last:
                    t = 1.0
                    converged = True
                    break
                cs, t = self.locate(cs.idx + t)
            elif t == t_old or abs(t - t_old) < cfg.tolerance * abs(t):
                # t == t_old covers a fixed point at local t = 0
                converged = True
                break

        point = cs.f0(t)
        result = DistanceQuery(
            distance=float(length(point - q)),
            t=cs.idx + t,
            point=point,
            segment=cs.idx,
            iterations=iterations,
            converged=converged,
            degenerate=degenerate,
        )
        if self._log is not None:
            if not converged and not degenerate:
                self._log.debug("newton_not_converged", p=q.tolist(), iterations=iterations)
            self._log.debug(
                "distance_query",
                p=q.tolist(),
                f0=point.tolist(),
                t=result.t,
                distance=result.distance,
            )
        return result

    def evaluate(self, p) -> float:
        """Distance from point *p* to the curve."""
        return self.query(p).distance

    def sdf(self, p: _Array) -> _Array:
        """Distance for every point of a ``(..., 2)`` array."""
        p = np.asarray(p, dtype=float)
        if p.ndim == 0 or p.shape[-1] != 2:
            raise InvalidInputError(f"expected a (..., 2) point array, got shape {p.shape}")
        flat = p.reshape(-1, 2)
        out = np.fromiter((self.query(q).distance for q in flat), dtype=float, count=flat.shape[0])
        return out.reshape(p.shape[:-1])

    def __call__(self, p: _Array) -> _Array:
        return self.sdf(p)

    # ------------------------------------------------------------------
    # Polygon approximation
    # ------------------------------------------------------------------

    def polygonize(self, n: int) -> _Array:
        """*n* curve points at evenly spaced global t, both ends included."""
        if n < 2:
            raise InvalidInputError(f"polygonize needs at least 2 points, got {n}")
        ts = np.linspace(0.0, float(len(self._splines)), n)
        return np.array([self.f0(t) for t in ts])

    def poly_spline(self, n: int):
        """Signed :class:`~sdf2d.geometry.Polygon2D` through ``polygonize(n)``."""
        from .geometry import Polygon2D  # geometry imports this module

        return Polygon2D(self.polygonize(n))


def CubicSpline2D(
    knots: Sequence[Sequence[float]] | _Array,
    config: Optional[SplineConfig] = None,
    logger=None,
) -> CubicSplineSDF2:
    """Build the distance field of a natural cubic spline through *knots*."""
    return CubicSplineSDF2(knots, config=config, logger=logger)
