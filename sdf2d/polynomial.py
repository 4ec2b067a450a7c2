"""Scalar cubic polynomials on ``t ∈ [0, 1]``.

``p(t) = a + b·t + c·t² + d·t³``, fitted Hermite-style from two endpoint
values and two endpoint slopes.  One polynomial per axis makes up a
:class:`sdf2d.spline.CubicSpline` segment.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List

import numpy as np
import numpy.typing as npt

from .config import EPSILON

_Array = npt.NDArray[np.floating]


def zero_small(x: float, scale: float, epsilon: float = EPSILON) -> float:
    """Return 0 if ``|x|`` is below ``epsilon·scale``, else *x*."""
    if scale == 0 or abs(x) < epsilon * scale:
        return 0.0
    return x


def quadratic(a: float, b: float, c: float) -> List[float]:
    """Real roots of ``a·t² + b·t + c = 0`` in ascending order.

    Falls back to the linear root when ``a == 0``; a constant equation has
    no roots reported (including the all-zero case).
    """
    if a == 0:
        if b == 0:
            return []
        return [-c / b]
    disc = b * b - 4.0 * a * c
    if disc < 0:
        return []
    if disc == 0:
        return [-b / (2.0 * a)]
    # avoid cancellation between -b and sqrt(disc)
    q = -0.5 * (b + math.copysign(math.sqrt(disc), b))
    return sorted([q / a, c / q])


@dataclass(frozen=True)
class CubicPolynomial:
    """Coefficients of ``a + b·t + c·t² + d·t³``."""

    a: float = 0.0
    b: float = 0.0
    c: float = 0.0
    d: float = 0.0

    @classmethod
    def fit(cls, y0: float, y1: float, D0: float, D1: float) -> CubicPolynomial:
        """Fit through ``(0, y0)`` and ``(1, y1)`` with slopes *D0* and *D1*.

        Coefficients that are tiny relative to the sum of all coefficient
        magnitudes are snapped to exactly zero.
        """
        a = float(y0)
        b = float(D0)
        c = 3.0 * (y1 - y0) - 2.0 * D0 - D1
        d = 2.0 * (y0 - y1) + D0 + D1
        total = abs(a) + abs(b) + abs(c) + abs(d)
        return cls(
            zero_small(a, total),
            zero_small(b, total),
            zero_small(float(c), total),
            zero_small(float(d), total),
        )

    def f0(self, t: float | _Array) -> float | _Array:
        """Function value at *t*."""
        return self.a + t * (self.b + t * (self.c + self.d * t))

    def f1(self, t: float | _Array) -> float | _Array:
        """First derivative at *t*."""
        return self.b + t * (2.0 * self.c + 3.0 * self.d * t)

    def f2(self, t: float | _Array) -> float | _Array:
        """Second derivative at *t*."""
        return 2.0 * self.c + 6.0 * self.d * t

    def stationary_points(self) -> List[float]:
        """t values where ``f1 == 0`` (local minima/maxima), not clamped."""
        return quadratic(3.0 * self.d, 2.0 * self.c, self.b)
