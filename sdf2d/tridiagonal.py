"""Tridiagonal linear solver (Thomas algorithm).

Solves ``M·x = d`` where ``M`` is given row by row as
``(sub-diagonal, diagonal, super-diagonal)`` triples.  There is no pivoting:
a zero elimination denominator is reported as :class:`SingularMatrixError`.

See: https://en.wikipedia.org/wiki/Tridiagonal_matrix_algorithm
"""

from __future__ import annotations

from typing import Sequence

import numpy as np
import numpy.typing as npt

from .errors import InvalidInputError, SingularMatrixError

_Array = npt.NDArray[np.floating]


def tridiagonal(m: Sequence[Sequence[float]] | _Array, d: Sequence[float] | _Array) -> _Array:
    """Solve the tridiagonal system ``m·x = d`` and return ``x``.

    Parameters
    ----------
    m:
        ``(n, 3)`` rows of ``(sub, main, super)`` coefficients.  ``m[0][0]``
        and ``m[n-1][2]`` fall outside the matrix and must be zero.
    d:
        Right-hand side of length ``n``.

    Returns
    -------
    numpy.ndarray
        Shape ``(n,)`` solution vector.

    Raises
    ------
    InvalidInputError
        Mismatched sizes, non-zero out-of-matrix entries, or ``m[0][1] == 0``.
    SingularMatrixError
        An elimination denominator is exactly zero.
    """
    m = np.asarray(m, dtype=float)
    d = np.asarray(d, dtype=float)
    if m.ndim != 2 or m.shape[1] != 3 or m.shape[0] == 0:
        raise InvalidInputError(f"tridiagonal rows must have shape (n, 3), got {m.shape}")
    n = m.shape[0]
    if d.shape != (n,):
        raise InvalidInputError(f"bad sizes: rows(m) = {n}, rows(d) = {d.shape}")
    if m[0, 0] != 0 or m[n - 1, 2] != 0:
        raise InvalidInputError("bad values for tridiagonal matrix: m[0][0] and m[n-1][2] must be 0")
    if m[0, 1] == 0:
        raise InvalidInputError("bad values for tridiagonal matrix: m[0][1] == 0")

    sub, diag, sup = m[:, 0], m[:, 1], m[:, 2]
    cp = np.empty(n)  # c-prime
    x = np.empty(n)   # d-prime, then the solution

    # forward elimination
    cp[0] = sup[0] / diag[0]
    x[0] = d[0] / diag[0]
    for i in range(1, n):
        denom = diag[i] - sub[i] * cp[i - 1]
        if denom == 0:
            raise SingularMatrixError(i)
        cp[i] = sup[i] / denom
        x[i] = (d[i] - sub[i] * x[i - 1]) / denom

    # back substitution
    for i in range(n - 2, -1, -1):
        x[i] -= cp[i] * x[i + 1]
    return x
