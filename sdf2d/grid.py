"""Grid sampling utilities for 2D distance functions."""

from __future__ import annotations

import os
from typing import Optional, Tuple

import numpy as np
import numpy.typing as npt

from .errors import InvalidInputError
from .geometry import Geometry2D

_Array = npt.NDArray[np.floating]
_Bounds2D = Tuple[Tuple[float, float], Tuple[float, float]]
_Resolution2D = Tuple[int, int]


def sample_levelset_2d(
    geom: Geometry2D,
    bounds: Optional[_Bounds2D] = None,
    resolution: _Resolution2D = (64, 64),
    padding: float = 0.1,
) -> _Array:
    """Sample *geom* on a uniform 2-D cell-centred grid.

    Parameters
    ----------
    geom:
        A 2-D geometry whose ``sdf()`` method accepts ``(..., 2)`` arrays.
    bounds:
        ``((x0, x1), (y0, y1))`` physical extents of the domain.  Defaults
        to the geometry's bounding box grown by *padding* times its
        largest side.
    resolution:
        ``(nx, ny)`` number of cells along each axis.
    padding:
        Relative margin used only when *bounds* is omitted.

    Returns
    -------
    numpy.ndarray
        Shape ``(ny, nx)`` array of distances, row-major (y first).
    """
    if bounds is None:
        bbox = geom.bounding_box()
        if bbox is None:
            raise InvalidInputError("bounds are required for a geometry without a bounding box")
        margin = padding * float(np.max(bbox.size()))
        bounds = bbox.enlarge(margin if margin > 0 else padding).as_bounds()

    (x0, x1), (y0, y1) = bounds
    nx, ny = resolution
    if nx < 1 or ny < 1:
        raise InvalidInputError(f"resolution must be positive, got {resolution}")

    xs = np.linspace(x0, x1, nx, endpoint=False) + (x1 - x0) / (2.0 * nx)
    ys = np.linspace(y0, y1, ny, endpoint=False) + (y1 - y0) / (2.0 * ny)

    Y, X = np.meshgrid(ys, xs, indexing="ij")
    p = np.stack([X, Y], axis=-1)
    return geom.sdf(p)


def save_npy(path: str, phi: _Array) -> None:
    """Save *phi* array to *path* (creates parent directories if needed)."""
    out_dir = os.path.dirname(path)
    if out_dir:
        os.makedirs(out_dir, exist_ok=True)
    np.save(path, phi)
