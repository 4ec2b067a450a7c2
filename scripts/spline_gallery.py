"""Render a few cubic splines as distance heatmaps on one page.

Each panel shows the spline's distance field, the knots, the polygonization
and the ``round()`` stroke outline.

Usage::

    python scripts/spline_gallery.py                        # saves spline_gallery.png
    python scripts/spline_gallery.py --out my_file.png      # custom output path
    python scripts/spline_gallery.py --res 96 --verbose     # coarser, with solver trace

Requirements: numpy, matplotlib
"""
from __future__ import annotations

import argparse
import os
import sys

# Ensure the repo root (parent of scripts/) is importable regardless of cwd
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import matplotlib.pyplot as plt
import numpy as np

from sdf2d import SDFError, Spline2D, sample_levelset_2d
from sdf2d.utils import configure_logging, get_logger

# ---------------------------------------------------------------------------
# Knot catalogue: (label, knots)
# ---------------------------------------------------------------------------

def _make_knots() -> list[tuple[str, np.ndarray]]:
    theta = np.linspace(0.0, 1.5 * np.pi, 7)
    x = np.linspace(0.0, 6.0, 9)
    return [
        ("arch",    np.array([(0.0, 0.0), (1.0, 1.0), (2.0, 0.0)])),
        ("line",    np.array([(0.0, 0.0), (2.0, 1.0)])),
        ("s-curve", np.array([(0.0, 0.0), (1.0, 1.0), (2.0, 1.0), (3.0, 0.0), (4.0, -1.0), (5.0, 0.0)])),
        ("spiral",  np.stack([(1.0 + theta) * np.cos(theta), (1.0 + theta) * np.sin(theta)], axis=-1)),
        ("wave",    np.stack([x, 0.5 * np.sin(x)], axis=-1)),
        ("hook",    np.array([(0.0, 0.0), (0.0, 2.0), (1.0, 3.0), (2.0, 2.0)])),
    ]


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------

def render_gallery(
    curves: list[tuple[str, np.ndarray]],
    out_path: str,
    res: int = 160,
    ncols: int = 3,
    logger=None,
) -> None:
    nrows = (len(curves) + ncols - 1) // ncols
    fig, axes = plt.subplots(
        nrows, ncols,
        figsize=(ncols * 3.6, nrows * 3.6),
        facecolor="#111111",
    )
    axes = np.asarray(axes).ravel()

    for ax, (label, knots) in zip(axes, curves):
        ax.set_facecolor("#111111")
        ax.set_xticks([])
        ax.set_yticks([])
        ax.set_title(label, color="white", fontsize=8, pad=3)
        for spine in ax.spines.values():
            spine.set_edgecolor("#444444")

        try:
            curve = Spline2D(knots, logger=logger)
        except SDFError as exc:
            ax.text(0.5, 0.5, str(exc), ha="center", va="center",
                    color="red", transform=ax.transAxes, fontsize=6, wrap=True)
            continue

        bbox = curve.bounding_box()
        margin = 0.25 * float(np.max(bbox.size()))
        (x0, x1), (y0, y1) = bounds = bbox.enlarge(margin).as_bounds()
        extent = [x0, x1, y0, y1]

        phi = sample_levelset_2d(curve, bounds, (res, res))
        ax.imshow(phi, origin="lower", extent=extent, cmap="magma",
                  vmin=0.0, vmax=max(float(phi.max()), 1e-6), interpolation="bilinear")

        stroke = sample_levelset_2d(curve.round(0.05 * margin / 0.25), bounds, (res, res))
        if stroke.min() < 0 < stroke.max():
            ax.contour(stroke, levels=[0.0], colors="white", linewidths=0.8, extent=extent)

        poly = curve.polygonize(64)
        ax.plot(poly[:, 0], poly[:, 1], color="#33ccff", linewidth=0.8)
        ax.plot(knots[:, 0], knots[:, 1], "o", color="#ffcc00", markersize=3)
        ax.set_xlim(x0, x1)
        ax.set_ylim(y0, y1)
        ax.set_aspect("equal")

    # Hide unused axes
    for ax in axes[len(curves):]:
        ax.set_visible(False)

    fig.suptitle("sdf2d: Cubic Spline Distance Fields", color="white",
                 fontsize=13, y=1.002)
    plt.tight_layout(pad=0.4)
    fig.savefig(out_path, dpi=200, bbox_inches="tight", facecolor=fig.get_facecolor())
    plt.close(fig)
    print(f"Saved: {out_path}")


def main() -> None:
    parser = argparse.ArgumentParser(description="Render cubic spline distance fields to a PNG gallery.")
    parser.add_argument("--out", default="spline_gallery.png", help="Output PNG path")
    parser.add_argument("--res", type=int, default=160, help="Grid cells per axis (default 160)")
    parser.add_argument("--cols", type=int, default=3, help="Number of columns (default 3)")
    parser.add_argument("--verbose", action="store_true", help="Log every Newton-Raphson step")
    args = parser.parse_args()

    logger = None
    if args.verbose:
        configure_logging(level="DEBUG")
        logger = get_logger("sdf2d.spline")

    render_gallery(_make_knots(), args.out, res=args.res, ncols=args.cols, logger=logger)


if __name__ == "__main__":
    main()
