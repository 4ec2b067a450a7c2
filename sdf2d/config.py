"""Configuration for the cubic-spline distance solver.

Settings are pydantic models so bad values fail at construction rather than
deep inside a query.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

# Defaults, exported as plain constants for callers that only need numbers.
NR_TOLERANCE = 1e-4
NR_MAXITERS = 10
NR_INITIAL_SAMPLES = 9
EPSILON = 1e-9


class SplineConfig(BaseModel):
    """Newton-Raphson settings used by :class:`sdf2d.spline.CubicSplineSDF2`."""

    model_config = ConfigDict(frozen=True)

    max_iterations: int = Field(
        default=NR_MAXITERS,
        ge=1,
        description="Maximum Newton-Raphson iterations per distance query",
    )
    tolerance: float = Field(
        default=NR_TOLERANCE,
        gt=0.0,
        description="Relative convergence tolerance on the local t parameter",
    )
    initial_samples: int = Field(
        default=NR_INITIAL_SAMPLES,
        ge=0,
        description="Initial guess is global t = initial_samples / 2",
    )
    on_degenerate: Literal["stop", "raise"] = Field(
        default="stop",
        description="Stop at the current t, or raise DegenerateQueryError",
    )


def get_default_config() -> SplineConfig:
    """Get default solver configuration."""
    return SplineConfig()
