"""Exception hierarchy for sdf2d."""


class SDFError(Exception):
    """Base exception for all sdf2d errors."""

    pass


class InvalidInputError(SDFError, ValueError):
    """Structurally invalid input: too few knots, a malformed matrix, ..."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class SingularMatrixError(SDFError, ArithmeticError):
    """Zero pivot met while eliminating a tridiagonal system."""

    def __init__(self, row: int) -> None:
        self.row = row
        super().__init__(f"Singular tridiagonal matrix: zero denominator at row {row}")


class DegenerateQueryError(SDFError, ArithmeticError):
    """Newton step on a spline segment has a zero second derivative."""

    def __init__(self, segment: int, t: float) -> None:
        self.segment = segment
        self.t = t
        super().__init__(
            f"Degenerate distance query on segment {segment} at t={t!r}: "
            "second derivative of squared distance is zero"
        )
