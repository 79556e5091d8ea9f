"""Outcome classification and hull generation failures."""

from __future__ import annotations

import enum


class Outcome(enum.Enum):
    """Classification attached to every construction result."""

    SUCCESS = "success"
    INVALID_ARGUMENT = "invalid_argument"
    DIMENSION_TOO_SMALL = "dimension_too_small"
    INCONSISTENT_DIMENSIONS = "inconsistent_dimensions"
    NON_FINITE_COORDINATES = "non_finite_coordinates"
    NOT_ENOUGH_VERTICES = "not_enough_vertices"
    DEGENERATE_DATA = "degenerate_data"
    PRECISION_FAILURE = "precision_failure"
    UNKNOWN_ERROR = "unknown_error"


class HullGenerationError(Exception):
    """Base exception for classified hull construction failures."""

    outcome: Outcome = Outcome.UNKNOWN_ERROR

    def __init__(self, message: str, outcome: Outcome | None = None):
        super().__init__(message)
        self.message = message
        if outcome is not None:
            self.outcome = outcome


class InvalidArgumentError(HullGenerationError):
    """Missing input, bad tolerance or configuration, unusable face type."""

    outcome = Outcome.INVALID_ARGUMENT


class DimensionError(HullGenerationError):
    """Dimension below two, or positions of different lengths."""

    outcome = Outcome.DIMENSION_TOO_SMALL


class NonFiniteCoordinatesError(HullGenerationError):
    """A coordinate is NaN or infinite."""

    outcome = Outcome.NON_FINITE_COORDINATES


class InsufficientPointsError(HullGenerationError):
    """Fewer than D + 1 points for a D-dimensional hull."""

    outcome = Outcome.NOT_ENOUGH_VERTICES


class DegenerateInputError(HullGenerationError):
    """Input spans fewer than D dimensions (e.g., collinear points in 2D)."""

    outcome = Outcome.DEGENERATE_DATA


class PrecisionError(HullGenerationError):
    """Numerical breakdown while building facet planes."""

    outcome = Outcome.PRECISION_FAILURE


_ERRORS_BY_OUTCOME = {
    Outcome.INVALID_ARGUMENT: InvalidArgumentError,
    Outcome.DIMENSION_TOO_SMALL: DimensionError,
    Outcome.INCONSISTENT_DIMENSIONS: DimensionError,
    Outcome.NON_FINITE_COORDINATES: NonFiniteCoordinatesError,
    Outcome.NOT_ENOUGH_VERTICES: InsufficientPointsError,
    Outcome.DEGENERATE_DATA: DegenerateInputError,
    Outcome.PRECISION_FAILURE: PrecisionError,
}


def error_for(outcome: Outcome, message: str) -> HullGenerationError:
    """Exception instance matching a failure outcome."""
    if outcome is Outcome.SUCCESS:
        raise ValueError("SUCCESS is not a failure outcome")
    cls = _ERRORS_BY_OUTCOME.get(outcome, HullGenerationError)
    return cls(message, outcome)
