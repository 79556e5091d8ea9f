import pytest

from ndhull.errors import (
    DegenerateInputError,
    DimensionError,
    HullGenerationError,
    InsufficientPointsError,
    InvalidArgumentError,
    NonFiniteCoordinatesError,
    Outcome,
    PrecisionError,
    error_for,
)


class TestHullGenerationError:
    """Tests for the classified failure hierarchy."""

    @pytest.mark.parametrize(
        "cls, outcome",
        [
            (InvalidArgumentError, Outcome.INVALID_ARGUMENT),
            (DimensionError, Outcome.DIMENSION_TOO_SMALL),
            (NonFiniteCoordinatesError, Outcome.NON_FINITE_COORDINATES),
            (InsufficientPointsError, Outcome.NOT_ENOUGH_VERTICES),
            (DegenerateInputError, Outcome.DEGENERATE_DATA),
            (PrecisionError, Outcome.PRECISION_FAILURE),
        ],
    )
    def test_default_outcome(self, cls, outcome):
        err = cls("boom")
        assert isinstance(err, HullGenerationError)
        assert err.outcome is outcome
        assert err.message == "boom"
        assert str(err) == "boom"

    def test_outcome_override(self):
        err = DimensionError("mixed", Outcome.INCONSISTENT_DIMENSIONS)
        assert err.outcome is Outcome.INCONSISTENT_DIMENSIONS
        assert DimensionError.outcome is Outcome.DIMENSION_TOO_SMALL

    def test_error_for(self):
        err = error_for(Outcome.DEGENERATE_DATA, "flat")
        assert isinstance(err, DegenerateInputError)
        assert err.message == "flat"

    def test_error_for_unknown(self):
        err = error_for(Outcome.UNKNOWN_ERROR, "???")
        assert type(err) is HullGenerationError
        assert err.outcome is Outcome.UNKNOWN_ERROR

    def test_error_for_success(self):
        with pytest.raises(ValueError):
            error_for(Outcome.SUCCESS, "")
