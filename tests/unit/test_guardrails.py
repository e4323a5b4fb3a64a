"""
Tests for inter-stage invariant checks.
"""

import pytest

from pvcurve.core.exceptions import ValidationError
from pvcurve.guardrails.validators import validate_dense, validate_ordering


class TestValidateOrdering:
    """Tests for ordering validation."""

    def test_ascending_minutes_pass(self, make_points):
        """Strictly ascending minutes should pass."""
        validate_ordering(make_points([0, 5, 9], [1.0, 1.0, 1.0]))

    def test_out_of_order_raises(self, make_points):
        """A step backwards should raise."""
        with pytest.raises(ValidationError) as exc_info:
            validate_ordering(make_points([0, 9, 5], [1.0, 1.0, 1.0]))

        assert exc_info.value.value == 5

    def test_duplicates_raise_when_strict(self, make_points):
        """Duplicate minutes should raise in strict mode."""
        with pytest.raises(ValidationError):
            validate_ordering(make_points([0, 5, 5], [1.0, 1.0, 1.0]))

    def test_duplicates_allowed_when_not_strict(self, make_points):
        """Non-strict mode should accept repeated minutes."""
        validate_ordering(make_points([0, 5, 5], [1.0, 1.0, 1.0]), strict=False)


class TestValidateDense:
    """Tests for density validation."""

    def test_dense_curve_passes(self, make_points):
        """One point per minute should pass."""
        validate_dense(make_points([3, 4, 5, 6], [1.0] * 4))

    def test_gap_raises(self, make_points):
        """A missing minute should raise."""
        with pytest.raises(ValidationError):
            validate_dense(make_points([3, 4, 6], [1.0] * 3))

    def test_empty_curve_passes(self):
        """Nothing to check in an empty curve."""
        validate_dense([])
