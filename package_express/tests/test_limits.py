"""
Unit Tests for Package Express Limits

Run with: pytest package_express/tests/test_limits.py -v
"""

import pytest

from package_express.limits import ALL, Heavy, Big, ThresholdExceeded, dimension_sum
from package_express.data import MAX_WEIGHT, MAX_DIMENSION_SUM


class TestHeavy:
    """Tests for the weight limit."""

    def test_threshold(self):
        assert Heavy.threshold == MAX_WEIGHT == 50

    def test_under_limit_returned_unchanged(self):
        assert Heavy.check(12.5) == 12.5

    def test_at_limit_accepted(self):
        assert Heavy.exceeded(50.0) is False
        assert Heavy.check(50.0) == 50.0

    def test_over_limit_raises(self):
        with pytest.raises(ThresholdExceeded) as exc_info:
            Heavy.check(50.01)
        assert exc_info.value.limit is Heavy
        assert exc_info.value.value == 50.01

    def test_message(self):
        assert Heavy.message == (
            "Package too heavy to be shipped via Package Express. Have a good day."
        )


class TestBig:
    """Tests for the dimension-sum limit."""

    def test_threshold(self):
        assert Big.threshold == MAX_DIMENSION_SUM == 50

    def test_dimension_sum(self):
        assert dimension_sum(10.0, 15.0, 20.0) == pytest.approx(45.0)

    def test_at_limit_accepted(self):
        assert Big.check(dimension_sum(10.0, 20.0, 20.0)) == pytest.approx(50.0)

    def test_over_limit_raises(self):
        with pytest.raises(ThresholdExceeded) as exc_info:
            Big.check(dimension_sum(10.0, 20.0, 21.0))
        assert exc_info.value.limit is Big

    def test_message(self):
        assert Big.message == "Package too big to be shipped via Package Express."


def test_threshold_exceeded_is_value_error():
    assert issubclass(ThresholdExceeded, ValueError)


def test_all_in_check_order():
    """Weight is checked before dimensions."""
    assert ALL == [Heavy, Big]
