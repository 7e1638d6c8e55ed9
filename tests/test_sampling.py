"""Tests for sub-range selection and expected values."""

from __future__ import annotations

import logging
from decimal import Decimal

import pytest

from probrange.data.range import SubRange
from probrange.errors import SelectionExhaustedError
from probrange.sampling import (
    select_index,
    uniform_expected_value,
    weighted_expected_value,
)
from probrange.validation import to_decimals


class TestSelectIndex:
    """Tests for select_index()."""

    @pytest.mark.parametrize(
        ("draw", "expected_index"),
        [
            (1, 0),
            (2, 1),
            (37, 1),
            (38, 2),
            (71, 2),
            (72, 3),
            (91, 3),
            (92, 4),
            (97, 4),
            (98, 5),
            (100, 5),
        ],
    )
    def test_percentile_thresholds(
        self,
        decimal_probabilities: list[Decimal],
        draw: int,
        expected_index: int,
    ) -> None:
        """Test each percentile maps onto the cumulative thresholds."""
        assert select_index(decimal_probabilities, draw) == expected_index

    def test_every_percentile_counts(
        self, decimal_probabilities: list[Decimal]
    ) -> None:
        """Test the number of percentiles per index matches the probabilities."""
        counts = [0] * len(decimal_probabilities)
        for draw in range(1, 101):
            counts[select_index(decimal_probabilities, draw)] += 1
        assert counts == [1, 36, 34, 20, 6, 3]

    def test_zero_probability_never_selected(self) -> None:
        """Test a zero-probability entry is skipped."""
        probabilities = to_decimals([0, 0.5, 0.5])
        selected = {select_index(probabilities, draw) for draw in range(1, 101)}
        assert selected == {1, 2}

    def test_exhausted_falls_back_to_last(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Test an unconsumed draw selects the last index and logs a warning."""
        probabilities = to_decimals([0.2, 0.3])
        with caplog.at_level(logging.WARNING, logger="probrange.sampling"):
            assert select_index(probabilities, 80) == 1
        assert "No sub-range selected for draw 80" in caplog.text

    def test_exhausted_strict_raises(self) -> None:
        """Test strict selection raises SelectionExhaustedError."""
        probabilities = to_decimals([0.2, 0.3])
        with pytest.raises(SelectionExhaustedError) as exc_info:
            select_index(probabilities, 80, strict=True)
        assert exc_info.value.draw == 80

    def test_strict_not_raised_when_selected(self) -> None:
        """Test strict selection behaves normally for a reachable draw."""
        probabilities = to_decimals([0.2, 0.3])
        assert select_index(probabilities, 50, strict=True) == 1


class TestExpectedValue:
    """Tests for expected value helpers."""

    def test_uniform_expected_value(self) -> None:
        """Test the uniform expectation is the interval midpoint."""
        assert uniform_expected_value(1, 1000) == 500.5
        assert uniform_expected_value(50, 70) == 60.0

    def test_weighted_expected_value(
        self, decimal_probabilities: list[Decimal]
    ) -> None:
        """Test the weighted midpoint sum of the reference table."""
        ranges = [
            SubRange(lo=1, hi=40),
            SubRange(lo=41, hi=119),
            SubRange(lo=120, hi=318),
            SubRange(lo=319, hi=397),
            SubRange(lo=398, hi=566),
            SubRange(lo=567, hi=1000),
        ]
        assert weighted_expected_value(ranges, decimal_probabilities) == pytest.approx(
            227.49
        )

    def test_weighted_expected_value_length_mismatch(self) -> None:
        """Test mismatched lengths are rejected."""
        with pytest.raises(ValueError):
            weighted_expected_value([SubRange(lo=1, hi=2)], to_decimals([0.5, 0.5]))
