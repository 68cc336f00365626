"""Tests for moving average and RSI calculations."""

import numpy as np
import pytest

from stocksignal.services.indicators.calculations import (
    NEUTRAL_RSI,
    moving_average,
    rsi,
)


class TestMovingAverage:
    """Tests for the simple moving average."""

    def test_hand_computed_series(self):
        """Known example: trailing 3-value means."""
        assert moving_average([1, 2, 3, 4, 5], 3) == [None, None, 2.0, 3.0, 4.0]

    @pytest.mark.parametrize("window", [1, 2, 5, 10, 20, 25])
    def test_length_matches_input(self, window):
        """Output is always the same length as the input."""
        series = [float(i) for i in range(20)]
        result = moving_average(series, window)

        assert len(result) == len(series)
        assert all(v is None for v in result[: window - 1])

    def test_each_value_is_trailing_mean(self):
        """Entry i equals the mean of the window ending at i."""
        series = [3.0, 7.0, 1.0, 9.0, 4.0, 6.0, 2.0, 8.0]
        result = moving_average(series, 4)

        for i in range(3, len(series)):
            assert result[i] == pytest.approx(sum(series[i - 3 : i + 1]) / 4)

    def test_window_of_one_is_identity(self):
        """A one-value window reproduces the input."""
        assert moving_average([5, 6, 7], 1) == [5.0, 6.0, 7.0]

    def test_window_longer_than_series(self):
        """Every position is undefined when the window never fills."""
        assert moving_average([1, 2, 3], 5) == [None, None, None]

    def test_empty_series(self):
        """Empty input gives empty output."""
        assert moving_average([], 3) == []

    def test_undefined_is_none_not_nan(self):
        """Missing averages are None so they cannot be used as numbers."""
        result = moving_average([1.0, 2.0], 2)
        assert result[0] is None

    @pytest.mark.parametrize("window", [0, -3, 2.5, "5", True, None])
    def test_invalid_window_rejected(self, window):
        """Non-integer or non-positive windows fail fast."""
        with pytest.raises(ValueError):
            moving_average([1, 2, 3], window)


class TestRSI:
    """Tests for the single-point RSI."""

    def test_neutral_when_history_too_short(self):
        """Fewer than period + 1 closes gives exactly 50."""
        assert rsi([float(i) for i in range(14)], 14) == NEUTRAL_RSI
        assert rsi([], 14) == 50.0

    def test_strictly_increasing_is_100(self):
        """No losses in the window gives 100."""
        closes = [float(i) for i in range(1, 21)]
        assert rsi(closes, 14) == 100.0

    def test_strictly_decreasing_is_0(self):
        """No gains in the window gives 0."""
        closes = [float(100 - i) for i in range(20)]
        assert rsi(closes, 14) == pytest.approx(0.0)

    def test_hand_computed_value(self):
        """Gains 2, losses 1 over two deltas: RS = 2, RSI = 66.67."""
        assert rsi([1.0, 3.0, 2.0], 2) == pytest.approx(200 / 3)

    def test_zero_deltas_count_as_neither(self):
        """Flat steps add nothing to gains or losses."""
        assert rsi([5.0, 5.0, 5.0, 6.0], 3) == 100.0
        assert rsi([5.0, 5.0, 4.0], 2) == pytest.approx(0.0)

    def test_only_final_window_is_used(self):
        """History before the last period + 1 closes does not matter."""
        crash = [500.0, 10.0]
        rising = [float(20 + i) for i in range(15)]
        assert rsi(crash + rising, 14) == rsi(rising, 14) == 100.0

    def test_bounded(self):
        """RSI always lands in [0, 100]."""
        rng = np.random.default_rng(7)
        walk = list(100 + np.cumsum(rng.normal(0, 2, 200)))

        for end in range(15, len(walk)):
            value = rsi(walk[:end], 14)
            assert 0.0 <= value <= 100.0

    @pytest.mark.parametrize("period", [0, -1, 1.5, False])
    def test_invalid_period_rejected(self, period):
        """Non-integer or non-positive periods fail fast."""
        with pytest.raises(ValueError):
            rsi([1.0, 2.0, 3.0], period)
