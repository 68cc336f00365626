"""
Technical Indicator Calculations

Pure Python/NumPy implementations of the indicators the signal engine uses.
All math is deterministic.
"""

from typing import Optional, Sequence

import numpy as np

# RSI returned when there is not enough history for a full window
NEUTRAL_RSI = 50.0


def _require_positive_int(value, label: str) -> None:
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise ValueError(f"{label} must be an integer, got {value!r}")
    if value < 1:
        raise ValueError(f"{label} must be >= 1, got {value}")


# =============================================================================
# MOVING AVERAGES
# =============================================================================


def moving_average(series: Sequence[float], window: int) -> list[Optional[float]]:
    """
    Simple Moving Average.

    Same length as `series`. Positions without `window` trailing values
    are None rather than NaN so a missing average can never leak into
    arithmetic as a number.
    """
    _require_positive_int(window, "window")

    data = np.asarray(series, dtype=float)
    result: list[Optional[float]] = [None] * len(data)

    for i in range(window - 1, len(data)):
        result[i] = float(np.mean(data[i - window + 1 : i + 1]))
    return result


# =============================================================================
# MOMENTUM INDICATORS
# =============================================================================


def rsi(series: Sequence[float], period: int = 14) -> float:
    """
    Relative Strength Index at the last element of `series`.

    Uses plain averages of the gains and losses over the final `period`
    differences. Only the latest point is computed; callers wanting a
    series must call this on successive prefixes.
    """
    _require_positive_int(period, "period")

    data = np.asarray(series, dtype=float)
    if len(data) < period + 1:
        return NEUTRAL_RSI

    deltas = np.diff(data[-(period + 1):])
    gains = float(np.sum(deltas[deltas > 0]))
    losses = float(-np.sum(deltas[deltas < 0]))

    avg_gain = gains / period
    avg_loss = losses / period

    if avg_loss == 0:
        return 100.0

    rs = avg_gain / avg_loss
    return 100 - (100 / (1 + rs))
