"""
Indicator Calculations

PURE PYTHON - Uses NumPy for calculations.
All math is deterministic and reproducible.
"""

from stocksignal.services.indicators.calculations import (
    NEUTRAL_RSI,
    moving_average,
    rsi,
)

__all__ = [
    "NEUTRAL_RSI",
    "moving_average",
    "rsi",
]
