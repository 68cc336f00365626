"""Shared fixtures for the StockSignal test suite."""

from datetime import datetime, timedelta

import pytest

from stocksignal.schemas.market import PriceBar


def _bars(closes, start=datetime(2024, 1, 1)):
    return [
        PriceBar(
            date=start + timedelta(days=i),
            open=close,
            high=close,
            low=close,
            close=close,
            volume=1_000 if close is not None else None,
        )
        for i, close in enumerate(closes)
    ]


@pytest.fixture
def make_bars():
    """Factory building daily PriceBars from a list of closes (None allowed)."""
    return _bars


@pytest.fixture
def golden_cross_closes():
    """24 falling closes then a jump that lifts MA5 over MA20 on the last bar.

    RSI at the last bar is ~80.3, so the overbought rule also holds.
    """
    return [100.0 - i for i in range(24)] + [130.0]


@pytest.fixture
def dead_cross_closes():
    """24 rising closes then a drop that sinks MA5 under MA20 on the last bar.

    RSI at the last bar is ~19.7, so the oversold rule also holds.
    """
    return [100.0 + i for i in range(24)] + [70.0]


@pytest.fixture
def sideways_closes():
    """Up 2, down 1 repeated: MA5 stays above MA20 and RSI sits at 66.7."""
    closes = [100.0]
    for i in range(29):
        closes.append(closes[-1] + (2.0 if i % 2 == 0 else -1.0))
    return closes
