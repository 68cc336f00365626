"""
StockSignal Schema Contracts

This module defines all JSON contracts between system components.
"""

from stocksignal.schemas.market import (
    ChartPeriod,
    ChartInterval,
    PriceBar,
    SymbolSearchResult,
    ChartRequest,
    ChartData,
)
from stocksignal.schemas.signals import (
    SignalType,
    Indicators,
    SignalResult,
    SignalRequest,
)

__all__ = [
    # Market
    "ChartPeriod",
    "ChartInterval",
    "PriceBar",
    "SymbolSearchResult",
    "ChartRequest",
    "ChartData",
    # Signals
    "SignalType",
    "Indicators",
    "SignalResult",
    "SignalRequest",
]
