"""
CONTRACT 1: Market Data

Input:  symbol + ChartPeriod (or a search query)
Output: StockChart / list[SymbolSearchResult]

Price history is fetched from Yahoo Finance and normalized into PriceBars.
"""

from datetime import datetime
from enum import Enum
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


# =============================================================================
# ENUMS
# =============================================================================


class ChartPeriod(str, Enum):
    W1 = "1w"
    MO1 = "1mo"
    MO3 = "3mo"
    MO6 = "6mo"
    Y1 = "1y"
    Y5 = "5y"


class ChartInterval(str, Enum):
    H1 = "1h"
    D1 = "1d"
    WK1 = "1wk"
    MO1 = "1mo"


# =============================================================================
# PRICE DATA
# =============================================================================


class PriceBar(BaseModel):
    """
    Single price observation.

    Any field except the date may be null; Yahoo leaves gaps for halted
    sessions and the still-forming bar. NaN and infinity are rejected.
    """

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    date: datetime
    open: Optional[float] = None
    high: Optional[float] = None
    low: Optional[float] = None
    close: Optional[float] = None
    volume: Optional[int] = Field(default=None, ge=0)


class SymbolSearchResult(BaseModel):
    """Single match from a symbol search."""

    symbol: str
    name: Optional[str] = None
    exchange: Optional[str] = None
    type: str


class ChartRequest(BaseModel):
    """
    Request for historical price data.
    Sent by: API layer
    Received by: Data Ingestion Service
    """

    symbol: str = Field(..., min_length=1, description="Ticker (e.g., 'AAPL', '005930.KS')")
    period: ChartPeriod = Field(default=ChartPeriod.MO1, description="Lookback period")


class ChartData(BaseModel):
    """
    Normalized price history for one symbol.
    Returned by: Data Ingestion Service
    Consumed by: Signal Service, API layer
    """

    symbol: str
    name: Optional[str] = None
    currency: Optional[str] = None
    period: ChartPeriod
    interval: ChartInterval
    quotes: list[PriceBar]
