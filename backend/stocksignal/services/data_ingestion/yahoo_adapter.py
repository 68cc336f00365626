"""
Yahoo Finance Data Adapter

Fetches REAL market data from Yahoo Finance: symbol search and
historical price bars for a chart period.
"""

import logging
from datetime import datetime
from typing import Optional

import numpy as np
import pandas as pd
import yfinance as yf

from stocksignal.core.config import settings
from stocksignal.schemas.market import (
    ChartData,
    ChartInterval,
    ChartPeriod,
    PriceBar,
    SymbolSearchResult,
)
from stocksignal.services.base import DataNotFoundError, ExternalAPIError

logger = logging.getLogger(__name__)

SOURCE_NAME = "YahooFinance"


# Sampling interval per chart period
INTERVAL_MAP = {
    ChartPeriod.W1: ChartInterval.H1,
    ChartPeriod.MO1: ChartInterval.D1,
    ChartPeriod.MO3: ChartInterval.D1,
    ChartPeriod.MO6: ChartInterval.D1,
    ChartPeriod.Y1: ChartInterval.WK1,
    ChartPeriod.Y5: ChartInterval.MO1,
}

# How far back each chart period reaches
LOOKBACK_MAP = {
    ChartPeriod.W1: pd.DateOffset(days=7),
    ChartPeriod.MO1: pd.DateOffset(months=1),
    ChartPeriod.MO3: pd.DateOffset(months=3),
    ChartPeriod.MO6: pd.DateOffset(months=6),
    ChartPeriod.Y1: pd.DateOffset(years=1),
    ChartPeriod.Y5: pd.DateOffset(years=5),
}


def resolve_period(value: Optional[str]) -> ChartPeriod:
    """Map a period string to a ChartPeriod, falling back to the default."""
    default = ChartPeriod(settings.default_chart_period)
    if not value:
        return default
    try:
        return ChartPeriod(value)
    except ValueError:
        logger.warning(f"Unknown period '{value}', using {default.value}")
        return default


def get_interval(period: ChartPeriod) -> ChartInterval:
    """Sampling interval for a chart period."""
    return INTERVAL_MAP[period]


def get_start_date(period: ChartPeriod, now: Optional[datetime] = None) -> datetime:
    """Start of the history window for a chart period."""
    now = now or datetime.now()
    return (pd.Timestamp(now) - LOOKBACK_MAP[period]).to_pydatetime()


def _optional_float(value) -> Optional[float]:
    if value is None or not np.isfinite(value):
        return None
    return float(value)


def history_to_bars(hist: pd.DataFrame) -> list[PriceBar]:
    """Convert a yfinance history frame to PriceBars, keeping gaps as None."""
    bars = []
    for idx, row in hist.iterrows():
        volume = row.get("Volume")
        bars.append(
            PriceBar(
                date=idx.to_pydatetime(),
                open=_optional_float(row.get("Open")),
                high=_optional_float(row.get("High")),
                low=_optional_float(row.get("Low")),
                close=_optional_float(row.get("Close")),
                volume=None if pd.isna(volume) else int(volume),
            )
        )
    return bars


async def fetch_chart(
    symbol: str,
    period: ChartPeriod = ChartPeriod.MO1,
    now: Optional[datetime] = None,
) -> ChartData:
    """
    Fetch price history for a chart period from Yahoo Finance.

    Args:
        symbol: Yahoo ticker (e.g., "AAPL", "005930.KS")
        period: Chart period; decides both start date and interval
        now: Reference time for the start date (defaults to now)

    Returns:
        ChartData with unadjusted bars, oldest first

    Raises:
        DataNotFoundError: Yahoo returned no rows
        ExternalAPIError: The request itself failed
    """
    interval = get_interval(period)
    start = get_start_date(period, now)

    try:
        logger.info(f"Fetching {symbol} ({period.value}, {interval.value}) from Yahoo Finance...")

        ticker = yf.Ticker(symbol)
        hist = ticker.history(start=start, interval=interval.value, auto_adjust=False)
    except Exception as e:
        logger.error(f"Error fetching {symbol} from Yahoo Finance: {e}")
        raise ExternalAPIError(
            SOURCE_NAME, f"Failed to fetch price data for {symbol}", {"error": str(e)}
        ) from e

    if hist is None or hist.empty:
        logger.warning(f"No data returned for {symbol}")
        raise DataNotFoundError(SOURCE_NAME, f"No price data for {symbol}")

    try:
        meta = ticker.history_metadata or {}
    except Exception as e:
        logger.debug(f"Could not get metadata for {symbol}: {e}")
        meta = {}

    return ChartData(
        symbol=symbol,
        name=meta.get("shortName") or meta.get("longName"),
        currency=meta.get("currency"),
        period=period,
        interval=interval,
        quotes=history_to_bars(hist),
    )


async def search_symbols(query: str, limit: int = 10) -> list[SymbolSearchResult]:
    """
    Search Yahoo Finance for tradable symbols.

    Only quote types listed in settings.search_quote_types are kept
    (equities and ETFs by default).
    """
    try:
        quotes = yf.Search(query, max_results=limit, news_count=0).quotes
    except Exception as e:
        logger.error(f"Search error for '{query}': {e}")
        raise ExternalAPIError(
            SOURCE_NAME, f"Search failed for '{query}'", {"error": str(e)}
        ) from e

    results = []
    for quote in quotes or []:
        quote_type = quote.get("quoteType")
        if quote_type not in settings.search_quote_types:
            continue
        results.append(
            SymbolSearchResult(
                symbol=quote["symbol"],
                name=quote.get("shortname") or quote.get("longname"),
                exchange=quote.get("exchange"),
                type=quote_type,
            )
        )
    return results


async def validate_symbol(symbol: str) -> bool:
    """Check if a symbol exists and has data."""
    try:
        hist = yf.Ticker(symbol).history(period="5d")
        return not hist.empty
    except Exception:
        return False
