"""
Market Data API Endpoints

Symbol search and price history with the derived signal attached.
"""

import logging
from typing import Optional

from fastapi import APIRouter, HTTPException, Query

from stocksignal.schemas.market import ChartData, ChartRequest
from stocksignal.services.base import DataNotFoundError, ExternalAPIError, ValidationError
from stocksignal.services.data_ingestion import get_data_ingestion_service
from stocksignal.services.data_ingestion.yahoo_adapter import resolve_period
from stocksignal.services.signals import get_signal_service

logger = logging.getLogger(__name__)

router = APIRouter()


async def load_chart(symbol: str, period: Optional[str]) -> ChartData:
    """Fetch price history, translating provider failures to HTTP errors."""
    service = get_data_ingestion_service()
    request = ChartRequest(symbol=symbol, period=resolve_period(period))

    try:
        return await service.execute(request)
    except DataNotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)
    except ExternalAPIError as e:
        raise HTTPException(
            status_code=500,
            detail={"message": "Failed to fetch price data", "error": e.details.get("error")},
        )


@router.get("/search")
async def search_stocks_endpoint(
    query: Optional[str] = Query(default=None, description="Search query"),
    limit: Optional[int] = Query(default=None, ge=1, le=50),
):
    """
    Search equities and ETFs by symbol or name.

    Returns matching symbols for autocomplete.
    """
    service = get_data_ingestion_service()

    try:
        results = await service.search(query, limit)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=e.message)
    except ExternalAPIError as e:
        raise HTTPException(
            status_code=500,
            detail={"message": "Search failed", "error": e.details.get("error")},
        )

    return [r.model_dump() for r in results]


@router.get("/stock/{symbol}")
async def get_stock(
    symbol: str,
    period: Optional[str] = Query(default=None, description="1w, 1mo, 3mo, 6mo, 1y or 5y"),
):
    """
    Get price history for a symbol with its trading signal.

    Unknown periods fall back to the default (1mo).
    """
    chart = await load_chart(symbol, period)
    signal = await get_signal_service().execute(chart.quotes)

    return {
        **chart.model_dump(mode="json"),
        "signals": signal.to_response(),
    }
