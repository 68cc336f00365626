"""
Signal API Endpoints

Signals for a symbol, or for price bars the caller already holds.
"""

from typing import Optional

from fastapi import APIRouter, Query

from stocksignal.api.v1.endpoints.market import load_chart
from stocksignal.schemas.signals import SignalRequest
from stocksignal.services.signals import get_signal_service

router = APIRouter()


@router.post("/derive")
async def derive_signal_endpoint(request: SignalRequest):
    """
    Derive a signal from supplied price bars (oldest first).

    `indicators` is omitted when there are fewer than 20 usable closes.
    """
    result = await get_signal_service().execute(request.bars)
    return result.to_response()


@router.get("/{symbol}")
async def get_signal(
    symbol: str,
    period: Optional[str] = Query(default=None, description="1w, 1mo, 3mo, 6mo, 1y or 5y"),
):
    """Get the current trading signal for a symbol."""
    chart = await load_chart(symbol, period)
    result = await get_signal_service().execute(chart.quotes)

    return {
        "symbol": chart.symbol,
        "period": chart.period.value,
        "interval": chart.interval.value,
        **result.to_response(),
    }
