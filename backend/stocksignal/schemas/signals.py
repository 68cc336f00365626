"""
CONTRACT 2: Signal Engine

Input:  list[PriceBar]
Output: SignalResult

Pure Python/NumPy - deterministic, stateless.
"""

from enum import Enum
from typing import Any, Optional
from pydantic import BaseModel, Field

from stocksignal.schemas.market import PriceBar


class SignalType(str, Enum):
    BUY = "BUY"
    SELL = "SELL"
    HOLD = "HOLD"


class Indicators(BaseModel):
    """Indicator snapshot at the latest close."""

    price: float
    ma5: float
    ma20: float
    rsi: float = Field(..., ge=0, le=100)


class SignalResult(BaseModel):
    """
    Trading signal with rationale.

    `indicators` is None when there was not enough history to compute
    anything; consumers must not render indicator values in that case.
    """

    signal: SignalType
    reason: str = Field(..., min_length=1)
    indicators: Optional[Indicators] = None

    @property
    def is_insufficient(self) -> bool:
        return self.indicators is None

    def to_response(self) -> dict[str, Any]:
        """Serialize for the API, omitting indicators when absent."""
        return self.model_dump(mode="json", exclude_none=True)


class SignalRequest(BaseModel):
    """Request body for deriving a signal from caller-supplied bars."""

    bars: list[PriceBar] = Field(..., description="Price bars, oldest first")
