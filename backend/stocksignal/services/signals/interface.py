"""
Signal Service Interface

Defines the contract for the signal derivation layer.
"""

from abc import abstractmethod

from stocksignal.services.base import BaseService
from stocksignal.schemas.market import PriceBar
from stocksignal.schemas.signals import SignalResult


class SignalServiceInterface(BaseService[list[PriceBar], SignalResult]):
    """
    Signal Service Contract.

    INPUT: list[PriceBar]
        - Chronological bars, oldest first; null closes allowed

    OUTPUT: SignalResult
        - signal: BUY / SELL / HOLD
        - reason: Human-readable rationale
        - indicators: Latest price, MA5, MA20, RSI (absent if data insufficient)
    """

    @property
    def name(self) -> str:
        return "SignalService"

    @abstractmethod
    async def execute(self, input_data: list[PriceBar]) -> SignalResult:
        """Derive a signal from a price history."""
        pass

    @abstractmethod
    async def health_check(self) -> bool:
        """Signal service is always healthy (pure computation)."""
        pass
