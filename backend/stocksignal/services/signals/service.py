"""
Signal Service Implementation

Wraps the signal engine for the API layer.
"""

import logging
from typing import Optional

from stocksignal.schemas.market import PriceBar
from stocksignal.schemas.signals import SignalResult
from stocksignal.services.signals.interface import SignalServiceInterface
from stocksignal.services.signals.engine import derive_signal

logger = logging.getLogger(__name__)


class SignalService(SignalServiceInterface):
    """
    Signal Service.

    Holds no state between calls; the same bars always give the same result.
    """

    @property
    def name(self) -> str:
        return "SignalService"

    async def execute(self, input_data: list[PriceBar]) -> SignalResult:
        """Derive a signal from a price history."""
        result = derive_signal(input_data)

        if result.is_insufficient:
            logger.info(f"Insufficient data for signal ({len(input_data)} bars)")
        else:
            logger.debug(f"Signal {result.signal.value}: {result.reason}")

        return result

    async def health_check(self) -> bool:
        """Signal service is always healthy (pure computation)."""
        return True


# Singleton instance
_service_instance: Optional[SignalService] = None


def get_signal_service() -> SignalService:
    """Get or create signal service instance."""
    global _service_instance
    if _service_instance is None:
        _service_instance = SignalService()
    return _service_instance
