"""
Signal Service

CONTRACT:
    Input:  list[PriceBar]
    Output: SignalResult

RESPONSIBILITIES:
    - Extract the clean closing series (null closes dropped)
    - Compute MA5, MA20 and RSI(14) at the latest close
    - Apply crossover / RSI rules in priority order, first match wins
    - Report insufficient data as HOLD without indicators

PURE PYTHON - No I/O, no shared state.
"""

from stocksignal.services.signals.engine import (
    SIGNAL_RULES,
    SignalContext,
    SignalRule,
    derive_signal,
    evaluate_rules,
    extract_closes,
)
from stocksignal.services.signals.interface import SignalServiceInterface
from stocksignal.services.signals.service import SignalService, get_signal_service

__all__ = [
    "SIGNAL_RULES",
    "SignalContext",
    "SignalRule",
    "derive_signal",
    "evaluate_rules",
    "extract_closes",
    "SignalServiceInterface",
    "SignalService",
    "get_signal_service",
]
