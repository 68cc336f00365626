"""
Signal Engine

Turns a price history into a BUY/SELL/HOLD verdict using a 5/20 moving
average crossover and a 14-period RSI. Rules are checked in a fixed order
and the first match wins.
"""

import math
from dataclasses import dataclass
from typing import Callable, Optional, Sequence

from stocksignal.schemas.market import PriceBar
from stocksignal.schemas.signals import Indicators, SignalResult, SignalType
from stocksignal.services.indicators.calculations import moving_average, rsi

SHORT_WINDOW = 5
LONG_WINDOW = 20
RSI_PERIOD = 14
RSI_OVERSOLD = 30.0
RSI_OVERBOUGHT = 70.0

# Fewer clean closes than the long window cannot produce a current MA20
MIN_CLOSES = LONG_WINDOW

INSUFFICIENT_DATA_REASON = "insufficient data"
NO_SIGNAL_REASON = "no clear signal"


@dataclass(frozen=True)
class SignalContext:
    """Indicator values the rules are evaluated against."""

    price: float
    ma5: float
    ma20: float
    prev_ma5: Optional[float]
    prev_ma20: Optional[float]
    rsi: float


@dataclass(frozen=True)
class SignalRule:
    """A named condition and the verdict it produces."""

    name: str
    signal: SignalType
    matches: Callable[[SignalContext], bool]
    describe: Callable[[SignalContext], str]


def _has_previous(ctx: SignalContext) -> bool:
    return ctx.prev_ma5 is not None and ctx.prev_ma20 is not None


def _golden_cross(ctx: SignalContext) -> bool:
    return _has_previous(ctx) and ctx.prev_ma5 <= ctx.prev_ma20 and ctx.ma5 > ctx.ma20


def _dead_cross(ctx: SignalContext) -> bool:
    return _has_previous(ctx) and ctx.prev_ma5 >= ctx.prev_ma20 and ctx.ma5 < ctx.ma20


SIGNAL_RULES: tuple[SignalRule, ...] = (
    SignalRule(
        name="golden_cross",
        signal=SignalType.BUY,
        matches=_golden_cross,
        describe=lambda ctx: (
            f"golden cross: {SHORT_WINDOW}-period average crossed above "
            f"{LONG_WINDOW}-period average"
        ),
    ),
    SignalRule(
        name="dead_cross",
        signal=SignalType.SELL,
        matches=_dead_cross,
        describe=lambda ctx: (
            f"dead cross: {SHORT_WINDOW}-period average crossed below "
            f"{LONG_WINDOW}-period average"
        ),
    ),
    SignalRule(
        name="rsi_oversold",
        signal=SignalType.BUY,
        matches=lambda ctx: ctx.rsi < RSI_OVERSOLD,
        describe=lambda ctx: f"RSI oversold ({ctx.rsi:.1f})",
    ),
    SignalRule(
        name="rsi_overbought",
        signal=SignalType.SELL,
        matches=lambda ctx: ctx.rsi > RSI_OVERBOUGHT,
        describe=lambda ctx: f"RSI overbought ({ctx.rsi:.1f})",
    ),
)


def extract_closes(bars: Sequence[PriceBar]) -> list[float]:
    """Closing prices in order, with missing or non-finite closes dropped."""
    return [
        bar.close for bar in bars if bar.close is not None and math.isfinite(bar.close)
    ]


def build_context(closes: Sequence[float]) -> SignalContext:
    """Compute the indicator snapshot for a clean closing series."""
    if len(closes) < MIN_CLOSES:
        raise ValueError(
            f"need at least {MIN_CLOSES} closes, got {len(closes)}"
        )

    ma5 = moving_average(closes, SHORT_WINDOW)
    ma20 = moving_average(closes, LONG_WINDOW)

    return SignalContext(
        price=closes[-1],
        ma5=ma5[-1],
        ma20=ma20[-1],
        prev_ma5=ma5[-2],
        prev_ma20=ma20[-2],
        rsi=rsi(closes, RSI_PERIOD),
    )


def evaluate_rules(
    ctx: SignalContext, rules: Sequence[SignalRule] = SIGNAL_RULES
) -> tuple[SignalType, str]:
    """Return the verdict of the first matching rule, or HOLD."""
    for rule in rules:
        if rule.matches(ctx):
            return rule.signal, rule.describe(ctx)
    return SignalType.HOLD, NO_SIGNAL_REASON


def derive_signal(bars: Sequence[PriceBar]) -> SignalResult:
    """
    Derive a trading signal from a price history.

    Args:
        bars: Price bars, oldest first. Bars without a close are skipped.

    Returns:
        SignalResult. When fewer than MIN_CLOSES closes remain the
        result is HOLD with no indicators.
    """
    closes = extract_closes(bars)
    if len(closes) < MIN_CLOSES:
        return SignalResult(signal=SignalType.HOLD, reason=INSUFFICIENT_DATA_REASON)

    ctx = build_context(closes)
    signal, reason = evaluate_rules(ctx)

    return SignalResult(
        signal=signal,
        reason=reason,
        indicators=Indicators(
            price=ctx.price,
            ma5=ctx.ma5,
            ma20=ctx.ma20,
            rsi=ctx.rsi,
        ),
    )
