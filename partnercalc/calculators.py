from __future__ import annotations
import math
from typing import List, Optional

import pandas as pd

from partnercalc.models import ProfitBreakdown
from partnercalc.presets import (
    BUY_RATE,
    FIRST_HALF_SHARE,
    SECOND_HALF_SHARE,
    SELL_RATE_MAX,
    SELL_RATE_MIN,
    SELL_RATE_STEP,
)


def nz(x, default=0.0):
    """Return a float for ``x`` or a fallback value.

    Session values can arrive as ``None`` or ``NaN`` before the page has run
    once.  This helper mirrors the spreadsheet ``NZ()`` function and keeps the
    formula from breaking when a value is missing.
    """

    try:
        if x is None or (isinstance(x, float) and math.isnan(x)):
            return default
        return float(x)
    except (TypeError, ValueError):
        return default


def parse_amount(text) -> Optional[float]:
    """Parse a typed amount such as ``"100000"`` or ``"1,250.5"``.

    Returns ``None`` when the text is empty, not a number, or not finite.
    """

    if text is None:
        return None
    cleaned = str(text).strip().replace(",", "")
    # float() would also take "1_000"; a number field does not
    if not cleaned or "_" in cleaned:
        return None
    try:
        value = float(cleaned)
    except ValueError:
        return None
    if not math.isfinite(value):
        return None
    return value


def is_valid_turnover(candidate) -> bool:
    value = parse_amount(candidate)
    return value is not None and value >= 0


def accept_turnover(candidate, current: float) -> float:
    """Apply the turnover acceptance policy.

    The candidate replaces ``current`` only when it parses as a number and is
    not negative.  Anything else keeps the previous value without complaint.
    """

    if not is_valid_turnover(candidate):
        return current
    return parse_amount(candidate) + 0.0  # "-0" becomes 0.0


def snap_sell_rate(value) -> float:
    """Snap a slider reading onto the 0.1 grid inside the allowed range."""

    v = nz(value, SELL_RATE_MIN)
    v = min(max(v, SELL_RATE_MIN), SELL_RATE_MAX)
    return round(round(v / SELL_RATE_STEP) * SELL_RATE_STEP, 1)


def sell_rate_steps() -> List[float]:
    """Every position the sell-rate slider can take, lowest first."""

    n = int(round((SELL_RATE_MAX - SELL_RATE_MIN) / SELL_RATE_STEP)) + 1
    return [round(SELL_RATE_MIN + i * SELL_RATE_STEP, 1) for i in range(n)]


def rate_difference(sell_rate, buy_rate=BUY_RATE) -> float:
    """Spread between sell and buy rate as a decimal (``0.7`` -> ``0.007``)."""

    return (sell_rate - buy_rate) / 100


def compute(turnover, sell_rate, buy_rate=BUY_RATE) -> ProfitBreakdown:
    """Derive the half-year and yearly profit for a partner.

    ``turnover`` is the partner's transaction volume and ``sell_rate`` /
    ``buy_rate`` are percentages (``1.0`` for 1%).  The first six months pay
    30% and the second six months 15% of ``turnover × rate difference``.  No
    range checks happen here; a sell rate below the buy rate simply yields a
    loss.
    """

    diff = rate_difference(sell_rate, buy_rate)
    first = turnover * diff * FIRST_HALF_SHARE
    second = turnover * diff * SECOND_HALF_SHARE
    return ProfitBreakdown(
        first_half_profit=first,
        second_half_profit=second,
        yearly_profit=first + second,
    )


def profit_schedule(turnover, buy_rate=BUY_RATE) -> pd.DataFrame:
    """Tabulate the profit breakdown for every sell-rate slider position.

    Handy as a what-if view: it shows how far the yearly profit moves as the
    sell rate is raised one step at a time for the current turnover.
    """

    rows = []
    for rate in sell_rate_steps():
        b = compute(turnover, rate, buy_rate)
        rows.append(
            {
                "SellRate": rate,
                "RateDifference": rate_difference(rate, buy_rate),
                "FirstHalfProfit": b.first_half_profit,
                "SecondHalfProfit": b.second_half_profit,
                "YearlyProfit": b.yearly_profit,
            }
        )
    return pd.DataFrame(
        rows,
        columns=[
            "SellRate",
            "RateDifference",
            "FirstHalfProfit",
            "SecondHalfProfit",
            "YearlyProfit",
        ],
    )
