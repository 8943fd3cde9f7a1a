from pydantic import BaseModel, ConfigDict, Field

from partnercalc.presets import (
    DEFAULT_SELL_RATE,
    DEFAULT_TURNOVER,
    SELL_RATE_MAX,
    SELL_RATE_MIN,
)


class CalculatorInputs(BaseModel):
    turnover: float = Field(default=DEFAULT_TURNOVER, ge=0)
    sell_rate: float = Field(default=DEFAULT_SELL_RATE, ge=SELL_RATE_MIN, le=SELL_RATE_MAX)


class ProfitBreakdown(BaseModel):
    """Derived half-year and yearly profit; never mutated after creation."""

    model_config = ConfigDict(frozen=True)

    first_half_profit: float = 0.0
    second_half_profit: float = 0.0
    yearly_profit: float = 0.0
