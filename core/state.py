import logging
from typing import MutableMapping

import streamlit as st

from core.utils import format_amount_field
from partnercalc.calculators import (
    accept_turnover,
    compute,
    is_valid_turnover,
    nz,
    snap_sell_rate,
)
from partnercalc.models import CalculatorInputs, ProfitBreakdown
from partnercalc.presets import DEFAULT_SELL_RATE, DEFAULT_TURNOVER

logger = logging.getLogger(__name__)

# ``turnover`` holds the last accepted value; ``turnover_input`` is the raw
# text widget.  ``sell_rate`` is owned by the slider widget.
TURNOVER_KEY = "turnover"
TURNOVER_INPUT_KEY = "turnover_input"
SELL_RATE_KEY = "sell_rate"


def init_state(state: MutableMapping = None) -> None:
    """Seed the calculator values for a fresh session."""
    ss = st.session_state if state is None else state
    ss.setdefault(TURNOVER_KEY, DEFAULT_TURNOVER)
    ss.setdefault(SELL_RATE_KEY, DEFAULT_SELL_RATE)
    ss.setdefault(TURNOVER_INPUT_KEY, format_amount_field(ss[TURNOVER_KEY]))


def apply_turnover_input(state: MutableMapping) -> float:
    """Accept or silently discard the text currently in the turnover field.

    On rejection the field is reset to show the retained turnover.
    """
    current = nz(state.get(TURNOVER_KEY), DEFAULT_TURNOVER)
    raw = state.get(TURNOVER_INPUT_KEY)
    if not is_valid_turnover(raw):
        state[TURNOVER_KEY] = current
        state[TURNOVER_INPUT_KEY] = format_amount_field(current)
        return current
    accepted = accept_turnover(raw, current)
    if accepted != current:
        logger.debug("Turnover updated | old=%s | new=%s", current, accepted)
    state[TURNOVER_KEY] = accepted
    return accepted


def on_turnover_change() -> None:
    apply_turnover_input(st.session_state)


def current_inputs(state: MutableMapping = None) -> CalculatorInputs:
    ss = st.session_state if state is None else state
    return CalculatorInputs(
        turnover=nz(ss.get(TURNOVER_KEY), DEFAULT_TURNOVER),
        sell_rate=snap_sell_rate(ss.get(SELL_RATE_KEY, DEFAULT_SELL_RATE)),
    )


def current_breakdown(state: MutableMapping = None) -> ProfitBreakdown:
    """Recompute the profit breakdown from the session inputs."""
    inputs = current_inputs(state)
    breakdown = compute(inputs.turnover, inputs.sell_rate)
    logger.debug(
        "Recomputed profit breakdown | turnover=%s | sell_rate=%s | yearly=%s",
        inputs.turnover,
        inputs.sell_rate,
        breakdown.yearly_profit,
    )
    return breakdown
