import streamlit as st
from core.state import SELL_RATE_KEY, TURNOVER_INPUT_KEY, on_turnover_change
from core.utils import format_percentage
from partnercalc.models import CalculatorInputs
from partnercalc.presets import BUY_RATE, SELL_RATE_MAX, SELL_RATE_MIN, SELL_RATE_STEP


def render_inputs_card(inputs: CalculatorInputs):
    """Turnover field, sell-rate slider and the fixed-rate readouts."""
    with st.container(border=True):
        st.text_input(
            "Turnover ($)",
            key=TURNOVER_INPUT_KEY,
            on_change=on_turnover_change,
            help="Partner's transaction volume. Must be a number of 0 or more.",
        )
        left, right = st.columns([3, 1])
        left.markdown("**Sell Rate**")
        right.markdown(f"**{format_percentage(inputs.sell_rate)}**")
        st.slider(
            "Sell Rate",
            min_value=SELL_RATE_MIN,
            max_value=SELL_RATE_MAX,
            step=SELL_RATE_STEP,
            key=SELL_RATE_KEY,
            label_visibility="collapsed",
        )
        lo, hi = st.columns(2)
        lo.caption(format_percentage(SELL_RATE_MIN))
        hi.markdown(
            f"<div style='text-align:right;font-size:0.8rem;color:#888'>"
            f"{format_percentage(SELL_RATE_MAX)}</div>",
            unsafe_allow_html=True,
        )
        st.divider()
        c1, c2 = st.columns(2)
        c1.metric("Buy Rate (Fixed)", format_percentage(BUY_RATE))
        c2.metric("Rate Difference", format_percentage(inputs.sell_rate - BUY_RATE))
