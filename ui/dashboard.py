import streamlit as st
from core.utils import format_currency
from partnercalc.calculators import profit_schedule
from partnercalc.models import CalculatorInputs, ProfitBreakdown
from partnercalc.presets import BUY_RATE, FIRST_HALF_SHARE, SECOND_HALF_SHARE


def formula_caption(share: float, inputs: CalculatorInputs) -> str:
    """Spell out one half-year term, e.g. ``30% × $100,000.00 × 0.70%``."""
    spread = inputs.sell_rate - BUY_RATE
    return f"{share * 100:.0f}% × {format_currency(inputs.turnover)} × {spread:.2f}%"


def render_results_card(inputs: CalculatorInputs, breakdown: ProfitBreakdown):
    """Render the profit breakdown metrics."""
    with st.container(border=True):
        st.subheader("Profit Breakdown")
        st.metric(
            f"First 6 Months ({FIRST_HALF_SHARE * 100:.0f}%)",
            format_currency(breakdown.first_half_profit),
        )
        st.caption(formula_caption(FIRST_HALF_SHARE, inputs))
        st.metric(
            f"Second 6 Months ({SECOND_HALF_SHARE * 100:.0f}%)",
            format_currency(breakdown.second_half_profit),
        )
        st.caption(formula_caption(SECOND_HALF_SHARE, inputs))
        st.divider()
        st.metric("Total Yearly Profit", format_currency(breakdown.yearly_profit))


def render_what_if(inputs: CalculatorInputs):
    """Yearly profit at every sell-rate step for the current turnover."""
    with st.expander("Profit by Sell Rate"):
        schedule = profit_schedule(inputs.turnover)
        st.line_chart(schedule, x="SellRate", y="YearlyProfit")
        st.dataframe(
            schedule,
            hide_index=True,
            column_config={
                "SellRate": st.column_config.NumberColumn("Sell Rate", format="%.1f%%"),
                "RateDifference": st.column_config.NumberColumn("Rate Difference", format="%.4f"),
                "FirstHalfProfit": st.column_config.NumberColumn("First 6 Months", format="$%.2f"),
                "SecondHalfProfit": st.column_config.NumberColumn("Second 6 Months", format="$%.2f"),
                "YearlyProfit": st.column_config.NumberColumn("Yearly", format="$%.2f"),
            },
        )
