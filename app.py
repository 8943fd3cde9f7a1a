import logging

import streamlit as st

from core.state import current_breakdown, current_inputs, init_state
from partnercalc.presets import LOG_FORMAT, LOG_LEVEL, TITLE
from ui.bottombar import render_bottombar
from ui.dashboard import render_results_card, render_what_if
from ui.forms import render_inputs_card
from ui.topbar import render_topbar

logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)
logger = logging.getLogger(__name__)

st.set_page_config(page_title=TITLE, layout="wide")


# ---------------------------------------------------------------------------
# Layout: inputs on the left, derived profit on the right.  Streamlit reruns
# this script on every widget change, so the breakdown is recomputed from the
# session values each time and never stored.
# ---------------------------------------------------------------------------


def render_calculator():
    inputs = current_inputs()
    breakdown = current_breakdown()
    left, right = st.columns(2, gap="large")
    with left:
        render_inputs_card(inputs)
    with right:
        render_results_card(inputs, breakdown)
    render_what_if(inputs)


init_state()
render_topbar()
render_calculator()
render_bottombar()
