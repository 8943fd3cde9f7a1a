import streamlit as st
from partnercalc import __version__
from partnercalc.presets import INTRO, TITLE


def render_topbar():
    """Render the page title, intro line and version."""
    st.title(TITLE)
    st.caption(INTRO)
    st.markdown(
        f"<div style='text-align:right;color:#888;font-size:0.75rem'>v{__version__}</div>",
        unsafe_allow_html=True,
    )
