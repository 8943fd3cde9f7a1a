import streamlit as st
from partnercalc.presets import FOOTNOTE, FOOTNOTE_FORMULA


def render_bottombar():
    st.markdown(
        f"<div style='text-align:center;color:#888;font-size:0.85rem;margin-top:2rem'>"
        f"{FOOTNOTE}<br/>{FOOTNOTE_FORMULA}</div>",
        unsafe_allow_html=True,
    )
