# app.py - Streamlit Lumpsum Calculator (Investment & Goal modes, SIP comparison, CSV export)
# Run: streamlit run app.py

from __future__ import annotations

import logging

import streamlit as st

import config
from lumpsum_calc import render_lumpsum_calculator

logging.basicConfig(
    level=getattr(logging, config.LOG_LEVEL, logging.WARNING),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

st.set_page_config(page_title="Lumpsum Calculator", page_icon="💰", layout="wide")
st.title("💰 Lumpsum Calculator")

render_lumpsum_calculator()

st.divider()
with st.expander("Notes & Tips"):
    st.markdown(
        "- **Goal mode** works backwards from the target to the lumpsum you need today.\n"
        "- **Inflation-adjusted value** is the maturity amount in today's money.\n"
        "- **Post-tax amount** taxes only the gain; a loss reduces the tax instead.\n"
        "- Returns are constant and user-supplied; real markets vary."
    )
