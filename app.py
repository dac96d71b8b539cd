
# app.py
# ================================================================
# Streamlit entry point: product table, per-category revenue shares.
# Run:  streamlit run app.py
# ================================================================

import streamlit as st

from ulush_app.config import PAGE_TITLE, configure_logging
from ulush_app.ui_main import render_main_page


# Must be the first Streamlit command of the script.
st.set_page_config(page_title=PAGE_TITLE, layout="wide")

configure_logging()

render_main_page()
