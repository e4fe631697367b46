# src/keeling_chart/app.py
"""
Keeling curve - Streamlit page
Shows:
 - The monthly average CO2 chart (observed, forecast, 95% CI) in the
   keeling_graph container
 - The observed/forecast row counts and the raw table

Run with: streamlit run src/keeling_chart/app.py
"""
import logging

import streamlit as st
import streamlit.components.v1 as components

from keeling_chart.chart import build_chart
from keeling_chart.cli import LOG_FORMAT
from keeling_chart.config import DEFAULT_CONFIG, TITLE, default_source
from keeling_chart.errors import ChartDataError, DataLoadError
from keeling_chart.render import wrap_in_page

logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)

st.set_page_config(page_title="Keeling Curve", layout="centered")
st.title(TITLE)

# --- Sidebar: data source ---
st.sidebar.header("Data")
source = st.sidebar.text_input("CSV URL or path", value=default_source())
split_index = st.sidebar.number_input(
    "Last observed row", min_value=0, value=DEFAULT_CONFIG.split_index, step=1
)
use_flag = st.sidebar.checkbox("Use is_forecast column when present", value=True)
config = DEFAULT_CONFIG.with_overrides(split_index=int(split_index), use_forecast_flag=use_flag)

# --- Chart ---
try:
    result = build_chart(source, config)
except DataLoadError as e:
    st.error(f"Could not fetch the CO2 data: {e}")
    st.stop()
except ChartDataError as e:
    st.error(f"The CO2 data is malformed: {e}")
    st.stop()

# the page carries the keeling_graph container around the SVG
components.html(wrap_in_page(result.svg, config), height=config.canvas_height + 20)

col1, col2 = st.columns(2)
col1.metric("Observed months", len(result.observed))
col2.metric("Forecast months", len(result.forecast))

with st.expander("Raw data"):
    st.dataframe(result.data[["ds", "yhat", "yhat_lower", "yhat_upper"]])
