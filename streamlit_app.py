"""Streamlit frontend for the Unit Converter.

Single screen: pick a conversion type, enter a value, press Convert.
"""

import streamlit as st

from unit_converter.converters import conversion_labels, resolve_strategy
from unit_converter.reference import conversion_table, create_conversion_chart
from unit_converter.service import run_conversion

st.set_page_config(
    page_title="Unit Converter",
    page_icon="📏",
    layout="centered",
)

st.title("📏 Unit Converter")

# Conversion type dropdown
selected_type = st.selectbox("Conversion Type", conversion_labels())
strategy = resolve_strategy(selected_type)
st.caption(strategy.description)

raw_value = st.text_input("Value", placeholder="Enter a number")

if st.button("Convert", type="primary", use_container_width=True):
    result = run_conversion(raw_value, selected_type)
    if result.ok:
        st.success(result.display_text())
    else:
        st.error(result.display_text())

st.markdown("---")

with st.expander(f"📊 {selected_type} reference"):
    st.dataframe(conversion_table(strategy.kind), hide_index=True, use_container_width=True)
    fig = create_conversion_chart(strategy.kind)
    st.plotly_chart(fig, use_container_width=True)
