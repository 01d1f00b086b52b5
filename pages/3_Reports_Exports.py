# FILE: pages/3_Reports_Exports.py
import streamlit as st

from draw_core.export_pdf import render_groups_pdf
from draw_core.io import (
    history_csv_bytes,
    history_to_dataframe,
    partition_csv_bytes,
    partition_to_dataframe,
)

st.title("3. Reports & Exports")
if "draw_engine" not in st.session_state:
    st.warning("Please enter names on the main page first.")
    st.stop()

st.subheader("Draw history")
history = st.session_state["draw_engine"].history
if history:
    st.dataframe(history_to_dataframe(history), use_container_width=True, hide_index=True)
    st.download_button("Download History CSV", data=history_csv_bytes(history),
                       file_name="draw_history.csv", key="dl_history")
else:
    st.write("No winners drawn yet.")

st.subheader("Groups")
result = st.session_state.get("partition")
if result is not None and result.groups:
    st.dataframe(partition_to_dataframe(result), use_container_width=True, hide_index=True)
    st.download_button("Download Groups CSV", data=partition_csv_bytes(result),
                       file_name="groups.csv", key="dl_groups")
    st.download_button("Download Printable Group Cards (PDF)", data=render_groups_pdf(result),
                       file_name="groups.pdf", mime="application/pdf", key="dl_groups_pdf")
else:
    st.write("No groups generated yet.")
