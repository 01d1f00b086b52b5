# FILE: pages/2_Auto_Grouping.py
import streamlit as st

from draw_core.config import ui_css
from draw_core.errors import InvalidGroupSizeError
from draw_core.grouping import coerce_group_size
from draw_core.ui_helpers import group_card_html

CARDS_PER_ROW = 3

st.markdown(ui_css(), unsafe_allow_html=True)
st.title("2. Auto Grouping")

if "group_engine" not in st.session_state:
    st.warning("Please enter names on the main page first.")
    st.stop()

names = st.session_state["names"]
engine = st.session_state["group_engine"]
st.session_state.setdefault("group_size", st.session_state["app_config"].default_group_size)

c1, c2 = st.columns([1, 2])
with c1:
    raw_size = st.number_input("People per group", min_value=1, step=1, key="group_size")
    group_size = coerce_group_size(raw_size)
with c2:
    st.write("")
    if st.button("Make groups", type="primary", key="btn_group", disabled=not names):
        try:
            st.session_state["partition"] = engine.partition(names, group_size)
        except InvalidGroupSizeError as e:
            st.error(str(e))

result = st.session_state.get("partition")
if result is None or not result.groups:
    st.info("No groups yet.")
else:
    st.caption(f"{len(result.members())} names in {result.count} groups of up to {result.group_size}")
    for start in range(0, result.count, CARDS_PER_ROW):
        cols = st.columns(CARDS_PER_ROW)
        for offset, col in enumerate(cols):
            idx = start + offset
            if idx >= result.count:
                break
            with col:
                st.markdown(group_card_html(idx, result.groups[idx]), unsafe_allow_html=True)
