# FILE: pages/1_Lucky_Draw.py
import streamlit as st

from draw_core.config import ui_css
from draw_core.errors import DrawInProgressError, ExhaustedPoolError
from draw_core.spin import run_spin
from draw_core.ui_helpers import history_row_markdown, history_rows, pool_caption, stage_html

st.markdown(ui_css(), unsafe_allow_html=True)
st.title("1. Lucky Draw")

if "draw_engine" not in st.session_state:
    st.warning("Please enter names on the main page first.")
    st.stop()

cfg = st.session_state["app_config"]
names = st.session_state["names"]
engine = st.session_state["draw_engine"]
engine.set_names(names)

# a rerun interrupts a running spin; nothing was committed, so drop it
engine.abandon()

c_main, c_hist = st.columns([2, 1])

with c_main:
    allow = st.toggle("Allow repeats", value=engine.allow_repeat, key="allow_repeat_toggle")
    engine.set_allow_repeat(allow)
    caption = st.empty()
    caption.caption(pool_caption(engine.pool_size, len(names)))

    stage = st.empty()
    stage.markdown(stage_html(engine.state), unsafe_allow_html=True)

    if st.button("Start draw", type="primary", key="btn_draw", disabled=not names):
        try:
            run_spin(
                engine,
                ticks=cfg.spin_ticks,
                interval_ms=cfg.spin_interval_ms,
                on_tick=lambda i, cand: stage.markdown(stage_html(engine.state), unsafe_allow_html=True),
            )
        except ExhaustedPoolError:
            st.error("No names left to draw. Allow repeats, clear the history, or add names.")
        except DrawInProgressError:
            st.warning("A draw is already running.")
        else:
            stage.markdown(stage_html(engine.state), unsafe_allow_html=True)
            caption.caption(pool_caption(engine.pool_size, len(names)))
            if cfg.celebrate:
                st.balloons()

with c_hist:
    st.subheader("Winners")
    if st.button("Clear history", key="btn_reset", disabled=not engine.history):
        engine.reset()
        stage.markdown(stage_html(engine.state), unsafe_allow_html=True)
        caption.caption(pool_caption(engine.pool_size, len(names)))
    rows = history_rows(engine.history)
    if not rows:
        st.write("No winners yet.")
    else:
        for order, name in rows:
            st.markdown(history_row_markdown(order, name))
