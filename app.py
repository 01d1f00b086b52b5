# app.py
import logging
import os

import streamlit as st

from draw_core.config import (
    ASSETS_DIR,
    CONFIG_FILE,
    DEFAULT_CONFIG,
    SAMPLE_NAMES_FILE,
    ensure_assets_exist,
    load_config_file,
    ui_css,
)
from draw_core.constants import SHUFFLE_STRATEGIES, TIPS
from draw_core.draw import DrawEngine
from draw_core.errors import NameImportError
from draw_core.grouping import GroupEngine
from draw_core.models import AppConfig
from draw_core.names import (
    build_template_csv,
    duplicate_names,
    names_to_text,
    parse_names_csv,
    parse_names_text,
)

logging.basicConfig(level=logging.INFO)

# ---------- Page & Theme ----------
st.set_page_config(page_title="Lucky Draw & Auto Grouping", layout="wide")
st.markdown(ui_css(), unsafe_allow_html=True)

ensure_assets_exist()


def _load_config() -> AppConfig:
    path = os.path.join(ASSETS_DIR, CONFIG_FILE)
    try:
        return load_config_file(path)
    except (OSError, ValueError) as e:
        st.session_state["config_error"] = str(e)
        return AppConfig(**DEFAULT_CONFIG)


# ---------- Session State ----------
def _init_state():
    ss = st.session_state
    if "app_config" not in ss:
        ss["app_config"] = _load_config()
    cfg = ss["app_config"]
    ss.setdefault("names", [])
    # widget state is dropped while another page is open; rebuild it from the list
    ss.setdefault("names_text", names_to_text(ss["names"]))
    ss.setdefault("last_upload", None)
    ss.setdefault("partition", None)
    if "draw_engine" not in ss:
        ss["draw_engine"] = DrawEngine(allow_repeat=cfg.allow_repeat, seed=cfg.random_seed)
    if "group_engine" not in ss:
        ss["group_engine"] = GroupEngine(seed=cfg.random_seed, strategy=cfg.shuffle_strategy)


_init_state()


def _apply_names(names):
    st.session_state["names"] = names
    st.session_state["draw_engine"].set_names(names)


def _import_upload(up):
    # an upload stays attached across reruns; only import it once
    marker = (up.name, up.size)
    if st.session_state["last_upload"] == marker:
        return
    try:
        names = parse_names_csv(up)
    except NameImportError as e:
        st.error(f"Import error: {e}")
        return
    st.session_state["last_upload"] = marker
    st.session_state["names_text"] = names_to_text(names)
    st.success(f"Imported {len(names)} names from {up.name}.")


def _load_sample():
    path = os.path.join(ASSETS_DIR, SAMPLE_NAMES_FILE)
    with open(path, "r", encoding="utf-8") as f:
        st.session_state["names_text"] = names_to_text(parse_names_csv(f.read()))


# ---------- Sidebar ----------
with st.sidebar:
    st.header("⚙️ Settings")
    cfg: AppConfig = st.session_state["app_config"]
    if st.session_state.get("config_error"):
        st.warning(f"Config file ignored: {st.session_state['config_error']}")

    spin_ticks = st.number_input("Spin ticks", min_value=1, max_value=100, value=cfg.spin_ticks, step=1)
    spin_interval_ms = st.number_input("Tick interval (ms)", min_value=0, max_value=1000,
                                       value=cfg.spin_interval_ms, step=10)
    shuffle_strategy = st.selectbox(
        "Group shuffle", SHUFFLE_STRATEGIES,
        index=SHUFFLE_STRATEGIES.index(cfg.shuffle_strategy),
        help="fisher_yates is unbiased; comparator reproduces the legacy random-sort shuffle.",
    )
    celebrate = st.checkbox("Celebrate winners", value=cfg.celebrate)

    st.session_state["app_config"] = cfg.model_copy(update={
        "spin_ticks": int(spin_ticks),
        "spin_interval_ms": int(spin_interval_ms),
        "shuffle_strategy": shuffle_strategy,
        "celebrate": celebrate,
    })
    st.session_state["group_engine"].strategy = shuffle_strategy

    st.markdown("---")
    st.markdown("**Tips**")
    for tip in TIPS:
        st.markdown(f"- {tip}")


# ---------- Name Source ----------
st.title("Lucky Draw & Auto Grouping")
st.caption("Paste names or import a CSV, then open **Lucky Draw** or **Auto Grouping** from the sidebar.")

c1, c2, c3 = st.columns([2, 1, 1])
with c1:
    up = st.file_uploader("Upload CSV", type=["csv", "txt"], key="uploader_names")
    if up is not None:
        _import_upload(up)
with c2:
    st.download_button("Download CSV Template", data=build_template_csv(),
                       file_name="names_template.csv", key="dl_tpl")
with c3:
    if st.button("Load Sample", key="load_sample"):
        _load_sample()

text = st.text_area("Names (one per line)", key="names_text", height=260,
                    placeholder="Paste the name list here, one name per line…")
names = parse_names_text(text)
_apply_names(names)

m1, m2, m3 = st.columns(3)
engine: DrawEngine = st.session_state["draw_engine"]
m1.metric("Names", len(names))
m2.metric("Eligible to draw", engine.pool_size)
m3.metric("Drawn so far", len(engine.history))

dups = duplicate_names(names)
if dups:
    listed = ", ".join(f"{n} ×{c}" for n, c in dups.items())
    st.info(f"Duplicate names are treated as separate entries: {listed}")
