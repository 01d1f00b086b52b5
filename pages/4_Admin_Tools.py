# FILE: pages/4_Admin_Tools.py
import os

import streamlit as st

from draw_core.config import ASSETS_DIR, CONFIG_FILE, config_to_yaml, load_config_file, save_config_yaml
from draw_core.draw import DrawEngine
from draw_core.grouping import GroupEngine
from draw_core.validation import run_self_test

st.title("4. Admin & Self-Test")

if st.button("Run Self-Test"):
    results = run_self_test()
    for label, ok in results["tests"]:
        (st.success if ok else st.error)(f"{'✓' if ok else '✗'} {label}")

st.subheader("Config file")
path = os.path.join(ASSETS_DIR, CONFIG_FILE)
if os.path.exists(path):
    with open(path, "r", encoding="utf-8") as f:
        current = f.read()
elif "app_config" in st.session_state:
    current = config_to_yaml(st.session_state["app_config"])
else:
    current = ""

text = st.text_area("draw_config.yaml", value=current, height=240)
if st.button("Save & Apply"):
    try:
        save_config_yaml(path, text)
        cfg = load_config_file(path)
    except (OSError, ValueError) as e:
        st.error(f"Config not saved: {e}")
    else:
        # fresh engines pick up the new seed and defaults; history starts over
        st.session_state["app_config"] = cfg
        st.session_state.pop("config_error", None)
        engine = DrawEngine(st.session_state.get("names", []), allow_repeat=cfg.allow_repeat, seed=cfg.random_seed)
        st.session_state["draw_engine"] = engine
        st.session_state["group_engine"] = GroupEngine(seed=cfg.random_seed, strategy=cfg.shuffle_strategy)
        st.session_state["partition"] = None
        st.success("Config saved and applied.")
