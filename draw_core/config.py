# draw_core/config.py
from __future__ import annotations
import logging
import os
import textwrap

import yaml
from pydantic import ValidationError

from .models import AppConfig

logger = logging.getLogger(__name__)

ASSETS_DIR = "assets"
CONFIG_FILE = "draw_config.yaml"
SAMPLE_NAMES_FILE = "sample_names.csv"

# ===== App defaults =====
DEFAULT_CONFIG = {
    "spin_ticks": 20,
    "spin_interval_ms": 100,         # 20 ticks x 100ms = 2s spin
    "default_group_size": 3,
    "allow_repeat": False,
    "shuffle_strategy": "fisher_yates",
    "random_seed": None,             # None -> seeded per process
    "celebrate": True,
}

DEFAULT_CONFIG_YAML = textwrap.dedent("""\
# Lucky Draw settings
spin_ticks: 20
spin_interval_ms: 100
default_group_size: 3
allow_repeat: false
# fisher_yates (unbiased) or comparator (legacy random-sort shuffle)
shuffle_strategy: fisher_yates
random_seed: null
celebrate: true
""")

# ===== Sample import (ragged rows on purpose: every cell is a name) =====
DEFAULT_SAMPLE_NAMES_CSV = textwrap.dedent("""\
Alex Carter,Blake Diaz,Casey Ellis
Drew Fox,Emery Gray
Fin Hayes,Gabe Irwin,Harper Jones,Izzy Kim
Jordan Lee
Kai Miller,Lane Novak,Morgan Ortiz
""")


def ensure_assets_exist(base_dir: str = ASSETS_DIR):
    os.makedirs(base_dir, exist_ok=True)
    cfg_path = os.path.join(base_dir, CONFIG_FILE)
    if not os.path.exists(cfg_path):
        with open(cfg_path, "w", encoding="utf-8") as f:
            f.write(DEFAULT_CONFIG_YAML)
        logger.info("Wrote default config to %s", cfg_path)
    names_path = os.path.join(base_dir, SAMPLE_NAMES_FILE)
    if not os.path.exists(names_path):
        with open(names_path, "w", encoding="utf-8") as f:
            f.write(DEFAULT_SAMPLE_NAMES_CSV)


def parse_config_text(text: str) -> AppConfig:
    """Validate YAML text into an AppConfig; missing keys fall back to defaults."""
    obj = yaml.safe_load(text) or {}
    if not isinstance(obj, dict):
        raise ValueError("Config must be a mapping of settings.")
    unknown = sorted(set(obj) - set(DEFAULT_CONFIG))
    if unknown:
        raise ValueError(f"Unknown config keys: {unknown}")
    merged = {**DEFAULT_CONFIG, **obj}
    try:
        return AppConfig(**merged)
    except ValidationError as e:
        raise ValueError(str(e)) from e


def load_config_file(path: str) -> AppConfig:
    with open(path, "r", encoding="utf-8") as f:
        cfg = parse_config_text(f.read())
    logger.info("Loaded config from %s", path)
    return cfg


def save_config_yaml(path: str, text: str):
    parse_config_text(text)
    with open(path, "w", encoding="utf-8") as f:
        f.write(text)


def config_to_yaml(cfg: AppConfig) -> str:
    return yaml.safe_dump(cfg.model_dump(), sort_keys=False, allow_unicode=True)


# ===== Monochrome theme (wrapped in <style>) =====
def ui_css() -> str:
    return """
<link href="https://fonts.googleapis.com/css2?family=Inter:wght@400;500;600;700&display=swap" rel="stylesheet">
<style>
:root{
  --bg:#fafafa;
  --surface:#ffffff;
  --muted:#f1f5f9;
  --line:#e4e4e7;
  --text:#18181b;
  --sub:#71717a;
  --brand:#18181b;
  --brand-2:#3f3f46;
  --radius:24px;
  --shadow:0 4px 24px rgba(24,24,27,.06);
}
body, .stApp, .block-container {
  font-family: Inter, system-ui, Segoe UI, Roboto, Helvetica, Arial, sans-serif; color: var(--text);
}
.block-container { padding-top: 1rem; max-width: 1200px; }

.card{
  background: var(--surface);
  border:1px solid var(--line);
  border-radius:var(--radius);
  box-shadow:var(--shadow);
  padding:18px;
}
.stage{
  background: var(--muted);
  border:1px solid var(--line);
  border-radius:var(--radius);
  min-height: 260px;
  display:flex; align-items:center; justify-content:center;
  font-size: 3.2rem; font-weight: 700; letter-spacing: -0.02em;
}
.stage.idle{ color: var(--sub); font-size: 1.2rem; font-weight: 500; }
.stage.drawing{ color: var(--brand-2); }
.stage.won{ color: var(--brand); }

.stButton > button[kind="primary"] {
  background: var(--brand); border-color: var(--brand); color:#fff;
  border-radius: 16px;
}
.chip{
  display:inline-block; padding:6px 12px; margin:4px 4px 0 0;
  border:1px solid var(--line); border-radius:999px; background:var(--muted);
}
.group-title{ font-size: 11px; font-weight: 700; letter-spacing: .12em; text-transform: uppercase; color: var(--sub); }
.small{ color: var(--sub); font-size: 12px }
</style>
"""
