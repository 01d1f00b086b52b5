# FILE: tests/test_config.py
import os

import pytest

from draw_core.config import (
    CONFIG_FILE,
    DEFAULT_CONFIG,
    DEFAULT_CONFIG_YAML,
    SAMPLE_NAMES_FILE,
    config_to_yaml,
    ensure_assets_exist,
    load_config_file,
    parse_config_text,
    save_config_yaml,
)
from draw_core.models import AppConfig
from draw_core.names import parse_names_csv


def test_defaults_validate():
    cfg = AppConfig(**DEFAULT_CONFIG)
    assert cfg.spin_ticks == 20
    assert cfg.spin_interval_ms == 100
    assert cfg.shuffle_strategy == "fisher_yates"
    assert cfg.random_seed is None
    assert parse_config_text(DEFAULT_CONFIG_YAML) == cfg


def test_partial_config_falls_back_to_defaults():
    cfg = parse_config_text("default_group_size: 5\nrandom_seed: 7\n")
    assert cfg.default_group_size == 5
    assert cfg.random_seed == 7
    assert cfg.spin_ticks == 20


@pytest.mark.parametrize("text", [
    "spin_ticks: 0\n",
    "default_group_size: -2\n",
    "spin_interval_ms: -1\n",
    "shuffle_strategy: bogosort\n",
    "colour: red\n",
    "- just\n- a list\n",
])
def test_invalid_config_rejected(text):
    with pytest.raises(ValueError):
        parse_config_text(text)


def test_empty_config_is_default():
    assert parse_config_text("") == AppConfig(**DEFAULT_CONFIG)


def test_ensure_assets_and_load(tmp_path):
    base = str(tmp_path / "assets")
    ensure_assets_exist(base)
    cfg = load_config_file(os.path.join(base, CONFIG_FILE))
    assert cfg == AppConfig(**DEFAULT_CONFIG)
    with open(os.path.join(base, SAMPLE_NAMES_FILE), "rb") as f:
        names = parse_names_csv(f.read())
    assert len(names) == 13


def test_ensure_assets_keeps_existing_files(tmp_path):
    base = str(tmp_path)
    path = os.path.join(base, CONFIG_FILE)
    with open(path, "w", encoding="utf-8") as f:
        f.write("spin_ticks: 5\n")
    ensure_assets_exist(base)
    assert load_config_file(path).spin_ticks == 5


def test_save_config_validates_before_writing(tmp_path):
    path = str(tmp_path / CONFIG_FILE)
    with pytest.raises(ValueError):
        save_config_yaml(path, "spin_ticks: 0\n")
    assert not os.path.exists(path)
    save_config_yaml(path, config_to_yaml(AppConfig(celebrate=False)))
    assert load_config_file(path).celebrate is False
