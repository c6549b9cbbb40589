from pathlib import Path
from typing import Any

import pytest

from fakenews.config import load_config


def test_env_seed(monkeypatch: Any) -> None:
    monkeypatch.setenv("FAKENEWS_SEED", "42")
    cfg = load_config()
    assert cfg.seed.value == 42


def test_env_seed_beats_file(monkeypatch: Any, tmp_path: Path) -> None:
    cfg_file = tmp_path / "cfg.yml"
    cfg_file.write_text("seed:\n  value: 1\n")
    monkeypatch.setenv("FAKENEWS_SEED", "2")
    assert load_config(cfg_file).seed.value == 2


def test_custom_env_override(monkeypatch: Any, tmp_path: Path) -> None:
    cfg_file = tmp_path / "cfg.yml"
    cfg_file.write_text('seed:\n  env: "CUSTOM_SEED"\n')
    monkeypatch.setenv("CUSTOM_SEED", "7")
    cfg = load_config(cfg_file)
    assert cfg.seed.env == "CUSTOM_SEED"
    assert cfg.seed.value == 7


def test_explicit_env_mapping(monkeypatch: Any) -> None:
    monkeypatch.setenv("FAKENEWS_SEED", "42")
    assert load_config(env={}).seed.value is None
    assert load_config(env={"FAKENEWS_SEED": " 5 "}).seed.value == 5


def test_non_integer_env_seed() -> None:
    with pytest.raises(ValueError, match="FAKENEWS_SEED"):
        load_config(env={"FAKENEWS_SEED": "abc"})
