from pathlib import Path

import pytest
from pydantic import ValidationError

from fakenews.config import load_config


def test_negative_default_limit(tmp_path: Path) -> None:
    cfg_file = tmp_path / "bad.yml"
    cfg_file.write_text("generators:\n  default_limit: -1\n")
    with pytest.raises(ValidationError):
        load_config(cfg_file)


def test_unknown_encoding(tmp_path: Path) -> None:
    cfg_file = tmp_path / "bad.yml"
    cfg_file.write_text("generators:\n  encoding: not-a-codec\n")
    with pytest.raises(ValidationError):
        load_config(cfg_file)


def test_unknown_log_level(tmp_path: Path) -> None:
    cfg_file = tmp_path / "bad.yml"
    cfg_file.write_text("logging:\n  level: LOUD\n")
    with pytest.raises(ValidationError):
        load_config(cfg_file)


def test_unknown_key(tmp_path: Path) -> None:
    cfg_file = tmp_path / "bad.yml"
    cfg_file.write_text("unknown:\n  foo: 1\n")
    with pytest.raises(ValidationError):
        load_config(cfg_file)
