"""Typed configuration schema and loader for the fakenews package."""

from __future__ import annotations

import codecs
import os
from collections.abc import Mapping
from importlib import resources as importlib_resources
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, ConfigDict, conint, field_validator

# ---------------------------------------------------------------------------
# Pydantic models
# ---------------------------------------------------------------------------


class SeedSettings(BaseModel):
    """Settings for the random source handed to generators and rules."""

    value: int | None = None
    env: str

    model_config = ConfigDict(extra="forbid")


class GeneratorSettings(BaseModel):
    """Defaults for line generators and chain combinators."""

    default_limit: conint(ge=0)
    encoding: str

    model_config = ConfigDict(extra="forbid")

    @field_validator("encoding")
    @classmethod
    def _known_encoding(cls, value: str) -> str:
        try:
            codecs.lookup(value)
        except LookupError:
            raise ValueError(f"unknown encoding: {value}") from None
        return value


class LoggingSettings(BaseModel):
    """Logging level and format used by the CLI."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
    format: str

    model_config = ConfigDict(extra="forbid")


class ConfigModel(BaseModel):
    """Top-level configuration model."""

    schema_version: conint(ge=1)
    seed: SeedSettings
    generators: GeneratorSettings
    logging: LoggingSettings

    model_config = ConfigDict(extra="forbid")


# ---------------------------------------------------------------------------
# Loader utilities
# ---------------------------------------------------------------------------


def deep_merge_dicts(a: dict[str, Any], b: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge mapping ``b`` onto ``a`` returning a new dict."""

    result: dict[str, Any] = dict(a)
    for key, b_val in b.items():
        if key in result and isinstance(result[key], dict) and isinstance(b_val, dict):
            result[key] = deep_merge_dicts(result[key], b_val)
        else:
            result[key] = b_val
    return result


def load_config(
    path: str | os.PathLike[str] | None = None,
    *,
    env: Mapping[str, str] | None = None,
) -> ConfigModel:
    """Load configuration from defaults and optional user overrides.

    Precedence of sources: package ``defaults.yml`` < user-provided YAML <
    environment variable named by ``seed.env``.  The environment value must be
    an integer; anything else raises ``ValueError``.
    """

    with (
        importlib_resources.files("fakenews.config")
        .joinpath("defaults.yml")
        .open("r", encoding="utf-8") as f
    ):
        defaults = yaml.safe_load(f) or {}

    if path is not None:
        with Path(path).open("r", encoding="utf-8") as f:
            overrides = yaml.safe_load(f) or {}
        merged = deep_merge_dicts(defaults, overrides)
    else:
        merged = defaults

    cfg = ConfigModel.model_validate(merged)

    environ = env if env is not None else os.environ
    seed_env = cfg.seed.env
    if seed_env in environ:
        raw = environ[seed_env].strip()
        try:
            cfg.seed.value = int(raw)
        except ValueError:
            raise ValueError(f"{seed_env} must be an integer, got {raw!r}") from None

    return cfg


__all__ = [
    "ConfigModel",
    "SeedSettings",
    "GeneratorSettings",
    "LoggingSettings",
    "deep_merge_dicts",
    "load_config",
]
