from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from suite_kernel.config.models import SuiteConfig


# ConfigError is raised for invalid configuration (fail fast).
class ConfigError(ValueError):
    pass


def load_yaml_config(path: Path) -> dict[str, Any]:
    # Raw YAML loader; returns a mapping for validation.
    raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    if raw is None:
        # An empty file means "all defaults".
        return {}
    if not isinstance(raw, dict):
        raise ConfigError("Config root must be a mapping")
    return raw


def parse_config(raw: dict[str, Any]) -> SuiteConfig:
    try:
        return SuiteConfig.model_validate(raw)
    except ValidationError as exc:
        raise ConfigError(str(exc)) from exc


def load_config(path: Path) -> SuiteConfig:
    return parse_config(load_yaml_config(path))
