"""CLI configuration — YAML defaults loaded over built-in values."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

import yaml

log = logging.getLogger(__name__)

BASE_DIR = Path(__file__).resolve().parent.parent
DEFAULT_PATH = BASE_DIR / "config" / "textformat.yaml"

DEFAULTS: dict[str, Any] = {
    "placeholder": "&",
    "base_format": "",
    "remove_format": True,
    "log_level": "WARNING",
}


class ConfigError(ValueError):
    """The config file could not be used."""


def load_config(path: Path | str | None = None) -> dict[str, Any]:
    """Load config from ``path``, $TEXTFORMAT_CONFIG or the bundled file.

    A missing file gives the defaults. Unknown keys are ignored.
    """
    if path is None:
        path = os.environ.get("TEXTFORMAT_CONFIG") or DEFAULT_PATH
    path = Path(path)

    config = dict(DEFAULTS)
    if not path.exists():
        log.debug("No config at %s, using defaults", path)
        return config

    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f)
    if data is None:
        return config
    if not isinstance(data, dict):
        raise ConfigError(f"{path}: expected a mapping, got {type(data).__name__}")

    for key, value in data.items():
        if key not in DEFAULTS:
            log.warning("Ignoring unknown config key: %s", key)
            continue
        expected = type(DEFAULTS[key])
        if not isinstance(value, expected):
            raise ConfigError(
                f"{path}: {key} must be {expected.__name__}, got {type(value).__name__}"
            )
        config[key] = value
    if not config["placeholder"]:
        raise ConfigError(f"{path}: placeholder must not be empty")
    log.debug("Loaded config from %s", path)
    return config
