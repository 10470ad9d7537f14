"""Configuration loading with smart defaults."""

from __future__ import annotations

import logging
import os
import threading
from pathlib import Path
from typing import Any, Dict, Optional

import fastjsonschema
import pyjson5

from .exceptions import ConfigError

logger = logging.getLogger(__name__)

CONFIG_ENV = "BEDAZZLE_CONFIG"

DEFAULTS: Dict[str, Any] = {
    "log_level": "INFO",
    "json_indent": 2,
    "default_laps": 50,
    "track_length": 5.8,
    "track_turns": 18,
    "turbo_level": 2,
}

_CONFIG_SCHEMA = {
    "type": "object",
    "properties": {
        "log_level": {"type": "string"},
        "json_indent": {"type": ["integer", "null"], "minimum": 0},
        "default_laps": {"type": "integer", "minimum": 1},
        "track_length": {"type": "number", "exclusiveMinimum": 0},
        "track_turns": {"type": "integer", "minimum": 0},
        "turbo_level": {"type": "integer", "minimum": 0},
    },
    "additionalProperties": False,
}

_VALIDATE = fastjsonschema.compile(_CONFIG_SCHEMA)

_config: Optional[Dict[str, Any]] = None
_config_lock = threading.Lock()


def config_path() -> Path:
    """Return the configuration file location."""

    override = os.environ.get(CONFIG_ENV)
    if override:
        return Path(override).expanduser()
    return Path.home() / ".bedazzle" / "config.json5"


def _read_config(path: Path) -> Dict[str, Any]:
    try:
        with path.open("r", encoding="utf-8") as handle:
            data = pyjson5.load(handle)
    except Exception as exc:
        raise ConfigError(f"Error reading configuration '{path}': {exc}") from exc

    try:
        _VALIDATE(data)
    except fastjsonschema.JsonSchemaValueException as exc:
        raise ConfigError(f"Invalid configuration '{path}': {exc.message}") from exc
    return dict(data)


def load_config() -> Dict[str, Any]:
    """Load configuration once per process, filling in defaults."""

    global _config
    if _config is None:
        with _config_lock:
            if _config is None:
                path = config_path()
                if path.exists():
                    config = _read_config(path)
                    logger.debug(f"Loaded configuration from {path}")
                else:
                    config = {}

                for key, value in DEFAULTS.items():
                    config.setdefault(key, value)
                _config = config

    return _config


def get_setting(name: str) -> Any:
    """Return a single configuration value."""

    return load_config().get(name, DEFAULTS.get(name))


def reset_config() -> None:
    """Forget the cached configuration so the next access reloads it."""

    global _config
    with _config_lock:
        _config = None
