"""
Load runtime settings from JSON. Exposes log level, log directory and the
demo trace parameters. settings.json lives next to this file; environment
variables TWOSTACK_LOG_LEVEL / TWOSTACK_LOG_DIR win over it.
"""
import json
import logging
import os
from typing import Optional

_CONFIG_DIR = os.path.dirname(os.path.abspath(__file__))
SETTINGS_FILE = "settings.json"


def _load_json(directory: str, name: str) -> dict:
    path = os.path.join(directory, name)
    if not os.path.exists(path):
        return {}
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def _int_setting(key: str, value) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValueError(f"setting {key} must be an integer, got {value!r}") from None


class Settings:
    """Single place for all settings. Uses settings.json in config/."""

    def __init__(self, config_dir: Optional[str] = None):
        self._dir = config_dir or _CONFIG_DIR
        self._data = _load_json(self._dir, SETTINGS_FILE)
        self._logging = self._data.get("logging") or {}
        self._demo = self._data.get("demo") or {}

    def get_log_level(self) -> str:
        """Level name for the console handler (e.g. "INFO")."""
        raw = os.getenv("TWOSTACK_LOG_LEVEL") or self._logging.get("level") or "INFO"
        name = str(raw).strip().upper()
        if not isinstance(logging.getLevelName(name), int):
            raise ValueError(f"unknown log level {raw!r}")
        return name

    def get_log_dir(self) -> Optional[str]:
        """Directory for per-run log files, or None to log to the terminal only."""
        raw = os.getenv("TWOSTACK_LOG_DIR")
        if raw is None:
            raw = self._logging.get("dir")
        if not raw:
            return None
        return os.path.expanduser(str(raw))

    def get_trace_length(self) -> int:
        """Number of push/pop operations in the demo's randomized trace."""
        return max(0, _int_setting("demo.trace_length", self._demo.get("trace_length", 10_000)))

    def get_trace_seed(self) -> int:
        return _int_setting("demo.trace_seed", self._demo.get("trace_seed", 0))
