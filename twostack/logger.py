"""
Centralized logging for twostack.

- Writes to the **terminal** (live) and, when a log directory is
  configured, to a **log file** named <log_dir>/<YYYY-MM-DD_HH-MM-SS>.log
- All modules use:  ``from twostack.logger import get_logger``
  then call ``log.info(...)``, ``log.debug(...)``, etc.
- Level and directory come from twostack/config/settings.json or the
  TWOSTACK_LOG_LEVEL / TWOSTACK_LOG_DIR environment variables.
"""

import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional

from twostack.config import Settings

_settings = Settings()

# ---------------------------------------------------------------------------
# Format
# ---------------------------------------------------------------------------
_FMT = "%(asctime)s [%(levelname)-5s] %(name)-20s  %(message)s"
_DATE_FMT = "%Y-%m-%d %H:%M:%S"

_formatter = logging.Formatter(_FMT, datefmt=_DATE_FMT)

# ---------------------------------------------------------------------------
# Optional log file
# ---------------------------------------------------------------------------
LOG_FILE: Optional[Path] = None
_log_dir = _settings.get_log_dir()
if _log_dir:
    _dir = Path(_log_dir)
    _dir.mkdir(parents=True, exist_ok=True)
    LOG_FILE = _dir / f"{datetime.now().strftime('%Y-%m-%d_%H-%M-%S')}.log"

# Console handler: configured level and above
_console_handler = logging.StreamHandler(sys.stdout)
_console_handler.setLevel(_settings.get_log_level())
_console_handler.setFormatter(_formatter)

_handlers = [_console_handler]
if LOG_FILE is not None:
    # File handler captures everything (DEBUG and above)
    _file_handler = logging.FileHandler(str(LOG_FILE), encoding="utf-8")
    _file_handler.setLevel(logging.DEBUG)
    _file_handler.setFormatter(_formatter)
    _handlers.append(_file_handler)

# Root logger
_root = logging.getLogger()
# Leave the root logger alone (level included) if this module is re-imported
# or the host application already configured logging
if not _root.handlers:
    _root.setLevel(logging.DEBUG)
    for _handler in _handlers:
        _root.addHandler(_handler)


def get_logger(name: str) -> logging.Logger:
    """Return a named child logger (e.g. ``get_logger('demo')``)."""
    return logging.getLogger(f"twostack.{name}")


# Convenience: a default logger named 'twostack'
log = logging.getLogger("twostack")

if LOG_FILE is not None:
    log.info("Logging started -> %s", LOG_FILE)
