"""
Environment-driven settings.

Values are read at call time so tests can monkeypatch the environment.

  SNAILFISH_INPUT       default input path for the search CLI (input.txt)
  SNAILFISH_LOG_LEVEL   logging level name (WARNING)
  SNAILFISH_LOG_FILE    optional log file path

  SNAILFISH_ADD_SCHEMA_FIELDS   inject kind/schema_version into CLI JSON
  SNAILFISH_SCHEMA_VERSION      override the injected schema_version (1.0.0)
"""

from __future__ import annotations

import logging
import os
from typing import Optional

ENV_INPUT = "SNAILFISH_INPUT"
ENV_LOG_LEVEL = "SNAILFISH_LOG_LEVEL"
ENV_LOG_FILE = "SNAILFISH_LOG_FILE"

DEFAULT_INPUT = "input.txt"
DEFAULT_LOG_LEVEL = "WARNING"


def input_path() -> str:
    v = os.getenv(ENV_INPUT, "").strip()
    return v or DEFAULT_INPUT


def log_level() -> int:
    name = os.getenv(ENV_LOG_LEVEL, "").strip().upper() or DEFAULT_LOG_LEVEL
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        raise ValueError(f"{ENV_LOG_LEVEL}: unknown logging level {name!r}")
    return level


def log_file() -> Optional[str]:
    v = os.getenv(ENV_LOG_FILE, "").strip()
    return v or None


# ---------------------------------------------------------------------------
# JSON payload versioning (opt-in, fields are optional for consumers)
# ---------------------------------------------------------------------------

ENV_SCHEMA_FIELDS = "SNAILFISH_ADD_SCHEMA_FIELDS"
ENV_SCHEMA_VERSION = "SNAILFISH_SCHEMA_VERSION"
DEFAULT_SCHEMA_VERSION = "1.0.0"


def schema_fields_enabled() -> bool:
    v = os.getenv(ENV_SCHEMA_FIELDS, "").strip().lower()
    return v in {"1", "true", "yes", "on"}


def schema_version() -> str:
    v = os.getenv(ENV_SCHEMA_VERSION, "").strip()
    return v or DEFAULT_SCHEMA_VERSION
