"""Helpers shared by the snailfish CLIs."""

from __future__ import annotations

import datetime
import hashlib
import json
import logging
import sys
from typing import Any, Dict, Iterable

from snailfish import config
from snailfish.logging_utils import PACKAGE_LOGGER, setup_logger


def utc_now_z() -> str:
    now = datetime.datetime.now(datetime.timezone.utc)
    return now.isoformat(timespec="seconds").replace("+00:00", "Z")


def inputs_hash(texts: Iterable[str]) -> str:
    payload = json.dumps(list(texts), separators=(",", ":"), ensure_ascii=False)
    return hashlib.sha256(payload.encode("utf-8")).hexdigest()


def configure_logging(verbose: bool) -> None:
    """Attach handlers to the package logger. Raises ValueError on a bad SNAILFISH_LOG_LEVEL."""
    level = logging.DEBUG if verbose else config.log_level()
    setup_logger(PACKAGE_LOGGER, log_file=config.log_file(), level=level)


def finalize_payload(payload: Dict[str, Any], *, kind: str) -> Dict[str, Any]:
    """Inject optional kind/schema_version when enabled; never overwrites keys."""
    if not config.schema_fields_enabled():
        return payload
    out = dict(payload)
    out.setdefault("kind", kind)
    out.setdefault("schema_version", config.schema_version())
    return out


def emit(payload: Dict[str, Any], pretty: bool) -> None:
    if pretty:
        print(json.dumps(payload, ensure_ascii=False, indent=2, sort_keys=True))
    else:
        print(json.dumps(payload, ensure_ascii=False, sort_keys=True))


def fail(message: str, code: int = 2) -> int:
    print(f"error: {message}", file=sys.stderr)
    return code
