"""shellarg configuration and logging."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import TextIO

import structlog

ENV_LOG = "SHELLARG_LOG"
ENV_LOG_FULL = "SHELLARG_LOG_FULL"

_TRUE = frozenset({"1", "true", "yes", "on"})
_FALSE = frozenset({"", "0", "false", "no", "off"})


@dataclass
class Config:
    """Parsed configuration."""

    log: Path | None = None  # None = no logging
    log_full: bool = False  # log the raw argument (requires log path)


# === Config Loading ===


def _parse_bool(name: str, value: str) -> bool:
    normalized = value.strip().lower()
    if normalized in _TRUE:
        return True
    if normalized in _FALSE:
        return False
    raise ValueError(f"{name}: expected a boolean, got {value!r}")


def load_config(environ: Mapping[str, str] | None = None) -> Config:
    """Build config from environment variables.

    Args:
        environ: Mapping to read from. Defaults to os.environ.

    Raises:
        ValueError: SHELLARG_LOG_FULL is set to something that isn't a boolean.
    """
    if environ is None:
        environ = os.environ

    config = Config()
    log_path = environ.get(ENV_LOG, "").strip()
    if log_path:
        config.log = Path(log_path).expanduser()
    config.log_full = _parse_bool(ENV_LOG_FULL, environ.get(ENV_LOG_FULL, ""))
    return config


# === Logging ===

_logger: structlog.typing.FilteringBoundLogger | None = None
_log_file: TextIO | None = None
_log_full = False


def _close_log_file() -> None:
    global _log_file
    if _log_file is not None:
        _log_file.close()
        _log_file = None


def configure_logging(config: Config) -> None:
    """Configure logging based on config settings. Call once at startup.

    Reconfiguring closes the file opened by the previous call.
    """
    global _logger, _log_file, _log_full
    _logger = None
    _close_log_file()
    _log_full = config.log_full
    if config.log is None:
        return

    # Ensure log directory exists
    config.log.parent.mkdir(parents=True, exist_ok=True)
    _log_file = config.log.open("a", encoding="utf-8")

    structlog.configure(
        processors=[
            structlog.processors.TimeStamper(fmt="iso", key="ts"),
            structlog.processors.add_log_level,
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(logging.INFO),
        logger_factory=structlog.WriteLoggerFactory(file=_log_file),
    )
    _logger = structlog.get_logger()


def log_preview(
    decision: str,
    arg: str,
    literal: str | None = None,
    error: str | None = None,
) -> None:
    """Log one previewed argument. No-op if logging not configured."""
    if _logger is None:
        return

    entry: dict[str, str | int] = {"decision": decision, "length": len(arg)}
    if literal is not None:
        entry["literal"] = literal
    if error is not None:
        entry["error"] = error
    if _log_full:
        entry["arg"] = arg
    _logger.info("preview", **entry)
