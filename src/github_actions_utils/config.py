"""Runtime settings read from environment variables."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass

from github_actions_utils.errors import ConfigError

RAW_CONTENT_ORIGIN = "https://raw.githubusercontent.com"

_ENV_PREFIX = "GITHUB_ACTIONS_UTILS_"
_DEFAULT_TIMEOUT = 30.0
_DEFAULT_CONNECT_TIMEOUT = 10.0
_DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(frozen=True, slots=True)
class Settings:
    """Server settings. Timeouts are in seconds."""

    raw_base_url: str = RAW_CONTENT_ORIGIN
    timeout: float = _DEFAULT_TIMEOUT
    connect_timeout: float = _DEFAULT_CONNECT_TIMEOUT
    log_level: str = _DEFAULT_LOG_LEVEL


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Build Settings from ``GITHUB_ACTIONS_UTILS_*`` environment variables.

    Unset or blank variables fall back to defaults.

    Raises:
        ConfigError: If a timeout is not a positive number or the log
            level is unknown.
    """
    env = os.environ if environ is None else environ

    base_url = env.get(f"{_ENV_PREFIX}RAW_BASE_URL", "").strip() or RAW_CONTENT_ORIGIN
    return Settings(
        raw_base_url=base_url.rstrip("/"),
        timeout=_read_seconds(env, "TIMEOUT", _DEFAULT_TIMEOUT),
        connect_timeout=_read_seconds(env, "CONNECT_TIMEOUT", _DEFAULT_CONNECT_TIMEOUT),
        log_level=_read_log_level(env),
    )


def _read_seconds(env: Mapping[str, str], name: str, default: float) -> float:
    key = f"{_ENV_PREFIX}{name}"
    raw = env.get(key, "").strip()
    if not raw:
        return default
    try:
        value = float(raw)
    except ValueError:
        raise ConfigError(f"{key} must be a number of seconds, got '{raw}'.") from None
    if value <= 0:
        raise ConfigError(f"{key} must be greater than zero, got '{raw}'.")
    return value


def _read_log_level(env: Mapping[str, str]) -> str:
    key = f"{_ENV_PREFIX}LOG_LEVEL"
    raw = env.get(key, "").strip().upper() or _DEFAULT_LOG_LEVEL
    if raw not in logging.getLevelNamesMapping():
        raise ConfigError(f"{key} must be a logging level name, got '{raw}'.")
    return raw
