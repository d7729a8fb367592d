"""Runtime helpers for working with environment-backed configuration.

Unset or blank variables fall back to ``or_value``; malformed values raise
``ConfigurationError``.
"""

from __future__ import annotations

import os

from .errors import ConfigurationError

_TRUE_VALUES = {"1", "true", "t", "yes", "y", "on"}
_FALSE_VALUES = {"0", "false", "f", "no", "n", "off"}


def _read(name: str) -> str | None:
    value = os.getenv(name)
    if value is None:
        return None
    value = value.strip()
    return value or None


def env_str(name: str, or_value: str) -> str:
    """Fetch an environment variable as a stripped string."""

    value = _read(name)
    return or_value if value is None else value


def env_int(name: str, or_value: int) -> int:
    """Fetch an environment variable and coerce it to ``int``."""

    raw = _read(name)
    if raw is None:
        return or_value
    try:
        return int(raw)
    except ValueError as exc:
        raise ConfigurationError(f"Environment variable {name!r} must be an integer (got {raw!r})") from exc


def env_float(name: str, or_value: float) -> float:
    """Fetch an environment variable and coerce it to ``float``."""

    raw = _read(name)
    if raw is None:
        return or_value
    try:
        return float(raw)
    except ValueError as exc:
        raise ConfigurationError(f"Environment variable {name!r} must be a float (got {raw!r})") from exc


def env_bool(name: str, or_value: bool) -> bool:
    """Fetch an environment variable and coerce it to ``bool``."""

    raw = _read(name)
    if raw is None:
        return or_value

    lowered = raw.lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ConfigurationError(f"Environment variable {name!r} must be a boolean (allowed: {_TRUE_VALUES | _FALSE_VALUES}, got {raw!r})")


def env_seconds(name: str, or_value: float) -> float:
    """Fetch a non-negative duration in seconds."""

    value = env_float(name, or_value)
    if value < 0:
        raise ConfigurationError(f"Environment variable {name!r} must be non-negative (got {value})")
    return value
