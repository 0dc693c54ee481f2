from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

from services.decoding import ValuePolicy


_HOST_ENV = "SENSOR_API_HOST"
_PORT_ENV = "SENSOR_API_PORT"
_VALUE_POLICY_ENV = "SENSOR_VALUE_POLICY"
_DIAGNOSTICS_ENV = "SENSOR_DIAGNOSTICS_ENABLED"
_CORS_ORIGINS_ENV = "SENSOR_CORS_ORIGINS"
_LOG_LEVEL_ENV = "LOG_LEVEL"

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class Settings:
    host: str
    port: int
    value_policy: ValuePolicy
    diagnostics_enabled: bool
    cors_origins: tuple[str, ...]
    log_level: str


def _read_str_env(name: str, default: str) -> str:
    value = os.getenv(name)
    if value is None:
        return default
    candidate = value.strip()
    return candidate or default


def _read_port(default: int) -> int:
    value = os.getenv(_PORT_ENV)
    if value is None:
        return default
    candidate = value.strip()
    if not candidate:
        return default
    try:
        parsed = int(candidate)
    except ValueError:
        return default
    return parsed if 0 < parsed < 65536 else default


def _read_value_policy(default: ValuePolicy) -> ValuePolicy:
    value = os.getenv(_VALUE_POLICY_ENV)
    if value is None:
        return default
    candidate = value.strip().lower()
    try:
        return ValuePolicy(candidate)
    except ValueError:
        return default


def _read_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    candidate = value.strip().lower()
    if candidate in _TRUTHY:
        return True
    if candidate in _FALSY:
        return False
    return default


def _read_origins(default: tuple[str, ...]) -> tuple[str, ...]:
    value = os.getenv(_CORS_ORIGINS_ENV)
    if value is None:
        return default
    origins = tuple(origin.strip() for origin in value.split(",") if origin.strip())
    return origins or default


def _read_log_level(default: str) -> str:
    value = os.getenv(_LOG_LEVEL_ENV)
    if value is None:
        return default
    candidate = value.strip()
    if not candidate:
        return default
    return candidate.upper()


@lru_cache
def get_settings() -> Settings:
    return Settings(
        host=_read_str_env(_HOST_ENV, "0.0.0.0"),
        port=_read_port(5000),
        value_policy=_read_value_policy(ValuePolicy.passthrough),
        diagnostics_enabled=_read_bool(_DIAGNOSTICS_ENV, True),
        cors_origins=_read_origins(("*",)),
        log_level=_read_log_level("INFO"),
    )
