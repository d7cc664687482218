"""
Environment-driven settings.

Every value is read on call, so tests can monkeypatch the environment.
"""

from __future__ import annotations

import os

KNOWN_SERVICES = ("clients", "products")

DEFAULT_CORS_ORIGINS = (
    "http://localhost:5173",
    "http://127.0.0.1:5173",
)


def env_str(name: str, default: str = "") -> str:
    return os.environ.get(name, "").strip() or default


def env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def env_float(name: str, default: float) -> float:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def env_list(name: str, default: tuple[str, ...]) -> list[str]:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return list(default)
    return [item.strip() for item in raw.split(",") if item.strip()]


def log_level() -> str:
    return env_str("LOG_LEVEL", "INFO").upper()


def cors_origins() -> list[str]:
    return env_list("CORS_ORIGINS", DEFAULT_CORS_ORIGINS)


def pool_min_size() -> int:
    return max(env_int("DB_POOL_MIN_SIZE", 1), 0)


def pool_max_size() -> int:
    return max(env_int("DB_POOL_MAX_SIZE", 5), 1, pool_min_size())


def command_timeout() -> float:
    return env_float("DB_COMMAND_TIMEOUT", 30.0)


def enabled_services() -> list[str]:
    """
    Services to mount in this process, in declaration order.
    """
    services = [name.lower() for name in env_list("SERVICES", KNOWN_SERVICES)]
    unknown = [name for name in services if name not in KNOWN_SERVICES]
    if unknown:
        raise RuntimeError(f"Unknown service(s) in SERVICES: {', '.join(unknown)}")
    return [name for name in KNOWN_SERVICES if name in services]
