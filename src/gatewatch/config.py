"""Tracker settings, with defaults overridable from the environment."""

import os
from dataclasses import dataclass, field
from typing import FrozenSet, List, Mapping, Optional

from gatewatch.exceptions import ConfigurationError

DEFAULT_BASE_URL = "http://kotlin-book.bignerdranch.com/2e"
DEFAULT_PASSENGERS = ["Madrigal", "Polarcubis", "Estragon", "Taernyl"]
DEFAULT_BANNED = frozenset({"Nogartse"})

ENV_PREFIX = "GATEWATCH_"


@dataclass
class TrackerSettings:
    """Settings for one tracking run."""

    passenger_names: List[str] = field(default_factory=lambda: list(DEFAULT_PASSENGERS))
    worker_count: int = 2
    # Minimum time a fetch takes, even if both upstream calls return sooner
    settle_delay: float = 0.5
    # Time between two countdown emissions
    tick_interval: float = 0.4
    banned_passengers: FrozenSet[str] = DEFAULT_BANNED
    base_url: str = DEFAULT_BASE_URL
    timeout: int = 30
    log_level: str = "INFO"

    def __post_init__(self):
        if self.worker_count < 1:
            raise ConfigurationError(f"worker_count must be >= 1, got {self.worker_count}")
        if self.settle_delay < 0 or self.tick_interval < 0:
            raise ConfigurationError("settle_delay and tick_interval must not be negative")
        if self.timeout <= 0:
            raise ConfigurationError(f"timeout must be positive, got {self.timeout}")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "TrackerSettings":
        """Build settings from GATEWATCH_* environment variables."""
        env = os.environ if environ is None else environ
        kwargs = {}

        names = _get(env, "PASSENGERS")
        if names is not None:
            kwargs["passenger_names"] = _split_names(names)
        banned = _get(env, "BANNED")
        if banned is not None:
            kwargs["banned_passengers"] = frozenset(_split_names(banned))
        workers = _get(env, "WORKERS")
        if workers is not None:
            kwargs["worker_count"] = _parse_number(int, "WORKERS", workers)
        settle = _get(env, "SETTLE_DELAY")
        if settle is not None:
            kwargs["settle_delay"] = _parse_number(float, "SETTLE_DELAY", settle)
        tick = _get(env, "TICK_INTERVAL")
        if tick is not None:
            kwargs["tick_interval"] = _parse_number(float, "TICK_INTERVAL", tick)
        timeout = _get(env, "TIMEOUT")
        if timeout is not None:
            kwargs["timeout"] = _parse_number(int, "TIMEOUT", timeout)
        base_url = _get(env, "BASE_URL")
        if base_url:
            kwargs["base_url"] = base_url.rstrip("/")
        log_level = _get(env, "LOG_LEVEL")
        if log_level:
            kwargs["log_level"] = log_level.upper()

        return cls(**kwargs)


def _get(env: Mapping[str, str], key: str) -> Optional[str]:
    value = env.get(ENV_PREFIX + key)
    if value is None:
        return None
    return value.strip()


def _split_names(value: str) -> List[str]:
    return [n.strip() for n in value.split(",") if n.strip()]


def _parse_number(kind, key: str, value: str):
    try:
        return kind(value)
    except ValueError:
        raise ConfigurationError(
            f"Invalid {ENV_PREFIX}{key}: {value!r}"
        ) from None
