"""Centralized buffer configuration sourced from environment."""

from __future__ import annotations

import os
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Mapping

CLONE_STRATEGY_NAMES: tuple[str, ...] = ("deep", "shallow", "method")
DEFAULT_CLONE_STRATEGY = "deep"


@dataclass(frozen=True, slots=True)
class BufferConfig:
    """Immutable buffer runtime configuration."""

    clone_strategy: str = DEFAULT_CLONE_STRATEGY
    trace_enabled: bool = False
    log_level: str = "INFO"


_BUFFER_CONFIG: ContextVar[BufferConfig | None] = ContextVar("double_buffered_config", default=None)


def _raw(name: str, *, env: Mapping[str, str] | None = None) -> str | None:
    value = os.getenv(name) if env is None else env.get(name)
    return None if value is None else str(value)


def _flag(name: str, default: bool, *, env: Mapping[str, str] | None = None) -> bool:
    raw = _raw(name, env=env)
    if raw is None:
        return bool(default)
    value = raw.strip().lower()
    if value in {"1", "true", "yes", "on"}:
        return True
    if value in {"0", "false", "no", "off"}:
        return False
    return bool(default)


def _text(name: str, default: str, *, env: Mapping[str, str] | None = None) -> str:
    raw = _raw(name, env=env)
    if raw is None:
        return str(default)
    value = raw.strip()
    return value if value else str(default)


def normalize_clone_strategy(raw: str | None, fallback: str = DEFAULT_CLONE_STRATEGY) -> str:
    value = "" if raw is None else str(raw).strip().lower()
    if value in {"copy", "shallow_copy"}:
        return "shallow"
    if value in {"deepcopy", "deep_copy"}:
        return "deep"
    if value in {"clone"}:
        return "method"
    if value not in CLONE_STRATEGY_NAMES:
        return str(fallback)
    return value


def resolve_log_level_name(default: str = "INFO", *, env: Mapping[str, str] | None = None) -> str:
    """Resolve log level with package-prefixed override."""
    value = _raw("DOUBLE_BUFFERED_LOG_LEVEL", env=env)
    if value is None:
        value = _raw("LOG_LEVEL", env=env) or default
    return value.strip().upper()


def load_buffer_config(*, env: Mapping[str, str] | None = None) -> BufferConfig:
    """Load immutable buffer configuration from env vars."""
    return BufferConfig(
        clone_strategy=normalize_clone_strategy(
            _text("DOUBLE_BUFFERED_CLONE", DEFAULT_CLONE_STRATEGY, env=env)
        ),
        trace_enabled=_flag("DOUBLE_BUFFERED_TRACE", False, env=env),
        log_level=resolve_log_level_name(env=env),
    )


def initialize_buffer_config(*, env: Mapping[str, str] | None = None) -> BufferConfig:
    config = load_buffer_config(env=env)
    _BUFFER_CONFIG.set(config)
    return config


def set_buffer_config(config: BufferConfig | None) -> BufferConfig | None:
    """Install ``config`` for the current context; ``None`` forces a reload on next read."""
    _BUFFER_CONFIG.set(config)
    return config


def get_buffer_config() -> BufferConfig:
    config = _BUFFER_CONFIG.get()
    if config is not None:
        return config
    return initialize_buffer_config()


__all__ = [
    "CLONE_STRATEGY_NAMES",
    "DEFAULT_CLONE_STRATEGY",
    "BufferConfig",
    "get_buffer_config",
    "initialize_buffer_config",
    "load_buffer_config",
    "normalize_clone_strategy",
    "resolve_log_level_name",
    "set_buffer_config",
]
