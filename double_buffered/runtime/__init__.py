"""Double-buffer runtime modules."""

from double_buffered.runtime.buffer import DoubleBuffered
from double_buffered.runtime.clone import CLONE_STRATEGIES, default_clone_fn, resolve_clone_fn
from double_buffered.runtime.config import (
    BufferConfig,
    get_buffer_config,
    initialize_buffer_config,
    load_buffer_config,
    set_buffer_config,
)
from double_buffered.runtime.errors import BufferConsumedError
from double_buffered.runtime.logging import configure_logging, get_logger, setup_logging

__all__ = [
    "CLONE_STRATEGIES",
    "BufferConfig",
    "BufferConsumedError",
    "DoubleBuffered",
    "configure_logging",
    "default_clone_fn",
    "get_buffer_config",
    "get_logger",
    "initialize_buffer_config",
    "load_buffer_config",
    "resolve_clone_fn",
    "set_buffer_config",
    "setup_logging",
]
