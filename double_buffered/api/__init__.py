"""Public double-buffer API contracts."""

from double_buffered.api.buffer import (
    CloneFn,
    DoubleBuffer,
    SupportsClone,
    create_default_double_buffer,
    create_double_buffer,
    create_double_buffer_with,
)
from double_buffered.api.logging import BufferLoggingConfig

__all__ = [
    "BufferLoggingConfig",
    "CloneFn",
    "DoubleBuffer",
    "SupportsClone",
    "create_default_double_buffer",
    "create_double_buffer",
    "create_double_buffer_with",
]
