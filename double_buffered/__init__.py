"""Generic double-buffered value container."""

from double_buffered.api import (
    CloneFn,
    DoubleBuffer,
    SupportsClone,
    create_default_double_buffer,
    create_double_buffer,
    create_double_buffer_with,
)
from double_buffered.runtime.buffer import DoubleBuffered
from double_buffered.runtime.errors import BufferConsumedError

__all__ = [
    "BufferConsumedError",
    "CloneFn",
    "DoubleBuffer",
    "DoubleBuffered",
    "SupportsClone",
    "create_default_double_buffer",
    "create_double_buffer",
    "create_double_buffer_with",
]
