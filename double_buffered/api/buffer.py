"""Public double-buffer API contracts."""

from __future__ import annotations

from collections.abc import Callable
from contextlib import AbstractContextManager
from typing import Protocol, Self, TypeVar

T = TypeVar("T")

type CloneFn[V] = Callable[[V], V]


class SupportsClone(Protocol):
    """Value exposing an explicit duplication method."""

    def clone(self) -> Self:
        """Return an independent, non-aliased copy."""


class DoubleBuffer(Protocol[T]):
    """Read/write double-buffer contract.

    ``read`` targets the read side and ``write`` targets the write side.
    Changes made to the write side stay invisible to readers until
    ``update`` publishes them.
    """

    def read(self) -> T:
        """Return the read side. Callers must not mutate it."""

    def write(self) -> T:
        """Return the write side for in-place staging."""

    def stage(self, value: T) -> None:
        """Replace the write side without publishing."""

    def update(self) -> None:
        """Copy the write side into the read side."""

    def upsert(self, value: T) -> None:
        """Stage ``value`` and publish it immediately."""

    def publishing(self) -> AbstractContextManager[T]:
        """Yield the write side and publish on clean exit."""

    def unbuffer_read(self) -> T:
        """Consume the buffer and return the read side."""

    def unbuffer_write(self) -> T:
        """Consume the buffer and return the write side."""


def create_double_buffer[V](value: V, *, clone: CloneFn[V] | None = None) -> DoubleBuffer[V]:
    """Create a double buffer with both sides cloned from ``value``."""
    from double_buffered.runtime.buffer import DoubleBuffered

    return DoubleBuffered.new(value, clone=clone)


def create_double_buffer_with[V](
    factory: Callable[[], V],
    *,
    clone: CloneFn[V] | None = None,
) -> DoubleBuffer[V]:
    """Create a double buffer calling ``factory`` once per side."""
    from double_buffered.runtime.buffer import DoubleBuffered

    return DoubleBuffered.construct_with(factory, clone=clone)


def create_default_double_buffer[V](
    value_type: Callable[[], V],
    *,
    clone: CloneFn[V] | None = None,
) -> DoubleBuffer[V]:
    """Create a double buffer from the default constructor of the value type."""
    from double_buffered.runtime.buffer import DoubleBuffered

    return DoubleBuffered.default(value_type, clone=clone)


__all__ = [
    "CloneFn",
    "DoubleBuffer",
    "SupportsClone",
    "create_default_double_buffer",
    "create_double_buffer",
    "create_double_buffer_with",
]
