"""Double-buffered value container.

A ``DoubleBuffered`` holds two independent copies of a value: the read side,
visible to consumers, and the write side, where producers stage changes.
``update`` copies the write side over the read side.

Pass-through access is deliberately asymmetric. ``buf.value`` and
``buf[key]`` read from the read side, while ``buf.value = x`` and
``buf[key] = x`` write into the write side. So after ``buf.value = 3``,
``buf.value == 3`` is false until ``buf.update()`` runs. ``read()`` and
``write()`` remain the canonical accessors.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from contextlib import contextmanager
from typing import Any

from double_buffered.api.buffer import CloneFn
from double_buffered.runtime.clone import default_clone_fn
from double_buffered.runtime.config import get_buffer_config
from double_buffered.runtime.errors import BufferConsumedError
from double_buffered.runtime.logging import get_logger

_LOG = get_logger("double_buffered.buffer")


class DoubleBuffered[T]:
    """Read/write double buffer over any duplicable value."""

    __slots__ = ("_read", "_write", "_clone", "_trace", "_consumed")

    _read: T
    _write: T
    _clone: CloneFn[T]
    _trace: bool
    _consumed: bool

    def __init__(self, value: T, *, clone: CloneFn[T] | None = None) -> None:
        """Initialize both sides with clones of ``value``."""
        clone_fn = clone if clone is not None else default_clone_fn()
        self._bind(clone_fn(value), clone_fn(value), clone_fn)

    @classmethod
    def new(cls, value: T, *, clone: CloneFn[T] | None = None) -> DoubleBuffered[T]:
        """Create a buffer whose sides are both cloned from ``value``."""
        return cls(value, clone=clone)

    @classmethod
    def construct_with(
        cls,
        factory: Callable[[], T],
        *,
        clone: CloneFn[T] | None = None,
    ) -> DoubleBuffered[T]:
        """Build each side with its own ``factory()`` call.

        The factory runs twice. An impure factory can leave the sides unequal
        from the start.
        """
        buffer = cls.__new__(cls)
        clone_fn = clone if clone is not None else default_clone_fn()
        read_side = factory()
        write_side = factory()
        buffer._bind(read_side, write_side, clone_fn)
        return buffer

    @classmethod
    def default(
        cls,
        value_type: Callable[[], T],
        *,
        clone: CloneFn[T] | None = None,
    ) -> DoubleBuffered[T]:
        """Build both sides from the value type's no-argument constructor."""
        return cls.construct_with(value_type, clone=clone)

    def _bind(self, read_side: T, write_side: T, clone_fn: CloneFn[T]) -> None:
        self._read = read_side
        self._write = write_side
        self._clone = clone_fn
        self._trace = get_buffer_config().trace_enabled
        self._consumed = False

    def _ensure_live(self, operation: str) -> None:
        if self._consumed:
            raise BufferConsumedError(operation)

    @property
    def consumed(self) -> bool:
        return self._consumed

    def read(self) -> T:
        """Return the read side. Callers must not mutate it."""
        self._ensure_live("read")
        return self._read

    def write(self) -> T:
        """Return the write side, never the read side.

        Mutations through the returned object stay invisible to ``read``
        until ``update`` is called. This allows editing a collection in place
        without building a copy first::

            buf = DoubleBuffered.default(list)
            buf.write().append(4)
            buf.update()
        """
        self._ensure_live("write")
        return self._write

    def stage(self, value: T) -> None:
        """Replace the write side with a clone of ``value`` without publishing."""
        self._ensure_live("stage")
        self._write = self._clone(value)
        if self._trace:
            _LOG.debug("double_buffer_stage type=%s", type(value).__name__)

    def update(self) -> None:
        """Copy the write side into the read side."""
        self._ensure_live("update")
        self._read = self._clone(self._write)
        if self._trace:
            _LOG.debug("double_buffer_update type=%s", type(self._read).__name__)

    def upsert(self, value: T) -> None:
        """Stage ``value`` and immediately publish it to the read side."""
        self.stage(value)
        self.update()

    @contextmanager
    def publishing(self) -> Iterator[T]:
        """Yield the write side and publish it when the block exits cleanly.

        An exception inside the block propagates and nothing is published;
        the staged changes remain on the write side.
        """
        yield self.write()
        self.update()

    def unbuffer_read(self) -> T:
        """Consume the buffer and return the read side.

        The write side is not published first. Call ``update`` beforehand to
        get the latest staged value.
        """
        self._ensure_live("unbuffer_read")
        value = self._read
        self._release("unbuffer_read")
        return value

    def unbuffer_write(self) -> T:
        """Consume the buffer and return the write side."""
        self._ensure_live("unbuffer_write")
        value = self._write
        self._release("unbuffer_write")
        return value

    def _release(self, operation: str) -> None:
        del self._read
        del self._write
        self._consumed = True
        if self._trace:
            _LOG.debug("double_buffer_consumed via=%s", operation)

    @property
    def value(self) -> T:
        """Read side on get; staging into the write side on set."""
        return self.read()

    @value.setter
    def value(self, value: T) -> None:
        self.stage(value)

    def __getitem__(self, key: Any) -> Any:
        side: Any = self.read()
        return side[key]

    def __setitem__(self, key: Any, item: Any) -> None:
        side: Any = self.write()
        side[key] = item

    def __delitem__(self, key: Any) -> None:
        side: Any = self.write()
        del side[key]

    def __repr__(self) -> str:
        if self._consumed:
            return f"{type(self).__name__}(<consumed>)"
        return f"{type(self).__name__}(read={self._read!r}, write={self._write!r})"


__all__ = ["DoubleBuffered"]
