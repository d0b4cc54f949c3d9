"""Runtime error types."""

from __future__ import annotations


class BufferConsumedError(RuntimeError):
    """Raised when a buffer is used after one of its sides was unbuffered."""

    def __init__(self, operation: str) -> None:
        super().__init__(f"double buffer already consumed; cannot {operation}")
        self.operation = operation
