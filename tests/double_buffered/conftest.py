from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

import pytest

from double_buffered.runtime.config import set_buffer_config

_ENV_VARS = (
    "DOUBLE_BUFFERED_CLONE",
    "DOUBLE_BUFFERED_TRACE",
    "DOUBLE_BUFFERED_LOG_LEVEL",
    "LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def _isolated_buffer_config(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    set_buffer_config(None)
    yield
    set_buffer_config(None)


@dataclass(slots=True)
class FakeGrid:
    cells: list[list[int]] = field(default_factory=lambda: [[0, 0], [0, 0]])
    clone_calls: int = 0

    def clone(self) -> FakeGrid:
        self.clone_calls += 1
        return FakeGrid(cells=[list(row) for row in self.cells])


class CountingFactory:
    def __init__(self) -> None:
        self.calls = 0

    def __call__(self) -> list[int]:
        self.calls += 1
        return [self.calls]
