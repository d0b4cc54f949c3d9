from __future__ import annotations

from copy import copy, deepcopy

import pytest

from double_buffered.runtime.buffer import DoubleBuffered
from double_buffered.runtime.clone import clone_method, default_clone_fn, resolve_clone_fn
from double_buffered.runtime.config import BufferConfig, set_buffer_config
from tests.double_buffered.conftest import FakeGrid


def test_resolve_clone_fn_known_strategies() -> None:
    assert resolve_clone_fn("deep") is deepcopy
    assert resolve_clone_fn(" SHALLOW ") is copy
    assert resolve_clone_fn("method") is clone_method


def test_resolve_clone_fn_rejects_unknown_name() -> None:
    with pytest.raises(ValueError, match="unknown clone strategy"):
        resolve_clone_fn("pickle")


def test_clone_method_calls_value_clone() -> None:
    grid = FakeGrid()
    copied = clone_method(grid)
    assert grid.clone_calls == 1
    assert copied.cells == grid.cells
    assert copied.cells is not grid.cells


def test_default_clone_fn_follows_config() -> None:
    assert default_clone_fn() is deepcopy
    set_buffer_config(BufferConfig(clone_strategy="shallow"))
    assert default_clone_fn() is copy


def test_configured_method_strategy_drives_buffer() -> None:
    set_buffer_config(BufferConfig(clone_strategy="method"))
    grid = FakeGrid()
    buf = DoubleBuffered.new(grid)
    assert grid.clone_calls == 2
    assert buf.read() is not buf.write()


def test_shallow_strategy_shares_nested_values() -> None:
    set_buffer_config(BufferConfig(clone_strategy="shallow"))
    buf = DoubleBuffered.new([[1]])
    buf.write()[0].append(2)
    # Only the outer list is duplicated.
    assert buf.read() == [[1, 2]]


def test_missing_clone_method_fails_like_attribute_access() -> None:
    set_buffer_config(BufferConfig(clone_strategy="method"))
    with pytest.raises(AttributeError):
        DoubleBuffered.new(3)
