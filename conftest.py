from collections.abc import Callable, Iterator
from typing import Any
from unittest.mock import AsyncMock, Mock

import pytest

from zooper_fox.config import get_capture_log_level, resolve_capture_log_level


@pytest.fixture(autouse=True)
def reset_config_cache() -> Iterator[None]:
    get_capture_log_level.cache_clear()
    resolve_capture_log_level.cache_clear()
    yield
    get_capture_log_level.cache_clear()
    resolve_capture_log_level.cache_clear()


@pytest.fixture
def spy() -> Callable[..., Mock]:
    """
    Wraps a function in a Mock so tests can count calls, e.g.
    `f = spy(lambda x: x + 1)`, then `f.assert_called_once_with(1)`.
    """

    def make(fn: Callable[..., Any] = lambda *_: None) -> Mock:
        return Mock(side_effect=fn)

    return make


@pytest.fixture
def async_spy() -> Callable[..., AsyncMock]:
    """Like `spy`, for coroutine functions: `await f(...)` returns `fn(...)`."""

    def make(fn: Callable[..., Any] = lambda *_: None) -> AsyncMock:
        return AsyncMock(side_effect=fn)

    return make
