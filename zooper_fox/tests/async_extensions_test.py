import asyncio

import pytest

from zooper_fox import (
    Left,
    Option,
    Right,
    bind_async,
    map_left_async,
    map_right_async,
    match_async,
    try_async,
)


async def length(s: str) -> int:
    await asyncio.sleep(0)
    return len(s)


async def describe(v: int) -> str:
    await asyncio.sleep(0)
    return f"Value: {v}"


async def failing(_):
    raise RuntimeError("mapper exception")


@pytest.mark.asyncio
async def test_map_left_async():
    assert await map_left_async(Left("Error occurred"), length) == Left(14)


@pytest.mark.asyncio
async def test_map_left_async__right_untouched(async_spy):
    mapper = async_spy(len)
    assert await map_left_async(Right(42), mapper) == Right(42)
    mapper.assert_not_called()


@pytest.mark.asyncio
async def test_map_right_async():
    assert await map_right_async(Right(42), describe) == Right("Value: 42")


@pytest.mark.asyncio
async def test_map_right_async__left_untouched(async_spy):
    mapper = async_spy(str)
    assert await map_right_async(Left("error"), mapper) == Left("error")
    mapper.assert_not_called()
    mapper.assert_not_awaited()


@pytest.mark.asyncio
async def test_map_async__propagates_errors():
    with pytest.raises(RuntimeError, match="mapper exception"):
        await map_left_async(Left("e"), failing)
    with pytest.raises(RuntimeError, match="mapper exception"):
        await map_right_async(Right(1), failing)


@pytest.mark.asyncio
async def test_bind_async():
    async def check(v: int):
        await asyncio.sleep(0)
        return Right(v * 2) if v > 0 else Left("not positive")

    assert await bind_async(Right(21), check) == Right(42)
    assert await bind_async(Right(-1), check) == Left("not positive")


@pytest.mark.asyncio
async def test_bind_async__short_circuits(async_spy):
    binder = async_spy(Right)
    assert await bind_async(Left("error"), binder) == Left("error")
    binder.assert_not_called()


@pytest.mark.asyncio
async def test_bind_async__propagates_errors():
    with pytest.raises(RuntimeError, match="mapper exception"):
        await bind_async(Right(1), failing)


@pytest.mark.asyncio
async def test_match_async(async_spy):
    left_fn = async_spy(lambda e: f"Error: {e}")
    right_fn = async_spy(lambda v: f"Result: {v}")
    assert await match_async(Left("boom"), left_fn, right_fn) == "Error: boom"
    left_fn.assert_awaited_once_with("boom")
    right_fn.assert_not_called()

    left_fn.reset_mock()
    assert await match_async(Right(1), left_fn, right_fn) == "Result: 1"
    right_fn.assert_awaited_once_with(1)
    left_fn.assert_not_called()


@pytest.mark.asyncio
async def test_match_async__propagates_errors():
    with pytest.raises(RuntimeError, match="mapper exception"):
        await match_async(Left("e"), failing, describe)
    with pytest.raises(RuntimeError, match="mapper exception"):
        await match_async(Right(1), length, failing)


@pytest.mark.asyncio
async def test_match_async__option():
    async def none_fn(_):
        return "none"

    assert await match_async(Option.some(3), none_fn, describe) == "Value: 3"
    assert await match_async(Option.none(), none_fn, describe) == "none"


@pytest.mark.asyncio
async def test_chained():
    e = await map_right_async(Right(10), lambda v: asyncio.sleep(0, result=v + 1))
    e = await bind_async(e, lambda v: asyncio.sleep(0, result=Right(v * 2)))
    e = e.map_right(str)
    assert e == Right("22")


@pytest.mark.asyncio
async def test_chained__short_circuits(async_spy):
    later = async_spy(str)
    e = await bind_async(Right(10), lambda _: asyncio.sleep(0, result=Left("failed")))
    e = await map_right_async(e, later)
    assert e == Left("failed")
    later.assert_not_called()


@pytest.mark.asyncio
async def test_try_async__then_match():
    async def fetch():
        await asyncio.sleep(0)
        raise ConnectionError("unreachable")

    e = await try_async(fetch)

    async def on_error(ex: Exception) -> str:
        return f"{type(ex).__name__}: {ex}"

    assert await match_async(e, on_error, describe) == "ConnectionError: unreachable"
