"""
Async counterparts of the core combinators, for functions returning an
awaitable. Each combinator awaits at most the one awaitable returned by the
function of the matching branch, the other function is never called.
Exceptions raised by the function propagate, use `try_async` to capture them.
"""

from collections.abc import Awaitable, Callable
from typing import TypeVar

from zooper_fox.either import Either, Left, Right
from zooper_fox.errors import InvalidStateError
from zooper_fox.option import Option
from zooper_fox.utils import as_either

L = TypeVar("L")
R = TypeVar("R")
T = TypeVar("T")
L2 = TypeVar("L2")
R2 = TypeVar("R2")


async def match_async(
    either: Either[L, R] | Option[R],
    left_fn: Callable[[L], Awaitable[T]],
    right_fn: Callable[[R], Awaitable[T]],
) -> T:
    e = as_either(either)
    if e.is_left:
        return await left_fn(e.left)
    if e.is_right:
        return await right_fn(e.right)
    raise InvalidStateError("Invalid Either state.")


async def map_left_async(
    either: Either[L, R] | Option[R], mapper: Callable[[L], Awaitable[L2]]
) -> Either[L2, R]:
    e = as_either(either)
    if e.is_left:
        return Left(await mapper(e.left))
    return Right(e.right)


async def map_right_async(
    either: Either[L, R] | Option[R], mapper: Callable[[R], Awaitable[R2]]
) -> Either[L, R2]:
    e = as_either(either)
    if e.is_right:
        return Right(await mapper(e.right))
    return Left(e.left)


async def bind_async(
    either: Either[L, R] | Option[R],
    binder: Callable[[R], Awaitable[Either[L, R2]]],
) -> Either[L, R2]:
    """
    Async `bind`: for a Right, awaits `binder(right)` and returns the
    resulting Either as is; a Left short-circuits.
    """
    e = as_either(either)
    if e.is_right:
        return await binder(e.right)
    return Left(e.left)
