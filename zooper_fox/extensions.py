from collections.abc import Callable
from typing import Any, TypeVar

from zooper_fox.either import Either, Left, Right
from zooper_fox.option import Option
from zooper_fox.utils import as_either

L = TypeVar("L")
R = TypeVar("R")
L2 = TypeVar("L2")
R2 = TypeVar("R2")


def try_get_right(either: Either[Any, R] | Option[R]) -> tuple[bool, R | None]:
    """
    Returns `(True, right)` for a Right and `(False, None)` for a Left.

    Usage:

        found, user = try_get_right(lookup(user_id))
        if found:
            ...
    """
    e = as_either(either)
    return (True, e.right) if e.is_right else (False, None)


def try_get_left(either: Either[L, Any] | Option[Any]) -> tuple[bool, L | None]:
    """Returns `(True, left)` for a Left and `(False, None)` for a Right."""
    e = as_either(either)
    return (True, e.left) if e.is_left else (False, None)


def map_left(
    either: Either[L, R] | Option[R], mapper: Callable[[L], L2]
) -> Either[L2, R]:
    """Transforms the Left value, a Right is passed through untouched"""
    return as_either(either).match(lambda left: Left(mapper(left)), Right)


def map_right(
    either: Either[L, R] | Option[R], mapper: Callable[[R], R2]
) -> Either[L, R2]:
    """Transforms the Right value, a Left is passed through untouched"""
    return as_either(either).match(Left, lambda right: Right(mapper(right)))


def bind(
    either: Either[L, R] | Option[R], binder: Callable[[R], Either[L, R2]]
) -> Either[L, R2]:
    """
    Chains a computation that may itself produce a Left. For a Right the
    result of `binder(right)` is returned as is, a Left short-circuits and
    `binder` is never called:

        parse(text).bind(validate).bind(save)
    """
    return as_either(either).match(Left, binder)
