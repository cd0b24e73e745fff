"""
Query style combinators over Either: projection, filtering, defaults,
zipping and flattening.

Like the core combinators, every operation acting on the Right value is a
no-op for a Left and vice versa, and caller errors are never captured.
"""

from collections.abc import Callable, Iterable
from typing import Any, TypeVar

from zooper_fox.either import Either, Left, Right
from zooper_fox.errors import InvalidOperationError
from zooper_fox.extensions import map_right
from zooper_fox.option import Option
from zooper_fox.utils import as_either, flatten as flatten_iterables

L = TypeVar("L")
R = TypeVar("R")
R1 = TypeVar("R1")
R2 = TypeVar("R2")
R3 = TypeVar("R3")

select = map_right


def select_many(
    either: Either[L, R] | Option[R],
    selector: Callable[[R], Either[L, R2]],
    result_selector: Callable[[R, R2], R3],
) -> Either[L, R3]:
    """
    Binds `selector` and combines the outer and inner Right values with
    `result_selector`. The first Left encountered is returned.
    """
    return as_either(either).match(
        Left,
        lambda right: as_either(selector(right)).match(
            Left, lambda inner: Right(result_selector(right, inner))
        ),
    )


def where(
    either: Either[L, R] | Option[R], predicate: Callable[[R], bool]
) -> Either[L, R]:
    """
    Returns the Either unchanged if it's a Left or its Right value satisfies
    `predicate`.

    NOTE: an Either has no empty state to filter down to, so a Right that
          fails the predicate raises InvalidOperationError instead.
    """
    e = as_either(either)
    if e.is_right and not predicate(e.right):
        raise InvalidOperationError("Predicate returned false for Right value")
    return e


def or_else(either: Either[L, R] | Option[R], default: R) -> Either[L, R]:
    """Replaces a Left with `Right(default)`, a Right is returned unchanged"""
    e = as_either(either)
    return e if e.is_right else Right(default)


def or_else_get(
    either: Either[L, R] | Option[R], factory: Callable[[L], R]
) -> Either[L, R]:
    """Replaces a Left with `Right(factory(left))`, a Right is returned unchanged"""
    e = as_either(either)
    return e if e.is_right else Right(factory(e.left))


def zip_either(
    first: Either[L, R1] | Option[R1], second: Either[L, R2] | Option[R2]
) -> Either[L, tuple[R1, R2]]:
    """
    Pairs two Right values. If either is a Left, the Left of `first` takes
    precedence over the Left of `second`.
    """
    return as_either(first).match(
        Left,
        lambda right1: as_either(second).match(
            Left, lambda right2: Right((right1, right2))
        ),
    )


def flatten(either: Either[L, Either[L, R]]) -> Either[L, R]:
    """
    Removes one level of nesting: an outer Left is returned as a Left, an
    outer Right yields the inner Either as is.
    """
    return as_either(either).match(Left, as_either)


def left_to_iterable(either: Either[L, Any] | Option[Any]) -> Iterable[L]:
    """The Left value as a one element iterable, empty for a Right"""
    e = as_either(either)
    return (e.left,) if e.is_left else ()


def right_to_iterable(either: Either[Any, R] | Option[R]) -> Iterable[R]:
    """The Right value as a one element iterable, empty for a Left"""
    e = as_either(either)
    return (e.right,) if e.is_right else ()


def lefts(eithers: Iterable[Either[L, Any]]) -> list[L]:
    """
    All Left values of `eithers`, in order.

    Example: [Left("a"), Right(1), Left("b")] -> ["a", "b"]
    """
    return list(flatten_iterables(left_to_iterable(e) for e in eithers))


def rights(eithers: Iterable[Either[Any, R]]) -> list[R]:
    """
    All Right values of `eithers`, in order.

    Example: [Left("a"), Right(1), Right(2)] -> [1, 2]
    """
    return list(flatten_iterables(right_to_iterable(e) for e in eithers))
