from collections.abc import Iterable
from itertools import chain
from typing import Any, TypeVar

from zooper_fox.either import Either
from zooper_fox.option import Option

T = TypeVar("T")


def flatten(iterables: Iterable[Iterable[T]]) -> Iterable[T]:
    """Lazily concatenates one level of nested iterables: [[1, 2], [3]] -> 1, 2, 3"""
    return chain.from_iterable(iterables)


def as_either(o: Either[Any, T] | Option[T]) -> Either[Any, T]:
    """
    Widens an Option to its `Either[Unit, T]`, returns an Either unchanged.
    Anything else is a TypeError.
    """
    if isinstance(o, Either):
        return o
    if isinstance(o, Option):
        return o.to_either()
    raise TypeError(f"Expected an Either or an Option, got {type(o).__name__}")
