from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Generic, TypeVar

from zooper_fox.either import Either, Left, Right
from zooper_fox.errors import InvalidStateError
from zooper_fox.unit import UNIT, Unit

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True)
class Option(Generic[T], Iterable[T]):
    """
    An optional value, Some(value) or None.

    Backed by an `Either[Unit, T]`: Right holds the value, Left always holds
    `UNIT`. Use `to_either` to hand an Option to Either based code, all
    combinators in this package also accept an Option directly.

        name = Option.some("JohnDoe")
        name.match(lambda v: f"Hello, {v}!", lambda: "Hello, guest!")

    NOTE: `Option.some(None)` is a Some holding None, not a None.
    """

    _either: Either[Unit, T]

    def __post_init__(self) -> None:
        if not isinstance(self._either, Either):
            raise TypeError(f"Option wraps an Either, got {type(self._either).__name__}")
        if self._either.is_left and not isinstance(self._either.left, Unit):
            raise InvalidStateError(
                f"Option can only wrap Unit on the left, got {self._either.left!r}"
            )

    def __repr__(self) -> str:
        return f"Option.some({self._either.right!r})" if self.is_some else "Option.none()"

    def __len__(self) -> int:
        return len(self._either)

    def __iter__(self) -> Iterator[T]:
        return iter(self._either)

    @classmethod
    def some(cls, value: T) -> "Option[T]":
        return cls(Right(value))

    @classmethod
    def none(cls) -> "Option[T]":
        return cls(Left(UNIT))

    @classmethod
    def from_optional(cls, value: T | None) -> "Option[T]":
        """Some(value) unless `value` is None"""
        return cls.none() if value is None else cls.some(value)

    @property
    def is_some(self) -> bool:
        return self._either.is_right

    @property
    def is_none(self) -> bool:
        return self._either.is_left

    @property
    def value(self) -> T:
        if not self.is_some:
            raise InvalidStateError("Cannot access value on None.")
        return self._either.right

    def match(self, some_fn: Callable[[T], U], none_fn: Callable[[], U]) -> U:
        return self._either.match(lambda _: none_fn(), some_fn)

    def to_either(self) -> Either[Unit, T]:
        return self._either

    # Either combinators, chained on the widened value. Results are Eithers
    # with Unit on the left.

    def map_right(self, mapper: Callable[[T], U]) -> Either[Unit, U]:
        return self._either.map_right(mapper)

    def select(self, selector: Callable[[T], U]) -> Either[Unit, U]:
        return self._either.select(selector)

    def bind(self, binder: Callable[[T], Either[Unit, U]]) -> Either[Unit, U]:
        return self._either.bind(binder)

    def where(self, predicate: Callable[[T], bool]) -> Either[Unit, T]:
        return self._either.where(predicate)

    def or_else(self, default: T) -> Either[Unit, T]:
        return self._either.or_else(default)

    def or_else_get(self, factory: Callable[[Unit], T]) -> Either[Unit, T]:
        return self._either.or_else_get(factory)

    def zip(self, other: "Either[Unit, U] | Option[U]") -> Either[Unit, tuple[T, U]]:
        return self._either.zip(other)  # type: ignore[arg-type]

    def try_get_value(self) -> tuple[bool, T | None]:
        return self._either.try_get_right()
