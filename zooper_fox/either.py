from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from zooper_fox.errors import InvalidStateError

L = TypeVar("L")
R = TypeVar("R")
T = TypeVar("T")
L2 = TypeVar("L2")
R2 = TypeVar("R2")
R3 = TypeVar("R3")


@dataclass(frozen=True)
class Either(Generic[L, R], Iterable[R]):
    """
    Represents a value of one of two possible types (a disjoint union).

    An instance is either a `Left` or a `Right`, the variant is fixed at
    construction and the value is immutable. By convention Left carries the
    error or absent case and Right the successful result:

        parsed = Either.from_right(42)
        failed = Either.from_left("not a number")
        parsed.match(lambda e: f"Error: {e}", lambda v: f"Result: {v}")

    Iterating an Either yields the Right value, or nothing for a Left.
    """

    _value: Any

    def __post_init__(self) -> None:
        if type(self) is Either:
            raise TypeError(
                "Either can't be instantiated directly, use Either.from_left or Either.from_right"
            )

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._value!r})"

    def __len__(self) -> int:
        return 1 if isinstance(self, Right) else 0

    def __iter__(self) -> Iterator[R]:
        return iter([self._value]) if isinstance(self, Right) else iter([])

    @staticmethod
    def from_left(left: L) -> "Either[L, Any]":
        return Left(left)

    @staticmethod
    def from_right(right: R) -> "Either[Any, R]":
        return Right(right)

    @staticmethod
    def of(value: Any, left_type: type, right_type: type) -> "Either[Any, Any]":
        """
        Builds a Left or a Right depending on the runtime type of `value`,
        the equivalent of assigning a bare value to an Either variable.

        Only the value itself is inspected, nested Eithers are wrapped as-is.
        Raises TypeError if `value` matches both or neither of the types.
        """
        is_left = isinstance(value, left_type)
        is_right = isinstance(value, right_type)
        if is_left and is_right:
            raise TypeError(
                f"Ambiguous conversion, {value!r} is both a {left_type.__name__} "
                f"and a {right_type.__name__}"
            )
        if is_right:
            return Right(value)
        if is_left:
            return Left(value)
        raise TypeError(
            f"Can't convert {type(value).__name__} to "
            f"Either[{left_type.__name__}, {right_type.__name__}]"
        )

    @property
    def is_left(self) -> bool:
        return isinstance(self, Left)

    @property
    def is_right(self) -> bool:
        return isinstance(self, Right)

    @property
    def left(self) -> L:
        if not self.is_left:
            raise InvalidStateError("Cannot access left when is_left is false.")
        return self._value  # type: ignore[no-any-return]

    @property
    def right(self) -> R:
        if not self.is_right:
            raise InvalidStateError("Cannot access right when is_right is false.")
        return self._value  # type: ignore[no-any-return]

    def match(self, left_fn: Callable[[L], T], right_fn: Callable[[R], T]) -> T:
        """
        Calls `left_fn` with the Left value or `right_fn` with the Right value
        and returns its result. Only the matching function is called, so this
        also serves for side effects only.
        """
        if isinstance(self, Left):
            return left_fn(self._value)
        if isinstance(self, Right):
            return right_fn(self._value)
        raise InvalidStateError("Invalid Either state.")

    # NOTE: the methods below delegate to the free functions in
    #       zooper_fox.extensions and zooper_fox.query, imported lazily since
    #       those modules import this one.

    def try_get_left(self) -> tuple[bool, L | None]:
        from zooper_fox.extensions import try_get_left

        return try_get_left(self)

    def try_get_right(self) -> tuple[bool, R | None]:
        from zooper_fox.extensions import try_get_right

        return try_get_right(self)

    def map_left(self, mapper: Callable[[L], L2]) -> "Either[L2, R]":
        from zooper_fox.extensions import map_left

        return map_left(self, mapper)

    def map_right(self, mapper: Callable[[R], R2]) -> "Either[L, R2]":
        from zooper_fox.extensions import map_right

        return map_right(self, mapper)

    def bind(self, binder: Callable[[R], "Either[L, R2]"]) -> "Either[L, R2]":
        from zooper_fox.extensions import bind

        return bind(self, binder)

    def select(self, selector: Callable[[R], R2]) -> "Either[L, R2]":
        from zooper_fox.query import select

        return select(self, selector)

    def select_many(
        self,
        selector: Callable[[R], "Either[L, R2]"],
        result_selector: Callable[[R, R2], R3],
    ) -> "Either[L, R3]":
        from zooper_fox.query import select_many

        return select_many(self, selector, result_selector)

    def where(self, predicate: Callable[[R], bool]) -> "Either[L, R]":
        from zooper_fox.query import where

        return where(self, predicate)

    def or_else(self, default: R) -> "Either[L, R]":
        from zooper_fox.query import or_else

        return or_else(self, default)

    def or_else_get(self, factory: Callable[[L], R]) -> "Either[L, R]":
        from zooper_fox.query import or_else_get

        return or_else_get(self, factory)

    def zip(self, other: "Either[L, R2]") -> "Either[L, tuple[R, R2]]":
        from zooper_fox.query import zip_either

        return zip_either(self, other)

    def flatten(self) -> "Either[L, Any]":
        from zooper_fox.query import flatten

        return flatten(self)

    def left_to_iterable(self) -> Iterable[L]:
        from zooper_fox.query import left_to_iterable

        return left_to_iterable(self)

    def right_to_iterable(self) -> Iterable[R]:
        from zooper_fox.query import right_to_iterable

        return right_to_iterable(self)


class Left(Either[L, Any]):
    @property
    def value(self) -> L:
        return self._value  # type: ignore[no-any-return]


class Right(Either[Any, R]):
    @property
    def value(self) -> R:
        return self._value  # type: ignore[no-any-return]
