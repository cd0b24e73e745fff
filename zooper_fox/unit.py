from typing import Any


class Unit:
    """
    A type with exactly one value, usable where "no value" still has to
    fill a type parameter, e.g. the None side of an `Option`.

    `Unit()` always returns the same instance, see `UNIT`.
    """

    __slots__ = ()
    _instance: "Unit | None" = None

    def __new__(cls) -> "Unit":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __eq__(self, other: Any) -> bool:
        return isinstance(other, Unit)

    def __hash__(self) -> int:
        return hash(Unit)

    def __repr__(self) -> str:
        return "Unit()"

    def __copy__(self) -> "Unit":
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> "Unit":
        return self

    def __reduce__(self) -> tuple[type["Unit"], tuple[()]]:
        return Unit, ()


UNIT = Unit()
