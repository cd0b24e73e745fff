from zooper_fox.async_extensions import (
    bind_async,
    map_left_async,
    map_right_async,
    match_async,
)
from zooper_fox.capture import ErrorInfo, try_, try_async
from zooper_fox.either import Either, Left, Right
from zooper_fox.errors import FoxError, InvalidOperationError, InvalidStateError
from zooper_fox.extensions import bind, map_left, map_right, try_get_left, try_get_right
from zooper_fox.option import Option
from zooper_fox.query import (
    flatten,
    left_to_iterable,
    lefts,
    or_else,
    or_else_get,
    right_to_iterable,
    rights,
    select,
    select_many,
    where,
    zip_either,
)
from zooper_fox.unit import UNIT, Unit

__all__ = [
    "Either",
    "Left",
    "Right",
    "Option",
    "Unit",
    "UNIT",
    "FoxError",
    "InvalidStateError",
    "InvalidOperationError",
    "ErrorInfo",
    "try_",
    "try_async",
    "try_get_left",
    "try_get_right",
    "map_left",
    "map_right",
    "bind",
    "select",
    "select_many",
    "where",
    "or_else",
    "or_else_get",
    "zip_either",
    "flatten",
    "left_to_iterable",
    "right_to_iterable",
    "lefts",
    "rights",
    "match_async",
    "map_left_async",
    "map_right_async",
    "bind_async",
]
