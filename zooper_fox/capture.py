import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import TypeVar

from zooper_fox.config import resolve_capture_log_level
from zooper_fox.either import Either, Left, Right

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class ErrorInfo:
    """
    Structured, exception free description of a captured error: its kind
    (qualified type name), message and the chain of causes.
    """

    kind: str
    message: str
    cause: "ErrorInfo | None" = None

    @classmethod
    def from_exception(cls, exc: BaseException) -> "ErrorInfo":
        chain: list[BaseException] = []
        current: BaseException | None = exc
        # exception chains may be cyclic
        while current is not None and all(current is not c for c in chain):
            chain.append(current)
            cause = current.__cause__
            if cause is None and not current.__suppress_context__:
                cause = current.__context__
            current = cause
        info: ErrorInfo | None = None
        for e in reversed(chain):
            info = cls(kind=_qualified_name(type(e)), message=str(e), cause=info)
        assert info is not None
        return info

    def chain(self) -> list["ErrorInfo"]:
        """This error followed by its causes, outermost first"""
        infos: list[ErrorInfo] = []
        info: ErrorInfo | None = self
        while info is not None:
            infos.append(info)
            info = info.cause
        return infos

    def __str__(self) -> str:
        return " <- ".join(f"{i.kind}: {i.message}" for i in self.chain())


def _qualified_name(t: type) -> str:
    return t.__qualname__ if t.__module__ == "builtins" else f"{t.__module__}.{t.__qualname__}"


def _log_captured(fn: Callable[..., object], exc: Exception) -> None:
    level = resolve_capture_log_level()
    if not logger.isEnabledFor(level):
        return
    fn_name = getattr(fn, "__qualname__", "<callable>")
    try:
        message = f"Captured exception from {fn_name}: {ErrorInfo.from_exception(exc)}"
    except Exception:
        # str() of the exception or one of its causes failed
        message = f"Captured {_qualified_name(type(exc))} from {fn_name} (unprintable)"
    logger.log(level, message)


def try_(fn: Callable[[], T]) -> Either[Exception, T]:
    """
    Calls `fn` and returns its result as a Right. Any Exception raised by
    `fn` is returned as a Left holding the exception object itself, so its
    type, message and cause are preserved:

        try_(lambda: int("42"))   -> Right(42)
        try_(lambda: int("x"))    -> Left(ValueError(...))

    Exceptions that don't derive from Exception (e.g. KeyboardInterrupt)
    propagate.
    """
    try:
        result = fn()
    except Exception as e:
        _log_captured(fn, e)
        return Left(e)
    return Right(result)


async def try_async(fn: Callable[[], Awaitable[T]]) -> Either[Exception, T]:
    """
    Async counterpart of `try_`. Exceptions raised by `fn` before it returns
    an awaitable and exceptions raised while awaiting it are both captured.
    Cancellation (asyncio.CancelledError) propagates.
    """
    try:
        result = await fn()
    except Exception as e:
        _log_captured(fn, e)
        return Left(e)
    return Right(result)
