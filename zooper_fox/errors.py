class FoxError(Exception):
    """Base class for errors raised by zooper_fox itself"""


class InvalidStateError(FoxError):
    """
    A value was used against its contract, e.g. reading `right` from a Left.
    These are programming errors and are never captured into a Left.
    """


class InvalidOperationError(FoxError):
    """An operation can't produce a result for the given value"""
