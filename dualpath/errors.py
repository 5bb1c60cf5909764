"""Exception hierarchy for dualpath."""

from __future__ import annotations


class DualPathError(Exception):
    """Base class for dualpath errors."""


class InvalidArgumentTypeError(DualPathError, TypeError):
    """Raised when a path argument is neither text nor a byte sequence.

    Parameters
    ----------
    name : str
        The argument name as exposed by the failing operation.
    received : object
        The rejected value.
    expected : str, optional
        Human-readable description of the accepted types.
    """

    def __init__(
        self, name: str, received: object, expected: str = "str | bytes"
    ) -> None:
        msg = (
            f'Invalid type for "{name}" argument, expecting {expected}; '
            f"got {type(received).__name__}"
        )
        super().__init__(msg)
        self.name = name
        self.received = received


__all__ = ["DualPathError", "InvalidArgumentTypeError"]
