"""Shared validation helpers for path arguments."""

from __future__ import annotations

import os
import typing as t

from ._text import Alphabet, alphabet_for
from .errors import InvalidArgumentTypeError

_BYTES_LIKE: t.Final = (bytearray, memoryview)


def validate_path(value: object, name: str = "path") -> str | bytes:
    """Return *value* as ``str`` or ``bytes``, rejecting anything else."""
    if isinstance(value, str | bytes):
        return value
    if isinstance(value, _BYTES_LIKE):
        return bytes(value)
    if isinstance(value, os.PathLike):
        try:
            return os.fspath(value)
        except TypeError as exc:
            raise InvalidArgumentTypeError(name, value) from exc
    raise InvalidArgumentTypeError(name, value)


def validate_paths(
    values: t.Sequence[object], name: str = "path"
) -> tuple[Alphabet[t.Any], list[t.Any]]:
    """Validate *values* and convert them to the kind of the first one.

    Returns the alphabet chosen for the call together with the converted
    arguments. With no arguments the text alphabet is used.
    """
    validated = [validate_path(value, name) for value in values]
    alphabet = alphabet_for(validated[0]) if validated else alphabet_for("")
    return alphabet, [alphabet.convert(value) for value in validated]


def validate_suffix(value: object, alphabet: Alphabet[t.Any] | None = None) -> t.Any:
    """Return the ``basename`` suffix, or ``None`` when none was given.

    With an *alphabet* the suffix is converted to its kind; without one it is
    only checked, so callers can reject a bad suffix before the path.
    """
    if value is None:
        return None
    if isinstance(value, _BYTES_LIKE):
        value = bytes(value)
    if isinstance(value, str | bytes):
        return value if alphabet is None else alphabet.convert(value)
    raise InvalidArgumentTypeError("suffix", value, expected="str")
