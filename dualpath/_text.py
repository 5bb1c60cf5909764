"""Character classifiers and per-kind symbol tables.

Every algorithm in dualpath works on ``str`` and ``bytes`` alike. Rather than
branching on the input type throughout, callers pick an :class:`Alphabet`
once per call and compare one-element slices (``path[i:i + 1]``), which have
the same kind as the path for both ``str`` and ``bytes``.
"""

from __future__ import annotations

import dataclasses as dc
import os
import typing as t

AnyPath = t.TypeVar("AnyPath", str, bytes)


@dc.dataclass(frozen=True, slots=True)
class Alphabet(t.Generic[AnyPath]):
    """Literal symbols used by the path grammar in a single string kind."""

    empty: AnyPath
    dot: AnyPath
    dotdot: AnyPath
    slash: AnyPath
    backslash: AnyPath
    colon: AnyPath

    @property
    def kind(self) -> type[AnyPath]:
        """Return ``str`` or ``bytes``."""
        return type(self.empty)

    def convert(self, value: str | bytes) -> AnyPath:
        """Return *value* in this alphabet's kind."""
        if isinstance(value, self.kind):
            return t.cast("AnyPath", value)
        if isinstance(value, str):
            return t.cast("AnyPath", os.fsencode(value))
        return t.cast("AnyPath", os.fsdecode(value))


TEXT: t.Final[Alphabet[str]] = Alphabet("", ".", "..", "/", "\\", ":")
BINARY: t.Final[Alphabet[bytes]] = Alphabet(b"", b".", b"..", b"/", b"\\", b":")


def alphabet_for(value: str | bytes) -> Alphabet[t.Any]:
    """Return the alphabet matching the kind of *value*."""
    return BINARY if isinstance(value, bytes) else TEXT


def is_posix_separator(char: str | bytes) -> bool:
    """Return ``True`` when *char* is the POSIX separator."""
    return char in ("/", b"/")


def is_separator(char: str | bytes) -> bool:
    """Return ``True`` when *char* is a Windows separator (``/`` or ``\\``)."""
    return char in ("/", "\\", b"/", b"\\")


def is_drive_letter(char: str | bytes) -> bool:
    """Return ``True`` when *char* is an ASCII letter usable as a drive."""
    return len(char) == 1 and char.isascii() and char.isalpha()


__all__ = [
    "BINARY",
    "TEXT",
    "Alphabet",
    "AnyPath",
    "alphabet_for",
    "is_drive_letter",
    "is_posix_separator",
    "is_separator",
]
