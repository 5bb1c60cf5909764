"""Root detection for POSIX and Windows path grammars."""

from __future__ import annotations

import dataclasses as dc
import typing as t

from ._text import alphabet_for, is_drive_letter, is_posix_separator, is_separator

_DRIVE_LENGTH: t.Final[int] = 2


@dc.dataclass(frozen=True, slots=True)
class RootDescriptor:
    """Where the root of a path ends and what it names.

    Attributes
    ----------
    root_end : int
        Offset of the first character after the root prefix.
    device : str | bytes
        ``C:`` style drive, ``\\\\server\\share`` for UNC roots, or empty.
    is_absolute : bool
        Whether the root anchors the path. Drive-relative paths such as
        ``C:foo`` carry a device but are not absolute.
    """

    root_end: int
    device: t.Any
    is_absolute: bool

    @property
    def is_unc(self) -> bool:
        """Return ``True`` when the device is a UNC share."""
        return len(self.device) > _DRIVE_LENGTH


def classify_posix(path: str | bytes) -> RootDescriptor:
    """Return the root of a POSIX *path*."""
    absolute = is_posix_separator(path[0:1])
    return RootDescriptor(
        int(absolute), alphabet_for(path).empty, is_absolute=absolute
    )


def _skip(path: str | bytes, start: int, *, separators: bool) -> int:
    """Return the end of the run starting at *start*.

    The run is made of separators when *separators* is true and of
    non-separators otherwise.
    """
    index = start
    while index < len(path) and is_separator(path[index : index + 1]) is separators:
        index += 1
    return index


def _match_unc(path: str | bytes) -> RootDescriptor | None:
    """Match ``\\\\server\\share`` at the start of *path*."""
    alphabet = alphabet_for(path)
    length = len(path)
    server_end = _skip(path, 2, separators=False)
    if server_end == 2 or server_end >= length:  # noqa: PLR2004
        return None
    share_start = _skip(path, server_end, separators=True)
    if share_start >= length:
        return None
    share_end = _skip(path, share_start, separators=False)
    device = (
        alphabet.backslash * 2
        + path[2:server_end]
        + alphabet.backslash
        + path[share_start:share_end]
    )
    return RootDescriptor(share_end, device, is_absolute=True)


def classify_win32(path: str | bytes) -> RootDescriptor:
    """Return the root of a Windows *path*.

    Recognises, in order: a lone separator, UNC roots (falling back to a
    single-separator root when the server or share is missing), a leading
    separator, and drive letters with or without a following separator.
    """
    alphabet = alphabet_for(path)
    first = path[0:1]
    if is_separator(first):
        if is_separator(path[1:2]):
            unc = _match_unc(path)
            if unc is not None:
                return unc
        return RootDescriptor(1, alphabet.empty, is_absolute=True)
    if is_drive_letter(first) and path[1:2] == alphabet.colon:
        device = path[:_DRIVE_LENGTH]
        if is_separator(path[2:3]):
            return RootDescriptor(3, device, is_absolute=True)
        return RootDescriptor(_DRIVE_LENGTH, device, is_absolute=False)
    return RootDescriptor(0, alphabet.empty, is_absolute=False)


__all__ = ["RootDescriptor", "classify_posix", "classify_win32"]
