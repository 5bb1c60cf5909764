"""Dot-segment collapsing shared by both path flavors."""

from __future__ import annotations

import typing as t

from ._text import AnyPath, alphabet_for

SeparatorTest = t.Callable[[t.Any], bool]


def normalize_segments(
    tail: AnyPath,
    allow_above_root: bool,  # noqa: FBT001
    separator: AnyPath,
    is_separator: SeparatorTest,
) -> AnyPath:
    """Collapse ``.``, ``..`` and empty segments in *tail*.

    Parameters
    ----------
    tail : str | bytes
        The part of a path following its root. Leading separators are
        ignored.
    allow_above_root : bool
        Keep ``..`` segments that would climb past the start of *tail*. Used
        for relative paths; absolute paths drop them.
    separator : str | bytes
        Separator written between output segments.
    is_separator : Callable
        Predicate recognising input separators (one-element slices).

    Returns
    -------
    str | bytes
        The collapsed tail without leading or trailing separators. A tail
        made only of separators and ``.`` segments yields an empty value.
    """
    alphabet = alphabet_for(tail)
    segments: list[AnyPath] = []
    start = 0
    length = len(tail)
    # One step past the end closes the final segment.
    for i in range(length + 1):
        if i < length and not is_separator(tail[i : i + 1]):
            continue
        segment = tail[start:i]
        start = i + 1
        if not segment or segment == alphabet.dot:
            continue
        if segment != alphabet.dotdot:
            segments.append(segment)
        elif segments and segments[-1] != alphabet.dotdot:
            segments.pop()
        elif allow_above_root:
            segments.append(alphabet.dotdot)
    return separator.join(segments)


__all__ = ["normalize_segments"]
