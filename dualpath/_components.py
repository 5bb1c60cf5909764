"""Backward scanners extracting the last component of a path."""

from __future__ import annotations

import typing as t

from ._text import alphabet_for

if t.TYPE_CHECKING:  # pragma: no cover - used only for typing
    from ._segments import SeparatorTest
    from ._text import AnyPath


def last_component(
    path: AnyPath,
    start: int,
    is_separator: SeparatorTest,
    suffix: AnyPath | None = None,
) -> AnyPath:
    """Return the final segment of *path*, ignoring everything before *start*.

    Trailing separators are trimmed. When *suffix* is non-empty and matches the
    end of the segment without consuming all of it, the suffix is removed too.
    """
    alphabet = alphabet_for(path)
    if suffix and len(suffix) <= len(path):
        if suffix == path:
            return alphabet.empty
        return _strip_suffix(path, start, is_separator, suffix)

    end = -1
    matched_separator = True
    for i in range(len(path) - 1, start - 1, -1):
        if is_separator(path[i : i + 1]):
            if not matched_separator:
                start = i + 1
                break
        elif end == -1:
            matched_separator = False
            end = i + 1

    if end == -1:
        return alphabet.empty
    return path[start:end]


def _strip_suffix(
    path: AnyPath, start: int, is_separator: SeparatorTest, suffix: AnyPath
) -> AnyPath:
    """Scan *path* backwards matching *suffix* against the final segment."""
    end = -1
    matched_separator = True
    suffix_index = len(suffix) - 1
    first_non_separator_end = -1
    for i in range(len(path) - 1, start - 1, -1):
        char = path[i : i + 1]
        if is_separator(char):
            if not matched_separator:
                start = i + 1
                break
            continue
        if first_non_separator_end == -1:
            matched_separator = False
            first_non_separator_end = i + 1
        if suffix_index < 0:
            continue
        if char == suffix[suffix_index : suffix_index + 1]:
            suffix_index -= 1
            if suffix_index == -1:
                end = i
        else:
            # Mismatch: the whole segment is the answer.
            suffix_index = -1
            end = first_non_separator_end

    if start == end:
        end = first_non_separator_end
    elif end == -1:
        end = len(path)
    return path[start:end]


def extension(path: AnyPath, start: int, is_separator: SeparatorTest) -> AnyPath:
    """Return the extension of the final segment of *path*.

    The extension runs from the last ``.`` to the end of the segment. Segments
    without a dot, the ``..`` segment, and names whose only dot is leading
    (``.profile``) have no extension.
    """
    alphabet = alphabet_for(path)
    start_dot = -1
    start_part = start
    end = -1
    matched_separator = True
    # 0: nothing seen before the dot yet, 1: only dots, -1: a name character.
    pre_dot_state = 0
    for i in range(len(path) - 1, start - 1, -1):
        char = path[i : i + 1]
        if is_separator(char):
            if not matched_separator:
                start_part = i + 1
                break
            continue
        if end == -1:
            matched_separator = False
            end = i + 1
        if char == alphabet.dot:
            if start_dot == -1:
                start_dot = i
            elif pre_dot_state != 1:
                pre_dot_state = 1
        elif start_dot != -1:
            pre_dot_state = -1

    if (
        start_dot == -1
        or end == -1
        or pre_dot_state == 0
        or (
            pre_dot_state == 1
            and start_dot == end - 1
            and start_dot == start_part + 1
        )
    ):
        return alphabet.empty
    return path[start_dot:end]


__all__ = ["extension", "last_component"]
