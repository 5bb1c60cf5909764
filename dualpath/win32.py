"""Windows path grammar: drives, UNC shares, and both slash directions.

Either ``/`` or ``\\`` separates segments on input; output always uses
``\\``. Roots come in four shapes: ``\\`` (current drive root), ``C:\\``
(drive absolute), ``C:`` (drive relative), and ``\\\\server\\share`` (UNC).
"""

from __future__ import annotations

import importlib
import logging
import typing as t

from ._components import extension, last_component
from ._roots import classify_win32
from ._segments import normalize_segments
from ._text import TEXT, is_drive_letter, is_separator
from ._validators import validate_path, validate_paths, validate_suffix
from .environment import WorkingDirectory, select_working_directory

if t.TYPE_CHECKING:  # pragma: no cover - used only for typing
    import types

    from ._text import Alphabet, AnyPath

logger = logging.getLogger(__name__)

sep: t.Final[str] = "\\"
delimiter: t.Final[str] = ";"

_DRIVE_LENGTH: t.Final[int] = 2


def _drive_prefix_length(path: str | bytes) -> int:
    """Return 2 when *path* starts with a drive such as ``C:``, else 0."""
    if is_drive_letter(path[0:1]) and path[1:2] in (":", b":"):
        return _DRIVE_LENGTH
    return 0


def _drive_cwd(
    device: AnyPath,
    alphabet: Alphabet[t.Any],
    working_directory: WorkingDirectory,
) -> AnyPath:
    """Return the working directory of the drive named by *device*.

    Falls back to the process directory, and to the drive root when that
    directory lives on another drive.
    """
    path = alphabet.convert(
        working_directory.drive_or_current(TEXT.convert(device))
    )
    if (
        path[:_DRIVE_LENGTH].lower() != device.lower()
        and path[2:3] == alphabet.backslash
    ):
        logger.debug(
            "Working directory %r is not on %r; using its root", path, device
        )
        return device + alphabet.backslash
    return path


def resolve(
    *paths: AnyPath, working_directory: WorkingDirectory | None = None
) -> AnyPath:
    """Resolve *paths* right to left into an absolute path.

    Resolution stops once both an absolute path and a device are known.
    Arguments naming a different device than the one already chosen are
    skipped. When the arguments run out, the working directory is consulted:
    the drive-specific one for drive-relative results, the process one
    otherwise. The result is ``.`` when nothing could be established.
    """
    alphabet, values = validate_paths(paths)
    resolved_device = alphabet.empty
    resolved_tail = alphabet.empty
    resolved_absolute = False

    for i in range(len(values) - 1, -2, -1):
        if i >= 0:
            path = values[i]
            if not path:
                continue
        else:
            collaborator = select_working_directory(working_directory)
            if resolved_device:
                path = _drive_cwd(resolved_device, alphabet, collaborator)
            else:
                path = alphabet.convert(collaborator.current())
            logger.debug(
                "Resolving %r against working directory %r", resolved_tail, path
            )
            if not path:
                continue

        root = classify_win32(path)
        if root.device:
            if not resolved_device:
                resolved_device = root.device
            elif root.device.lower() != resolved_device.lower():
                # Another device: not applicable to this result.
                continue

        if resolved_absolute:
            if resolved_device:
                break
        else:
            resolved_tail = (
                path[root.root_end :] + alphabet.backslash + resolved_tail
            )
            resolved_absolute = root.is_absolute
            if resolved_absolute and resolved_device:
                break

    resolved_tail = normalize_segments(
        resolved_tail, not resolved_absolute, alphabet.backslash, is_separator
    )
    if resolved_absolute:
        return resolved_device + alphabet.backslash + resolved_tail
    return resolved_device + resolved_tail or alphabet.dot


def normalize(path: AnyPath) -> AnyPath:
    """Collapse redundant separators and ``.``/``..`` segments in *path*.

    Forward slashes become backslashes, the device is kept as written, and a
    trailing separator survives. ``..`` may climb above a drive-relative or
    rootless start (``C:..\\abc`` is already normal) but never above an
    absolute root.
    """
    alphabet, (value,) = validate_paths((path,))
    if not value:
        return alphabet.dot

    root = classify_win32(value)
    tail = alphabet.empty
    if root.root_end < len(value):
        tail = normalize_segments(
            value[root.root_end :],
            not root.is_absolute,
            alphabet.backslash,
            is_separator,
        )
    if not tail and not root.is_absolute:
        tail = alphabet.dot
    if tail and is_separator(value[-1:]):
        tail += alphabet.backslash

    if root.is_absolute:
        return root.device + alphabet.backslash + tail
    return root.device + tail


def isabs(path: AnyPath) -> bool:
    """Return ``True`` for rooted paths: ``\\foo``, ``C:\\foo``, UNC shares.

    Drive-relative paths such as ``C:foo`` are not absolute.
    """
    return classify_win32(validate_path(path)).is_absolute


is_absolute = isabs


def _collapse_leading_separators(
    joined: AnyPath, first: AnyPath, alphabet: Alphabet[t.Any]
) -> AnyPath:
    """Keep ``join`` output from reading as a UNC root by accident.

    The leading separators are left alone only when *first* (the first
    non-empty argument) begins with exactly two separators followed by a
    name, which is taken as a deliberate ``\\\\server`` prefix. Otherwise a
    leading run of two or more separators becomes a single one.
    """
    count = 0
    if is_separator(first[0:1]):
        count = 1
        if is_separator(first[1:2]):
            count = 2
            if len(first) > 2:  # noqa: PLR2004
                if not is_separator(first[2:3]):
                    return joined
                count = 3

    while count < len(joined) and is_separator(joined[count : count + 1]):
        count += 1
    if count >= 2:  # noqa: PLR2004
        return alphabet.backslash + joined[count:]
    return joined


def join(*paths: AnyPath) -> AnyPath:
    """Join non-empty *paths* with ``\\`` and normalise the result.

    ``join("//server", "share")`` builds a UNC root, while accidental double
    separators such as ``join("//", "foo")`` do not.
    """
    alphabet, values = validate_paths(paths)
    parts = [value for value in values if value]
    if not parts:
        return alphabet.dot
    joined = alphabet.backslash.join(parts)
    return normalize(_collapse_leading_separators(joined, parts[0], alphabet))


def _trim_backslashes(path: AnyPath, alphabet: Alphabet[t.Any]) -> tuple[int, int]:
    """Return the bounds of *path* without leading and trailing backslashes.

    At least one character is kept after the start, so only UNC roots such as
    ``\\\\server\\share\\`` lose a trailing separator.
    """
    start = 0
    while start < len(path) and path[start : start + 1] == alphabet.backslash:
        start += 1
    end = len(path)
    while end - 1 > start and path[end - 1 : end] == alphabet.backslash:
        end -= 1
    return start, end


def relative(
    from_path: AnyPath,
    to_path: AnyPath,
    *,
    working_directory: WorkingDirectory | None = None,
) -> AnyPath:
    """Return the path leading from *from_path* to *to_path*.

    Both arguments are resolved first. Comparison ignores case, but the
    returned segments keep the casing of the resolved *to_path*. Paths on
    different devices have no relative form, so the resolved *to_path* is
    returned as is.
    """
    alphabet, (source, target) = validate_paths(
        (validate_path(from_path, "from_path"), validate_path(to_path, "to_path"))
    )
    if source == target:
        return alphabet.empty

    source_original = resolve(source, working_directory=working_directory)
    target_original = resolve(target, working_directory=working_directory)
    if source_original == target_original:
        return alphabet.empty

    source = source_original.lower()
    target = target_original.lower()
    if source == target:
        return alphabet.empty

    source_start, source_end = _trim_backslashes(source, alphabet)
    source_length = source_end - source_start
    target_start, target_end = _trim_backslashes(target, alphabet)
    target_length = target_end - target_start

    length = min(source_length, target_length)
    last_common_sep = -1
    i = 0
    while i < length:
        char = source[source_start + i : source_start + i + 1]
        if char != target[target_start + i : target_start + i + 1]:
            break
        if char == alphabet.backslash:
            last_common_sep = i
        i += 1

    if i != length:
        if last_common_sep == -1:
            return target_original
    else:
        if target_length > length:
            if target[target_start + i : target_start + i + 1] == alphabet.backslash:
                # source is the exact base of target: 'C:\\foo' -> 'C:\\foo\\bar'
                return target_original[target_start + i + 1 :]
            if i == _DRIVE_LENGTH:
                # source is the drive root: 'C:\\' -> 'C:\\foo'
                return target_original[target_start + i :]
        if source_length > length:
            if source[source_start + i : source_start + i + 1] == alphabet.backslash:
                # target is the exact base of source: 'C:\\foo\\bar' -> 'C:\\foo'
                last_common_sep = i
            elif i == _DRIVE_LENGTH:
                # target is the drive root: 'C:\\foo\\bar' -> 'C:\\'
                last_common_sep = 3
        if last_common_sep == -1:
            last_common_sep = 0

    ups: list[AnyPath] = []
    for index in range(source_start + last_common_sep + 1, source_end + 1):
        if index == source_end or source[index : index + 1] == alphabet.backslash:
            ups.append(alphabet.dotdot)

    target_start += last_common_sep
    if ups:
        return (
            alphabet.backslash.join(ups)
            + target_original[target_start:target_end]
        )
    if target_original[target_start : target_start + 1] == alphabet.backslash:
        target_start += 1
    return target_original[target_start:target_end]


def dirname(path: AnyPath) -> AnyPath:
    """Return *path* without its final segment.

    The root is never removed: ``dirname("C:\\\\foo")`` is ``C:\\\\``, a bare
    UNC root is returned unchanged, and rootless single segments yield ``.``.
    """
    alphabet, (value,) = validate_paths((path,))
    length = len(value)
    if not length:
        return alphabet.dot
    if length == 1:
        return value if is_separator(value) else alphabet.dot

    root = classify_win32(value)
    if root.is_unc:
        if root.root_end == length:
            return value
        # The separator after the share belongs to the root.
        root_end = root.root_end + 1
    else:
        root_end = root.root_end

    end = -1
    matched_separator = True
    for i in range(length - 1, root_end - 1, -1):
        if is_separator(value[i : i + 1]):
            if not matched_separator:
                end = i
                break
        else:
            matched_separator = False

    if end == -1:
        if not root_end:
            return alphabet.dot
        end = root_end
    return value[:end]


def basename(path: AnyPath, suffix: str | bytes | None = None) -> AnyPath:
    """Return the final segment of *path*, minus *suffix* when it matches.

    A leading drive is skipped so ``basename("C:")`` is empty and
    ``basename("C:foo")`` is ``foo``.
    """
    checked_suffix = validate_suffix(suffix)
    alphabet, (value,) = validate_paths((path,))
    return last_component(
        value,
        _drive_prefix_length(value),
        is_separator,
        validate_suffix(checked_suffix, alphabet),
    )


def extname(path: AnyPath) -> AnyPath:
    """Return the extension of the final segment of *path*, dot included."""
    _, (value,) = validate_paths((path,))
    return extension(value, _drive_prefix_length(value), is_separator)


def __getattr__(name: str) -> types.ModuleType:
    """Expose the sibling flavors as ``win32.posix`` and ``win32.win32``."""
    if name in {"posix", "win32"}:
        return importlib.import_module(f"{__package__}.{name}")
    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)


__all__ = [
    "basename",
    "delimiter",
    "dirname",
    "extname",
    "is_absolute",
    "isabs",
    "join",
    "normalize",
    "relative",
    "resolve",
    "sep",
]
