"""POSIX path grammar: ``/`` is the only separator and the only root."""

from __future__ import annotations

import importlib
import logging
import typing as t

from . import platform as _platform
from ._components import extension, last_component
from ._roots import classify_posix
from ._segments import normalize_segments
from ._text import is_posix_separator
from ._validators import validate_path, validate_paths, validate_suffix
from .environment import WorkingDirectory, select_working_directory

if t.TYPE_CHECKING:  # pragma: no cover - used only for typing
    import types

    from ._text import AnyPath

logger = logging.getLogger(__name__)

sep: t.Final[str] = "/"
delimiter: t.Final[str] = ":"


def _posix_cwd(working_directory: WorkingDirectory) -> str:
    """Return the working directory in POSIX form.

    On Windows hosts the drive is dropped and backslashes become slashes so
    the result can anchor a POSIX path.
    """
    cwd = working_directory.current()
    if not _platform.IS_WINDOWS:
        return cwd
    cwd = cwd.replace("\\", "/")
    index = cwd.find("/")
    return cwd[index:] if index != -1 else "/"


def resolve(
    *paths: AnyPath, working_directory: WorkingDirectory | None = None
) -> AnyPath:
    """Resolve *paths* right to left into an absolute path.

    Arguments are prepended until one is absolute; the working directory is
    consulted only when none is. Empty arguments are ignored.
    """
    alphabet, values = validate_paths(paths)
    resolved = alphabet.empty
    resolved_absolute = False

    for path in reversed(values):
        if not path:
            continue
        resolved = path + alphabet.slash + resolved
        resolved_absolute = is_posix_separator(path[0:1])
        if resolved_absolute:
            break
    else:
        cwd = _posix_cwd(select_working_directory(working_directory))
        logger.debug("Resolving %r against working directory %s", resolved, cwd)
        if cwd:
            cwd = alphabet.convert(cwd)
            resolved = cwd + alphabet.slash + resolved
            resolved_absolute = is_posix_separator(cwd[0:1])

    resolved = normalize_segments(
        resolved, not resolved_absolute, alphabet.slash, is_posix_separator
    )
    if resolved_absolute:
        return alphabet.slash + resolved
    return resolved or alphabet.dot


def normalize(path: AnyPath) -> AnyPath:
    """Collapse redundant separators and ``.``/``..`` segments in *path*.

    A trailing separator survives normalisation, ``..`` segments above the
    root of an absolute path are dropped, and an empty path becomes ``.``.
    """
    alphabet, (value,) = validate_paths((path,))
    if not value:
        return alphabet.dot

    root = classify_posix(value)
    trailing_separator = is_posix_separator(value[-1:])
    tail = normalize_segments(
        value, not root.is_absolute, alphabet.slash, is_posix_separator
    )

    if not tail:
        if root.is_absolute:
            return alphabet.slash
        return alphabet.dot + alphabet.slash if trailing_separator else alphabet.dot
    if trailing_separator:
        tail += alphabet.slash
    return alphabet.slash + tail if root.is_absolute else tail


def isabs(path: AnyPath) -> bool:
    """Return ``True`` when *path* starts at the filesystem root."""
    return classify_posix(validate_path(path)).is_absolute


is_absolute = isabs


def join(*paths: AnyPath) -> AnyPath:
    """Join non-empty *paths* with ``/`` and normalise the result."""
    alphabet, values = validate_paths(paths)
    joined = alphabet.slash.join(value for value in values if value)
    if not joined:
        return alphabet.dot
    return normalize(joined)


def relative(
    from_path: AnyPath,
    to_path: AnyPath,
    *,
    working_directory: WorkingDirectory | None = None,
) -> AnyPath:
    """Return the path leading from *from_path* to *to_path*.

    Both arguments are resolved first, so relative inputs are taken relative
    to the working directory. Identical locations produce an empty path.
    """
    alphabet, (source, target) = validate_paths(
        (validate_path(from_path, "from_path"), validate_path(to_path, "to_path"))
    )
    if source == target:
        return alphabet.empty

    source = resolve(source, working_directory=working_directory)
    target = resolve(target, working_directory=working_directory)
    if source == target:
        return alphabet.empty

    # Both are absolute: skip the leading slash.
    source_start = 1
    source_end = len(source)
    source_length = source_end - source_start
    target_start = 1
    target_length = len(target) - target_start

    length = min(source_length, target_length)
    last_common_sep = -1
    i = 0
    while i < length:
        char = source[source_start + i : source_start + i + 1]
        if char != target[target_start + i : target_start + i + 1]:
            break
        if is_posix_separator(char):
            last_common_sep = i
        i += 1

    if i == length:
        if target_length > length:
            if is_posix_separator(target[target_start + i : target_start + i + 1]):
                # source is the exact base of target: '/foo/bar' -> '/foo/bar/baz'
                return target[target_start + i + 1 :]
            if i == 0:
                # source is the root: '/' -> '/foo'
                return target[target_start + i :]
        elif source_length > length:
            if is_posix_separator(source[source_start + i : source_start + i + 1]):
                # target is the exact base of source: '/foo/bar/baz' -> '/foo/bar'
                last_common_sep = i
            elif i == 0:
                # target is the root: '/foo/bar' -> '/'
                last_common_sep = 0

    ups: list[AnyPath] = []
    for index in range(source_start + last_common_sep + 1, source_end + 1):
        if index == source_end or is_posix_separator(source[index : index + 1]):
            ups.append(alphabet.dotdot)

    return alphabet.slash.join(ups) + target[target_start + last_common_sep :]


def dirname(path: AnyPath) -> AnyPath:
    """Return *path* without its final segment.

    Trailing separators are ignored. Rootless single segments yield ``.``.
    """
    alphabet, (value,) = validate_paths((path,))
    if not value:
        return alphabet.dot

    has_root = classify_posix(value).is_absolute
    end = -1
    matched_separator = True
    for i in range(len(value) - 1, 0, -1):
        if is_posix_separator(value[i : i + 1]):
            if not matched_separator:
                end = i
                break
        else:
            matched_separator = False

    if end == -1:
        return alphabet.slash if has_root else alphabet.dot
    if has_root and end == 1:
        return alphabet.slash * 2
    return value[:end]


def basename(path: AnyPath, suffix: str | bytes | None = None) -> AnyPath:
    """Return the final segment of *path*, minus *suffix* when it matches."""
    checked_suffix = validate_suffix(suffix)
    alphabet, (value,) = validate_paths((path,))
    return last_component(
        value, 0, is_posix_separator, validate_suffix(checked_suffix, alphabet)
    )


def extname(path: AnyPath) -> AnyPath:
    """Return the extension of the final segment of *path*, dot included."""
    _, (value,) = validate_paths((path,))
    return extension(value, 0, is_posix_separator)


def __getattr__(name: str) -> types.ModuleType:
    """Expose the sibling flavors as ``posix.posix`` and ``posix.win32``."""
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
