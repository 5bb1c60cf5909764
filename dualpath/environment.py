"""Working-directory collaborators consulted by ``resolve`` and ``relative``.

Path operations never read process state directly. They ask a
:class:`WorkingDirectory` for the current directory and, on Windows, for the
per-drive current directory that ``cmd.exe`` keeps in hidden ``=C:`` style
environment variables.
"""

from __future__ import annotations

import contextlib
import dataclasses as dc
import logging
import os
import threading
import typing as t

logger = logging.getLogger(__name__)

DRIVE_CWD_ENV_PREFIX: t.Final[str] = "="


def drive_cwd_from_environ(
    device: str, environ: t.Mapping[str, str] | None = None
) -> str | None:
    """Return the working directory recorded for *device*.

    *environ* defaults to ``os.environ``; POSIX hosts cannot hold ``=C:``
    style names there, so callers may pass any mapping instead.
    """
    if environ is None:
        environ = os.environ
    key = f"{DRIVE_CWD_ENV_PREFIX}{device}"
    return environ.get(key) or environ.get(key.upper())


def _missing_drive(device: str) -> str | None:
    """Report that no per-drive directory is known for *device*."""
    del device
    return None


@dc.dataclass(frozen=True, slots=True)
class WorkingDirectory:
    """Source of the directories relative paths are resolved against.

    Attributes
    ----------
    current : Callable[[], str]
        Returns the process-wide working directory.
    drive : Callable[[str], str | None]
        Returns the working directory of a drive such as ``"C:"`` or ``None``
        when the drive has none recorded.
    """

    current: t.Callable[[], str] = os.getcwd
    drive: t.Callable[[str], str | None] = drive_cwd_from_environ

    @classmethod
    def fixed(
        cls, cwd: str, drives: t.Mapping[str, str] | None = None
    ) -> WorkingDirectory:
        """Return a collaborator reporting *cwd* and the given drive directories.

        Drive keys are matched case-insensitively (``"c:"`` and ``"C:"`` are
        the same drive).
        """
        if not drives:
            return cls(current=lambda: cwd, drive=_missing_drive)
        table = {device.upper(): path for device, path in drives.items()}
        return cls(
            current=lambda: cwd, drive=lambda device: table.get(device.upper())
        )

    def drive_or_current(self, device: str) -> str:
        """Return the directory for *device*, falling back to :attr:`current`."""
        path = self.drive(device)
        if path:
            return path
        logger.debug(
            "No working directory recorded for %s; using process cwd", device
        )
        return self.current()


PROCESS_WORKING_DIRECTORY: t.Final[WorkingDirectory] = WorkingDirectory()

# Overrides are tracked per thread so concurrent callers cannot observe each
# other's fixed directories.
_state = threading.local()


def active_working_directory() -> WorkingDirectory:
    """Return the override active on this thread, or the process default."""
    stack: list[WorkingDirectory] = getattr(_state, "stack", [])
    return stack[-1] if stack else PROCESS_WORKING_DIRECTORY


def select_working_directory(
    working_directory: WorkingDirectory | None,
) -> WorkingDirectory:
    """Return *working_directory* when given, else the active collaborator."""
    if working_directory is not None:
        return working_directory
    return active_working_directory()


@contextlib.contextmanager
def use_working_directory(
    working_directory: WorkingDirectory | str,
) -> t.Iterator[WorkingDirectory]:
    """Resolve relative paths against *working_directory* within the block.

    A plain string is wrapped with :meth:`WorkingDirectory.fixed`. Blocks may
    be nested; leaving one restores the previous collaborator.
    """
    if isinstance(working_directory, str):
        working_directory = WorkingDirectory.fixed(working_directory)
    stack: list[WorkingDirectory] = getattr(_state, "stack", None) or []
    _state.stack = stack
    stack.append(working_directory)
    logger.debug("Activated working directory override %r", working_directory)
    try:
        yield working_directory
    finally:
        stack.pop()
        logger.debug("Restored working directory override depth %d", len(stack))


def reset_working_directory() -> None:
    """Drop every override active on the current thread."""
    _state.stack = []


__all__ = [
    "DRIVE_CWD_ENV_PREFIX",
    "PROCESS_WORKING_DIRECTORY",
    "WorkingDirectory",
    "active_working_directory",
    "drive_cwd_from_environ",
    "reset_working_directory",
    "select_working_directory",
    "use_working_directory",
]
