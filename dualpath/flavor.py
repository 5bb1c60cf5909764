"""Enumeration of the supported path grammars."""

from __future__ import annotations

import enum
import importlib
import typing as t

if t.TYPE_CHECKING:  # pragma: no cover - used only for typing
    import types


class Flavor(enum.StrEnum):
    """Path grammar variants, valued by the name of their module."""

    POSIX = "posix"
    WINDOWS = "win32"

    @property
    def sep(self) -> str:
        """Return the separator written by this flavor."""
        return self.module.sep

    @property
    def alt_seps(self) -> tuple[str, ...]:
        """Return every separator accepted on input."""
        # Both grammars read ``/``; Windows adds its own separator.
        return tuple(dict.fromkeys((self.module.sep, "/")))

    @property
    def delimiter(self) -> str:
        """Return the delimiter used in path lists such as ``PATH``."""
        return self.module.delimiter

    @property
    def module(self) -> types.ModuleType:
        """Return the module implementing this flavor."""
        return importlib.import_module(f"{__package__}.{self.value}")


__all__ = ["Flavor"]
