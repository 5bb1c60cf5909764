"""Host platform detection used to pick the default path flavor.

Keeping the decision in one place lets the package surface and the test
suite agree on which flavor ``import dualpath`` exposes.
"""

from __future__ import annotations

import os
import sys
import typing as t

from .flavor import Flavor

# Tests set this override to emulate another host (for example Windows)
# without spawning a different OS.
FLAVOR_OVERRIDE_ENV: t.Final[str] = "DUALPATH_FLAVOR_OVERRIDE"

IS_WINDOWS = os.name == "nt"

# Each entry pairs a platform prefix (as reported by ``sys.platform`` or
# written in the override) with the flavor it selects. Anything unmatched
# uses POSIX rules.
_WINDOWS_PREFIXES: t.Final[tuple[str, ...]] = ("win", "nt")


def _normalise(platform: str) -> str:
    """Return a lowercase version of *platform* suitable for prefix checks."""
    return platform.strip().lower()


def _current_platform(platform: str | None = None) -> str:
    """Return the effective platform name, honouring overrides."""
    if platform:
        return _normalise(platform)

    if override := os.getenv(FLAVOR_OVERRIDE_ENV):
        return _normalise(override)

    return _normalise(sys.platform)


def host_flavor(platform: str | None = None) -> Flavor:
    """Return the flavor matching *platform* (default: the current host)."""
    platform_name = _current_platform(platform)
    if platform_name.startswith(_WINDOWS_PREFIXES):
        return Flavor.WINDOWS
    return Flavor.POSIX


__all__ = ["FLAVOR_OVERRIDE_ENV", "IS_WINDOWS", "host_flavor"]
