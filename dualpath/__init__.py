"""POSIX and Windows path grammar without filesystem access.

``dualpath.posix`` and ``dualpath.win32`` implement the same operations for
their grammars; the package itself re-exports the flavor matching the host
(see :func:`dualpath.platform.host_flavor`).
"""

from __future__ import annotations

from . import posix, win32
from .environment import WorkingDirectory, use_working_directory
from .errors import DualPathError, InvalidArgumentTypeError
from .flavor import Flavor
from .platform import FLAVOR_OVERRIDE_ENV, host_flavor

_default = host_flavor().module

basename = _default.basename
delimiter: str = _default.delimiter
dirname = _default.dirname
extname = _default.extname
is_absolute = _default.is_absolute
isabs = _default.isabs
join = _default.join
normalize = _default.normalize
relative = _default.relative
resolve = _default.resolve
sep: str = _default.sep

__all__ = [
    "FLAVOR_OVERRIDE_ENV",
    "DualPathError",
    "Flavor",
    "InvalidArgumentTypeError",
    "WorkingDirectory",
    "basename",
    "delimiter",
    "dirname",
    "extname",
    "host_flavor",
    "is_absolute",
    "isabs",
    "join",
    "normalize",
    "posix",
    "relative",
    "resolve",
    "sep",
    "use_working_directory",
    "win32",
]
