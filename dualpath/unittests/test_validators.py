"""Tests for argument validation and the error hierarchy."""

from __future__ import annotations

import pathlib
import typing as t

import pytest

import dualpath
from dualpath import posix, win32
from dualpath._text import BINARY, TEXT, alphabet_for
from dualpath._validators import validate_path, validate_paths, validate_suffix
from dualpath.errors import DualPathError, InvalidArgumentTypeError


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("a/b", "a/b"),
        (b"a/b", b"a/b"),
        (bytearray(b"a/b"), b"a/b"),
        (memoryview(b"a/b"), b"a/b"),
        (pathlib.PurePosixPath("a/b"), "a/b"),
    ],
    ids=["str", "bytes", "bytearray", "memoryview", "pathlike"],
)
def test_validate_path_accepts(value: object, expected: str | bytes) -> None:
    """Text, byte sequences and path-like objects are accepted."""
    assert validate_path(value) == expected


@pytest.mark.parametrize("value", [None, 1, 1.5, ["a"], object()])
def test_validate_path_rejects(value: object) -> None:
    """Other values raise an error naming the argument and the type."""
    with pytest.raises(InvalidArgumentTypeError) as excinfo:
        validate_path(value, "to_path")
    err = excinfo.value
    assert err.name == "to_path"
    assert err.received is value
    assert str(err) == (
        'Invalid type for "to_path" argument, expecting str | bytes; '
        f"got {type(value).__name__}"
    )


def test_error_is_type_error() -> None:
    """Callers catching ``TypeError`` also see dualpath errors."""
    err = InvalidArgumentTypeError("path", 3)
    assert isinstance(err, TypeError)
    assert isinstance(err, DualPathError)
    assert dualpath.InvalidArgumentTypeError is InvalidArgumentTypeError


def test_validate_paths_converts_to_first_kind() -> None:
    """Later arguments take the kind of the first one."""
    alphabet, values = validate_paths(["a", b"b"])
    assert alphabet is TEXT
    assert values == ["a", "b"]

    alphabet, values = validate_paths([b"a", "b"])
    assert alphabet is BINARY
    assert values == [b"a", b"b"]


def test_validate_paths_empty_uses_text() -> None:
    """No arguments select the text alphabet."""
    assert validate_paths([]) == (TEXT, [])


def test_validate_suffix() -> None:
    """Suffixes follow the path kind and must be text or bytes."""
    assert validate_suffix(None, TEXT) is None
    assert validate_suffix(b".js", TEXT) == ".js"
    assert validate_suffix(".js", BINARY) == b".js"
    assert validate_suffix(bytearray(b".js")) == b".js"
    with pytest.raises(InvalidArgumentTypeError, match='"suffix"'):
        validate_suffix(1, TEXT)


def test_alphabet_for() -> None:
    """The alphabet tracks the value kind."""
    assert alphabet_for("x") is TEXT
    assert alphabet_for(b"x") is BINARY
    assert BINARY.kind is bytes
    assert TEXT.convert(b"x") == "x"


@pytest.mark.parametrize(
    ("call", "name"),
    [
        (lambda: posix.join("a", 1), "path"),
        (lambda: win32.resolve(None), "path"),
        (lambda: posix.normalize(2), "path"),
        (lambda: win32.isabs(2), "path"),
        (lambda: posix.relative(1, "a"), "from_path"),
        (lambda: win32.relative("a", 1), "to_path"),
        (lambda: posix.dirname(()), "path"),
        (lambda: win32.extname({}), "path"),
        (lambda: posix.basename("a", 1), "suffix"),
        (lambda: win32.basename(1), "path"),
        (lambda: posix.basename(1, 2), "suffix"),
        (lambda: win32.basename(None, 2.5), "suffix"),
    ],
)
def test_operations_reject_non_paths(
    call: t.Callable[[], object], name: str
) -> None:
    """Every operation validates its arguments before doing any work."""
    with pytest.raises(InvalidArgumentTypeError) as excinfo:
        call()
    assert excinfo.value.name == name
