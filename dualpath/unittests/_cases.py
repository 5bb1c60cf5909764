"""Case tables shared by the POSIX and Windows grammar tests."""

from __future__ import annotations

# Cases shared with win32.join, which writes backslashes instead.
JOIN_CASES: list[tuple[tuple[str, ...], str]] = [
    ((".", "x/b", "..", "/b/c.js"), "x/b/c.js"),
    ((), "."),
    (("/.", "x/b", "..", "/b/c.js"), "/x/b/c.js"),
    (("/foo", "../../../bar"), "/bar"),
    (("foo", "../../../bar"), "../../bar"),
    (("foo/", "../../../bar"), "../../bar"),
    (("foo/x", "../../../bar"), "../bar"),
    (("foo/x", "./bar"), "foo/x/bar"),
    (("foo/x/", "./bar"), "foo/x/bar"),
    (("foo/x/", ".", "bar"), "foo/x/bar"),
    (("./",), "./"),
    ((".", "./"), "./"),
    ((".", ".", "."), "."),
    ((".", "./", "."), "."),
    ((".", "/./", "."), "."),
    ((".", "/////./", "."), "."),
    ((".",), "."),
    (("", "."), "."),
    (("", "foo"), "foo"),
    (("foo", "/bar"), "foo/bar"),
    (("", "/foo"), "/foo"),
    (("", "", "/foo"), "/foo"),
    (("", "", "foo"), "foo"),
    (("foo", ""), "foo"),
    (("foo/", ""), "foo/"),
    (("foo", "", "/bar"), "foo/bar"),
    (("./", "..", "/foo"), "../foo"),
    (("./", "..", "..", "/foo"), "../../foo"),
    ((".", "..", "..", "/foo"), "../../foo"),
    (("", "..", "..", "/foo"), "../../foo"),
    (("/",), "/"),
    (("/", "."), "/"),
    (("/", ".."), "/"),
    (("/", "..", ".."), "/"),
    (("",), "."),
    (("", ""), "."),
    ((" /foo",), " /foo"),
    ((" ", "foo"), " /foo"),
    ((" ", "."), " "),
    ((" ", "/"), " /"),
    ((" ", ""), " "),
    (("/", "foo"), "/foo"),
    (("/", "/foo"), "/foo"),
    (("/", "//foo"), "/foo"),
    (("/", "", "/foo"), "/foo"),
    (("", "/", "foo"), "/foo"),
    (("", "/", "/foo"), "/foo"),
]

# The extension table is shared with win32.extname.
EXTNAME_CASES: list[tuple[str, str]] = [
    ("", ""),
    ("/path/to/file", ""),
    ("/path/to/file.ext", ".ext"),
    ("/path.to/file.ext", ".ext"),
    ("/path.to/file", ""),
    ("/path.to/.file", ""),
    ("/path.to/.file.ext", ".ext"),
    ("/path/to/f.ext", ".ext"),
    ("/path/to/..ext", ".ext"),
    ("/path/to/..", ""),
    ("file", ""),
    ("file.ext", ".ext"),
    (".file", ""),
    (".file.ext", ".ext"),
    ("/file", ""),
    ("/file.ext", ".ext"),
    ("/.file", ""),
    ("/.file.ext", ".ext"),
    (".path/file.ext", ".ext"),
    ("file.ext.ext", ".ext"),
    ("file.", "."),
    (".", ""),
    ("./", ""),
    (".file.", "."),
    (".file..", "."),
    ("..", ""),
    ("../", ""),
    ("..file.ext", ".ext"),
    ("..file", ".file"),
    ("..file.", "."),
    ("..file..", "."),
    ("...", "."),
    ("...ext", ".ext"),
    ("....", "."),
    ("file.ext/", ".ext"),
    ("file.ext//", ".ext"),
    ("file/", ""),
    ("file//", ""),
    ("file./", "."),
    ("file.//", "."),
]
