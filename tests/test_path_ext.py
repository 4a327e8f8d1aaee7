"""
Summary: Tests for the PathExt method-call wrapper.
Why: The wrapper must behave exactly like the free functions for every input type.
"""

from __future__ import annotations

import os
from pathlib import Path, PurePath, PureWindowsPath

import pytest

import pathext
from pathext import PathExt, UnknownPathFlavorError, UnsupportedPathError, ext


def test_readme_examples() -> None:
    assert PathExt("/some/path").has_component("path")
    assert PathExt("/some/path").contains("some")
    assert PathExt("/this/and/that/").starts_or_ends_with("/")


@pytest.mark.parametrize(
    "value",
    ["/opt/archive.tar.gz", b"/opt/archive.tar.gz", Path("/opt/archive.tar.gz"), PurePath("/opt/archive.tar.gz")],
    ids=["str", "bytes", "Path", "PurePath"],
)
def test_methods_match_free_functions(value: object) -> None:
    wrapped = PathExt(value)  # pyright: ignore[reportArgumentType]
    plain = value  # pyright: ignore[reportUnknownVariableType]

    assert wrapped.contains("tar") == pathext.contains(plain, "tar")  # pyright: ignore[reportArgumentType]
    assert wrapped.has_component("opt") == pathext.has_component(plain, "opt")  # pyright: ignore[reportArgumentType]
    assert wrapped.starts_or_ends_with("/opt") == pathext.starts_or_ends_with(plain, "/opt")  # pyright: ignore[reportArgumentType]
    assert wrapped.ends_with_extensions(".tar.gz") == pathext.ends_with_extensions(plain, ".tar.gz")  # pyright: ignore[reportArgumentType]
    assert wrapped.strip_extensions() == pathext.strip_extensions(plain) == "/opt/archive"  # pyright: ignore[reportArgumentType]
    assert wrapped.strip_prefix_if_needed("/opt") == PurePath("archive.tar.gz")


def test_wrapper_is_pathlike() -> None:
    wrapped = ext("/usr/local/aardvark")
    assert os.fspath(wrapped) == "/usr/local/aardvark"
    assert Path(wrapped) == Path("/usr/local/aardvark")
    assert pathext.contains(wrapped, "local")


def test_wrapping_a_wrapper_unwraps() -> None:
    inner = PathExt("/a/b/")
    outer = PathExt(inner)
    assert outer.value == "/a/b/"
    assert outer == inner


def test_wrapper_keeps_raw_text() -> None:
    assert PathExt("/a/b/").text == "/a/b/"
    assert PathExt(b"/a/\xff").text is None


def test_wrapper_components_and_flavor() -> None:
    wrapped = PathExt("C:\\media\\Track.flac", flavor="windows")
    assert wrapped.components == ("C:\\", "media", "Track.flac")
    assert isinstance(wrapped.as_pure_path(), PureWindowsPath)
    assert wrapped.has_component("media")
    assert wrapped.strip_prefix_if_needed("C:\\media") == PureWindowsPath("Track.flac")


def test_wrapper_is_frozen() -> None:
    wrapped = PathExt("/a")
    with pytest.raises(AttributeError):
        wrapped.value = "/b"  # pyright: ignore[reportAttributeAccessIssue]


def test_wrapper_rejects_non_paths() -> None:
    with pytest.raises(UnsupportedPathError):
        _ = PathExt(42)  # pyright: ignore[reportArgumentType]


def test_operations_never_fail_on_edge_inputs() -> None:
    """Empty paths, empty patterns and undecodable paths all yield values."""

    for value in ("", b"", b"\xff", "\udcff", Path(""), "/"):
        wrapped = PathExt(value)
        assert isinstance(wrapped.contains(""), bool)
        assert isinstance(wrapped.has_component(""), bool)
        assert isinstance(wrapped.starts_or_ends_with(""), bool)
        assert isinstance(wrapped.ends_with_extensions(""), bool)
        assert wrapped.strip_extensions() in (None, "", "/", ".")
        assert isinstance(wrapped.strip_prefix_if_needed(""), PurePath)


def test_wrapper_rejects_unknown_flavor() -> None:
    """A bad flavor fails when the wrapper is built, not on first structural call."""

    with pytest.raises(UnknownPathFlavorError):
        _ = PathExt("/a", flavor="amiga")

    assert PathExt("/a", flavor="POSIX").has_component("a")
