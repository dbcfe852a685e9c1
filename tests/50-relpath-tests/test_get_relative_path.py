# tests/50-relpath-tests/test_get_relative_path.py
"""Tests for pocket_relpath.relpath.get_relative_path()."""

import os
from pathlib import Path

import pytest

import pocket_relpath.relpath as mod_relpath
import pocket_relpath.separators as mod_separators
import pocket_relpath.utils_logs as mod_logs

# ---------------------------------------------------------------------------
# POSIX flavor
# ---------------------------------------------------------------------------


@pytest.mark.parametrize(
    "relative_to,path,expected",
    [
        ("/Foo", "/Bar", "../Bar"),
        ("/Foo", "/Foo/Bar", "Bar"),
        ("/Foo/Bar", "/Bar/Bar", "../../Bar/Bar"),
        ("/Foo/Foo", "/Foo/Bar", "../Bar"),
        ("/Foo/Bar/", "/Foo/Bar", "."),
        ("/Foo/Bar", "/Foo/Bar/", "."),
        ("/Foo", "/Foo/Bar/", "Bar/"),
        ("/Foo/Bar", "/Foo", ".."),
        ("/Foo", "/", ".."),
        ("/", "/Foo", "Foo"),
        ("/", "/", "."),
        ("/Foodie", "/Foobar", "../Foobar"),
        ("/Foo", "/Foodie/x", "../Foodie/x"),
        ("/a/b/c", "/a/x/y", "../../x/y"),
        ("/foo", "/FOO", "../FOO"),
    ],
)
def test_get_relative_path_posix(relative_to: str, path: str, expected: str) -> None:
    """One .. per source segment past the common prefix, then the target rest."""
    # --- execute ---
    result = mod_relpath.get_relative_path(relative_to, path, flavor="posix")

    # --- verify ---
    assert result == expected


def test_get_relative_path_normalizes_dot_segments() -> None:
    """Inputs are canonicalized before they are compared."""
    # --- execute and verify ---
    assert (
        mod_relpath.get_relative_path(
            "/Foo/./Bar/../Baz", "/Foo//Baz/Qux", flavor="posix"
        )
        == "Qux"
    )


def test_get_relative_path_accepts_pathlike() -> None:
    # --- execute and verify ---
    result = mod_relpath.get_relative_path(
        Path("/srv/app"), Path("/srv/data/x.txt"), flavor="posix"
    )
    assert result == "../data/x.txt"


@pytest.mark.skipif(os.name == "nt", reason="POSIX cwd required")
def test_get_relative_path_resolves_relative_inputs_against_cwd(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    """Relative inputs become absolute under the current directory first."""
    # --- patch and execute ---
    monkeypatch.chdir(tmp_path)
    result = mod_relpath.get_relative_path("a/b", "a/c/d", flavor="posix")

    # --- verify ---
    assert result == "../c/d"


# ---------------------------------------------------------------------------
# Windows flavor
# ---------------------------------------------------------------------------


@pytest.mark.parametrize(
    "relative_to,path,expected",
    [
        ("C:\\Foo", "C:\\Bar", "..\\Bar"),
        ("C:\\Foo", "C:\\Foo\\Bar", "Bar"),
        ("C:\\Foo\\Bar", "C:\\Bar\\Bar", "..\\..\\Bar\\Bar"),
        ("C:\\Foo\\Foo", "C:\\Foo\\Bar", "..\\Bar"),
        ("C:\\Foo\\", "C:\\Foo", "."),
        ("C:\\Foo", "c:\\FOO\\bar", "bar"),
        ("c:\\foo", "C:\\Foo", "."),
        ("C:/Foo/Bar", "C:/Foo/Baz", "..\\Baz"),
        ("C:\\Foo", "C:\\Foo\\Bar\\", "Bar\\"),
        ("C:\\", "C:\\Foo", "Foo"),
    ],
)
def test_get_relative_path_windows(relative_to: str, path: str, expected: str) -> None:
    """Backslash output, either separator accepted, case ignored."""
    # --- execute ---
    result = mod_relpath.get_relative_path(relative_to, path, flavor="windows")

    # --- verify ---
    assert result == expected


@pytest.mark.parametrize(
    "relative_to,path",
    [
        ("C:\\Foo", "D:\\Bar"),
        ("D:\\", "C:\\Foo\\Bar"),
    ],
)
def test_get_relative_path_different_roots_returns_target(
    relative_to: str, path: str
) -> None:
    """No relative form exists across drives."""
    # --- execute and verify ---
    assert mod_relpath.get_relative_path(relative_to, path, flavor="windows") == path


# ---------------------------------------------------------------------------
# Canonicalization
# ---------------------------------------------------------------------------


def test_custom_canonicalizer_is_used_for_both_inputs() -> None:
    """An injected canonicalizer replaces the built-in one."""
    # --- setup ---
    seen: list[str] = []

    def canon(p: str) -> str:
        seen.append(p)
        return "/root/" + p

    # --- execute ---
    result = mod_relpath.get_relative_path(
        "x/y", "x/z", flavor="posix", canonicalizer=canon
    )

    # --- verify ---
    assert seen == ["x/y", "x/z"]
    assert result == "../z"


@pytest.mark.parametrize(
    "flavor,raw,expected",
    [
        ("posix", "/Foo/Bar/", "/Foo/Bar/"),
        ("posix", "/Foo//Bar/../Baz", "/Foo/Baz"),
        ("posix", "/", "/"),
        ("windows", "C:/Foo/Bar/", "C:\\Foo\\Bar\\"),
        ("windows", "C:\\Foo\\.\\Bar", "C:\\Foo\\Bar"),
        ("windows", "C:\\", "C:\\"),
    ],
)
def test_canonicalize_keeps_trailing_separator(
    flavor: str, raw: str, expected: str
) -> None:
    # --- setup ---
    profile = mod_separators.get_separator_profile(flavor)

    # --- execute and verify ---
    assert mod_relpath.canonicalize(raw, profile) == expected


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------


@pytest.mark.parametrize(
    "relative_to,path,param",
    [
        ("", "/Foo", "relative_to"),
        (None, "/Foo", "relative_to"),
        ("/Foo", "", "path"),
        ("/Foo", None, "path"),
        ("", "", "relative_to"),
    ],
)
def test_empty_arguments_raise(
    relative_to: str | None, path: str | None, param: str
) -> None:
    """Empty or missing inputs are a contract violation."""
    # --- execute ---
    with pytest.raises(mod_relpath.ArgumentError) as exc_info:
        mod_relpath.get_relative_path(relative_to, path, flavor="posix")

    # --- verify ---
    assert exc_info.value.param_name == param
    assert isinstance(exc_info.value, ValueError)


def test_unknown_flavor_raises_value_error() -> None:
    # --- execute and verify ---
    with pytest.raises(ValueError, match="Unknown path flavor"):
        mod_relpath.get_relative_path("/a", "/b", flavor="vms")


def test_trace_logging_describes_decisions(capsys: pytest.CaptureFixture[str]) -> None:
    """At trace level the builder reports its inputs and result."""
    # --- execute ---
    with mod_logs.temporary_log_level("trace"):
        mod_relpath.get_relative_path("/Foo", "/Bar", flavor="posix")

    # --- verify ---
    out = capsys.readouterr().out
    assert "[relpath]" in out
    assert "'../Bar'" in out


@pytest.mark.parametrize(
    "value,expected",
    [
        ("/Foo", "/Foo"),
        (Path("/Foo/Bar"), str(Path("/Foo/Bar"))),
    ],
)
def test_require_path_returns_string(value: str | Path, expected: str) -> None:
    # --- execute and verify ---
    assert mod_relpath.require_path(value, "path") == expected


@pytest.mark.parametrize("value", ["", None])
def test_require_path_rejects_empty(value: str | None) -> None:
    # --- execute and verify ---
    with pytest.raises(mod_relpath.ArgumentError) as exc_info:
        mod_relpath.require_path(value, "relative_to")
    assert exc_info.value.param_name == "relative_to"


@pytest.mark.skipif(os.name == "nt", reason="POSIX host cwd required")
def test_canonicalize_relative_windows_input_uses_host_cwd(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    """A relative input is joined onto the host cwd even for another flavor."""
    # --- setup ---
    profile = mod_separators.get_separator_profile("windows")

    # --- patch and execute ---
    monkeypatch.chdir(tmp_path)
    result = mod_relpath.canonicalize("foo", profile)

    # --- verify ---
    assert result == os.getcwd().replace("/", "\\") + "\\foo"
