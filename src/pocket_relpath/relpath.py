# src/pocket_relpath/relpath.py
"""Relative paths between two absolute paths.

Two strings are compared character by character, the shared prefix is
snapped back to a segment boundary, and the leftover segments of the
source path become `..` hops in front of the leftover part of the target.

Examples (POSIX flavor):
    /Foo       → /Bar       = ../Bar
    /Foo       → /Foo/Bar   = Bar
    /Foo/Bar   → /Bar/Bar   = ../../Bar/Bar
    /Foo/Foo   → /Foo/Bar   = ../Bar
"""

import ntpath
import os
import posixpath
from collections.abc import Callable

from .constants import CURRENT_DIR, PARENT_DIR
from .separators import get_separator_profile, is_separator
from .types import PathFlavor, SeparatorProfile
from .utils_logs import get_logger

StrPath = str | os.PathLike[str]


class ArgumentError(ValueError):
    """Raised when a required path argument is empty or missing."""

    def __init__(self, param_name: str) -> None:
        self.param_name = param_name
        xmsg = f"Argument {param_name!r} must be a non-empty path"
        super().__init__(xmsg)


def require_path(value: StrPath | None, param_name: str) -> str:
    """Return `value` as a string, or raise ArgumentError if it is empty or None."""
    text = "" if value is None else os.fspath(value)
    if not text:
        raise ArgumentError(param_name)
    return text


# --------------------------------------------------------------------------- #
# Common-prefix scanning
# --------------------------------------------------------------------------- #


def _fold(c: str) -> str:
    """Uppercase a single character, leaving it alone if it has no
    one-to-one uppercase form (e.g. 'ß' → 'SS' is not applied)."""
    upper = c.upper()
    return upper if len(upper) == 1 else c


def equal_starting_character_count(first: str, second: str, ignore_case: bool) -> int:
    """Count the leading characters two strings share, optionally ignoring case."""
    if not first or not second:
        return 0

    count = 0
    for left, right in zip(first, second):
        if left != right and not (ignore_case and _fold(left) == _fold(right)):
            break
        count += 1
    return count


def common_path_length(
    first: str,
    second: str,
    ignore_case: bool,
    profile: SeparatorProfile | None = None,
) -> int:
    """Return the length of the shared prefix, aligned to a segment boundary.

    Only `first` is consulted when retracting into a partial segment.
    """
    if profile is None:
        profile = get_separator_profile()

    common = equal_starting_character_count(first, second, ignore_case)

    if common == 0:
        return 0

    # first is fully shared and ends where a segment of second ends
    if common == len(first) and (
        common == len(second) or is_separator(second[common], profile)
    ):
        return common

    if common == len(second) and is_separator(first[common], profile):
        return common

    # matched into the middle of a segment, e.g. /Foodie vs /Foobar
    while common > 0 and not is_separator(first[common - 1], profile):
        common -= 1

    return common


# --------------------------------------------------------------------------- #
# Canonicalization
# --------------------------------------------------------------------------- #


def canonicalize(path: StrPath, profile: SeparatorProfile | None = None) -> str:
    """Return the absolute, normalized form of `path` for the given flavor.

    Lexical only; nothing is looked up on disk. A trailing separator on the
    input survives normalization.

    Relative inputs are joined onto the host process's current directory,
    whatever the flavor. With a flavor that differs from the host (Windows
    rules on a POSIX host, say) the result is rooted at the host cwd, e.g.
    `foo` becomes `\\root\\work\\foo`. Pass absolute paths in that case.
    """
    if profile is None:
        profile = get_separator_profile()

    raw = os.fspath(path)
    pathmod = ntpath if profile["flavor"] == "windows" else posixpath
    full = pathmod.abspath(raw)

    if (
        raw
        and is_separator(raw[-1], profile)
        and not is_separator(full[-1], profile)
    ):
        full += profile["primary"]
    return full


# --------------------------------------------------------------------------- #
# Relative path builder
# --------------------------------------------------------------------------- #


def get_relative_path(
    relative_to: StrPath | None,
    path: StrPath | None,
    *,
    flavor: PathFlavor | str | None = None,
    canonicalizer: Callable[[str], str] | None = None,
) -> str:
    """Return `path` expressed relative to the directory `relative_to`.

    Both inputs are canonicalized first. When they do not share a root
    (e.g. different drives), the canonical `path` is returned as is.

    Raises:
        ArgumentError: if either argument is empty or None.
    """
    relative_to = require_path(relative_to, "relative_to")
    path = require_path(path, "path")

    logger = get_logger()
    profile = get_separator_profile(flavor)
    ignore_case = profile["ignore_case"]

    if canonicalizer is None:
        source = canonicalize(relative_to, profile)
        target = canonicalize(path, profile)
    else:
        source = canonicalizer(relative_to)
        target = canonicalizer(path)

    logger.trace(
        "[relpath] %r → %r (flavor=%s)", source, target, profile["flavor"]
    )

    # different roots (drives) cannot be bridged with ..
    source_root, target_root = source[:1], target[:1]
    if ignore_case:
        source_root, target_root = _fold(source_root), _fold(target_root)
    if source_root != target_root:
        logger.trace("[relpath] no common root, returning target")
        return target

    common_length = common_path_length(source, target, ignore_case, profile)
    if common_length == 0:
        logger.trace("[relpath] nothing in common, returning target")
        return target

    # trailing separators aren't significant for comparison
    source_length = len(source)
    if is_separator(source[-1], profile):
        source_length -= 1

    target_length = len(target)
    target_ends_in_separator = is_separator(target[-1], profile)
    if target_ends_in_separator:
        target_length -= 1

    if source_length == target_length and common_length >= source_length:
        return CURRENT_DIR

    separator = profile["primary"]
    parts: list[str] = []

    # one .. per source segment past the common prefix
    if common_length < source_length:
        parts.append(PARENT_DIR)
        for i in range(common_length + 1, source_length):
            if is_separator(source[i], profile):
                parts.append(separator)
                parts.append(PARENT_DIR)
    elif common_length < len(target) and is_separator(target[common_length], profile):
        # no parent hops, so eat the separator leading into the remainder
        common_length += 1

    difference_length = target_length - common_length
    if target_ends_in_separator:
        difference_length += 1

    if difference_length > 0:
        if parts:
            parts.append(separator)
        parts.append(target[common_length : common_length + difference_length])

    result = "".join(parts)
    logger.trace("[relpath] common=%d result=%r", common_length, result)
    return result
