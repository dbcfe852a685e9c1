# src/pocket_relpath/separators.py
"""Separator conventions per path flavor.

The flavor is always passed explicitly (or resolved once from the runtime
config), so every function here behaves the same on any host.
"""

import os

from .constants import ALT_SEPARATOR, POSIX_SEPARATOR, WINDOWS_SEPARATOR
from .runtime import current_runtime
from .types import PATH_FLAVORS, PathFlavor, ResolvedFlavor, SeparatorProfile


def detect_flavor() -> ResolvedFlavor:
    """Return the flavor of the host platform."""
    return "windows" if os.name == "nt" else "posix"


def resolve_flavor_name(flavor: PathFlavor | str | None = None) -> ResolvedFlavor:
    """Turn 'auto' / None into a concrete flavor.

    None defers to the runtime-configured flavor first, then the host.
    """
    if flavor is None:
        flavor = current_runtime.get("flavor") or "auto"

    name = str(flavor).lower()
    if name not in PATH_FLAVORS:
        xmsg = (
            f"Unknown path flavor: {flavor!r}"
            f" (expected one of: {', '.join(PATH_FLAVORS)})"
        )
        raise ValueError(xmsg)

    if name == "auto":
        return detect_flavor()
    return "windows" if name == "windows" else "posix"


def get_separator_profile(flavor: PathFlavor | str | None = None) -> SeparatorProfile:
    resolved = resolve_flavor_name(flavor)
    if resolved == "windows":
        return {
            "flavor": "windows",
            "primary": WINDOWS_SEPARATOR,
            "alternate": ALT_SEPARATOR,
            "ignore_case": True,
        }
    return {
        "flavor": "posix",
        "primary": POSIX_SEPARATOR,
        "alternate": ALT_SEPARATOR,
        "ignore_case": False,
    }


def is_separator(c: str, profile: SeparatorProfile | None = None) -> bool:
    """Return True if `c` is the primary or alternate separator."""
    if profile is None:
        profile = get_separator_profile()
    return c in (profile["primary"], profile["alternate"])
