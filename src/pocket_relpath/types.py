# src/pocket_relpath/types.py
from __future__ import annotations

from typing import Literal, TypedDict

from typing_extensions import NotRequired

PathFlavor = Literal["auto", "windows", "posix"]
ResolvedFlavor = Literal["windows", "posix"]

PATH_FLAVORS: tuple[PathFlavor, ...] = ("auto", "windows", "posix")


class SeparatorProfile(TypedDict):
    flavor: ResolvedFlavor
    primary: str  # native separator, emitted when building paths
    alternate: str  # also accepted when scanning
    ignore_case: bool  # Windows compares paths case-insensitively


class Runtime(TypedDict):
    log_level: str
    use_color: bool

    # None or missing → detect from host
    flavor: NotRequired[PathFlavor]
