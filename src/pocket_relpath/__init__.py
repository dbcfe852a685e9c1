# src/pocket_relpath/__init__.py

"""Pocket Relpath — relative paths between absolute paths, segment by segment.

Full developer API
==================
This package re-exports all non-private symbols from its submodules,
making it suitable for programmatic use, custom integrations, or plugins.
Anything prefixed with "_" is considered internal and may change.

Highlights:
    - get_relative_path()   → Relative path from one absolute path to another
    - common_path_length()  → Segment-aligned shared prefix length
    - is_separator()        → Separator test for a path flavor
    - main()                → CLI entrypoint
"""

from .actions import get_metadata, run_selftest
from .cli import main
from .config import apply_runtime, resolve_flavor, resolve_log_level
from .constants import (
    ALT_SEPARATOR,
    DEFAULT_ENV_LOG_LEVEL,
    DEFAULT_ENV_PATH_FLAVOR,
    DEFAULT_LOG_LEVEL,
    DEFAULT_PATH_FLAVOR,
    LEVEL_ORDER,
    POSIX_SEPARATOR,
    WINDOWS_SEPARATOR,
)
from .meta import (
    PROGRAM_DISPLAY,
    PROGRAM_ENV,
    PROGRAM_PACKAGE,
    PROGRAM_SCRIPT,
    Metadata,
)
from .relpath import (
    ArgumentError,
    canonicalize,
    common_path_length,
    equal_starting_character_count,
    get_relative_path,
    require_path,
)
from .runtime import current_runtime
from .separators import (
    detect_flavor,
    get_separator_profile,
    is_separator,
    resolve_flavor_name,
)
from .types import PathFlavor, ResolvedFlavor, Runtime, SeparatorProfile
from .utils import should_use_color
from .utils_logs import (
    RESET,
    colorize,
    get_logger,
    set_log_level,
    temporary_log_level,
)


__all__ = [  # noqa: RUF022
    # --- Core ---
    "ArgumentError",
    "canonicalize",
    "common_path_length",
    "equal_starting_character_count",
    "get_relative_path",
    "require_path",
    #
    # --- Separators ---
    "detect_flavor",
    "get_separator_profile",
    "is_separator",
    "resolve_flavor_name",
    #
    # --- CLI / Actions / Config ---
    "apply_runtime",
    "get_metadata",
    "main",
    "resolve_flavor",
    "resolve_log_level",
    "run_selftest",
    #
    # --- Constants / Metadata / Runtime ---
    "ALT_SEPARATOR",
    "DEFAULT_ENV_LOG_LEVEL",
    "DEFAULT_ENV_PATH_FLAVOR",
    "DEFAULT_LOG_LEVEL",
    "DEFAULT_PATH_FLAVOR",
    "Metadata",
    "POSIX_SEPARATOR",
    "PROGRAM_DISPLAY",
    "PROGRAM_ENV",
    "PROGRAM_PACKAGE",
    "PROGRAM_SCRIPT",
    "WINDOWS_SEPARATOR",
    "current_runtime",
    #
    # --- utils ---
    "LEVEL_ORDER",
    "RESET",
    "colorize",
    "get_logger",
    "set_log_level",
    "should_use_color",
    "temporary_log_level",
    #
    # --- Types ---
    "PathFlavor",
    "ResolvedFlavor",
    "Runtime",
    "SeparatorProfile",
]
