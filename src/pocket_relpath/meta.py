# src/pocket_relpath/meta.py

"""Centralized program identity constants for Pocket Relpath."""

from typing import NamedTuple

_BASE = "pocket-relpath"

# CLI script name (the executable or `poetry run` entrypoint)
PROGRAM_SCRIPT = _BASE

# Human-readable name for banners, help text, etc.
PROGRAM_DISPLAY = _BASE.replace("-", " ").title()

# Python package / import name
PROGRAM_PACKAGE = _BASE.replace("-", "_")

# Environment variable prefix (used for POCKET_RELPATH_LOG_LEVEL, etc.)
PROGRAM_ENV = _BASE.replace("-", "_").upper()

# Short tagline or description for help screens and metadata
DESCRIPTION = "Relative paths between absolute paths, segment by segment."


class Metadata(NamedTuple):
    version: str
    commit: str
