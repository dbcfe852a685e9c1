# tests/utils/__init__.py

from .paths import posix_paths, windows_paths
from .trace import TRACE, make_trace

__all__ = [
    "TRACE",
    "make_trace",
    "posix_paths",
    "windows_paths",
]
