# src/pocket_relpath/constants.py
"""
Central constants used across the project.
"""

# --- env keys ---
DEFAULT_ENV_LOG_LEVEL: str = "LOG_LEVEL"
DEFAULT_ENV_PATH_FLAVOR: str = "PATH_FLAVOR"

# --- defaults ---
DEFAULT_LOG_LEVEL: str = "info"
DEFAULT_PATH_FLAVOR: str = "auto"

# --- separators ---
WINDOWS_SEPARATOR: str = "\\"
POSIX_SEPARATOR: str = "/"
ALT_SEPARATOR: str = "/"  # accepted on every platform

# --- relative path tokens ---
CURRENT_DIR: str = "."
PARENT_DIR: str = ".."

# --- log levels (most to least verbose) ---
LEVEL_ORDER: list[str] = [
    "trace",
    "debug",
    "info",
    "warning",
    "error",
    "critical",
    "silent",  # disables all logging
]
