# src/pocket_relpath/runtime.py
"""Holds live runtime context shared across modules (e.g., log level, flavor)."""

from typing import cast

from .constants import (
    DEFAULT_ENV_LOG_LEVEL,
    DEFAULT_ENV_PATH_FLAVOR,
    DEFAULT_LOG_LEVEL,
    DEFAULT_PATH_FLAVOR,
    LEVEL_ORDER,
)
from .meta import PROGRAM_ENV
from .types import PATH_FLAVORS, PathFlavor, Runtime
from .utils import getenv_choice, safe_log, should_use_color


def _warn_invalid_env(key: str, raw: str, default: str) -> None:
    # the package logger imports this module, so it can't be used yet
    safe_log(f"⚠️  Invalid {key}={raw!r}, using default {default!r}.")


def _initial_log_level() -> str:
    return getenv_choice(
        DEFAULT_ENV_LOG_LEVEL,
        PROGRAM_ENV,
        LEVEL_ORDER,
        DEFAULT_LOG_LEVEL,
        _warn_invalid_env,
    )


def _initial_flavor() -> PathFlavor:
    value = getenv_choice(
        DEFAULT_ENV_PATH_FLAVOR,
        PROGRAM_ENV,
        PATH_FLAVORS,
        DEFAULT_PATH_FLAVOR,
        _warn_invalid_env,
    )
    return cast("PathFlavor", value)


current_runtime: Runtime = {
    "log_level": _initial_log_level(),
    "use_color": should_use_color(),
    "flavor": _initial_flavor(),
}
