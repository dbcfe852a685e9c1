# src/pocket_relpath/config.py
"""Resolve runtime settings from CLI → env → default and sync the runtime."""

import argparse
from collections.abc import Collection
from typing import cast

from .constants import (
    DEFAULT_ENV_LOG_LEVEL,
    DEFAULT_ENV_PATH_FLAVOR,
    DEFAULT_LOG_LEVEL,
    DEFAULT_PATH_FLAVOR,
    LEVEL_ORDER,
)
from .meta import PROGRAM_ENV
from .runtime import current_runtime
from .types import PATH_FLAVORS, PathFlavor
from .utils import getenv_choice, should_use_color
from .utils_logs import get_logger, set_log_level


def _warn_invalid_env(key: str, raw: str, default: str) -> None:
    get_logger().warning("Invalid %s=%r, using default %r.", key, raw, default)


def _resolve_choice(
    cli_value: str | None,
    env_key: str,
    choices: Collection[str],
    default: str,
) -> str:
    """Pick a value from CLI, then env, then default.

    A bad CLI value is an error; a bad env value only warns.
    """
    if cli_value:
        value = cli_value.lower()
        if value not in choices:
            xmsg = (
                f"Invalid value {cli_value!r} (expected one of: {', '.join(choices)})"
            )
            raise ValueError(xmsg)
        return value

    return getenv_choice(env_key, PROGRAM_ENV, choices, default, _warn_invalid_env)


def resolve_flavor(cli_value: str | None = None) -> PathFlavor:
    """Resolve the path flavor from CLI → env → default."""
    value = _resolve_choice(
        cli_value, DEFAULT_ENV_PATH_FLAVOR, PATH_FLAVORS, DEFAULT_PATH_FLAVOR
    )
    return cast("PathFlavor", value)


def resolve_log_level(cli_value: str | None = None) -> str:
    """Resolve log level from CLI → env → default."""
    return _resolve_choice(
        cli_value, DEFAULT_ENV_LOG_LEVEL, LEVEL_ORDER, DEFAULT_LOG_LEVEL
    )


def apply_runtime(args: argparse.Namespace) -> None:
    """Write resolved settings from parsed CLI args into `current_runtime`."""
    use_color = getattr(args, "use_color", None)
    current_runtime["use_color"] = (
        should_use_color() if use_color is None else bool(use_color)
    )
    current_runtime["flavor"] = resolve_flavor(getattr(args, "flavor", None))
    set_log_level(resolve_log_level(getattr(args, "log_level", None)))
