# src/pocket_relpath/utils.py

import os
import sys
from collections.abc import Callable, Collection
from contextlib import suppress
from typing import TextIO, cast


def should_use_color() -> bool:
    """Return True if colored output should be enabled."""
    # Respect explicit overrides
    if "NO_COLOR" in os.environ:
        return False
    if os.getenv("FORCE_COLOR", "").lower() in {"1", "true", "yes"}:
        return True

    # Auto-detect: use color if output is a TTY
    return sys.stdout.isatty()


def getenv_program(key: str, program_env: str) -> str | None:
    """Return `<PROGRAM_ENV>_<key>` if set, else the generic `<key>`."""
    return os.getenv(f"{program_env}_{key}") or os.getenv(key) or None


def getenv_choice(
    key: str,
    program_env: str,
    choices: Collection[str],
    default: str,
    on_invalid: Callable[[str, str, str], None] | None = None,
) -> str:
    """Return the env value for `key` if it is one of `choices`, else `default`.

    Matching is case-insensitive. An unrecognized value is handed to
    `on_invalid(key, raw_value, default)` before falling back.
    """
    raw = getenv_program(key, program_env)
    if not raw:
        return default

    value = raw.lower()
    if value in choices:
        return value

    if on_invalid is not None:
        on_invalid(key, raw, default)
    return default


def safe_log(msg: str) -> None:
    """Emergency logger that never fails."""
    stream = cast("TextIO", sys.__stderr__)
    try:
        print(msg, file=stream)
    except Exception:  # noqa: BLE001
        # As final guardrail — never crash during crash reporting
        with suppress(Exception):
            stream.write(f"[INTERNAL] {msg}\n")
