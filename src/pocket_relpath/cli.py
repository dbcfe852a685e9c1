# src/pocket_relpath/cli.py

import argparse
import platform
import sys
from difflib import get_close_matches

from .actions import get_metadata, run_selftest
from .config import apply_runtime
from .constants import LEVEL_ORDER
from .meta import DESCRIPTION, PROGRAM_DISPLAY, PROGRAM_SCRIPT
from .relpath import (
    canonicalize,
    common_path_length,
    get_relative_path,
    require_path,
)
from .separators import get_separator_profile
from .types import PATH_FLAVORS
from .utils import safe_log
from .utils_logs import get_logger


# --------------------------------------------------------------------------- #
# Parser
# --------------------------------------------------------------------------- #


def _flag_hints(message: str, known_flags: list[str]) -> list[str]:
    """Suggest close matches for flags argparse did not recognize."""
    marker = "unrecognized arguments:"
    if marker not in message:
        return []

    unknown = [tok for tok in message.split(marker, 1)[1].split() if tok.startswith("-")]
    hints: list[str] = []
    for flag in unknown:
        close = get_close_matches(flag, known_flags, n=1, cutoff=0.6)
        if close:
            hints.append(f"Hint: did you mean {close[0]}?")
    return hints


class HintingArgumentParser(argparse.ArgumentParser):
    def error(self, message: str) -> None:  # type: ignore[override]
        known_flags = [s for action in self._actions for s in action.option_strings]
        lines = [f"{self.prog}: error: {message}", *_flag_hints(message, known_flags)]
        self.print_usage(sys.stderr)
        self.exit(2, "\n".join(lines) + "\n")


def _add_path_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "relative_to",
        nargs="?",
        metavar="FROM",
        help="Directory the result should be relative to.",
    )
    parser.add_argument("paths", nargs="*", metavar="TO", help="Target path(s).")
    parser.add_argument(
        "--flavor",
        choices=PATH_FLAVORS,
        help="Path conventions to apply (default: env or host platform).",
    )
    parser.add_argument(
        "--common-length",
        action="store_true",
        help="Print the shared segment-aligned prefix length instead.",
    )


def _add_output_options(parser: argparse.ArgumentParser) -> None:
    color = parser.add_mutually_exclusive_group()
    for flag, value, text in (
        ("--color", True, "Force-enable ANSI color output."),
        ("--no-color", False, "Disable ANSI color output."),
    ):
        color.add_argument(
            flag, dest="use_color", action="store_const", const=value, help=text
        )

    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument(
        "-q",
        "--quiet",
        dest="log_level",
        action="store_const",
        const="warning",
        help="Only show warnings and errors.",
    )
    verbosity.add_argument(
        "-v",
        "--verbose",
        dest="log_level",
        action="store_const",
        const="debug",
        help="Show debug output.",
    )
    verbosity.add_argument("--log-level", choices=LEVEL_ORDER, dest="log_level")


def _setup_parser() -> argparse.ArgumentParser:
    parser = HintingArgumentParser(prog=PROGRAM_SCRIPT, description=DESCRIPTION)
    _add_path_arguments(parser)
    _add_output_options(parser)
    parser.add_argument("--version", action="store_true", help="Show version info.")
    parser.add_argument(
        "--selftest",
        action="store_true",
        help="Check the built-in relative path cases and exit.",
    )
    parser.set_defaults(use_color=None, log_level=None)
    return parser


# --------------------------------------------------------------------------- #
# Commands
# --------------------------------------------------------------------------- #


def _print_results(args: argparse.Namespace) -> None:
    logger = get_logger()
    profile = get_separator_profile()
    logger.debug("Using %s path conventions", profile["flavor"])

    for target in args.paths:
        if not args.common_length:
            print(get_relative_path(args.relative_to, target))
            continue

        # same canonical strings get_relative_path() compares
        source = canonicalize(require_path(args.relative_to, "relative_to"), profile)
        canonical_target = canonicalize(require_path(target, "path"), profile)
        print(
            common_path_length(
                source, canonical_target, profile["ignore_case"], profile
            )
        )


def _report(level: str, message: str) -> None:
    try:
        getattr(get_logger(), level)("%s", message)
    except Exception:  # noqa: BLE001
        safe_log(f"[FATAL] Logging failed while reporting: {message}")


def main(argv: list[str] | None = None) -> int:
    parser = _setup_parser()
    args = parser.parse_args(argv)

    try:
        apply_runtime(args)
        logger = get_logger()
        logger.debug(
            "Runtime: Python %s (%s)",
            platform.python_version(),
            platform.python_implementation(),
        )

        if args.version:
            meta = get_metadata()
            logger.info("%s %s (%s)", PROGRAM_DISPLAY, meta.version, meta.commit)
            return 0

        if args.selftest:
            return 0 if run_selftest() else 1

        if args.relative_to is None or not args.paths:
            parser.error("the following arguments are required: FROM TO")

        _print_results(args)

    except (ValueError, TypeError) as e:
        # controlled termination (includes ArgumentError)
        _report("error", str(e))
        return 1

    except Exception as e:  # noqa: BLE001
        _report("critical", f"Unexpected internal error: {e}")
        return 1

    return 0
