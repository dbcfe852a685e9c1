# src/pocket_relpath/actions.py
import re
import subprocess
from contextlib import suppress
from pathlib import Path

from .meta import PROGRAM_DISPLAY, Metadata
from .relpath import get_relative_path
from .utils_logs import GREEN, RED, colorize, get_logger

# (flavor, relative_to, path, expected)
SELFTEST_CASES: list[tuple[str, str, str, str]] = [
    ("posix", "/Foo", "/Bar", "../Bar"),
    ("posix", "/Foo", "/Foo/Bar", "Bar"),
    ("posix", "/Foo/Bar", "/Bar/Bar", "../../Bar/Bar"),
    ("posix", "/Foo/Foo", "/Foo/Bar", "../Bar"),
    ("posix", "/Foo/Bar/", "/Foo/Bar", "."),
    ("posix", "/Foodie", "/Foobar", "../Foobar"),
    ("windows", "C:\\Foo", "C:\\Bar", "..\\Bar"),
    ("windows", "C:\\Foo", "c:\\foo\\Bar", "Bar"),
    ("windows", "C:\\Foo\\Bar", "C:\\Bar\\Bar", "..\\..\\Bar\\Bar"),
    ("windows", "C:\\Foo", "D:\\Bar", "D:\\Bar"),
]


def get_metadata() -> Metadata:
    """Return (version, commit) tuple for this tool.

    Reads pyproject.toml for the version and git for the commit,
    falling back to "unknown" for either.
    """
    logger = get_logger()
    logger.trace("get_metadata ran from: %s", Path(__file__).resolve())

    version = "unknown"
    commit = "unknown"

    root = Path(__file__).resolve().parents[2]
    pyproject = root / "pyproject.toml"
    if pyproject.exists():
        logger.trace("trying to read metadata from %s", pyproject)
        text = pyproject.read_text(encoding="utf-8")
        match = re.search(r'(?m)^\s*version\s*=\s*["\']([^"\']+)["\']', text)
        if match:
            version = match.group(1)

    with suppress(Exception):
        logger.trace("trying to get commit from git")
        result = subprocess.run(
            ["git", "rev-parse", "--short", "HEAD"],  # noqa: S607
            cwd=root,
            capture_output=True,
            text=True,
            check=True,
        )
        commit = result.stdout.strip() or "unknown"

    logger.trace("got package version %s with commit %s", version, commit)
    return Metadata(version, commit)


def run_selftest() -> bool:
    """Run known relative-path cases under both flavors."""
    logger = get_logger()
    logger.info("🧪 Running self-test...")

    failures = 0
    for flavor, relative_to, path, expected in SELFTEST_CASES:
        try:
            result = get_relative_path(relative_to, path, flavor=flavor)
        except Exception:
            logger.exception(
                "Unexpected self-test failure. "
                "Please report this issue with the following traceback:"
            )
            return False

        passed = result == expected
        status = colorize("ok", GREEN) if passed else colorize("FAIL", RED)
        logger.debug(
            "[SELFTEST] %s (%s) %s → %s = %s", status, flavor, relative_to, path, result
        )
        if not passed:
            failures += 1
            logger.error(
                "Self-test case failed (%s): %r → %r gave %r, expected %r",
                flavor,
                relative_to,
                path,
                result,
                expected,
            )

    if failures:
        logger.error("Self-test failed: %d of %d cases.", failures, len(SELFTEST_CASES))
        return False

    logger.info(
        "%s — %s is working correctly.",
        colorize("✅ Self-test passed", GREEN),
        PROGRAM_DISPLAY,
    )
    return True
