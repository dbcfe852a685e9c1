# tests/conftest.py
"""
Shared test setup for project.

Every test starts from a known runtime (info level, no color, auto flavor)
and gets the original runtime back afterwards.
"""

from collections.abc import Iterator

import pytest
from hypothesis import HealthCheck, settings
from pytest import Config

import pocket_relpath.runtime as mod_runtime
import pocket_relpath.utils_logs as mod_logs
from pocket_relpath.meta import PROGRAM_ENV
from tests.utils import make_trace

TRACE = make_trace("⚡️")

# reset_runtime is autouse and function-scoped
settings.register_profile(
    "pocket",
    suppress_health_check=[HealthCheck.function_scoped_fixture],
)
settings.load_profile("pocket")


def pytest_report_header(config: Config) -> str:
    return f"Env prefix: {PROGRAM_ENV}"


@pytest.fixture(autouse=True)
def reset_runtime(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Isolate tests from each other and from the caller's environment."""
    for var in (
        f"{PROGRAM_ENV}_LOG_LEVEL",
        "LOG_LEVEL",
        f"{PROGRAM_ENV}_PATH_FLAVOR",
        "PATH_FLAVOR",
        "NO_COLOR",
        "FORCE_COLOR",
    ):
        monkeypatch.delenv(var, raising=False)

    saved = dict(mod_runtime.current_runtime)
    mod_runtime.current_runtime.update(
        {"log_level": "info", "use_color": False, "flavor": "auto"}
    )
    TRACE("runtime reset", mod_runtime.current_runtime)
    try:
        yield
    finally:
        mod_runtime.current_runtime.clear()
        mod_runtime.current_runtime.update(saved)  # type: ignore[typeddict-item]
        mod_logs.set_log_level(mod_runtime.current_runtime["log_level"])
