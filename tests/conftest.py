"""Shared pytest fixtures for tour, CLI, and module-entry tests."""

from __future__ import annotations

import contextlib
import os
import re
import tempfile
from collections.abc import Callable, Iterator
from pathlib import Path
from typing import TYPE_CHECKING

import lib_log_rich.runtime
import pytest
from click.testing import CliRunner

from syntax_tour.adapters.cli.context import TracebackSettings

if TYPE_CHECKING:
    from syntax_tour.composition import AppServices

_COVERAGE_BASENAME = ".coverage.syntax_tour"


def _purge_stale_coverage_files(cov_path: Path) -> None:
    """Delete leftover SQLite database and journal files from crashed runs."""
    for suffix in ("", "-journal", "-wal", "-shm"):
        with contextlib.suppress(FileNotFoundError):
            Path(str(cov_path) + suffix).unlink()


def pytest_configure(config: pytest.Config) -> None:
    """Redirect the coverage database to a **local** temp directory.

    SQLite locking is unreliable on network mounts, so coverage data is kept
    under the system temp dir unless ``COVERAGE_FILE`` says otherwise. Runs
    before ``pytest-cov`` creates its ``Coverage()`` object.
    """
    if "COVERAGE_FILE" not in os.environ:
        cov_path = Path(tempfile.gettempdir()) / _COVERAGE_BASENAME
        _purge_stale_coverage_files(cov_path)
        os.environ["COVERAGE_FILE"] = str(cov_path)


def _load_dotenv() -> None:
    """Load .env file when it exists for local test configuration."""
    from dotenv import load_dotenv

    env_file = Path(__file__).parent.parent / ".env"
    if env_file.exists():
        load_dotenv(env_file)


_load_dotenv()

ANSI_ESCAPE_PATTERN = re.compile(r"\x1B\[[0-?]*[ -/]*[@-~]")

TOUR_OUTPUT: tuple[str, ...] = (
    "Hello, world!",
    *(f"i is: {i}" for i in range(10)),
    "0",
    "bark!",
    "9",
)


def _remove_ansi_codes(text: str) -> str:
    """Return *text* stripped of ANSI escape sequences."""
    return ANSI_ESCAPE_PATTERN.sub("", text)


@pytest.fixture(autouse=True)
def shutdown_logging_runtime() -> Iterator[None]:
    """Tear the lib_log_rich runtime down after each test.

    The runtime is process-global; without this, the first test that starts it
    fixes the console level for every later test.
    """
    yield
    if lib_log_rich.runtime.is_initialised():
        lib_log_rich.runtime.shutdown()


@pytest.fixture
def expected_tour_output() -> list[str]:
    """The fourteen tour lines, in order."""
    return list(TOUR_OUTPUT)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a fresh CliRunner per test.

    Use ``result.stdout`` when comparing exact output so that log records on
    stderr cannot leak into the comparison.
    """
    return CliRunner()


@pytest.fixture
def production_factory() -> Callable[[], AppServices]:
    """Provide the production services factory for tests.

    Example:
        def test_info(cli_runner: CliRunner, production_factory: Callable[[], AppServices]) -> None:
            result = cli_runner.invoke(cli, ["info"], obj=production_factory)
            assert result.exit_code == 0
    """
    from syntax_tour.composition import build_production

    return build_production


@pytest.fixture
def strip_ansi() -> Callable[[str], str]:
    """Return a helper that strips ANSI escape sequences from a string."""

    def _strip(value: str) -> str:
        return _remove_ansi_codes(value)

    return _strip


@pytest.fixture
def managed_traceback_state() -> Iterator[None]:
    """Reset traceback flags to a known baseline and restore after the test.

    Use this whenever a test reads or mutates the global
    ``lib_cli_exit_tools.config`` traceback flags.
    """
    previous = TracebackSettings.current()
    TracebackSettings().install()
    try:
        yield
    finally:
        previous.install()



@pytest.fixture
def overflowing_tour(monkeypatch: pytest.MonkeyPatch) -> None:
    """Make the ``tour`` command fail the way an overflowing ``add`` would."""
    from syntax_tour.adapters.cli.commands import tour as tour_command
    from syntax_tour.domain.behaviors import INT32_MAX, add

    def _overflow(emit: Callable[[str], None]) -> None:
        emit(str(add(INT32_MAX, 1)))

    monkeypatch.setattr(tour_command, "run_tour", _overflow)


@pytest.fixture
def hostile_environment(tmp_path: Path) -> dict[str, str]:
    """An environment full of settings a config-reading tour would choke on.

    Holds an invalid log level in ``SYNTAX_TOUR___*`` style variables and an
    ``XDG_CONFIG_HOME`` whose ``syntax-tour/config.toml`` is not valid TOML.
    """
    config_dir = tmp_path / "xdg" / "syntax-tour"
    config_dir.mkdir(parents=True)
    (config_dir / "config.toml").write_text("[lib_log_rich\nconsole_level = = 'BOGUS'\n", encoding="utf-8")
    (tmp_path / ".env").write_text("SYNTAX_TOUR___LIB_LOG_RICH__CONSOLE_LEVEL=BOGUS\n", encoding="utf-8")

    env = dict(os.environ)
    env["SYNTAX_TOUR___LIB_LOG_RICH__CONSOLE_LEVEL"] = "BOGUS"
    env["SYNTAX_TOUR___LIB_LOG_RICH__SERVICE"] = ""
    env["XDG_CONFIG_HOME"] = str(tmp_path / "xdg")
    return env
