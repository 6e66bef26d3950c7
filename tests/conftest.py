"""Shared pytest fixtures for CLI, tour and module-entry tests.

All shared fixtures live here and are picked up through conftest discovery.
Fixture names read as plain English.
"""

from __future__ import annotations

import contextlib
import os
import re
import tempfile
from collections.abc import Callable, Iterator
from dataclasses import fields
from pathlib import Path
from typing import TYPE_CHECKING, Any

import lib_cli_exit_tools
import pytest
from click.testing import CliRunner
from lib_layered_config import Config

if TYPE_CHECKING:
    from syntax_snippets.adapters.memory import UserNameStub
    from syntax_snippets.composition import AppServices

_COVERAGE_BASENAME = ".coverage.syntax_snippets"


def _purge_stale_coverage_files(cov_path: Path) -> None:
    """Delete a leftover coverage database and its SQLite sidecar files."""
    for suffix in ("", "-journal", "-wal", "-shm"):
        with contextlib.suppress(FileNotFoundError):
            Path(str(cov_path) + suffix).unlink()


def pytest_configure(config: pytest.Config) -> None:
    """Keep the coverage database in a local temp directory.

    Runs before pytest-cov creates its ``Coverage`` object, so the
    ``COVERAGE_FILE`` value applies however pytest is invoked.
    """
    if "COVERAGE_FILE" not in os.environ:
        cov_path = Path(tempfile.gettempdir()) / _COVERAGE_BASENAME
        _purge_stale_coverage_files(cov_path)
        os.environ["COVERAGE_FILE"] = str(cov_path)


ANSI_ESCAPE_PATTERN = re.compile(r"\x1B\[[0-?]*[ -/]*[@-~]")
CONFIG_FIELDS: tuple[str, ...] = tuple(field.name for field in fields(type(lib_cli_exit_tools.config)))


def _remove_ansi_codes(text: str) -> str:
    """Return *text* stripped of ANSI escape sequences."""
    return ANSI_ESCAPE_PATTERN.sub("", text)


def _snapshot_cli_config() -> dict[str, object]:
    """Capture every attribute from ``lib_cli_exit_tools.config``."""
    return {name: getattr(lib_cli_exit_tools.config, name) for name in CONFIG_FIELDS}


def _restore_cli_config(snapshot: dict[str, object]) -> None:
    """Reapply a configuration snapshot captured by ``_snapshot_cli_config``."""
    for name, value in snapshot.items():
        setattr(lib_cli_exit_tools.config, name, value)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a fresh CliRunner per test.

    ``result.stdout`` holds only what the commands printed; log records and
    error messages land in ``result.stderr``.
    """
    return CliRunner()


@pytest.fixture
def production_factory() -> Callable[[], AppServices]:
    """Provide the production services factory (real config, logging, user lookup)."""
    from syntax_snippets.composition import build_production

    return build_production


@pytest.fixture
def testing_factory() -> Callable[[], AppServices]:
    """Provide the in-memory services factory.

    Every call builds a new container with a fresh IdFactory and a user-name
    stub answering ``tester``, so tour output is deterministic.
    """
    from syntax_snippets.composition import build_testing

    return build_testing


@pytest.fixture
def user_stub() -> UserNameStub:
    """Provide a user-name stub that answers ``ada``."""
    from syntax_snippets.adapters.memory import UserNameStub

    return UserNameStub(name="ada")


@pytest.fixture
def stub_user_factory(user_stub: UserNameStub) -> Callable[[], AppServices]:
    """Provide an in-memory services factory wired to :func:`user_stub`."""
    from syntax_snippets.composition import build_testing

    return lambda: build_testing(user=user_stub)


@pytest.fixture
def strip_ansi() -> Callable[[str], str]:
    """Return a helper that strips ANSI escape sequences from a string."""

    def _strip(value: str) -> str:
        return _remove_ansi_codes(value)

    return _strip


@pytest.fixture
def managed_traceback_state() -> Iterator[None]:
    """Reset traceback flags to a known baseline and restore after the test."""
    lib_cli_exit_tools.reset_config()
    lib_cli_exit_tools.config.traceback = False
    lib_cli_exit_tools.config.traceback_force_color = False
    snapshot = _snapshot_cli_config()
    try:
        yield
    finally:
        _restore_cli_config(snapshot)


@pytest.fixture
def clear_config_cache() -> Iterator[None]:
    """Clear the get_config lru_cache before the test."""
    from syntax_snippets.adapters.config import loader as config_mod

    config_mod.get_config.cache_clear()
    yield


@pytest.fixture
def config_factory() -> Callable[[dict[str, Any]], Config]:
    """Create real Config instances from plain dicts, without provenance."""

    def _factory(data: dict[str, Any]) -> Config:
        return Config(data, {})

    return _factory


@pytest.fixture
def config_cli_context(
    clear_config_cache: None,
) -> Callable[[dict[str, Any]], Callable[[], AppServices]]:
    """Return a function turning a config dict into a services factory.

    Only ``get_config`` is replaced; display and logging stay production.
    The user lookup is the in-memory stub and the IdFactory starts fresh.

    Example:
        def test_audience(cli_runner, config_cli_context) -> None:
            factory = config_cli_context({"tour": {"audience": "you"}})
            result = cli_runner.invoke(cli, ["run", "classes"], obj=factory)
    """
    from syntax_snippets.composition import AppServices, build_production, build_testing

    def _create(config_data: dict[str, Any]) -> Callable[[], AppServices]:
        config = Config(config_data, {})

        def _fake_get_config(**_kwargs: Any) -> Config:
            return config

        def _factory() -> AppServices:
            prod = build_production()
            memory = build_testing()
            return AppServices(
                get_config=_fake_get_config,
                display_config=prod.display_config,
                init_logging=prod.init_logging,
                get_user_name=memory.get_user_name,
                id_factory=memory.id_factory,
            )

        return _factory

    return _create


@pytest.fixture
def profile_capture_factory(
    clear_config_cache: None,
) -> Callable[[Config, list[str | None]], Callable[[], AppServices]]:
    """Return a function building a factory whose get_config records profiles."""
    from syntax_snippets.composition import AppServices, build_testing

    def _inject(config: Config, captured_profiles: list[str | None]) -> Callable[[], AppServices]:
        def _capturing_get_config(*, profile: str | None = None, **_kwargs: Any) -> Config:
            captured_profiles.append(profile)
            return config

        def _factory() -> AppServices:
            memory = build_testing()
            return AppServices(
                get_config=_capturing_get_config,
                display_config=memory.display_config,
                init_logging=memory.init_logging,
                get_user_name=memory.get_user_name,
                id_factory=memory.id_factory,
            )

        return _factory

    return _inject


@pytest.fixture(autouse=True)
def stopped_logging_runtime() -> Iterator[None]:
    """Start and end every test without a running lib_log_rich runtime.

    ``CliRunner.invoke`` never reaches ``main()``, which is what normally shuts
    the runtime down, so a runtime started in one test would otherwise leak
    into the next.
    """
    import lib_log_rich.runtime

    if lib_log_rich.runtime.is_initialised():
        lib_log_rich.runtime.shutdown()
    yield
    if lib_log_rich.runtime.is_initialised():
        lib_log_rich.runtime.shutdown()
