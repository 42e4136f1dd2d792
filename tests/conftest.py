"""Shared pytest fixtures for domain, interception, CLI and module-entry tests.

Centralizes test infrastructure following clean architecture principles:
- All shared fixtures live here
- Tests import fixtures implicitly via pytest's conftest discovery
- Fixtures use descriptive names that read as plain English
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterator
from dataclasses import fields
from pathlib import Path
from typing import TYPE_CHECKING, Any

import lib_cli_exit_tools
import lib_log_rich.runtime
import pytest
from click.testing import CliRunner
from lib_layered_config import Config

from person_proxy.adapters.memory import TranscriptSpy
from person_proxy.domain.person import Profile

if TYPE_CHECKING:
    from person_proxy.composition import AppServices


def _load_dotenv() -> None:
    """Load .env file when it exists for local test configuration."""
    from dotenv import load_dotenv

    env_file = Path(__file__).parent.parent / ".env"
    if env_file.exists():
        load_dotenv(env_file)


_load_dotenv()

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


@pytest.fixture(autouse=True)
def fresh_logging_runtime() -> Iterator[None]:
    """Start and end every test without a lib_log_rich runtime."""
    if lib_log_rich.runtime.is_initialised():
        lib_log_rich.runtime.shutdown()
    yield
    if lib_log_rich.runtime.is_initialised():
        lib_log_rich.runtime.shutdown()


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a fresh CliRunner per test.

    Use ``result.stdout`` for demo output so log records written to stderr
    never disturb line-order assertions.
    """
    return CliRunner()


@pytest.fixture
def production_factory() -> Callable[[], AppServices]:
    """Provide the production services factory (real stdout sinks and config)."""
    from person_proxy.composition import build_production

    return build_production


@pytest.fixture
def transcript() -> TranscriptSpy:
    """Provide a fresh TranscriptSpy capturing demo output in order."""
    return TranscriptSpy()


@pytest.fixture
def testing_factory(transcript: TranscriptSpy) -> Callable[[], AppServices]:
    """Provide an in-memory services factory writing into ``transcript``.

    Example:
        def test_demo(cli_runner, testing_factory, transcript) -> None:
            cli_runner.invoke(cli, ["demo"], obj=testing_factory)
            assert transcript.lines[0].endswith("introduce")
    """
    from person_proxy.composition import build_testing

    return lambda: build_testing(spy=transcript)


@pytest.fixture
def mohan() -> Profile:
    """The demo profile: Mohan, 30, from Delhi, India."""
    return Profile(name="Mohan", age=30, city="Delhi", country="India")


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
    """Clear the get_config lru_cache before each test."""
    from person_proxy.adapters.config import loader as config_mod

    config_mod.get_config.cache_clear()
    yield


@pytest.fixture
def config_factory() -> Callable[[dict[str, Any]], Config]:
    """Create real Config instances from test data dicts without filesystem I/O."""

    def _factory(data: dict[str, Any]) -> Config:
        return Config(data, {})

    return _factory


@pytest.fixture
def inject_config(
    clear_config_cache: None,
    transcript: TranscriptSpy,
) -> Callable[[Config], Callable[[], AppServices]]:
    """Return a factory that provides in-memory services with an injected Config.

    Only the configuration boundary is replaced; output still lands in
    ``transcript``.

    Example:
        def test_profile(cli_runner, config_factory, inject_config, transcript) -> None:
            factory = inject_config(config_factory({"demo": {"name": "Ravi"}}))
            cli_runner.invoke(cli, ["demo"], obj=factory)
    """
    from person_proxy.composition import AppServices, build_testing

    def _inject(config: Config) -> Callable[[], AppServices]:
        def _fake_get_config(**_kwargs: Any) -> Config:
            return config

        base = build_testing(spy=transcript)
        services = AppServices(
            get_config=_fake_get_config,
            display_config=base.display_config,
            init_logging=base.init_logging,
            emit_line=base.emit_line,
            observe_invocation=base.observe_invocation,
        )
        return lambda: services

    return _inject
