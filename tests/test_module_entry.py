"""Module entry stories ensuring `python -m person_proxy` mirrors the console script."""

from __future__ import annotations

import runpy
import subprocess
import sys
from collections.abc import Callable

import lib_cli_exit_tools
import pytest

from person_proxy import __init__conf__, entry
from person_proxy.adapters import cli as cli_mod


@pytest.mark.os_agnostic
def test_module_entry_without_arguments_runs_the_demo(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    monkeypatch.setattr(sys, "argv", ["person-proxy"], raising=False)

    with pytest.raises(SystemExit) as exc:
        runpy.run_module("person_proxy.__main__", run_name="__main__")

    out = capsys.readouterr().out
    assert exc.value.code == 0
    assert "[Proxy Interception] Method called: introduce" in out
    assert "I am from Delhi, India." in out


@pytest.mark.os_agnostic
def test_module_entry_reports_unsupported_operation(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
    strip_ansi: Callable[[str], str],
) -> None:
    monkeypatch.setattr(sys, "argv", ["person-proxy", "call", "fly"], raising=False)
    monkeypatch.setattr(lib_cli_exit_tools.config, "traceback", False, raising=False)
    monkeypatch.setattr(lib_cli_exit_tools.config, "traceback_force_color", False, raising=False)

    with pytest.raises(SystemExit) as exc:
        runpy.run_module("person_proxy.__main__", run_name="__main__")

    assert exc.value.code == cli_mod.ExitCode.INVALID_ARGUMENT
    assert "Unsupported operation" in strip_ansi(capsys.readouterr().err)


@pytest.mark.os_agnostic
def test_module_entry_traceback_flag_prints_full_traceback(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
    strip_ansi: Callable[[str], str],
) -> None:
    """--traceback shows the full trace and the prior flags are restored."""
    monkeypatch.setattr(sys, "argv", ["person-proxy", "--traceback", "call", "say_age"])
    monkeypatch.setattr(lib_cli_exit_tools.config, "traceback", False, raising=False)
    monkeypatch.setattr(lib_cli_exit_tools.config, "traceback_force_color", False, raising=False)

    with pytest.raises(SystemExit) as exc:
        runpy.run_module("person_proxy.__main__", run_name="__main__")

    plain_err = strip_ansi(capsys.readouterr().err)
    assert exc.value.code != 0
    assert "Traceback (most recent call last)" in plain_err
    assert "TypeError" in plain_err
    assert lib_cli_exit_tools.config.traceback is False
    assert lib_cli_exit_tools.config.traceback_force_color is False


@pytest.mark.os_agnostic
def test_cli_registers_every_command() -> None:
    assert set(cli_mod.cli.commands) == {"demo", "call", "info", "config"}


@pytest.mark.os_agnostic
def test_console_script_entry_returns_exit_code(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    monkeypatch.setattr(sys, "argv", ["person-proxy", "info"], raising=False)

    assert entry.main() == 0
    assert f"Info for {__init__conf__.name}:" in capsys.readouterr().out


@pytest.mark.os_agnostic
def test_python_dash_m_help_lists_commands() -> None:
    result = subprocess.run(
        [sys.executable, "-m", "person_proxy", "--help"],
        capture_output=True,
        text=True,
        check=False,
    )

    assert result.returncode == 0
    assert "demo" in result.stdout
    assert "call" in result.stdout
