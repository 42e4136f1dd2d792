"""Process boundary: run the CLI and turn every outcome into an exit code."""

from __future__ import annotations

import sys
import threading
from collections.abc import Callable, Iterator, Sequence
from contextlib import contextmanager
from typing import TYPE_CHECKING

import click
import lib_cli_exit_tools
import lib_log_rich.runtime

from person_proxy import __init__conf__

from .exit_codes import ExitCode

if TYPE_CHECKING:
    from person_proxy.composition import AppServices

#: Character budget for a printed traceback without ``--traceback``.
SUMMARY_TRACEBACK_LIMIT = 500
#: Character budget for a printed traceback with ``--traceback``.
VERBOSE_TRACEBACK_LIMIT = 10_000


@contextmanager
def preserved_traceback_flags() -> Iterator[None]:
    """Undo whatever ``--traceback`` set on ``lib_cli_exit_tools.config``."""
    flags = lib_cli_exit_tools.config
    saved = (flags.traceback, flags.traceback_force_color)
    try:
        yield
    finally:
        flags.traceback, flags.traceback_force_color = saved


def _report_failure(exc: BaseException) -> int:
    verbose = bool(lib_cli_exit_tools.config.traceback)
    lib_cli_exit_tools.print_exception_message(
        trace_back=verbose,
        length_limit=VERBOSE_TRACEBACK_LIMIT if verbose else SUMMARY_TRACEBACK_LIMIT,
    )
    return lib_cli_exit_tools.get_system_exit_code(exc)


def _shutdown_logging() -> None:
    # The runtime is process-wide; only the main thread tears it down.
    if threading.current_thread() is threading.main_thread() and lib_log_rich.runtime.is_initialised():
        lib_log_rich.runtime.shutdown()


def main(argv: Sequence[str] | None = None, *, services_factory: Callable[[], AppServices]) -> int:
    """Run ``person-proxy`` and return its exit code.

    Commands that fail on purpose print their own message and raise
    ``SystemExit`` with an :class:`ExitCode`. Click usage errors print usage
    help. Any other exception is printed by lib_cli_exit_tools, in full when
    ``--traceback`` was given.

    Args:
        argv: Arguments without the program name. None reads ``sys.argv``.
        services_factory: ``build_production`` or ``build_testing``.

    Example:
        >>> from person_proxy.composition import build_testing
        >>> main(["call", "fly"], services_factory=build_testing)  # doctest: +SKIP
        22
    """
    from .root import cli

    args = list(argv) if argv is not None else sys.argv[1:]
    with preserved_traceback_flags():
        try:
            cli.main(args=args, prog_name=__init__conf__.shell_command, obj=services_factory, standalone_mode=False)
        except click.exceptions.Exit as exc:
            return exc.exit_code
        except click.ClickException as exc:
            exc.show()
            return exc.exit_code
        except SystemExit as exc:
            return lib_cli_exit_tools.get_system_exit_code(exc)
        except BaseException as exc:
            return _report_failure(exc)
        finally:
            _shutdown_logging()
    return ExitCode.SUCCESS


__all__ = ["main", "preserved_traceback_flags"]
