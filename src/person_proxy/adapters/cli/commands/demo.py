"""Interception demo CLI commands.

Contents:
    * :func:`cli_demo` - Run the fixed three-call sequence through the interceptor.
    * :func:`cli_call` - Send a single call through the interceptor.
"""

from __future__ import annotations

import logging

import lib_log_rich.runtime
import rich_click as click

from person_proxy.adapters.config.overrides import coerce_value
from person_proxy.adapters.config.profile import load_demo_profile
from person_proxy.adapters.interception.proxy import PersonInterceptor
from person_proxy.application.demo import run_demo
from person_proxy.composition import build_intercepted_person
from person_proxy.domain.enums import Operation
from person_proxy.domain.errors import ConfigurationError, UnsupportedOperationError
from person_proxy.domain.person import Profile

from ..context import HELP_SETTINGS, CLIContext, get_cli_context
from ..exit_codes import ExitCode

logger = logging.getLogger(__name__)


def _load_profile(cli_ctx: CLIContext) -> Profile:
    try:
        return load_demo_profile(cli_ctx.config)
    except ConfigurationError as exc:
        click.echo(f"Error: {exc}", err=True)
        raise SystemExit(ExitCode.CONFIG_ERROR) from exc


def _intercepted_person(cli_ctx: CLIContext, profile: Profile) -> PersonInterceptor:
    services = cli_ctx.services
    return build_intercepted_person(profile, emit=services.emit_line, observe=services.observe_invocation)


@click.command("demo", context_settings=HELP_SETTINGS)
@click.pass_context
def cli_demo(ctx: click.Context) -> None:
    """Introduce the configured person through the interceptor.

    Prints an observation line followed by the result line for each of
    ``introduce``, ``say_age`` and ``say_where_from``. The profile comes from
    the ``[demo]`` configuration section (override with ``--set demo.KEY=VALUE``).
    """
    cli_ctx = get_cli_context(ctx)
    profile = _load_profile(cli_ctx)
    with lib_log_rich.runtime.bind(job_id="cli-demo", extra={"command": "demo", "person": profile.name}):
        logger.info("Running interception demo")
        run_demo(_intercepted_person(cli_ctx, profile), profile)


@click.command("call", context_settings=HELP_SETTINGS)
@click.argument("operation", type=str)
@click.argument("args", nargs=-1, type=str)
@click.pass_context
def cli_call(ctx: click.Context, operation: str, args: tuple[str, ...]) -> None:
    """Send one OPERATION with ARGS through the interceptor.

    OPERATION is an identifier such as ``sayAge`` or its method name ``say_age``.

    ARGS are parsed as JSON where possible (``30`` becomes an integer) and
    passed on as strings otherwise. Operations outside the capability set
    exit with code 22.

    \b
    Examples:
        person-proxy call introduce Ravi
        person-proxy call say_where_from Mumbai India
    """
    cli_ctx = get_cli_context(ctx)
    profile = _load_profile(cli_ctx)
    values = tuple(coerce_value(raw) for raw in args)

    with lib_log_rich.runtime.bind(job_id="cli-call", extra={"command": "call", "operation": operation}):
        try:
            resolved = Operation.parse(operation)
        except UnsupportedOperationError as exc:
            logger.warning("Rejected unsupported operation", extra={"operation": operation})
            click.echo(f"Error: {exc}", err=True)
            raise SystemExit(ExitCode.INVALID_ARGUMENT) from exc
        _intercepted_person(cli_ctx, profile).invoke(resolved, *values)


__all__ = ["cli_call", "cli_demo"]
