"""Root ``person-proxy`` group.

The group resolves configuration and logging for every command. Run without a
subcommand, it runs ``demo``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import lib_cli_exit_tools
import rich_click as click

from person_proxy import __init__conf__
from person_proxy.adapters.config.overrides import apply_overrides

from .commands import cli_call, cli_config, cli_demo, cli_info
from .context import HELP_SETTINGS, CLIContext

if TYPE_CHECKING:
    from person_proxy.composition import AppServices


def _services(ctx: click.Context) -> AppServices:
    factory = ctx.obj
    if not callable(factory):
        raise RuntimeError("person-proxy needs a services factory as Click's obj (build_production or build_testing).")
    services: AppServices = factory()  # Click types obj as Any
    return services


@click.group(help=__init__conf__.title, context_settings=HELP_SETTINGS, invoke_without_command=True)
@click.version_option(
    version=__init__conf__.version,
    prog_name=__init__conf__.shell_command,
    message=f"{__init__conf__.shell_command} version {__init__conf__.version}",
)
@click.option("--traceback/--no-traceback", default=False, help="Print the full Python traceback when a command fails")
@click.option("--profile", default=None, help="Read configuration from profile/<NAME>/ directories")
@click.option(
    "--set",
    "set_overrides",
    multiple=True,
    metavar="SECTION.KEY=VALUE",
    help="Override one configuration value, e.g. demo.age=41 (repeatable)",
)
@click.pass_context
def cli(ctx: click.Context, traceback: bool, profile: str | None, set_overrides: tuple[str, ...]) -> None:
    """Load configuration, start logging and hand both to the chosen command.

    Example:
        >>> from click.testing import CliRunner
        >>> from person_proxy.adapters.memory import TranscriptSpy
        >>> from person_proxy.composition import build_testing
        >>> spy = TranscriptSpy()
        >>> CliRunner().invoke(cli, [], obj=lambda: build_testing(spy=spy)).exit_code
        0
        >>> spy.lines[2]
        '[Proxy Interception] Method called: sayAge'
    """
    services = _services(ctx)
    try:
        config = apply_overrides(services.get_config(profile=profile), set_overrides)
    except ValueError as exc:
        raise click.UsageError(str(exc)) from exc
    services.init_logging(config)

    lib_cli_exit_tools.config.traceback = traceback
    lib_cli_exit_tools.config.traceback_force_color = traceback
    ctx.obj = CLIContext(config=config, services=services, profile=profile)

    if ctx.invoked_subcommand is None:
        ctx.invoke(cli_demo)


for _command in (cli_demo, cli_call, cli_info, cli_config):
    cli.add_command(_command)


__all__ = ["cli"]
