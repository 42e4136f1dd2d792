"""``person-proxy config``: show the merged configuration."""

from __future__ import annotations

import logging

import lib_log_rich.runtime
import rich_click as click

from person_proxy.domain.enums import OutputFormat

from ..context import HELP_SETTINGS, get_cli_context
from ..exit_codes import ExitCode

logger = logging.getLogger(__name__)


@click.command("config", context_settings=HELP_SETTINGS)
@click.option(
    "--format",
    "output_format",
    type=click.Choice([fmt.value for fmt in OutputFormat], case_sensitive=False),
    default=OutputFormat.HUMAN.value,
    help="Human-readable or JSON output",
)
@click.option("--section", default=None, help="Show one section only, e.g. 'demo'")
@click.pass_context
def cli_config(ctx: click.Context, output_format: str, section: str | None) -> None:
    """Show the configuration the demo runs with, ``--set`` overrides included.

    Layers, lowest first: bundled defaults, app, host, user, .env, environment.
    An unknown ``--section`` exits with code 22.
    """
    cli_ctx = get_cli_context(ctx)
    fmt = OutputFormat(output_format.lower())
    with lib_log_rich.runtime.bind(job_id="cli-config", extra={"command": "config", "format": fmt.value}):
        logger.info("Displaying configuration", extra={"section": section})
        try:
            cli_ctx.services.display_config(cli_ctx.config, output_format=fmt, section=section, profile=cli_ctx.profile)
        except ValueError as exc:
            click.echo(f"Error: {exc}", err=True)
            raise SystemExit(ExitCode.INVALID_ARGUMENT) from exc


__all__ = ["cli_config"]
