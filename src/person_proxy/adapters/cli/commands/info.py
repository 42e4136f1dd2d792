"""``person-proxy info``: print package metadata."""

from __future__ import annotations

import logging

import lib_log_rich.runtime
import rich_click as click

from person_proxy import __init__conf__

from ..context import HELP_SETTINGS

logger = logging.getLogger(__name__)


@click.command("info", context_settings=HELP_SETTINGS)
def cli_info() -> None:
    """Print name, version and the shell command of this installation."""
    with lib_log_rich.runtime.bind(job_id="cli-info", extra={"command": "info"}):
        logger.info("Displaying package information")
        __init__conf__.print_info()


__all__ = ["cli_info"]
