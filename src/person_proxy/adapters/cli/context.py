"""State the root group resolves once and hands to every subcommand."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

import rich_click as click
from lib_layered_config import Config

if TYPE_CHECKING:
    from person_proxy.composition import AppServices

#: Click settings shared by the group and its commands.
HELP_SETTINGS: Final[dict[str, list[str]]] = {"help_option_names": ["-h", "--help"]}


@dataclass(frozen=True, slots=True)
class CLIContext:
    """Configuration with ``--set`` applied, the wired services and the profile name."""

    config: Config
    services: AppServices
    profile: str | None = None


def get_cli_context(ctx: click.Context) -> CLIContext:
    """Return the CLIContext stored on ``ctx`` or one of its parents.

    Raises:
        RuntimeError: If the root group has not run for ``ctx``.
    """
    found = ctx.find_object(CLIContext)
    if found is None:
        raise RuntimeError("CLI context not initialized; invoke commands through the person-proxy group.")
    return found


__all__ = [
    "HELP_SETTINGS",
    "CLIContext",
    "get_cli_context",
]
