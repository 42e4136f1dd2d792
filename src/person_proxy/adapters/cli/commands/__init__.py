"""Subcommands registered on the root ``person-proxy`` group."""

from __future__ import annotations

from .config import cli_config
from .demo import cli_call, cli_demo
from .info import cli_info

__all__ = [
    "cli_call",
    "cli_config",
    "cli_demo",
    "cli_info",
]
