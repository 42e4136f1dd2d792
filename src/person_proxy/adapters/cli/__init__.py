"""The ``person-proxy`` command line.

Contents:
    * :func:`cli` - root group from :mod:`.root`
    * :func:`main` - process boundary from :mod:`.main`
    * :class:`ExitCode` and :class:`CLIContext`
"""

from __future__ import annotations

from .context import CLIContext, get_cli_context
from .exit_codes import ExitCode
from .main import main
from .root import cli

__all__ = [
    "CLIContext",
    "ExitCode",
    "cli",
    "get_cli_context",
    "main",
]
