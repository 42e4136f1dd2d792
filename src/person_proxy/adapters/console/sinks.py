"""stdout sinks for subject output and observation records.

Both sinks write through ``click.echo`` to the same stream, so an observation
line always lands before the result line of the call it describes.

Contents:
    * :func:`echo_line` - satisfies :class:`~person_proxy.application.ports.EmitLine`.
    * :func:`echo_observation` - satisfies :class:`~person_proxy.application.ports.ObserveInvocation`.
"""

from __future__ import annotations

import logging

import rich_click as click

from person_proxy.domain.behaviors import build_observation
from person_proxy.domain.invocation import Invocation

logger = logging.getLogger(__name__)


def echo_line(line: str) -> None:
    """Write a subject's result line to stdout."""
    click.echo(line)


def echo_observation(invocation: Invocation) -> None:
    """Log the intercepted call and write its observation line to stdout.

    Args:
        invocation: The call about to be forwarded.

    Side Effects:
        Emits one INFO log record and one stdout line.
    """
    logger.info(
        "Intercepted call",
        extra={"operation": invocation.operation.value, "arg_count": len(invocation.args)},
    )
    click.echo(build_observation(invocation))


__all__ = [
    "echo_line",
    "echo_observation",
]
