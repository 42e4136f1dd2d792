"""Console adapter - stdout sinks for demo output.

Contents:
    * :func:`.sinks.echo_line` - Subject result lines
    * :func:`.sinks.echo_observation` - Interceptor observation records
"""

from __future__ import annotations

from .sinks import echo_line, echo_observation

__all__ = ["echo_line", "echo_observation"]
