"""``person-proxy config`` output, rendered by lib_layered_config."""

from __future__ import annotations

import lib_log_rich.runtime
from lib_layered_config import Config
from lib_layered_config import OutputFormat as LayeredFormat
from lib_layered_config import display_config as render_config
from rich.console import Console

from person_proxy.domain.enums import OutputFormat


def display_config(
    config: Config,
    *,
    output_format: OutputFormat = OutputFormat.HUMAN,
    section: str | None = None,
    console: Console | None = None,
    profile: str | None = None,
) -> None:
    """Print ``config`` (or just ``section`` of it) with each value's source layer.

    Buffered log records are flushed first so they do not land inside the dump.
    ``profile`` only labels the output; the caller already loaded it.

    Raises:
        ValueError: If ``section`` is not in ``config``.
    """
    if lib_log_rich.runtime.is_initialised():
        lib_log_rich.runtime.flush()
    render_config(
        config,
        output_format=LayeredFormat(output_format.value),
        section=section,
        profile=profile,
        console=console,
    )


__all__ = ["display_config"]
