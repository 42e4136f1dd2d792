"""In-memory logging adapter for testing."""

from __future__ import annotations

import lib_log_rich.runtime
from lib_layered_config import Config

from person_proxy import __init__conf__


def init_logging_in_memory(config: Config) -> None:
    """Start a quiet lib_log_rich runtime so commands can bind log context.

    Ignores ``config`` and skips ``.env`` loading and the stdlib bridge.
    Calls after the first one return immediately.
    """
    if lib_log_rich.runtime.is_initialised():
        return
    lib_log_rich.runtime.init(
        lib_log_rich.runtime.RuntimeConfig(
            service=__init__conf__.name,
            environment="test",
            console_level="CRITICAL",
        )
    )


__all__ = ["init_logging_in_memory"]
