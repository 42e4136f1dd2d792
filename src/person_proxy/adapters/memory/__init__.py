"""Adapters behind ``build_testing``: no config files, no stdout.

The person is always Mohan. Every output line lands in a :class:`TranscriptSpy`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .config import display_config_in_memory, get_config_in_memory
from .logging import init_logging_in_memory
from .transcript import TranscriptSpy

if TYPE_CHECKING:
    from person_proxy.application.ports import (
        DisplayConfig,
        EmitLine,
        GetConfig,
        InitLogging,
        ObserveInvocation,
    )

    _assert_get_config: GetConfig = get_config_in_memory
    _assert_display_config: DisplayConfig = display_config_in_memory
    _assert_init_logging: InitLogging = init_logging_in_memory
    _assert_emit_line: EmitLine = TranscriptSpy().emit_line
    _assert_observe: ObserveInvocation = TranscriptSpy().observe

__all__ = [
    "TranscriptSpy",
    "display_config_in_memory",
    "get_config_in_memory",
    "init_logging_in_memory",
]
