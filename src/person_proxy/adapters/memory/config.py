"""Filesystem-free configuration for the in-memory wiring."""

from __future__ import annotations

from dataclasses import asdict

from lib_layered_config import Config

from person_proxy.domain.enums import OutputFormat
from person_proxy.domain.person import DEFAULT_PROFILE


def get_config_in_memory(*, profile: str | None = None, start_dir: str | None = None) -> Config:
    """Return a Config holding only the built-in demo person; ``profile`` is ignored.

    Example:
        >>> get_config_in_memory().as_dict()["demo"]["city"]
        'Delhi'
    """
    return Config({"demo": asdict(DEFAULT_PROFILE)}, {})


def display_config_in_memory(
    config: Config,
    *,
    output_format: OutputFormat = OutputFormat.HUMAN,
    section: str | None = None,
    profile: str | None = None,
) -> None:
    """Accept the display call and print nothing."""


__all__ = [
    "display_config_in_memory",
    "get_config_in_memory",
]
