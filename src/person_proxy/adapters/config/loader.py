"""Layered configuration for ``person-proxy``.

Layers, lowest first: the bundled ``defaultconfig.toml``, app, host and user
files, ``.env`` and environment variables. On Linux the user file is
``~/.config/person-proxy/config.toml``.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from lib_layered_config import DEFAULT_MAX_PROFILE_LENGTH, Config, read_config, validate_profile_name

from person_proxy import __init__conf__

#: Defaults shipped with the package: the demo person and quiet console logging.
DEFAULT_CONFIG_PATH = Path(__file__).with_name("defaultconfig.toml")


@lru_cache(maxsize=4)
def get_config(*, profile: str | None = None, start_dir: str | None = None) -> Config:
    """Read the merged configuration, once per ``(profile, start_dir)``.

    Args:
        profile: Adds ``profile/<name>/`` directories to every layer.
        start_dir: Where ``.env`` discovery starts. Defaults to the cwd.

    Raises:
        ValueError: If ``profile`` is empty, too long, or not a plain name
            (``../etc`` and ``a/b`` are rejected).

    Example:
        >>> get_config().get("demo", default={})["name"]
        'Mohan'
    """
    if profile is not None:
        validate_profile_name(profile, max_length=DEFAULT_MAX_PROFILE_LENGTH)
    return read_config(
        vendor=__init__conf__.LAYEREDCONF_VENDOR,
        app=__init__conf__.LAYEREDCONF_APP,
        slug=__init__conf__.LAYEREDCONF_SLUG,
        profile=profile,
        default_file=DEFAULT_CONFIG_PATH,
        start_dir=start_dir,
    )


__all__ = [
    "DEFAULT_CONFIG_PATH",
    "get_config",
]
