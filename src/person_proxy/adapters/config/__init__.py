"""Configuration adapter - loading, display, overrides, and the demo profile.

Provides adapters for configuration management using lib_layered_config.

Contents:
    * :mod:`.loader` - Configuration loading with caching
    * :mod:`.display` - Configuration display in human/JSON formats
    * :mod:`.overrides` - CLI ``--set`` override parsing and application
    * :mod:`.profile` - ``[demo]`` section parsing into a domain Profile
"""

from __future__ import annotations

from .display import display_config
from .loader import DEFAULT_CONFIG_PATH, get_config
from .overrides import apply_overrides, coerce_value
from .profile import load_demo_profile

__all__ = [
    "DEFAULT_CONFIG_PATH",
    "apply_overrides",
    "coerce_value",
    "display_config",
    "get_config",
    "load_demo_profile",
]
