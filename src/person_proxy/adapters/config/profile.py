"""Read the ``[demo]`` section into a domain :class:`Profile`.

Pydantic parses the raw section at the boundary; the domain dataclass then
applies its own invariants. Both kinds of failure surface as
:class:`ConfigurationError` so the CLI can map them to one exit code.
"""

from __future__ import annotations

from typing import cast

from lib_layered_config import Config
from pydantic import BaseModel, ConfigDict, ValidationError

from person_proxy.domain.errors import ConfigurationError, InvalidProfileError
from person_proxy.domain.person import DEFAULT_PROFILE, Profile


class DemoProfileModel(BaseModel):
    """Pydantic model for [demo] config section validation.

    Missing keys fall back to the built-in demo profile. Unknown keys are
    rejected so a typo like ``contry`` does not pass silently.

    Example:
        >>> DemoProfileModel(age="41").age
        41
        >>> DemoProfileModel().name
        'Mohan'
    """

    name: str = DEFAULT_PROFILE.name
    age: int = DEFAULT_PROFILE.age
    city: str = DEFAULT_PROFILE.city
    country: str = DEFAULT_PROFILE.country

    model_config = ConfigDict(extra="forbid")


def load_demo_profile(config: Config) -> Profile:
    """Build the demo profile from the ``[demo]`` section of ``config``.

    Args:
        config: Loaded layered configuration.

    Returns:
        Validated domain profile.

    Raises:
        ConfigurationError: If the section has unknown keys, wrongly typed
            values, or values the domain rejects.

    Example:
        >>> load_demo_profile(Config({"demo": {"city": "Mumbai"}}, {})).city
        'Mumbai'
    """
    raw: object = config.get("demo", default={})
    try:
        parsed = DemoProfileModel.model_validate(cast("dict[str, object]", raw) if raw else {})
        return Profile(name=parsed.name, age=parsed.age, city=parsed.city, country=parsed.country)
    except (ValidationError, InvalidProfileError) as exc:
        raise ConfigurationError(f"Invalid [demo] configuration: {exc}") from exc


__all__ = [
    "DemoProfileModel",
    "load_demo_profile",
]
