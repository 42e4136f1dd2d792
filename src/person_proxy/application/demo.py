"""Demo use case: the fixed call sequence driven through a person."""

from __future__ import annotations

import logging

from ..domain.person import Profile
from .ports import Person

logger = logging.getLogger(__name__)


def run_demo(person: Person, profile: Profile) -> None:
    """Issue the fixed three-call sequence against ``person``.

    Calls ``introduce``, ``say_age`` and ``say_where_from`` in that order
    with the values from ``profile``. Any failure propagates to the caller.

    Args:
        person: Any implementation of the capability interface, usually an
            intercepted subject from the composition root.
        profile: Source of the call arguments.

    Example:
        >>> from person_proxy.domain.person import DEFAULT_PROFILE, Resident
        >>> lines: list[str] = []
        >>> run_demo(Resident(DEFAULT_PROFILE, emit=lines.append), DEFAULT_PROFILE)
        >>> lines[0]
        'Hello, my name is Mohan.'
    """
    logger.debug("Running demo sequence", extra={"person": profile.name})
    person.introduce(profile.name)
    person.say_age(profile.age)
    person.say_where_from(profile.city, profile.country)


__all__ = ["run_demo"]
