"""Pure domain functions with no I/O or framework dependencies.

Every line the demo writes to stdout is rendered here, so the subject and
the interceptor only decide *when* a line is produced, never *how* it reads.
"""

from __future__ import annotations

from .invocation import Invocation

OBSERVATION_PREFIX = "[Proxy Interception] Method called:"


def build_introduction(name: str) -> str:
    """Return the introduction line for ``name``.

    Example:
        >>> build_introduction("Mohan")
        'Hello, my name is Mohan.'
    """
    return f"Hello, my name is {name}."


def build_age_statement(age: int) -> str:
    """Return the age statement line.

    Example:
        >>> build_age_statement(30)
        'I am 30 years old.'
    """
    return f"I am {age} years old."


def build_origin_statement(city: str, country: str) -> str:
    """Return the origin statement line.

    Example:
        >>> build_origin_statement("Delhi", "India")
        'I am from Delhi, India.'
    """
    return f"I am from {city}, {country}."


def build_observation(invocation: Invocation) -> str:
    r"""Render the observation record written before a call is forwarded.

    Only the operation identifier is included; arguments stay out of the
    line so it reads the same for every call of one operation.

    Args:
        invocation: The intercepted call.

    Returns:
        A single line naming the invoked operation.

    Example:
        >>> from person_proxy.domain.enums import Operation
        >>> build_observation(Invocation(Operation.SAY_AGE, (30,)))
        '[Proxy Interception] Method called: sayAge'
    """
    return f"{OBSERVATION_PREFIX} {invocation.operation.value}"


__all__ = [
    "OBSERVATION_PREFIX",
    "build_age_statement",
    "build_introduction",
    "build_observation",
    "build_origin_statement",
]
