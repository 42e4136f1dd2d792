"""Observation record for a single intercepted call."""

from __future__ import annotations

from dataclasses import dataclass

from .enums import Operation


@dataclass(frozen=True, slots=True)
class Invocation:
    """One call captured by the interceptor before it is forwarded.

    Attributes:
        operation: Which capability operation was invoked.
        args: Positional arguments exactly as the caller supplied them.

    Example:
        >>> call = Invocation(Operation.SAY_WHERE_FROM, ("Delhi", "India"))
        >>> call.operation.value
        'sayWhereFrom'
        >>> call.args
        ('Delhi', 'India')
    """

    operation: Operation
    args: tuple[object, ...] = ()


__all__ = ["Invocation"]
