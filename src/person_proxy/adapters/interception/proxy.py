"""Capability-preserving interceptor for person subjects.

Contents:
    * :class:`PersonInterceptor` - observes every call, then forwards it.

System Role:
    Sits between the composition root and a concrete subject. Callers hold a
    :class:`~person_proxy.application.ports.Person` and cannot tell the
    interceptor apart from the subject except by the observation side effect.
"""

from __future__ import annotations

import logging
from typing import Any, NoReturn

from person_proxy.application.ports import ObserveInvocation, Person
from person_proxy.domain.enums import Operation
from person_proxy.domain.errors import UnsupportedOperationError
from person_proxy.domain.invocation import Invocation

logger = logging.getLogger(__name__)


class PersonInterceptor:
    """Wrap one subject, observing each call before forwarding it.

    Each capability method delegates explicitly and carries its own operation
    identifier. The observer runs first; if it raises, the call is not
    forwarded. Whatever the subject returns or raises reaches the caller
    unchanged. Any attribute outside the capability set raises
    :class:`UnsupportedOperationError`.

    Args:
        target: The subject receiving forwarded calls.
        observe: Sink receiving one :class:`Invocation` per call.

    Examples:
        >>> from person_proxy.domain.person import DEFAULT_PROFILE, Resident
        >>> lines: list[str] = []
        >>> seen: list[Invocation] = []
        >>> proxy = PersonInterceptor(Resident(DEFAULT_PROFILE, emit=lines.append), observe=seen.append)
        >>> proxy.say_age(30)
        >>> [call.operation.value for call in seen], lines
        (['sayAge'], ['I am 30 years old.'])

        >>> proxy.fly()  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        UnsupportedOperationError: Unsupported operation: 'fly'
    """

    __slots__ = ("_observe", "_target")

    def __init__(self, target: Person, *, observe: ObserveInvocation) -> None:
        self._target = target
        self._observe = observe

    @property
    def target(self) -> Person:
        """The wrapped subject."""
        return self._target

    def introduce(self, name: str) -> None:
        return self._forward(Operation.INTRODUCE, name)

    def say_age(self, age: int) -> None:
        return self._forward(Operation.SAY_AGE, age)

    def say_where_from(self, city: str, country: str) -> None:
        return self._forward(Operation.SAY_WHERE_FROM, city, country)

    def invoke(self, operation: str | Operation, *args: object) -> Any:
        """Dispatch a call by operation identifier.

        Args:
            operation: Identifier such as ``"sayAge"`` or method name ``"say_age"``.
            *args: Positional arguments forwarded unmodified.

        Returns:
            Whatever the subject's operation returns.

        Raises:
            UnsupportedOperationError: If ``operation`` is not in the capability set.
        """
        resolved = Operation.parse(operation)
        return getattr(self, resolved.method_name)(*args)

    def _forward(self, operation: Operation, *args: object) -> Any:
        invocation = Invocation(operation, args)
        self._observe(invocation)
        logger.debug("Forwarding %s to %r", operation.value, self._target)
        return getattr(self._target, operation.method_name)(*args)

    def __getattr__(self, name: str) -> NoReturn:
        # Only reached for names not defined on the class.
        raise UnsupportedOperationError(
            f"Unsupported operation: {name!r} (supported: {', '.join(op.value for op in Operation)})"
        )

    def __repr__(self) -> str:
        return f"PersonInterceptor({self._target!r})"


__all__ = ["PersonInterceptor"]
