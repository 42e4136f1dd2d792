"""In-memory output adapters for testing.

Provides sinks that satisfy the same Protocols as the console adapters but
collect everything into one ordered transcript instead of writing to stdout.

Contents:
    * :class:`TranscriptSpy` - Captures result lines and observation records.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from person_proxy.domain.behaviors import build_observation
from person_proxy.domain.invocation import Invocation


def _empty_lines() -> list[str]:
    return []


def _empty_invocations() -> list[Invocation]:
    return []


@dataclass
class TranscriptSpy:
    """Captures subject output and interceptor observations in call order.

    ``lines`` interleaves rendered observation lines and result lines exactly
    as they would appear on stdout. Each test should create its own spy.

    Attributes:
        lines: Every line in emission order.
        invocations: Observation records in the order they were received.
        raise_on_observe: When set, :meth:`observe` raises this exception
            after recording the invocation.

    Example:
        >>> from person_proxy.domain.enums import Operation
        >>> spy = TranscriptSpy()
        >>> spy.observe(Invocation(Operation.INTRODUCE, ("Mohan",)))
        >>> spy.emit_line("Hello, my name is Mohan.")
        >>> spy.lines
        ['[Proxy Interception] Method called: introduce', 'Hello, my name is Mohan.']
    """

    lines: list[str] = field(default_factory=_empty_lines)
    invocations: list[Invocation] = field(default_factory=_empty_invocations)
    raise_on_observe: Exception | None = None

    def clear(self) -> None:
        """Reset captured data for next test."""
        self.lines.clear()
        self.invocations.clear()
        self.raise_on_observe = None

    def emit_line(self, line: str) -> None:
        """Record a subject result line."""
        self.lines.append(line)

    def observe(self, invocation: Invocation) -> None:
        """Record an observation and its rendered line."""
        self.invocations.append(invocation)
        self.lines.append(build_observation(invocation))
        if self.raise_on_observe is not None:
            raise self.raise_on_observe

    @property
    def result_lines(self) -> list[str]:
        """Lines that are not observation records."""
        observed = {build_observation(call) for call in self.invocations}
        return [line for line in self.lines if line not in observed]


__all__ = ["TranscriptSpy"]
