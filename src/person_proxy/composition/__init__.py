"""Wiring for the person-proxy CLI and the demo it runs.

:func:`build_production` and :func:`build_testing` choose the adapters behind
each port. :func:`build_intercepted_person` is the one place a subject is
created, and it hands that subject straight to its interceptor.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..adapters.config.display import display_config
from ..adapters.config.loader import get_config
from ..adapters.console.sinks import echo_line, echo_observation
from ..adapters.interception.proxy import PersonInterceptor
from ..adapters.logging.setup import init_logging
from ..domain.person import Profile, Resident

if TYPE_CHECKING:
    from ..adapters.memory.transcript import TranscriptSpy
    from ..application.ports import (
        DisplayConfig,
        EmitLine,
        GetConfig,
        InitLogging,
        ObserveInvocation,
        Person,
    )

    # pyright checks each adapter against its port here.
    _assert_get_config: GetConfig = get_config
    _assert_display_config: DisplayConfig = display_config
    _assert_init_logging: InitLogging = init_logging
    _assert_echo_line: EmitLine = echo_line
    _assert_echo_observation: ObserveInvocation = echo_observation
    _assert_resident: type[Person] = Resident
    _assert_interceptor: type[Person] = PersonInterceptor


@dataclass(frozen=True, slots=True)
class AppServices:
    """The adapters a CLI run needs: config in, logging, and two output sinks.

    ``emit_line`` receives the subject's result lines and
    ``observe_invocation`` the interceptor's records.
    """

    get_config: GetConfig
    display_config: DisplayConfig
    init_logging: InitLogging
    emit_line: EmitLine
    observe_invocation: ObserveInvocation


def build_production() -> AppServices:
    """Layered config files, lib_log_rich, and both sinks on stdout."""
    return AppServices(
        get_config=get_config,
        display_config=display_config,
        init_logging=init_logging,
        emit_line=echo_line,
        observe_invocation=echo_observation,
    )


def build_testing(*, spy: TranscriptSpy | None = None) -> AppServices:
    """Mohan's built-in profile, a quiet logging runtime, and a transcript.

    Pass ``spy`` to read the transcript after the command ran; otherwise the
    lines go to a fresh :class:`TranscriptSpy` nobody looks at.
    """
    from ..adapters.memory import (
        TranscriptSpy,
        display_config_in_memory,
        get_config_in_memory,
        init_logging_in_memory,
    )

    transcript = spy or TranscriptSpy()
    return AppServices(
        get_config=get_config_in_memory,
        display_config=display_config_in_memory,
        init_logging=init_logging_in_memory,
        emit_line=transcript.emit_line,
        observe_invocation=transcript.observe,
    )


def build_intercepted_person(profile: Profile, *, emit: EmitLine, observe: ObserveInvocation) -> PersonInterceptor:
    """Create the subject for ``profile`` and return it already wrapped.

    The interceptor ends up holding the only reference to the subject.

    Example:
        >>> from person_proxy.domain.person import DEFAULT_PROFILE
        >>> lines: list[str] = []
        >>> person = build_intercepted_person(
        ...     DEFAULT_PROFILE, emit=lines.append, observe=lambda call: lines.append(call.operation.value)
        ... )
        >>> person.introduce("Mohan")
        >>> lines
        ['introduce', 'Hello, my name is Mohan.']
    """
    return PersonInterceptor(Resident(profile, emit=emit), observe=observe)


__all__ = [
    "AppServices",
    "build_intercepted_person",
    "build_production",
    "build_testing",
]
