"""Property-based tests for interception transparency.

Uses hypothesis to generate argument tuples and verify that the interceptor
adds exactly one observation per call and never changes the subject's text.
"""

from __future__ import annotations

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from person_proxy.adapters.interception import PersonInterceptor
from person_proxy.adapters.memory import TranscriptSpy
from person_proxy.domain.behaviors import build_observation
from person_proxy.domain.enums import Operation
from person_proxy.domain.invocation import Invocation
from person_proxy.domain.person import DEFAULT_PROFILE, Resident

texts = st.text(max_size=40)
ages = st.integers(min_value=0, max_value=150)
KNOWN_NAMES = {op.value for op in Operation} | {op.method_name for op in Operation}

calls = st.one_of(
    st.tuples(st.just(Operation.INTRODUCE), st.tuples(texts)),
    st.tuples(st.just(Operation.SAY_AGE), st.tuples(ages)),
    st.tuples(st.just(Operation.SAY_WHERE_FROM), st.tuples(texts, texts)),
)


def _direct_lines(operation: Operation, args: tuple[object, ...]) -> list[str]:
    lines: list[str] = []
    getattr(Resident(DEFAULT_PROFILE, emit=lines.append), operation.method_name)(*args)
    return lines


@pytest.mark.os_agnostic
@given(call=calls)
@settings(max_examples=200)
def test_intercepted_call_is_observation_then_direct_output(call: tuple[Operation, tuple[object, ...]]) -> None:
    operation, args = call
    spy = TranscriptSpy()
    proxy = PersonInterceptor(Resident(DEFAULT_PROFILE, emit=spy.emit_line), observe=spy.observe)

    getattr(proxy, operation.method_name)(*args)

    assert spy.lines == [build_observation(Invocation(operation, args)), *_direct_lines(operation, args)]
    assert spy.invocations == [Invocation(operation, args)]


@pytest.mark.os_agnostic
@given(sequence=st.lists(calls, max_size=10))
def test_call_sequence_yields_one_pair_per_call(sequence: list[tuple[Operation, tuple[object, ...]]]) -> None:
    spy = TranscriptSpy()
    proxy = PersonInterceptor(Resident(DEFAULT_PROFILE, emit=spy.emit_line), observe=spy.observe)

    for operation, args in sequence:
        proxy.invoke(operation, *args)

    expected: list[str] = []
    for operation, args in sequence:
        expected.append(build_observation(Invocation(operation, args)))
        expected.extend(_direct_lines(operation, args))
    assert spy.lines == expected


@pytest.mark.os_agnostic
@given(name=st.text(min_size=1).filter(lambda value: value not in KNOWN_NAMES))
def test_any_other_identifier_is_rejected(name: str) -> None:
    spy = TranscriptSpy()
    proxy = PersonInterceptor(Resident(DEFAULT_PROFILE, emit=spy.emit_line), observe=spy.observe)

    with pytest.raises(AttributeError):
        proxy.invoke(name)

    assert spy.lines == []
