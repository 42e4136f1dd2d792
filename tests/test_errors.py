"""Domain error types: instantiation, message preservation, and ancestry."""

from __future__ import annotations

import pytest

from person_proxy.domain.errors import (
    ConfigurationError,
    InvalidProfileError,
    UnsupportedOperationError,
)


@pytest.mark.os_agnostic
def test_unsupported_operation_error_is_an_attribute_error() -> None:
    """hasattr/getattr-with-default keep working against the interceptor."""
    exc = UnsupportedOperationError("Unsupported operation: 'fly'")

    assert isinstance(exc, AttributeError)
    assert str(exc) == "Unsupported operation: 'fly'"


@pytest.mark.os_agnostic
def test_invalid_profile_error_is_a_value_error() -> None:
    assert isinstance(InvalidProfileError("age"), ValueError)


@pytest.mark.os_agnostic
def test_configuration_error_preserves_message() -> None:
    assert str(ConfigurationError("[demo] section is invalid")) == "[demo] section is invalid"
