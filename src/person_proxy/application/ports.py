"""Application ports - Protocol definitions for subjects and adapter functions.

``Person`` is the capability interface shared by the concrete subject and the
interceptor. The remaining Protocol classes define a ``__call__`` method whose
signature exactly matches the corresponding adapter function. Existing
module-level functions satisfy these protocols automatically via structural
subtyping (PEP 544).

System Role:
    Sits between domain and adapters.  Infrastructure types (``Config``) are
    imported under ``TYPE_CHECKING`` only so that import-linter layer
    contracts remain satisfied at runtime.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Final, Protocol, runtime_checkable

from ..domain.enums import Operation, OutputFormat
from ..domain.invocation import Invocation

if TYPE_CHECKING:
    from lib_layered_config import Config


@runtime_checkable
class Person(Protocol):
    """Capability interface: the operations any subject must support."""

    def introduce(self, name: str) -> None: ...

    def say_age(self, age: int) -> None: ...

    def say_where_from(self, city: str, country: str) -> None: ...


#: Operations named by :class:`Person`, one per Protocol method.
PERSON_OPERATIONS: Final[frozenset[Operation]] = frozenset(Operation)


class EmitLine(Protocol):
    """Write one result line produced by a subject."""

    def __call__(self, line: str) -> None: ...


class ObserveInvocation(Protocol):
    """Record an intercepted call before it is forwarded."""

    def __call__(self, invocation: Invocation) -> None: ...


class GetConfig(Protocol):
    """Load layered configuration with application defaults."""

    def __call__(self, *, profile: str | None = ..., start_dir: str | None = ...) -> Config: ...


class DisplayConfig(Protocol):
    """Display the provided configuration in the requested format."""

    def __call__(
        self, config: Config, *, output_format: OutputFormat = ..., section: str | None = ..., profile: str | None = ...
    ) -> None: ...


class InitLogging(Protocol):
    """Initialize lib_log_rich runtime with the provided configuration."""

    def __call__(self, config: Config) -> None: ...


__all__ = [
    "PERSON_OPERATIONS",
    "DisplayConfig",
    "EmitLine",
    "GetConfig",
    "InitLogging",
    "ObserveInvocation",
    "Person",
]
