"""Application layer - use cases and port definitions.

Contains use cases that orchestrate domain logic and port protocols that
define the interfaces for adapter implementations.

Contents:
    * :mod:`.ports` - Capability interface and callable Protocol definitions
    * :mod:`.demo` - Fixed demo call sequence
"""

from __future__ import annotations

from .demo import run_demo
from .ports import (
    PERSON_OPERATIONS,
    DisplayConfig,
    EmitLine,
    GetConfig,
    InitLogging,
    ObserveInvocation,
    Person,
)

__all__ = [
    "PERSON_OPERATIONS",
    "DisplayConfig",
    "EmitLine",
    "GetConfig",
    "InitLogging",
    "ObserveInvocation",
    "Person",
    "run_demo",
]
