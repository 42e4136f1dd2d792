"""Public package surface exposing the interception demo and metadata.

Routes imports through the architectural layers:
- Domain exports: profile, subject, operation identifiers, errors
- Application exports: capability interface and demo use case
- Composition exports: wired interceptor construction
- Metadata: Package information
"""

from __future__ import annotations

# Metadata
from .__init__conf__ import print_info

# Application exports
from .application import Person, run_demo

# Composition exports (wired adapters)
from .composition import build_intercepted_person

# Domain exports
from .domain import (
    DEFAULT_PROFILE,
    Invocation,
    Operation,
    Profile,
    Resident,
    UnsupportedOperationError,
)

__all__ = [
    "DEFAULT_PROFILE",
    "Invocation",
    "Operation",
    "Person",
    "Profile",
    "Resident",
    "UnsupportedOperationError",
    "build_intercepted_person",
    "print_info",
    "run_demo",
]
