"""Domain layer - pure business logic with no I/O or framework dependencies.

Contains entities, value objects, and domain services that form the core
business logic of the application.

Contents:
    * :mod:`.behaviors` - Line rendering for subject output and observations
    * :mod:`.enums` - Domain enumerations (Operation, OutputFormat)
    * :mod:`.errors` - Domain exception types
    * :mod:`.invocation` - Observation record for an intercepted call
    * :mod:`.person` - Demo profile and the concrete subject
"""

from __future__ import annotations

from .behaviors import (
    OBSERVATION_PREFIX,
    build_age_statement,
    build_introduction,
    build_observation,
    build_origin_statement,
)
from .enums import Operation, OutputFormat
from .errors import ConfigurationError, InvalidProfileError, UnsupportedOperationError
from .invocation import Invocation
from .person import DEFAULT_PROFILE, Profile, Resident

__all__ = [
    # Behaviors
    "OBSERVATION_PREFIX",
    "build_age_statement",
    "build_introduction",
    "build_observation",
    "build_origin_statement",
    # Enums
    "Operation",
    "OutputFormat",
    # Errors
    "ConfigurationError",
    "InvalidProfileError",
    "UnsupportedOperationError",
    # Entities
    "DEFAULT_PROFILE",
    "Invocation",
    "Profile",
    "Resident",
]
