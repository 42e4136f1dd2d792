"""Demo profile data and the concrete subject that speaks it.

Contents:
    * :class:`Profile` - immutable demo data (name, age, city, country).
    * :class:`Resident` - concrete person performing the real domain action.

System Role:
    ``Resident`` structurally satisfies :class:`person_proxy.application.ports.Person`.
    It never prints directly; every line goes through the ``emit`` sink it was
    constructed with, which keeps this module free of I/O.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from .behaviors import build_age_statement, build_introduction, build_origin_statement
from .errors import InvalidProfileError


def _require_text(field_name: str, value: object) -> None:
    if not isinstance(value, str) or not value.strip():
        raise InvalidProfileError(f"{field_name} must be a non-empty string, got {value!r}")


@dataclass(frozen=True, slots=True)
class Profile:
    """Demo data describing one person.

    Attributes:
        name: Display name.
        age: Age in whole years.
        city: Home city.
        country: Home country.

    Raises:
        InvalidProfileError: If a text field is blank or ``age`` is not a
            non-negative integer.

    Examples:
        >>> Profile(name="Mohan", age=30, city="Delhi", country="India").age
        30

        >>> Profile(name="Mohan", age=-1, city="Delhi", country="India")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        InvalidProfileError: age must be a non-negative integer, got -1
    """

    name: str
    age: int
    city: str
    country: str

    def __post_init__(self) -> None:
        _require_text("name", self.name)
        _require_text("city", self.city)
        _require_text("country", self.country)
        # bool is an int subclass; True is not an age
        if isinstance(self.age, bool) or not isinstance(self.age, int) or self.age < 0:
            raise InvalidProfileError(f"age must be a non-negative integer, got {self.age!r}")


DEFAULT_PROFILE = Profile(name="Mohan", age=30, city="Delhi", country="India")


class Resident:
    """Concrete person implementing the capability interface.

    Each operation renders its line from the call arguments, not from the
    stored profile. ``introduce("Ravi")`` on Mohan's resident introduces
    Ravi.

    Args:
        profile: Demo data held for the lifetime of the instance.
        emit: Sink receiving each rendered line.

    Example:
        >>> lines: list[str] = []
        >>> resident = Resident(DEFAULT_PROFILE, emit=lines.append)
        >>> resident.say_where_from("Delhi", "India")
        >>> lines
        ['I am from Delhi, India.']
    """

    __slots__ = ("_emit", "_profile")

    def __init__(self, profile: Profile, *, emit: Callable[[str], None]) -> None:
        self._profile = profile
        self._emit = emit

    @property
    def profile(self) -> Profile:
        return self._profile

    @property
    def name(self) -> str:
        return self._profile.name

    @property
    def age(self) -> int:
        return self._profile.age

    @property
    def city(self) -> str:
        return self._profile.city

    @property
    def country(self) -> str:
        return self._profile.country

    def introduce(self, name: str) -> None:
        self._emit(build_introduction(name))

    def say_age(self, age: int) -> None:
        self._emit(build_age_statement(age))

    def say_where_from(self, city: str, country: str) -> None:
        self._emit(build_origin_statement(city, country))

    def __repr__(self) -> str:
        return f"Resident({self._profile!r})"


__all__ = [
    "DEFAULT_PROFILE",
    "Profile",
    "Resident",
]
