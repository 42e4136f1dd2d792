"""Type-safe domain enums for person operations and output formats."""

from __future__ import annotations

import re
from enum import Enum

from .errors import UnsupportedOperationError

_WORD_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


class Operation(str, Enum):
    """Stable identifiers for every operation in the person capability set.

    The value is the identifier written into observation records. The
    Python method implementing it is :attr:`method_name`.

    Attributes:
        INTRODUCE: ``introduce(name)``
        SAY_AGE: ``say_age(age)``
        SAY_WHERE_FROM: ``say_where_from(city, country)``

    Example:
        >>> Operation.SAY_AGE.value
        'sayAge'
        >>> Operation.SAY_WHERE_FROM.method_name
        'say_where_from'
    """

    INTRODUCE = "introduce"
    SAY_AGE = "sayAge"
    SAY_WHERE_FROM = "sayWhereFrom"

    @property
    def method_name(self) -> str:
        """Name of the Python method implementing this operation."""
        return _WORD_BOUNDARY.sub("_", self.value).lower()

    @classmethod
    def parse(cls, name: str | Operation) -> Operation:
        """Resolve an identifier or method name, or reject it.

        Args:
            name: ``"sayAge"``, ``"say_age"`` or an ``Operation`` member.

        Returns:
            The matching Operation member.

        Raises:
            UnsupportedOperationError: If ``name`` is not in the capability set.

        Examples:
            >>> Operation.parse("say_where_from")
            <Operation.SAY_WHERE_FROM: 'sayWhereFrom'>
            >>> Operation.parse("sayAge")
            <Operation.SAY_AGE: 'sayAge'>

            >>> Operation.parse("fly")  # doctest: +IGNORE_EXCEPTION_DETAIL
            Traceback (most recent call last):
            ...
            UnsupportedOperationError: Unsupported operation: 'fly'
        """
        for member in cls:
            if name == member.value or name == member.method_name:
                return member
        supported = ", ".join(member.value for member in cls)
        raise UnsupportedOperationError(f"Unsupported operation: {name!r} (supported: {supported})")


class OutputFormat(str, Enum):
    """Output format for ``person-proxy config``.

    Example:
        >>> OutputFormat("json") is OutputFormat.JSON
        True
    """

    HUMAN = "human"
    JSON = "json"


__all__ = [
    "Operation",
    "OutputFormat",
]
