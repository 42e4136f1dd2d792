"""Exit codes of the ``person-proxy`` command line."""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    """Process exit codes, following errno and sysexits.h where one fits.

    Click usage errors keep Click's own code 2. Unexpected exceptions get
    whatever ``lib_cli_exit_tools`` maps them to.

    Example:
        >>> int(ExitCode.INVALID_ARGUMENT)
        22
    """

    SUCCESS = 0
    #: EINVAL: an operation outside the person capability set, or an unknown config section.
    INVALID_ARGUMENT = 22
    #: EX_CONFIG: the ``[demo]`` section does not describe a valid person.
    CONFIG_ERROR = 78


__all__ = ["ExitCode"]
