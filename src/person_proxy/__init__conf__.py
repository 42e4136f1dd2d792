"""Static package metadata surfaced to CLI commands and documentation.

Values are kept in sync with ``pyproject.toml``; the ``LAYEREDCONF_*``
identifiers decide where lib_layered_config looks for configuration files.

Contents:
    * Metadata constants (``name``, ``title``, ``version``, ...).
    * :func:`print_info` - render the constants for ``person-proxy info``.
"""

from __future__ import annotations

name = "person_proxy"
title = "Intercept calls on a person object, log them, and forward them unchanged"
version = "1.0.0"
author = "person-proxy maintainers"
shell_command = "person-proxy"

#: Vendor directory on macOS/Windows configuration paths.
LAYEREDCONF_VENDOR = "person-proxy"
#: Application directory on macOS/Windows configuration paths.
LAYEREDCONF_APP = "person-proxy"
#: Directory name under XDG configuration paths on Linux.
LAYEREDCONF_SLUG = "person-proxy"


def print_info() -> None:
    """Print the summarised metadata block used by the CLI ``info`` command.

    Example:
        >>> print_info()  # doctest: +ELLIPSIS
        Info for person_proxy:
        ...
    """
    fields = [
        ("name", name),
        ("title", title),
        ("version", version),
        ("author", author),
        ("shell_command", shell_command),
    ]
    pad = max(len(label) for label, _ in fields)
    lines = [f"Info for {name}:", ""]
    lines.extend(f"    {label.ljust(pad)} = {value}" for label, value in fields)
    print("\n".join(lines))
