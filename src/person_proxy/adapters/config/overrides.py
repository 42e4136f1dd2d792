"""``--set SECTION.KEY=VALUE`` overrides for the loaded configuration.

Values are read as JSON where they parse, so ``demo.age=41`` sets an ``int``.
The ``call`` command reuses :func:`coerce_value` for its arguments.
"""

from __future__ import annotations

from collections.abc import Iterable

import orjson
from lib_layered_config import Config

CoercedValue = str | int | float | bool | None | list[object] | dict[str, object]
"""What :func:`coerce_value` can return."""

OverridePath = tuple[str, ...]
"""Section name followed by the nested key names."""


def coerce_value(raw: str) -> CoercedValue:
    """Return ``raw`` parsed as JSON, or ``raw`` itself when it is not JSON.

    Examples:
        >>> coerce_value("30"), coerce_value("false"), coerce_value("Delhi")
        (30, False, 'Delhi')
        >>> coerce_value('"30"')
        '30'
    """
    if not raw:
        return raw
    try:
        return orjson.loads(raw)
    except orjson.JSONDecodeError:
        return raw


def parse_override(raw: str) -> tuple[OverridePath, CoercedValue]:
    """Split ``SECTION.KEY[.SUBKEY...]=VALUE`` into its path and coerced value.

    Only the first ``=`` separates; the value may contain more.

    Raises:
        ValueError: If ``=`` is missing, the path has no dot, or a name in it is empty.

    Examples:
        >>> parse_override("demo.age=41")
        (('demo', 'age'), 41)
        >>> parse_override("demo.name=a=b")
        (('demo', 'name'), 'a=b')
    """
    dotted, sep, text = raw.partition("=")
    if not sep:
        raise ValueError(f"--set {raw!r} must contain '=' (SECTION.KEY=VALUE)")
    path = tuple(dotted.split("."))
    if len(path) < 2:
        raise ValueError(f"--set {raw!r} needs SECTION.KEY before '='")
    if not all(path):
        raise ValueError(f"--set {raw!r} has an empty name in {dotted!r}")
    return path, coerce_value(text)


def build_override_tree(raw_overrides: Iterable[str]) -> dict[str, object]:
    """Merge every override into one nested mapping; later ones win.

    Raises:
        ValueError: If an override is malformed or descends below a key that
            an earlier override set to a plain value.

    Example:
        >>> build_override_tree(["demo.age=41", "demo.city=Mumbai"])
        {'demo': {'age': 41, 'city': 'Mumbai'}}
    """
    tree: dict[str, object] = {}
    for raw in raw_overrides:
        path, value = parse_override(raw)
        node = tree
        for name in path[:-1]:
            child = node.setdefault(name, {})
            if not isinstance(child, dict):
                raise ValueError(f"--set {raw!r} goes below {name!r}, which is already set to {child!r}")
            node = child  # pyright: ignore[reportUnknownVariableType]
        node[path[-1]] = value
    return tree


def apply_overrides(config: Config, raw_overrides: tuple[str, ...]) -> Config:
    """Return ``config`` with the ``--set`` values merged over every file and env layer.

    Example:
        >>> base = Config({"demo": {"age": 30, "city": "Delhi"}}, {})
        >>> apply_overrides(base, ("demo.age=41",))["demo"]
        {'age': 41, 'city': 'Delhi'}
        >>> apply_overrides(base, ()) is base
        True
    """
    if not raw_overrides:
        return config
    return config.with_overrides(build_override_tree(raw_overrides))  # type: ignore[arg-type]


__all__ = [
    "CoercedValue",
    "OverridePath",
    "apply_overrides",
    "build_override_tree",
    "coerce_value",
    "parse_override",
]
