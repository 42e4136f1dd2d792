"""Start lib_log_rich for a production ``person-proxy`` run.

The ``[lib_log_rich]`` section of the layered config becomes the runtime's
settings. Interception records logged by :mod:`person_proxy.adapters.console`
and the demo's debug records reach its sinks through the stdlib bridge.
"""

from __future__ import annotations

from typing import cast

import lib_log_rich.config
import lib_log_rich.runtime
from lib_layered_config import Config
from pydantic import BaseModel, ConfigDict

from person_proxy import __init__conf__


class LoggingConfigModel(BaseModel):
    """The ``[lib_log_rich]`` section; unknown keys go to ``RuntimeConfig`` as-is.

    Example:
        >>> LoggingConfigModel(console_level="INFO").model_dump(exclude_none=True)
        {'environment': 'prod', 'console_level': 'INFO'}
    """

    service: str | None = None
    environment: str = "prod"

    model_config = ConfigDict(extra="allow")


def _runtime_config(config: Config) -> lib_log_rich.runtime.RuntimeConfig:
    raw = config.get("lib_log_rich", default={}) or {}
    section = LoggingConfigModel.model_validate(cast("dict[str, object]", raw))
    return lib_log_rich.runtime.RuntimeConfig(
        service=section.service or __init__conf__.name,
        environment=section.environment,
        **section.model_dump(exclude={"service", "environment"}, exclude_none=True),
    )


def init_logging(config: Config) -> None:
    """Start the runtime from ``config`` and route stdlib ``logging`` into it.

    ``.env`` files are read first so ``LOG_*`` variables apply. Does nothing
    when a runtime is already running.

    Example:
        >>> init_logging(Config({"lib_log_rich": {"environment": "test"}}, {}))  # doctest: +SKIP
    """
    if lib_log_rich.runtime.is_initialised():
        return
    lib_log_rich.config.enable_dotenv()
    lib_log_rich.runtime.init(_runtime_config(config))
    lib_log_rich.runtime.attach_std_logging()


__all__ = [
    "LoggingConfigModel",
    "init_logging",
]
