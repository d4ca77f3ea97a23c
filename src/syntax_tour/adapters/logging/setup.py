"""lib_log_rich runtime for the CLI, started from fixed settings.

The settings are constants: the tour's output and exit status must not
depend on files or the environment, so nothing here is looked up at runtime.
Domain and application modules log through ``logging.getLogger(__name__)``;
:func:`init_logging` bridges those records into lib_log_rich.
"""

from __future__ import annotations

from typing import Final

import lib_log_rich.runtime

from syntax_tour import __init__conf__

#: Service name stamped on every log record.
LOG_SERVICE: Final[str] = __init__conf__.name
#: Environment label stamped on every log record; the tour only runs locally.
LOG_ENVIRONMENT: Final[str] = "local"
#: Records below this level stay off the console, which keeps stdout and
#: stderr quiet during a normal tour.
CONSOLE_LEVEL: Final[str] = "WARNING"


def build_runtime_config() -> lib_log_rich.runtime.RuntimeConfig:
    """Return the runtime settings the CLI always starts with.

    Example:
        >>> build_runtime_config().service
        'syntax_tour'
    """
    return lib_log_rich.runtime.RuntimeConfig(
        service=LOG_SERVICE,
        environment=LOG_ENVIRONMENT,
        console_level=CONSOLE_LEVEL,
    )


def init_logging() -> None:
    """Start lib_log_rich and attach stdlib logging, once per process."""
    if lib_log_rich.runtime.is_initialised():
        return
    lib_log_rich.runtime.init(build_runtime_config())
    lib_log_rich.runtime.attach_std_logging()


__all__ = [
    "CONSOLE_LEVEL",
    "LOG_ENVIRONMENT",
    "LOG_SERVICE",
    "build_runtime_config",
    "init_logging",
]
