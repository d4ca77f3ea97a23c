"""Process boundary of the CLI: run Click, turn every outcome into an exit code.

Contents:
    * :func:`main` - Shared by the console script and ``python -m``.
"""

from __future__ import annotations

import sys
import threading
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING, Final

import click
import lib_cli_exit_tools
import lib_log_rich.runtime

from syntax_tour import __init__conf__

from .context import TracebackSettings

if TYPE_CHECKING:
    from syntax_tour.composition import AppServices

#: Characters of traceback text printed without ``--traceback``.
SUMMARY_TRACEBACK_CHARS: Final[int] = 500
#: Characters of traceback text printed with ``--traceback``.
FULL_TRACEBACK_CHARS: Final[int] = 10_000


def _report_failure(exc: BaseException) -> int:
    full = TracebackSettings.current().enabled
    lib_cli_exit_tools.print_exception_message(
        trace_back=full,
        length_limit=FULL_TRACEBACK_CHARS if full else SUMMARY_TRACEBACK_CHARS,
    )
    return lib_cli_exit_tools.get_system_exit_code(exc)


def _invoke(args: list[str], services_factory: Callable[[], AppServices]) -> int:
    from .root import cli

    try:
        cli.main(
            args=args,
            prog_name=__init__conf__.shell_command,
            obj=services_factory,
            standalone_mode=False,
        )
    except click.exceptions.Exit as exc:
        return exc.exit_code
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except BaseException as exc:  # noqa: BLE001
        return _report_failure(exc)
    return 0


def main(
    argv: Sequence[str] | None = None,
    *,
    restore_traceback: bool = True,
    services_factory: Callable[[], AppServices] | None = None,
) -> int:
    """Run the CLI and return its exit code.

    Click runs with ``standalone_mode=False`` so that usage errors keep their
    Click exit code while any other exception, an :class:`IntegerOverflowError`
    for instance, is printed by ``lib_cli_exit_tools`` and mapped to a
    non-zero code. The lib_log_rich runtime is shut down before returning.

    Args:
        argv: Arguments without the program name; ``None`` reads ``sys.argv``.
        restore_traceback: Put the traceback flags back afterwards.
        services_factory: Builds the :class:`AppServices` for this run.

    Raises:
        ValueError: If *services_factory* is missing.

    Example:
        >>> from syntax_tour.composition import build_production
        >>> main(["tour"], services_factory=build_production)  # doctest: +SKIP
        Hello, world!
        ...
        0
    """
    if services_factory is None:
        raise ValueError("services_factory is required. Pass build_production from composition layer.")

    args = list(argv) if argv is not None else sys.argv[1:]
    previous = TracebackSettings.current()
    try:
        return _invoke(args, services_factory)
    finally:
        if restore_traceback:
            previous.install()
        if threading.current_thread() is threading.main_thread() and lib_log_rich.runtime.is_initialised():
            lib_log_rich.runtime.shutdown()


__all__ = ["main"]
