"""Root ``syntax-tour`` command group.

Without a subcommand the group runs the tour. The only global option besides
``--version`` and ``--help`` is ``--traceback``; nothing on the tour path
reads files or environment variables.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

import rich_click as click

from syntax_tour import __init__conf__

from .commands import cli_info, cli_tour
from .context import enable_tracebacks

if TYPE_CHECKING:
    from syntax_tour.composition import AppServices

#: ``-h`` works everywhere ``--help`` does.
CLICK_CONTEXT_SETTINGS: Final[dict[str, list[str]]] = {"help_option_names": ["-h", "--help"]}


@click.group(
    help=__init__conf__.title,
    context_settings=CLICK_CONTEXT_SETTINGS,
    invoke_without_command=True,
)
@click.version_option(
    version=__init__conf__.version,
    prog_name=__init__conf__.shell_command,
    message=f"{__init__conf__.shell_command} version {__init__conf__.version}",
)
@click.option(
    "--traceback/--no-traceback",
    default=False,
    help="Show the full Python traceback when a command fails",
)
@click.pass_context
def cli(ctx: click.Context, traceback: bool) -> None:
    """Start logging, apply ``--traceback``, and run the tour by default.

    ``ctx.obj`` must be the services factory handed over by :func:`.main.main`
    or a test.
    """
    if not callable(ctx.obj):
        raise RuntimeError("Services factory not provided. This is a bug.")
    services: AppServices = ctx.obj()
    services.init_logging()
    enable_tracebacks(traceback)

    if ctx.invoked_subcommand is None:
        ctx.invoke(cli_tour)


cli.add_command(cli_tour)
cli.add_command(cli_info)


__all__ = ["CLICK_CONTEXT_SETTINGS", "cli"]
