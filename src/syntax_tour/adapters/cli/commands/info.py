"""The ``info`` command."""

from __future__ import annotations

import logging

import lib_log_rich.runtime
import rich_click as click

from syntax_tour import __init__conf__

logger = logging.getLogger(__name__)


@click.command("info")
def cli_info() -> None:
    """Print the installed package's name, version and console script."""
    with lib_log_rich.runtime.bind(job_id="cli-info", extra={"command": "info"}):
        logger.info("Displaying package information")
        __init__conf__.print_info()


__all__ = ["cli_info"]
