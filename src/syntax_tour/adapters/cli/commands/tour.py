"""The ``tour`` command."""

from __future__ import annotations

import logging

import lib_log_rich.runtime
import rich_click as click

from syntax_tour.application.tour import run_tour

logger = logging.getLogger(__name__)


@click.command("tour")
def cli_tour() -> None:
    """Print the fourteen tour lines."""
    with lib_log_rich.runtime.bind(job_id="cli-tour", extra={"command": "tour"}):
        logger.info("Running syntax tour")
        run_tour(click.echo)


__all__ = ["cli_tour"]
