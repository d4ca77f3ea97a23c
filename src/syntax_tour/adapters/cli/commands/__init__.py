"""Subcommands registered on the root group."""

from __future__ import annotations

from .info import cli_info
from .tour import cli_tour

__all__ = ["cli_info", "cli_tour"]
