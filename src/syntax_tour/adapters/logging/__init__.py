"""Logging adapter: lib_log_rich startup for the CLI."""

from __future__ import annotations

from .setup import build_runtime_config, init_logging

__all__ = ["build_runtime_config", "init_logging"]
