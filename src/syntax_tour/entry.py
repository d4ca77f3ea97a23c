"""Console script entry point with production wiring.

System Role:
    Sits at package level (outside adapters) so the composition root can be
    handed to the CLI without the adapters layer importing it.
"""

from __future__ import annotations

from .adapters.cli.main import main as cli_main
from .composition import build_production


def main() -> int:
    """Run the ``syntax-tour`` console script.

    Returns:
        Exit code from CLI execution.
    """
    return cli_main(services_factory=build_production)


__all__ = ["main"]
