"""Console script entry point with production wiring.

Sits at package level (outside adapters) so composition can be wired into
the adapters layer without violating the layer contracts.
"""

from __future__ import annotations

from .adapters.cli.main import main as cli_main
from .composition import build_production


def main() -> int:
    """Run the ``person-proxy`` console script with production services.

    Returns:
        Exit code from CLI execution.
    """
    return cli_main(services_factory=build_production)


__all__ = ["main"]
