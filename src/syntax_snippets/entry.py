"""Console script entry point with production wiring.

Sits at package level, outside the adapters, so it can hand the composition
root's factory to the CLI without the adapters importing composition.
"""

from __future__ import annotations

from .adapters.cli.main import main as cli_main
from .composition import build_production


def main() -> int:
    """Run the ``syntax-snippets`` console script with production services."""
    return cli_main(services_factory=build_production)


__all__ = ["main"]
