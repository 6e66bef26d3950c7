"""CLI command implementations.

Collects all subcommand functions and re-exports them for registration
with the root CLI group.

Contents:
    * Tour commands from :mod:`.tour_cmd`
    * Info command from :mod:`.info`
    * Config command from :mod:`.config`
"""

from __future__ import annotations

from .config import cli_config
from .info import cli_info
from .tour_cmd import cli_list, cli_run

__all__ = [
    "cli_config",
    "cli_info",
    "cli_list",
    "cli_run",
]
