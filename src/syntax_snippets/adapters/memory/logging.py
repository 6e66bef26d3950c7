"""In-memory logging adapter for testing.

Commands open ``lib_log_rich.runtime.bind`` scopes, which need a running
runtime. This adapter starts one that stays off the console and off every
backend, so test output holds only what the commands print.
"""

from __future__ import annotations

import lib_log_rich.runtime
from lib_layered_config import Config

from syntax_snippets import __init__conf__


def init_logging_in_memory(config: Config) -> None:
    """Start a silent lib_log_rich runtime unless one is already running.

    *config* is accepted for the InitLogging signature and not read, and no
    ``.env`` file is loaded.

    Example:
        >>> from lib_layered_config import Config
        >>> init_logging_in_memory(Config({}, {}))
        >>> lib_log_rich.runtime.is_initialised()
        True
        >>> lib_log_rich.runtime.shutdown()
    """
    if lib_log_rich.runtime.is_initialised():
        return
    lib_log_rich.runtime.init(
        lib_log_rich.runtime.RuntimeConfig(
            service=__init__conf__.name,
            environment="test",
            console_level="CRITICAL",
            backend_level="CRITICAL",
            queue_enabled=False,
        )
    )


__all__ = ["init_logging_in_memory"]
