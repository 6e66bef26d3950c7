"""Adapters layer - infrastructure and framework integrations.

Connects the application to the outside world: the command line,
configuration files, the logging runtime and the process environment.

Contents:
    * :mod:`.cli` - rich-click command-line interface
    * :mod:`.config` - Configuration loading, display, overrides, tour settings
    * :mod:`.logging` - Logging setup with lib_log_rich
    * :mod:`.system` - Ambient lookups (current user name)
    * :mod:`.memory` - In-memory doubles for tests
"""

from __future__ import annotations

__all__: list[str] = []
