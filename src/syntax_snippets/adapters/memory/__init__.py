"""In-memory adapter implementations for testing.

Lightweight implementations of the application ports that operate entirely in
memory: no configuration files and no environment lookups. The logging
adapter starts a silent lib_log_rich runtime so commands can bind log scopes.

Contents:
    * :mod:`.config` - In-memory configuration adapters
    * :mod:`.logging` - In-memory logging adapter
    * :mod:`.user` - In-memory user-name lookup (UserNameStub class)
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .config import display_config_in_memory, get_config_in_memory
from .logging import init_logging_in_memory
from .user import UserNameStub

# Static conformance assertions
if TYPE_CHECKING:
    from syntax_snippets.application.ports import (
        DisplayConfig,
        GetConfig,
        GetUserName,
        InitLogging,
    )

    _assert_get_config: GetConfig = get_config_in_memory
    _assert_display_config: DisplayConfig = display_config_in_memory
    _assert_init_logging: InitLogging = init_logging_in_memory
    _assert_get_user_name: GetUserName = UserNameStub().get_user_name

__all__ = [
    "UserNameStub",
    "display_config_in_memory",
    "get_config_in_memory",
    "init_logging_in_memory",
]
