"""Application layer - use cases and port definitions.

Contains the snippet tour use case that orchestrates domain demonstrations
and port protocols that define the interfaces for adapter implementations.

Contents:
    * :mod:`.ports` - Callable Protocol definitions for adapter functions
    * :mod:`.tour` - Snippet catalog and runner
"""

from __future__ import annotations

from .ports import (
    DisplayConfig,
    GetConfig,
    GetUserName,
    InitLogging,
)
from .tour import SNIPPETS, Snippet, SnippetContext, run_snippets, select_snippets

__all__ = [
    "DisplayConfig",
    "GetConfig",
    "GetUserName",
    "InitLogging",
    "SNIPPETS",
    "Snippet",
    "SnippetContext",
    "run_snippets",
    "select_snippets",
]
