"""Composition root wiring adapters to application ports."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

# Configuration services
from ..adapters.config.display import display_config
from ..adapters.config.loader import get_config

# Logging services
from ..adapters.logging.setup import init_logging

# System services
from ..adapters.system.user import get_user_name
from ..domain.singletons import ID_FACTORY, IdFactory

# Static conformance assertions: each adapter function must
# structurally satisfy its Protocol.
if TYPE_CHECKING:
    from ..adapters.memory.user import UserNameStub
    from ..application.ports import (
        DisplayConfig,
        GetConfig,
        GetUserName,
        InitLogging,
    )

    _assert_get_config: GetConfig = get_config
    _assert_display_config: DisplayConfig = display_config
    _assert_init_logging: InitLogging = init_logging
    _assert_get_user_name: GetUserName = get_user_name


@dataclass(frozen=True, slots=True)
class AppServices:
    """Frozen container holding all application port implementations.

    ``id_factory`` is the counter the ``objects`` snippet draws from; in
    production it is the process-wide singleton.
    """

    get_config: GetConfig
    display_config: DisplayConfig
    init_logging: InitLogging
    get_user_name: GetUserName
    id_factory: IdFactory


def build_production() -> AppServices:
    """Wire production adapters into an AppServices container."""
    return AppServices(
        get_config=get_config,
        display_config=display_config,
        init_logging=init_logging,
        get_user_name=get_user_name,
        id_factory=ID_FACTORY,
    )


def build_testing(*, user: UserNameStub | None = None) -> AppServices:
    """Wire in-memory adapters into an AppServices container.

    Args:
        user: Optional UserNameStub answering user-name lookups. When None, a
            fresh stub named ``tester`` is created.

    Returns:
        AppServices container with in-memory adapters and a fresh IdFactory,
        so every container counts from 1.
    """
    from ..adapters.memory import (
        UserNameStub,
        display_config_in_memory,
        get_config_in_memory,
        init_logging_in_memory,
    )

    user_stub = user if user is not None else UserNameStub()

    return AppServices(
        get_config=get_config_in_memory,
        display_config=display_config_in_memory,
        init_logging=init_logging_in_memory,
        get_user_name=user_stub.get_user_name,
        id_factory=IdFactory(),
    )


__all__ = [
    # Configuration
    "get_config",
    "display_config",
    # Logging
    "init_logging",
    # System
    "get_user_name",
    # Composition
    "AppServices",
    "build_production",
    "build_testing",
]
