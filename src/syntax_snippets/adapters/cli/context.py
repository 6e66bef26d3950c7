"""State shared between the root command and its subcommands.

Contents:
    * :class:`CLIContext` - what the root command leaves in ``ctx.obj``.
    * :class:`TracebackState` - the two ``lib_cli_exit_tools`` traceback flags.
    * Helpers to store and fetch the context and to toggle tracebacks.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, NamedTuple

import lib_cli_exit_tools
import rich_click as click
from lib_layered_config import Config

if TYPE_CHECKING:
    from syntax_snippets.composition import AppServices


class TracebackState(NamedTuple):
    """Traceback flags of ``lib_cli_exit_tools.config`` at one moment."""

    enabled: bool
    force_color: bool


@dataclass(slots=True)
class CLIContext:
    """State the root command hands down to every subcommand.

    Attributes:
        traceback: ``--traceback`` was given.
        config: Configuration with ``--set`` overrides already applied.
        services: Wired application services.
        profile: Profile selected on the root command.
        set_overrides: Raw ``--set`` strings, reapplied when a subcommand
            reloads configuration for another profile.
    """

    traceback: bool
    config: Config
    services: AppServices
    profile: str | None = None
    set_overrides: tuple[str, ...] = ()


def store_cli_context(
    ctx: click.Context,
    *,
    traceback: bool,
    config: Config,
    services: AppServices,
    profile: str | None = None,
    set_overrides: tuple[str, ...] = (),
) -> None:
    """Replace the services factory in ``ctx.obj`` with a :class:`CLIContext`.

    Example:
        >>> from unittest.mock import MagicMock
        >>> from syntax_snippets.composition import build_testing
        >>> ctx = MagicMock()
        >>> store_cli_context(ctx, traceback=True, config=MagicMock(), services=build_testing())
        >>> ctx.obj.traceback
        True
    """
    ctx.obj = CLIContext(traceback, config, services, profile, set_overrides)


def get_cli_context(ctx: click.Context) -> CLIContext:
    """Fetch the :class:`CLIContext` left by the root command.

    Raises:
        RuntimeError: If a subcommand runs without the root command.
    """
    cli_ctx = ctx.obj
    if isinstance(cli_ctx, CLIContext):
        return cli_ctx
    raise RuntimeError("CLI context not initialized. Call store_cli_context first.")


def apply_traceback_preferences(enabled: bool) -> None:
    """Turn full, coloured tracebacks on or off for ``lib_cli_exit_tools``.

    Example:
        >>> apply_traceback_preferences(True)
        >>> snapshot_traceback_state()
        TracebackState(enabled=True, force_color=True)
        >>> apply_traceback_preferences(False)
    """
    restore_traceback_state(TracebackState(bool(enabled), bool(enabled)))


def snapshot_traceback_state() -> TracebackState:
    """Read the current traceback flags."""
    config = lib_cli_exit_tools.config
    return TracebackState(
        enabled=bool(getattr(config, "traceback", False)),
        force_color=bool(getattr(config, "traceback_force_color", False)),
    )


def restore_traceback_state(state: TracebackState) -> None:
    """Write flags previously read by :func:`snapshot_traceback_state`."""
    lib_cli_exit_tools.config.traceback = state.enabled
    lib_cli_exit_tools.config.traceback_force_color = state.force_color


__all__ = [
    "CLIContext",
    "TracebackState",
    "apply_traceback_preferences",
    "get_cli_context",
    "restore_traceback_state",
    "snapshot_traceback_state",
    "store_cli_context",
]
