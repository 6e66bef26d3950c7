"""Process-level CLI runner shared by the console script and ``python -m``.

Contents:
    * :func:`main` - run the CLI and return its exit code.
"""

from __future__ import annotations

import sys
import threading
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING

import click
import lib_cli_exit_tools
import lib_log_rich.runtime

from syntax_snippets import __init__conf__

from .constants import TRACEBACK_SUMMARY_LIMIT, TRACEBACK_VERBOSE_LIMIT
from .context import (
    apply_traceback_preferences,
    restore_traceback_state,
    snapshot_traceback_state,
)
from .exit_codes import ExitCode

if TYPE_CHECKING:
    from syntax_snippets.composition import AppServices


def _report_failure(exc: BaseException) -> int:
    """Print *exc* through ``lib_cli_exit_tools`` and return its exit code."""
    verbose = snapshot_traceback_state().enabled
    apply_traceback_preferences(verbose)
    lib_cli_exit_tools.print_exception_message(
        trace_back=verbose,
        length_limit=TRACEBACK_VERBOSE_LIMIT if verbose else TRACEBACK_SUMMARY_LIMIT,
    )
    return lib_cli_exit_tools.get_system_exit_code(exc)


def _run_cli(argv: Sequence[str] | None, *, services_factory: Callable[[], AppServices]) -> int:
    """Drive the root group in non-standalone mode and map the outcome.

    Click runs with ``standalone_mode=False`` so that ``obj`` can carry the
    services factory; usage errors are shown by Click, everything else by
    :func:`_report_failure`.
    """
    from .root import cli

    try:
        cli.main(
            args=list(sys.argv[1:] if argv is None else argv),
            prog_name=__init__conf__.shell_command,
            obj=services_factory,
            standalone_mode=False,
        )
    except click.exceptions.Exit as exc:
        return exc.exit_code
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except BaseException as exc:  # SystemExit from commands included
        return _report_failure(exc)
    return ExitCode.SUCCESS


def _shutdown_logging() -> None:
    """Stop the lib_log_rich runtime, but only from the main thread."""
    if threading.current_thread() is not threading.main_thread():
        return
    if lib_log_rich.runtime.is_initialised():
        lib_log_rich.runtime.shutdown()


def main(
    argv: Sequence[str] | None = None,
    *,
    restore_traceback: bool = True,
    services_factory: Callable[[], AppServices] | None = None,
) -> int:
    """Run the CLI once and return its exit code.

    Args:
        argv: Arguments without the program name; None reads ``sys.argv``.
        restore_traceback: Put the traceback flags back the way they were
            before the run.
        services_factory: Builds the AppServices for this run. The console
            script passes ``build_production``.

    Returns:
        0 after a normal tour, otherwise the code of the failure.

    Raises:
        ValueError: If services_factory is missing.

    Example:
        >>> from syntax_snippets.composition import build_testing
        >>> main(["run", "values", "--no-titles"], services_factory=build_testing)  # doctest: +SKIP
        2
        0
    """
    if services_factory is None:
        raise ValueError("services_factory is required. Pass build_production from composition layer.")

    saved = snapshot_traceback_state()
    try:
        return _run_cli(argv, services_factory=services_factory)
    finally:
        if restore_traceback:
            restore_traceback_state(saved)
        _shutdown_logging()


__all__ = ["main"]
