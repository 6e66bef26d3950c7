"""The ``syntax-snippets`` command group.

The group callback builds the services, loads configuration with the root
``--profile`` and ``--set`` values, starts logging and leaves a
:class:`~.context.CLIContext` for the subcommands. Called without a
subcommand it runs the whole tour.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import rich_click as click
from lib_layered_config import Config

from syntax_snippets import __init__conf__
from syntax_snippets.adapters.config.overrides import apply_overrides

from .constants import CLICK_CONTEXT_SETTINGS
from .context import apply_traceback_preferences, store_cli_context

if TYPE_CHECKING:
    from syntax_snippets.composition import AppServices


def _load_config(services: AppServices, profile: str | None, set_overrides: tuple[str, ...]) -> Config:
    """Load layered configuration and merge the ``--set`` values into it.

    Raises:
        click.UsageError: If an override is malformed or descends into a
            non-table value.
    """
    config = services.get_config(profile=profile)
    try:
        return apply_overrides(config, set_overrides)
    except (ValueError, TypeError) as exc:
        raise click.UsageError(str(exc)) from exc


def _bootstrap(ctx: click.Context, *, traceback: bool, profile: str | None, set_overrides: tuple[str, ...]) -> None:
    factory = ctx.obj
    if not callable(factory):
        raise RuntimeError("Services factory not provided. This is a bug.")
    services: AppServices = factory()
    config = _load_config(services, profile, set_overrides)
    services.init_logging(config)
    store_cli_context(
        ctx,
        traceback=traceback,
        config=config,
        services=services,
        profile=profile,
        set_overrides=set_overrides,
    )
    apply_traceback_preferences(traceback)


@click.group(
    help=__init__conf__.title,
    context_settings=CLICK_CONTEXT_SETTINGS,
    invoke_without_command=True,
)
@click.version_option(
    version=__init__conf__.version,
    prog_name=__init__conf__.shell_command,
    message=f"{__init__conf__.shell_command} version {__init__conf__.version}",
)
@click.option("--traceback/--no-traceback", default=False, help="Print the full Python traceback on errors")
@click.option("--profile", default=None, help="Read configuration from a named profile (e.g., 'classroom')")
@click.option(
    "--set",
    "set_overrides",
    multiple=True,
    metavar="SECTION.KEY=VALUE",
    help="Override one configuration value; repeat for more (e.g., tour.audience=you).",
)
@click.pass_context
def cli(ctx: click.Context, traceback: bool, profile: str | None, set_overrides: tuple[str, ...]) -> None:
    """Set up the run, then hand over to a subcommand or the full tour.

    Example:
        >>> from click.testing import CliRunner
        >>> from syntax_snippets.composition import build_testing
        >>> result = CliRunner().invoke(cli, ["run", "values", "--no-titles"], obj=build_testing)
        >>> result.stdout
        '2\\n'
    """
    _bootstrap(ctx, traceback=traceback, profile=profile, set_overrides=set_overrides)

    if ctx.invoked_subcommand is None:
        from .commands import cli_run

        ctx.invoke(cli_run)


def _register_commands() -> None:
    # Command modules import this package, so they are attached after ``cli`` exists.
    from .commands import cli_config, cli_info, cli_list, cli_run

    for command in (cli_run, cli_list, cli_info, cli_config):
        cli.add_command(command)


_register_commands()


__all__ = ["cli"]
