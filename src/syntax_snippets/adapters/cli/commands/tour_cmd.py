"""Tour commands: run snippets and list the catalog.

Contents:
    * :func:`cli_run` - Run all snippets or the named ones, in catalog order.
    * :func:`cli_list` - Print every snippet slug with its title.
"""

from __future__ import annotations

import logging

import lib_log_rich.runtime
import rich_click as click
from pydantic import ValidationError

from syntax_snippets.adapters.config.tour import TourConfigModel, load_tour_settings
from syntax_snippets.application.tour import SNIPPETS, SnippetContext, run_snippets, select_snippets
from syntax_snippets.domain.errors import UnknownSnippetError

from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import CLIContext, get_cli_context
from ..exit_codes import ExitCode

logger = logging.getLogger(__name__)


def _load_settings(cli_ctx: CLIContext) -> TourConfigModel:
    """Validate the ``[tour]`` section or exit with CONFIG_ERROR."""
    try:
        return load_tour_settings(cli_ctx.config)
    except ValidationError as exc:
        logger.error("Invalid tour configuration", extra={"error": str(exc)})
        click.echo(f"Error: invalid [tour] configuration:\n{exc}", err=True)
        raise SystemExit(ExitCode.CONFIG_ERROR) from exc


@click.command("run", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("slugs", nargs=-1, metavar="[SLUG]...")
@click.option(
    "--titles/--no-titles",
    "show_titles",
    default=None,
    help="Print a title header before each snippet (default: tour.show_titles)",
)
@click.pass_context
def cli_run(ctx: click.Context, slugs: tuple[str, ...] = (), show_titles: bool | None = None) -> None:
    """Run the snippets in catalog order and print what each one shows.

    Without SLUG arguments every snippet runs. See ``list`` for the slugs.
    """
    cli_ctx = get_cli_context(ctx)
    settings = _load_settings(cli_ctx)
    effective_titles = settings.show_titles if show_titles is None else show_titles

    extra = {"command": "run", "snippets": list(slugs) or "all"}
    with lib_log_rich.runtime.bind(job_id="cli-run", extra=extra):
        try:
            snippets = select_snippets(slugs)
        except UnknownSnippetError as exc:
            logger.error("Unknown snippet requested", extra={"error": str(exc)})
            click.echo(f"Error: {exc}", err=True)
            raise SystemExit(ExitCode.INVALID_ARGUMENT) from exc

        context = SnippetContext(
            audience=settings.audience,
            get_user_name=cli_ctx.services.get_user_name,
            id_factory=cli_ctx.services.id_factory,
        )
        count = run_snippets(snippets, context=context, emit=click.echo, show_titles=effective_titles)
        logger.info("Tour finished", extra={"snippets_run": count})


@click.command("list", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_list() -> None:
    """List snippet slugs and titles in the order the tour runs them.

    Example:
        >>> from click.testing import CliRunner
        >>> from syntax_snippets.adapters.cli import cli
        >>> from syntax_snippets.composition import build_testing
        >>> CliRunner().invoke(cli, ["list"], obj=build_testing).stdout.splitlines()[0]
        'intro                  Print a line of text'
    """
    width = max(len(snippet.slug) for snippet in SNIPPETS)
    with lib_log_rich.runtime.bind(job_id="cli-list", extra={"command": "list"}):
        for snippet in SNIPPETS:
            click.echo(f"{snippet.slug.ljust(width)}  {snippet.title}")


__all__ = ["cli_list", "cli_run"]
