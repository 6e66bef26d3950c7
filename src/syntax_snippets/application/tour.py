"""Snippet catalog and the runner that walks through it.

The tour is a fixed, ordered sequence of independent snippets. Each snippet
turns a :class:`SnippetContext` into the lines it prints; the runner emits
those lines through a caller-supplied callable so the CLI owns the output
stream.

Contents:
    * :class:`Snippet` - catalog entry (slug, title, line producer).
    * :class:`SnippetContext` - per-run values snippets depend on.
    * :data:`SNIPPETS` - the ordered catalog.
    * :func:`select_snippets` - resolve slugs to catalog entries.
    * :func:`run_snippets` - execute snippets in order.
"""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass

from ..domain import bindings
from ..domain.errors import UnknownSnippetError
from ..domain.records import Point, describe_equality
from ..domain.singletons import IdFactory
from ..domain.traits import CustomizableGreeter, DefaultGreeter, Greeter
from .ports import GetUserName

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SnippetContext:
    """Values a snippet may need beyond literals.

    Attributes:
        audience: Name the class and trait snippets greet.
        get_user_name: Lookup for the invoking user's login name.
        id_factory: Counter used by the singleton snippet.
    """

    audience: str
    get_user_name: GetUserName
    id_factory: IdFactory


@dataclass(frozen=True, slots=True)
class Snippet:
    """One walkthrough step."""

    slug: str
    title: str
    run: Callable[[SnippetContext], Sequence[str]]


def _intro(ctx: SnippetContext) -> list[str]:
    return ["Some text"]


def _values(ctx: SnippetContext) -> list[str]:
    return [str(bindings.evaluate_value())]


def _variables(ctx: SnippetContext) -> list[str]:
    bindings.reassign_variable()
    return []


def _types(ctx: SnippetContext) -> list[str]:
    bindings.typed_bindings()
    return []


def _blocks(ctx: SnippetContext) -> list[str]:
    value, _outer = bindings.evaluate_block()
    return [str(value)]


def _anonymous_functions(ctx: SnippetContext) -> list[str]:
    return [repr(bindings.anonymous_function())]


def _named_functions(ctx: SnippetContext) -> list[str]:
    bindings.add_one(1)
    return []


def _multiple_parameters(ctx: SnippetContext) -> list[str]:
    return [str(bindings.add(1, 2))]


def _no_parameters(ctx: SnippetContext) -> list[str]:
    return [str(bindings.get_the_answer())]


def _methods(ctx: SnippetContext) -> list[str]:
    bindings.add2(1, 2)
    return []


def _parameter_lists(ctx: SnippetContext) -> list[str]:
    return [str(bindings.add_then_multiply(1, 2)(3))]


def _parameterless_methods(ctx: SnippetContext) -> list[str]:
    return [bindings.build_user_greeting(ctx.get_user_name())]


def _multi_line_methods(ctx: SnippetContext) -> list[str]:
    return [bindings.square_string(2.5)]


def _classes(ctx: SnippetContext) -> list[str]:
    greeter = Greeter("Hello, ", "!")
    return [greeter.greet(ctx.audience)]


def _case_classes(ctx: SnippetContext) -> list[str]:
    point = Point(1, 2)
    another_point = Point(1, 2)
    yet_another_point = Point(2, 2)
    lines = [
        describe_equality(point, another_point),
        describe_equality(point, yet_another_point),
    ]
    try:
        point.x = 3  # type: ignore[misc]
    except dataclasses.FrozenInstanceError as exc:
        lines.append(f"Fields are read-only: {exc}")
    return lines


def _objects(ctx: SnippetContext) -> list[str]:
    new_id = ctx.id_factory.create()
    newer_id = ctx.id_factory.create()
    return [str(new_id), str(newer_id)]


def _traits(ctx: SnippetContext) -> list[str]:
    greeter = DefaultGreeter()
    custom_greeter = CustomizableGreeter("How are you, ", "?")
    return [greeter.greet(ctx.audience), custom_greeter.greet(ctx.audience)]


SNIPPETS: tuple[Snippet, ...] = (
    Snippet("intro", "Print a line of text", _intro),
    Snippet("values", "Name the result of an expression", _values),
    Snippet("variables", "Variables are values that can be re-assigned", _variables),
    Snippet("types", "Explicitly state the type of a value or variable", _types),
    Snippet("blocks", "Blocks", _blocks),
    Snippet("anonymous-functions", "Anonymous function", _anonymous_functions),
    Snippet("named-functions", "Named functions", _named_functions),
    Snippet("multiple-parameters", "Function with multiple parameters", _multiple_parameters),
    Snippet("no-parameters", "Function with no parameters", _no_parameters),
    Snippet("methods", "Methods are different to functions", _methods),
    Snippet("parameter-lists", "A method can take multiple parameter lists", _parameter_lists),
    Snippet("parameterless-methods", "A method may take no parameter lists at all", _parameterless_methods),
    Snippet("multi-line-methods", "A multi-line method", _multi_line_methods),
    Snippet("classes", "A class is defined using its constructor parameters", _classes),
    Snippet("case-classes", "Case classes are compared by value", _case_classes),
    Snippet("objects", "Objects are single instances of their own definitions", _objects),
    Snippet("traits", "Traits supply default behaviour that classes may override", _traits),
)


def select_snippets(slugs: Iterable[str] = ()) -> tuple[Snippet, ...]:
    """Resolve slugs to catalog entries, preserving catalog order.

    Args:
        slugs: Requested snippet slugs. Empty selects the whole catalog.
            Duplicates collapse to one entry.

    Returns:
        Matching snippets in catalog order.

    Raises:
        UnknownSnippetError: If any slug is not in the catalog.

    Example:
        >>> [s.slug for s in select_snippets(["traits", "values"])]
        ['values', 'traits']
        >>> len(select_snippets()) == len(SNIPPETS)
        True
    """
    wanted = set(slugs)
    if not wanted:
        return SNIPPETS
    known = {snippet.slug for snippet in SNIPPETS}
    unknown = sorted(wanted - known)
    if unknown:
        available = ", ".join(snippet.slug for snippet in SNIPPETS)
        raise UnknownSnippetError(f"Unknown snippet(s): {', '.join(unknown)}. Available: {available}")
    return tuple(snippet for snippet in SNIPPETS if snippet.slug in wanted)


def run_snippets(
    snippets: Iterable[Snippet],
    *,
    context: SnippetContext,
    emit: Callable[[str], object],
    show_titles: bool = True,
) -> int:
    """Run each snippet in order and emit its lines.

    Args:
        snippets: Snippets to run, usually from :func:`select_snippets`.
        context: Values shared by all snippets in this run.
        emit: Receives every output line (e.g. ``click.echo``).
        show_titles: Emit a ``%% <title>`` header before each snippet.

    Returns:
        Number of snippets run.
    """
    count = 0
    for snippet in snippets:
        logger.info("Running snippet", extra={"snippet": snippet.slug})
        if show_titles:
            emit(f"%% {snippet.title}")
        for line in snippet.run(context):
            emit(line)
        count += 1
    return count


__all__ = [
    "SNIPPETS",
    "Snippet",
    "SnippetContext",
    "run_snippets",
    "select_snippets",
]
