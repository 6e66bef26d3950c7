"""Values, variables, blocks, function values and methods.

Pure functions with no I/O. Each one reproduces a single walkthrough step and
returns the value that step prints, so the runner decides where output goes.

Contents:
    * :func:`evaluate_value` - immutable binding of an arithmetic result.
    * :func:`reassign_variable` - a binding that is rebound once.
    * :func:`typed_bindings` - bindings with explicit type annotations.
    * :func:`evaluate_block` - nested scope whose last expression is its value.
    * :data:`add_one`, :data:`add`, :data:`get_the_answer` - function values.
    * :func:`add2` - a method with a name, parameter list and return type.
    * :func:`add_then_multiply` - staged application over two parameter lists.
    * :func:`build_user_greeting` - greeting built from the ambient user name.
    * :func:`square_string` - a multi-line method.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Final

USER_GREETING_TEMPLATE: Final[str] = "Hello, {name}!"


def evaluate_value() -> int:
    """Name the result of an expression with an immutable binding.

    ``Final`` marks the name as never rebound; type checkers reject a second
    assignment, the interpreter does not.

    Example:
        >>> evaluate_value()
        2
    """
    x: Final = 1 + 1
    return x


def reassign_variable() -> int:
    """Bind a value, then rebind it.

    Example:
        >>> reassign_variable()
        3
    """
    z = 1 + 1
    z = 3
    return z


def typed_bindings() -> tuple[int, int]:
    """State the type of a value or variable explicitly."""
    y1: Final[int] = 1 + 1
    y2: int = 1 + 1
    return y1, y2


def evaluate_block() -> tuple[int, int]:
    """Evaluate a nested scope whose last expression is its value.

    The inner ``x`` lives in its own scope and shadows the outer one.

    Returns:
        Tuple of (value of the block, outer ``x`` after the block ran).

    Example:
        >>> evaluate_block()
        (3, 2)
    """
    x = 1 + 1

    def block() -> int:
        x = 1 + 1
        return x + 1

    return block(), x


add_one: Callable[[int], int] = lambda x: x + 1  # noqa: E731
add: Callable[[int, int], int] = lambda x, y: x + y  # noqa: E731
get_the_answer: Callable[[], int] = lambda: 42  # noqa: E731


def anonymous_function() -> Callable[[int], int]:
    """Return an unnamed function value; printing it shows its representation."""
    return lambda x: x + 1


def add2(x: int, y: int) -> int:
    """Add two integers.

    Example:
        >>> add2(1, 2)
        3
    """
    return x + y


def add_then_multiply(x: int, y: int) -> Callable[[int], int]:
    """Take the operands now and the multiplier later.

    Args:
        x: First operand.
        y: Second operand.

    Returns:
        Callable that takes ``multiplier`` and returns ``(x + y) * multiplier``.

    Example:
        >>> add_then_multiply(1, 2)(3)
        9
        >>> times = add_then_multiply(2, 3)
        >>> times(0), times(-1)
        (0, -5)
    """

    def with_multiplier(multiplier: int) -> int:
        return (x + y) * multiplier

    return with_multiplier


def build_user_greeting(name: str) -> str:
    """Greet the invoking user by name.

    Example:
        >>> build_user_greeting("ada")
        'Hello, ada!'
    """
    return USER_GREETING_TEMPLATE.format(name=name)


def square_string(value: float) -> str:
    """Square ``value`` and return it as text.

    Example:
        >>> square_string(2.5)
        '6.25'
    """
    square = value * value
    return str(square)


__all__ = [
    "USER_GREETING_TEMPLATE",
    "add",
    "add2",
    "add_one",
    "add_then_multiply",
    "anonymous_function",
    "build_user_greeting",
    "evaluate_block",
    "evaluate_value",
    "get_the_answer",
    "reassign_variable",
    "square_string",
    "typed_bindings",
]
