"""Classes and capability traits with default and overridden behaviour.

A class can extend one base class but mix in several traits. Here
:class:`Greeting` declares the capability without a default and
:class:`DefaultGreeting` supplies one; :class:`DefaultGreeter` composes both,
so the default fills the abstract slot, while :class:`CustomizableGreeter`
overrides it.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class Greeter:
    """Greeter defined by its constructor parameters.

    Example:
        >>> Greeter("Hello, ", "!").greet("Scala developer")
        'Hello, Scala developer!'
    """

    def __init__(self, prefix: str, suffix: str) -> None:
        self.prefix = prefix
        self.suffix = suffix

    def greet(self, name: str) -> str:
        return self.prefix + name + self.suffix


class Greeting(ABC):
    """Capability with no default: every implementer supplies ``greet``."""

    @abstractmethod
    def greet(self, name: str) -> str: ...


class DefaultGreeting:
    """Capability with a default greeting."""

    def greet(self, name: str) -> str:
        return f"Hello, {name}!"


class DefaultGreeter(DefaultGreeting, Greeting):
    """Accept the default greeting.

    ``DefaultGreeting`` precedes ``Greeting`` in the MRO, so its ``greet``
    satisfies the abstract method.

    Example:
        >>> DefaultGreeter().greet("Scala developer")
        'Hello, Scala developer!'
    """


class CustomizableGreeter(DefaultGreeting, Greeting):
    """Override the default greeting with a custom prefix and postfix.

    Example:
        >>> CustomizableGreeter("How are you, ", "?").greet("Scala developer")
        'How are you, Scala developer?'
    """

    def __init__(self, prefix: str, postfix: str) -> None:
        self.prefix = prefix
        self.postfix = postfix

    def greet(self, name: str) -> str:
        return self.prefix + name + self.postfix


__all__ = [
    "CustomizableGreeter",
    "DefaultGreeter",
    "DefaultGreeting",
    "Greeter",
    "Greeting",
]
