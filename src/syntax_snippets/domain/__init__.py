"""Domain layer - pure language-feature demonstrations with no I/O.

Contents:
    * :mod:`.bindings` - Values, variables, blocks, function values, methods
    * :mod:`.records` - Value-equality record (``Point``)
    * :mod:`.singletons` - Process-wide counter (``IdFactory``)
    * :mod:`.traits` - Classes and capability traits
    * :mod:`.enums` - Domain enumerations (OutputFormat)
    * :mod:`.errors` - Domain exception types
"""

from __future__ import annotations

from .bindings import (
    add,
    add2,
    add_one,
    add_then_multiply,
    build_user_greeting,
    evaluate_block,
    evaluate_value,
    get_the_answer,
    square_string,
)
from .enums import OutputFormat
from .errors import UnknownSnippetError, UserNameUnavailableError
from .records import Point, describe_equality
from .singletons import ID_FACTORY, IdFactory, create_id
from .traits import CustomizableGreeter, DefaultGreeter, DefaultGreeting, Greeter, Greeting

__all__ = [
    # Bindings and functions
    "add",
    "add2",
    "add_one",
    "add_then_multiply",
    "build_user_greeting",
    "evaluate_block",
    "evaluate_value",
    "get_the_answer",
    "square_string",
    # Records
    "Point",
    "describe_equality",
    # Singletons
    "ID_FACTORY",
    "IdFactory",
    "create_id",
    # Traits
    "CustomizableGreeter",
    "DefaultGreeter",
    "DefaultGreeting",
    "Greeter",
    "Greeting",
    # Enums
    "OutputFormat",
    # Errors
    "UnknownSnippetError",
    "UserNameUnavailableError",
]
