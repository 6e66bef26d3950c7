"""Public package surface exposing the snippet tour, metadata and configuration.

Imports are routed through the architectural layers:
- Domain exports: the language-feature demonstrations
- Application exports: the snippet catalog and runner
- Composition exports: wired adapter services (configuration)
- Metadata: package information
"""

from __future__ import annotations

# Metadata
from .__init__conf__ import print_info

# Application exports
from .application.tour import SNIPPETS, SnippetContext, run_snippets, select_snippets

# Composition exports (wired adapters)
from .composition import get_config

# Domain exports
from .domain.bindings import add, add_then_multiply, get_the_answer, square_string
from .domain.records import Point
from .domain.singletons import IdFactory, create_id
from .domain.traits import CustomizableGreeter, DefaultGreeter, Greeter

__all__ = [
    "SNIPPETS",
    "CustomizableGreeter",
    "DefaultGreeter",
    "Greeter",
    "IdFactory",
    "Point",
    "SnippetContext",
    "add",
    "add_then_multiply",
    "create_id",
    "get_config",
    "get_the_answer",
    "print_info",
    "run_snippets",
    "select_snippets",
    "square_string",
]
