"""Static package metadata surfaced to CLI commands and documentation.

Kept as plain module constants so the CLI can show version and help text
without importing installation metadata at runtime.

Contents:
    * Metadata constants (``name``, ``title``, ``version`` ...).
    * ``LAYEREDCONF_*`` identifiers used by lib_layered_config path discovery.
    * :func:`print_info` - render the metadata block for the ``info`` command.
"""

from __future__ import annotations

name = "syntax_snippets"
title = "Annotated walkthrough of basic language syntax, one snippet at a time"
version = "0.1.0"
author = "syntax-snippets contributors"
shell_command = "syntax-snippets"

#: Vendor, application and slug identifiers for lib_layered_config.
LAYEREDCONF_VENDOR: str = "syntax-snippets"
LAYEREDCONF_APP: str = "Syntax Snippets"
LAYEREDCONF_SLUG: str = "syntax-snippets"


def print_info() -> None:
    """Print the summarised metadata block used by the CLI ``info`` command.

    Example:
        >>> print_info()  # doctest: +ELLIPSIS
        Info for syntax_snippets:
        ...
    """
    fields = [
        ("name", name),
        ("title", title),
        ("version", version),
        ("author", author),
        ("shell_command", shell_command),
    ]
    pad = max(len(label) for label, _ in fields)
    lines = [f"Info for {name}:", ""]
    lines.extend(f"    {label.ljust(pad)} = {value}" for label, value in fields)
    print("\n".join(lines))


__all__ = ["print_info"]
