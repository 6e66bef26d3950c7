"""Domain-specific exceptions for typed error handling at boundaries."""

from __future__ import annotations


class UnknownSnippetError(LookupError):
    """A requested snippet slug is not in the catalog.

    Raised when the caller asks for a snippet by slug and no catalog entry
    matches. Caught at the CLI boundary and reported with the list of
    available slugs.

    Example:
        >>> from syntax_snippets.domain.errors import UnknownSnippetError
        >>> err = UnknownSnippetError("Unknown snippet: 'loops'")
        >>> str(err)
        "Unknown snippet: 'loops'"
        >>> isinstance(err, LookupError)
        True
    """


class UserNameUnavailableError(LookupError):
    """The invoking user's name cannot be determined.

    Raised by the user-name lookup when neither the environment nor the
    password database yields a login name.

    Example:
        >>> from syntax_snippets.domain.errors import UserNameUnavailableError
        >>> str(UserNameUnavailableError("No login name available"))
        'No login name available'
    """


__all__ = [
    "UnknownSnippetError",
    "UserNameUnavailableError",
]
