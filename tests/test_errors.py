"""Domain error types and enums."""

from __future__ import annotations

import pytest

from syntax_snippets.domain.enums import OutputFormat
from syntax_snippets.domain.errors import UnknownSnippetError, UserNameUnavailableError


@pytest.mark.os_agnostic
def test_unknown_snippet_error_is_lookup_error() -> None:
    """Callers may catch it as a failed lookup."""
    with pytest.raises(LookupError, match="loops"):
        raise UnknownSnippetError("Unknown snippet(s): loops")


@pytest.mark.os_agnostic
def test_user_name_unavailable_error_preserves_message() -> None:
    """The message explains why no name was found."""
    assert str(UserNameUnavailableError("no login name")) == "no login name"


@pytest.mark.os_agnostic
def test_output_format_compares_to_strings() -> None:
    """Enum members equal their CLI spellings."""
    assert OutputFormat("json") is OutputFormat.JSON
    assert OutputFormat.HUMAN == "human"


@pytest.mark.os_agnostic
def test_output_format_rejects_unknown_values() -> None:
    """Only human and json exist."""
    with pytest.raises(ValueError):
        OutputFormat("yaml")
