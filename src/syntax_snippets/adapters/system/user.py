"""Ambient user-name lookup backed by :func:`getpass.getuser`."""

from __future__ import annotations

import getpass

from syntax_snippets.domain.errors import UserNameUnavailableError


def get_user_name() -> str:
    """Return the login name of the invoking user.

    ``getpass.getuser`` checks ``LOGNAME``, ``USER``, ``LNAME`` and
    ``USERNAME`` in order, then falls back to the password database.

    Returns:
        Login name of the current user.

    Raises:
        UserNameUnavailableError: If no login name can be determined.

    Example:
        >>> isinstance(get_user_name(), str)  # doctest: +SKIP
        True
    """
    try:
        return getpass.getuser()
    except (OSError, KeyError, ImportError) as exc:
        raise UserNameUnavailableError(f"Cannot determine the current user name: {exc}") from exc


__all__ = ["get_user_name"]
