"""In-memory user-name lookup for testing.

Contents:
    * :class:`UserNameStub` - Returns a fixed name and counts lookups.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class UserNameStub:
    """Fixed user-name lookup that records how often it was asked.

    Attributes:
        name: Name returned by every lookup.
        raise_exception: When set, lookups raise this exception instead.
        calls: Number of lookups so far.

    Example:
        >>> stub = UserNameStub(name="ada")
        >>> stub.get_user_name()
        'ada'
        >>> stub.calls
        1
    """

    name: str = "tester"
    raise_exception: Exception | None = None
    calls: int = 0

    def get_user_name(self) -> str:
        self.calls += 1
        if self.raise_exception is not None:
            raise self.raise_exception
        return self.name


__all__ = ["UserNameStub"]
