"""Value-equality record compared field by field."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Point:
    """Immutable coordinate pair compared by value, not identity.

    Fields are read-only: assigning one raises
    :class:`dataclasses.FrozenInstanceError`.

    Example:
        >>> Point(1, 2) == Point(1, 2)
        True
        >>> Point(1, 2) is Point(1, 2)
        False
        >>> str(Point(2, 2))
        'Point(2,2)'
    """

    x: int
    y: int

    def __str__(self) -> str:
        return f"Point({self.x},{self.y})"


def describe_equality(first: Point, second: Point) -> str:
    """Describe whether two points compare equal.

    Example:
        >>> describe_equality(Point(1, 2), Point(1, 2))
        'Point(1,2) and Point(1,2) are the same.'
        >>> describe_equality(Point(1, 2), Point(2, 2))
        'Point(1,2) and Point(2,2) are different.'
    """
    verdict = "the same" if first == second else "different"
    return f"{first} and {second} are {verdict}."


__all__ = ["Point", "describe_equality"]
