"""Singleton holding a private, process-wide counter.

Contents:
    * :class:`IdFactory` - counter with a single increment-and-return operation.
    * :data:`ID_FACTORY` - the process-wide instance.
    * :func:`create_id` - shortcut for ``ID_FACTORY.create()``.
"""

from __future__ import annotations

import threading


class IdFactory:
    """Hand out increasing integer ids starting at 1.

    There is no reset; the count lives as long as the instance. A lock keeps
    concurrent callers from receiving the same id.

    Example:
        >>> factory = IdFactory()
        >>> factory.create(), factory.create()
        (1, 2)
    """

    __slots__ = ("_counter", "_lock")

    def __init__(self) -> None:
        self._counter = 0
        self._lock = threading.Lock()

    def create(self) -> int:
        """Increment the counter and return its new value."""
        with self._lock:
            self._counter += 1
            return self._counter


ID_FACTORY = IdFactory()


def create_id() -> int:
    """Return the next id from the process-wide :data:`ID_FACTORY`."""
    return ID_FACTORY.create()


__all__ = ["ID_FACTORY", "IdFactory", "create_id"]
