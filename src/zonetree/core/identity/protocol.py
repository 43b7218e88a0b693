"""Id generator protocol.

Mutation functions receive an IdGenerator instead of reaching for a global
counter, so tests can inject a deterministic one.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Protocol, runtime_checkable


@runtime_checkable
class IdGenerator(Protocol):
    """Produces fresh node ids.

    An id returned by next_id() is distinct from every id this generator has
    returned before and from every id passed to reserve().
    """

    def next_id(self) -> str:
        """Return a fresh id."""
        ...

    def reserve(self, ids: Iterable[str]) -> None:
        """Mark ids as taken (typically every id of a destination tree)."""
        ...
