"""Node id allocation services.

Generators are stateful: they remember every id they issued and every id
reserved from trees they will merge into, and never hand out any of them.
"""

from __future__ import annotations

import uuid
from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING

from zonetree.core.identity import ZONE_SEPARATOR

if TYPE_CHECKING:
    from zonetree.config import EditorSettings
    from zonetree.core.identity import IdGenerator


class UuidIdGenerator:
    """Allocates random UUID4 ids.

    Collisions are astronomically unlikely; an issued or reserved value is
    still skipped and redrawn rather than trusted.

    Args:
        factory: Source of candidate ids (default uuid4 text). Injectable for
            tests.
    """

    def __init__(self, factory: Callable[[], str] | None = None):
        self._factory = factory or (lambda: str(uuid.uuid4()))
        self._taken: set[str] = set()

    def next_id(self) -> str:
        """Return a fresh id not issued or reserved before.

        Returns:
            New id string.
        """
        candidate = self._factory()
        while candidate in self._taken:
            candidate = self._factory()
        self._taken.add(candidate)
        return candidate

    def reserve(self, ids: Iterable[str]) -> None:
        """Mark ids as taken so next_id() never returns them.

        Args:
            ids: Ids already present in a destination tree.
        """
        self._taken.update(ids)


class SequentialIdGenerator:
    """Allocates deterministic ``"<prefix>-<n>"`` ids.

    Counting starts at 1 and skips any value that has been reserved.

    Args:
        prefix: Leading part of every id. Must not contain the zone-key
            separator.
    """

    def __init__(self, prefix: str = "node"):
        if ZONE_SEPARATOR in prefix:
            raise ValueError(f"Id prefix {prefix!r} must not contain {ZONE_SEPARATOR!r}")
        self._prefix = prefix
        self._next_index = 1
        self._reserved: set[str] = set()

    def next_id(self) -> str:
        """Return the next unreserved sequential id."""
        while True:
            candidate = f"{self._prefix}-{self._next_index}"
            self._next_index += 1
            if candidate not in self._reserved:
                return candidate

    def reserve(self, ids: Iterable[str]) -> None:
        """Mark ids as taken so next_id() skips them."""
        self._reserved.update(ids)


def create_id_generator(settings: EditorSettings | None = None) -> IdGenerator:
    """Build the generator selected by settings.id_strategy.

    Args:
        settings: Editor settings; defaults are used when None.

    Returns:
        A UuidIdGenerator or SequentialIdGenerator.
    """
    if settings is None:
        from zonetree.config import EditorSettings

        settings = EditorSettings()
    if settings.id_strategy == "sequential":
        return SequentialIdGenerator(prefix=settings.id_prefix)
    return UuidIdGenerator()
