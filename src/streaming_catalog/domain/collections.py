"""User collections: a saved-items library and named playlists.

A collection is an ordered, duplicate-free sequence of references to catalog
entities. Rejected adds and removals of absent items are not errors; they are
reported through the return value, the log and the optional event bus.
"""

import logging
from typing import Generic, Iterator, List, Optional, TypeVar

from ..events import (
    CollectionCleared,
    EventBus,
    ItemAdded,
    ItemRejected,
    ItemRemoved,
    PlaylistRenamed,
)
from .result import DomainError, DuplicateError, Result, ValidationError, failure, success
from .search import search_items

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Collection(Generic[T]):
    """Ordered set of items, preserving the order of first successful add."""

    def __init__(self, event_bus: Optional[EventBus] = None):
        self._items: List[T] = []
        self._event_bus = event_bus

    @property
    def label(self) -> str:
        """Human-readable name used in diagnostics."""
        return "collection"

    def check_add(self, item: Optional[T]) -> Result[T, DomainError]:
        """Decide whether an item may be added, without adding it."""
        if item is None:
            return failure(ValidationError(f"Cannot add null item to {self.label}"))
        if item in self._items:
            return failure(DuplicateError(f"Item already exists in {self.label}"))
        return success(item)

    def add(self, item: Optional[T]) -> bool:
        """Add an item. Returns False for None or an item already present."""
        result = self.check_add(item)
        if result.is_failure():
            reason = str(result.error())
            logger.debug(reason)
            self._publish(ItemRejected(collection=self.label, reason=reason))
            return False

        self._items.append(item)
        logger.debug("Added %s to %s", item, self.label)
        self._publish(ItemAdded(collection=self.label, item=str(item)))
        return True

    def remove(self, item: T) -> None:
        """Remove the first equal item; silently does nothing if absent."""
        was_present = item in self._items
        if was_present:
            self._items.remove(item)
        logger.debug("Removed %s from %s (present=%s)", item, self.label, was_present)
        self._publish(ItemRemoved(collection=self.label, item=str(item), was_present=was_present))

    def contains(self, item: T) -> bool:
        """Check whether an equal item is held."""
        return item in self._items

    def size(self) -> int:
        """Get number of items."""
        return len(self._items)

    def is_empty(self) -> bool:
        """Check whether the collection holds no items."""
        return not self._items

    def clear(self) -> None:
        """Remove all items. The cleared count goes to the log and event bus."""
        count = len(self._items)
        self._items.clear()
        logger.info("Cleared %d items from %s", count, self.label)
        self._publish(CollectionCleared(collection=self.label, count=count))

    def items(self) -> List[T]:
        """Get a copy of the items in insertion order."""
        return list(self._items)

    def search(self, keyword: Optional[str]) -> List[T]:
        """Items whose text rendering contains the keyword, ignoring case."""
        results = search_items(self._items, keyword)
        logger.debug("Found %d item(s) in %s matching %r", len(results), self.label, keyword)
        return results

    def __contains__(self, item: object) -> bool:
        return item in self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(list(self._items))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.label!r}, items={len(self._items)})"

    def _publish(self, event) -> None:
        if self._event_bus is not None:
            self._event_bus.publish(event)


class Library(Collection[T]):
    """A user's saved items."""

    @property
    def label(self) -> str:
        return "library"


class Playlist(Collection[T]):
    """A named, user-ordered list of items."""

    def __init__(self, name: str, event_bus: Optional[EventBus] = None):
        super().__init__(event_bus)
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, value: str) -> None:
        old_name = self._name
        self._name = value
        self._publish(PlaylistRenamed(old_name=old_name, new_name=value))

    @property
    def label(self) -> str:
        return f"playlist '{self._name}'"
