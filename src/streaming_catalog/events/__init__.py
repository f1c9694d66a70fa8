"""
Event System - structured event sink for the catalog.

Mutations on the registry and on user collections are reported as domain
events on an injected bus rather than printed.
"""

from .event_bus import EventBus, DomainEvent
from .domain_events import (
    EntityAdded,
    EntityRejected,
    EntityRemoved,
    ItemAdded,
    ItemRejected,
    ItemRemoved,
    CollectionCleared,
    PlaylistRenamed,
)

__all__ = [
    # Core event system
    "EventBus",
    "DomainEvent",
    # Catalog events
    "EntityAdded",
    "EntityRejected",
    "EntityRemoved",
    # Collection events
    "ItemAdded",
    "ItemRejected",
    "ItemRemoved",
    "CollectionCleared",
    "PlaylistRenamed",
]
