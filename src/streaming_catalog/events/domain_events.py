"""
Domain Events - specific event implementations.

Events published by the catalog registry and by user collections.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from .event_bus import DomainEvent


@dataclass(kw_only=True)
class EntityAdded(DomainEvent):
    """Event fired when an entity is registered in the catalog."""
    kind: str
    entity_id: str
    label: str

    def _get_event_data(self) -> Dict[str, Any]:
        return {"kind": self.kind, "entity_id": self.entity_id, "label": self.label}


@dataclass(kw_only=True)
class EntityRejected(DomainEvent):
    """Event fired when the catalog refuses to register an entity."""
    kind: Optional[str]
    entity_id: Optional[str]
    reason: str

    def _get_event_data(self) -> Dict[str, Any]:
        return {"kind": self.kind, "entity_id": self.entity_id, "reason": self.reason}


@dataclass(kw_only=True)
class EntityRemoved(DomainEvent):
    """Event fired when an entity is removed from the catalog."""
    kind: str
    entity_id: str
    label: str

    def _get_event_data(self) -> Dict[str, Any]:
        return {"kind": self.kind, "entity_id": self.entity_id, "label": self.label}


@dataclass(kw_only=True)
class ItemAdded(DomainEvent):
    """Event fired when an item is saved to a collection."""
    collection: str
    item: str

    def _get_event_data(self) -> Dict[str, Any]:
        return {"collection": self.collection, "item": self.item}


@dataclass(kw_only=True)
class ItemRejected(DomainEvent):
    """Event fired when a collection refuses an item."""
    collection: str
    reason: str

    def _get_event_data(self) -> Dict[str, Any]:
        return {"collection": self.collection, "reason": self.reason}


@dataclass(kw_only=True)
class ItemRemoved(DomainEvent):
    """Event fired when remove() is called on a collection."""
    collection: str
    item: str
    was_present: bool

    def _get_event_data(self) -> Dict[str, Any]:
        return {
            "collection": self.collection,
            "item": self.item,
            "was_present": self.was_present,
        }


@dataclass(kw_only=True)
class CollectionCleared(DomainEvent):
    """Event fired when a collection is emptied."""
    collection: str
    count: int

    def _get_event_data(self) -> Dict[str, Any]:
        return {"collection": self.collection, "count": self.count}


@dataclass(kw_only=True)
class PlaylistRenamed(DomainEvent):
    """Event fired when a playlist changes its name."""
    old_name: str
    new_name: str

    def _get_event_data(self) -> Dict[str, Any]:
        return {"old_name": self.old_name, "new_name": self.new_name}
