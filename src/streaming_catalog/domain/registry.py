"""Catalog registry.

``MusicService`` owns the system-wide lists of songs, podcasts, artists and
albums. Adds are validated (no None, no duplicates) and rejected adds are
reported, never raised. Removal repairs the album and artist references that
point at the removed entity.
"""

import logging
from dataclasses import asdict, dataclass
from typing import Any, Dict, List, Optional

from ..events import EntityAdded, EntityRejected, EntityRemoved, EventBus
from . import search as search_engine
from .entities import Album, Artist, CatalogEntity, Media, Podcast, Song
from .result import DomainError, DuplicateError, Result, ValidationError, failure, success
from .value_objects import EntityKind

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CatalogStatistics:
    """Entity counts of a catalog."""
    song_count: int
    podcast_count: int
    artist_count: int
    album_count: int

    @property
    def total(self) -> int:
        return self.song_count + self.podcast_count + self.artist_count + self.album_count

    def to_dict(self) -> Dict[str, int]:
        return asdict(self)


class MusicService:
    """The catalog of all media, artists and albums in the system."""

    def __init__(self, event_bus: Optional[EventBus] = None):
        self._event_bus = event_bus
        self._entities: Dict[EntityKind, List[Any]] = {kind: [] for kind in EntityKind}

    # ==================== ADD ====================

    def register(self, entity: Optional[CatalogEntity]) -> Result[CatalogEntity, DomainError]:
        """Add any catalog entity, returning why it was refused on failure."""
        if entity is None:
            return self._reject(None, None, ValidationError("Cannot add null entity to catalog"))

        kind = getattr(entity, "kind", None)
        if not isinstance(kind, EntityKind):
            return self._reject(
                None, None,
                ValidationError(f"Unsupported catalog entity: {type(entity).__name__}")
            )

        entities = self._entities[kind]
        if entity in entities:
            return self._reject(
                kind, entity.id,
                DuplicateError(f"{kind.value.title()} {entity.id!r} already exists in catalog")
            )

        entities.append(entity)
        logger.info("%s added: %s", kind.value.title(), _label(entity))
        self._publish(EntityAdded(
            aggregate_id=entity.id,
            aggregate_type=kind.value,
            kind=kind.value,
            entity_id=entity.id,
            label=_label(entity),
        ))
        return success(entity)

    def add_song(self, song: Optional[Song]) -> bool:
        return self._add_as(EntityKind.SONG, song)

    def add_podcast(self, podcast: Optional[Podcast]) -> bool:
        return self._add_as(EntityKind.PODCAST, podcast)

    def add_artist(self, artist: Optional[Artist]) -> bool:
        return self._add_as(EntityKind.ARTIST, artist)

    def add_album(self, album: Optional[Album]) -> bool:
        return self._add_as(EntityKind.ALBUM, album)

    def _add_as(self, kind: EntityKind, entity: Optional[CatalogEntity]) -> bool:
        if entity is not None and getattr(entity, "kind", None) is not kind:
            result = self._reject(
                kind, None,
                ValidationError(f"Expected a {kind.value}, got {type(entity).__name__}")
            )
        else:
            result = self.register(entity)
        return result.is_success()

    def _reject(self, kind: Optional[EntityKind], entity_id: Optional[str],
                error: DomainError) -> Result[CatalogEntity, DomainError]:
        logger.info("Catalog add rejected: %s", error)
        self._publish(EntityRejected(
            aggregate_id=entity_id,
            aggregate_type=kind.value if kind else None,
            kind=kind.value if kind else None,
            entity_id=entity_id,
            reason=str(error),
        ))
        return failure(error)

    # ==================== LOOKUP ====================

    def get_by_id(self, kind: EntityKind, entity_id: str) -> Optional[CatalogEntity]:
        """First entity of the given kind with the id, or None."""
        for entity in self._entities[kind]:
            if entity.id == entity_id:
                return entity
        return None

    def get_song_by_id(self, song_id: str) -> Optional[Song]:
        return self.get_by_id(EntityKind.SONG, song_id)

    def get_podcast_by_id(self, podcast_id: str) -> Optional[Podcast]:
        return self.get_by_id(EntityKind.PODCAST, podcast_id)

    def get_artist_by_id(self, artist_id: str) -> Optional[Artist]:
        return self.get_by_id(EntityKind.ARTIST, artist_id)

    def get_album_by_id(self, album_id: str) -> Optional[Album]:
        return self.get_by_id(EntityKind.ALBUM, album_id)

    def get_all_songs(self) -> List[Song]:
        return list(self._entities[EntityKind.SONG])

    def get_all_podcasts(self) -> List[Podcast]:
        return list(self._entities[EntityKind.PODCAST])

    def get_all_artists(self) -> List[Artist]:
        return list(self._entities[EntityKind.ARTIST])

    def get_all_albums(self) -> List[Album]:
        return list(self._entities[EntityKind.ALBUM])

    def statistics(self) -> CatalogStatistics:
        """Get entity counts."""
        return CatalogStatistics(
            song_count=len(self._entities[EntityKind.SONG]),
            podcast_count=len(self._entities[EntityKind.PODCAST]),
            artist_count=len(self._entities[EntityKind.ARTIST]),
            album_count=len(self._entities[EntityKind.ALBUM]),
        )

    # ==================== SEARCH ====================

    def search(self, keyword: Optional[str]) -> List[Media]:
        """Songs then podcasts matching the keyword."""
        return search_engine.search_media(
            self._entities[EntityKind.SONG], self._entities[EntityKind.PODCAST], keyword
        )

    def search_songs(self, keyword: Optional[str]) -> List[Song]:
        return search_engine.search_songs(self._entities[EntityKind.SONG], keyword)

    def search_podcasts(self, keyword: Optional[str]) -> List[Podcast]:
        return search_engine.search_podcasts(self._entities[EntityKind.PODCAST], keyword)

    def search_artists(self, keyword: Optional[str]) -> List[Artist]:
        return search_engine.search_artists(self._entities[EntityKind.ARTIST], keyword)

    def search_albums(self, keyword: Optional[str]) -> List[Album]:
        return search_engine.search_albums(self._entities[EntityKind.ALBUM], keyword)

    # ==================== REMOVE ====================

    def remove_song(self, song_id: str) -> Optional[Song]:
        """Remove a song from the catalog and from every registered album."""
        song = self._pop(EntityKind.SONG, song_id)
        if song is not None:
            for album in self._entities[EntityKind.ALBUM]:
                album.remove_song(song)
        return song

    def remove_podcast(self, podcast_id: str) -> Optional[Podcast]:
        return self._pop(EntityKind.PODCAST, podcast_id)

    def remove_album(self, album_id: str) -> Optional[Album]:
        """Remove an album from the catalog and from its artist."""
        album = self._pop(EntityKind.ALBUM, album_id)
        if album is not None:
            album.artist.remove_album(album)
        return album

    def remove_artist(self, artist_id: str) -> Optional[Artist]:
        """Remove an artist together with every registered album it owns."""
        artist = self._pop(EntityKind.ARTIST, artist_id)
        if artist is not None:
            owned = [a for a in self._entities[EntityKind.ALBUM] if a.artist == artist]
            for album in owned:
                self.remove_album(album.album_id)
        return artist

    def _pop(self, kind: EntityKind, entity_id: str) -> Optional[Any]:
        entity = self.get_by_id(kind, entity_id)
        if entity is None:
            logger.debug("Nothing to remove: no %s with id %r", kind.value, entity_id)
            return None

        self._entities[kind].remove(entity)
        logger.info("%s removed: %s", kind.value.title(), _label(entity))
        self._publish(EntityRemoved(
            aggregate_id=entity.id,
            aggregate_type=kind.value,
            kind=kind.value,
            entity_id=entity.id,
            label=_label(entity),
        ))
        return entity

    def _publish(self, event) -> None:
        if self._event_bus is not None:
            self._event_bus.publish(event)


def _label(entity: CatalogEntity) -> str:
    if isinstance(entity, Artist):
        return entity.name
    return entity.title
