"""Keyword search over catalog entities.

Matching is a case-insensitive substring test over a fixed set of fields per
entity kind, combined with OR. A blank keyword is a valid query that matches
nothing. There is no index and no ranking: results keep the order of the
sequence that was searched.
"""

from typing import Callable, Dict, Iterable, List, Optional, Tuple, TypeVar

from .entities import Album, Artist, CatalogEntity, Media, Podcast, Song
from .value_objects import EntityKind

T = TypeVar("T")

FieldGetter = Callable[[CatalogEntity], str]

SEARCH_FIELDS: Dict[EntityKind, Tuple[FieldGetter, ...]] = {
    EntityKind.SONG: (
        lambda song: song.title,
        lambda song: song.artist_name,
        lambda song: song.genre,
    ),
    EntityKind.PODCAST: (
        lambda podcast: podcast.title,
        lambda podcast: podcast.host_name,
    ),
    EntityKind.ARTIST: (
        lambda artist: artist.name,
    ),
    EntityKind.ALBUM: (
        lambda album: album.title,
        lambda album: album.artist.name,
    ),
}


def normalize_keyword(keyword: Optional[str]) -> Optional[str]:
    """Lowercase a keyword, or return None when it cannot match anything."""
    if keyword is None or not keyword.strip():
        return None
    return keyword.lower()


def searchable_fields(entity: CatalogEntity) -> List[str]:
    """Get the values examined when searching an entity."""
    return [getter(entity) or "" for getter in SEARCH_FIELDS[entity.kind]]


def matches(entity: CatalogEntity, needle: str) -> bool:
    """Check whether any searchable field contains an already-lowered needle."""
    return any(needle in value.lower() for value in searchable_fields(entity))


def _filter(entities: Iterable[T], keyword: Optional[str]) -> List[T]:
    needle = normalize_keyword(keyword)
    if needle is None:
        return []
    return [entity for entity in entities if matches(entity, needle)]


def search_songs(songs: Iterable[Song], keyword: Optional[str]) -> List[Song]:
    """Songs whose title, artist name or genre contains the keyword."""
    return _filter(songs, keyword)


def search_podcasts(podcasts: Iterable[Podcast], keyword: Optional[str]) -> List[Podcast]:
    """Podcasts whose title or host name contains the keyword."""
    return _filter(podcasts, keyword)


def search_artists(artists: Iterable[Artist], keyword: Optional[str]) -> List[Artist]:
    """Artists whose name contains the keyword."""
    return _filter(artists, keyword)


def search_albums(albums: Iterable[Album], keyword: Optional[str]) -> List[Album]:
    """Albums whose title or artist name contains the keyword."""
    return _filter(albums, keyword)


def search_media(
    songs: Iterable[Song],
    podcasts: Iterable[Podcast],
    keyword: Optional[str],
) -> List[Media]:
    """Song matches followed by podcast matches."""
    results: List[Media] = []
    results.extend(search_songs(songs, keyword))
    results.extend(search_podcasts(podcasts, keyword))
    return results


def search_items(items: Iterable[T], keyword: Optional[str]) -> List[T]:
    """Match arbitrary collection items against their text rendering."""
    if keyword is None or not keyword.strip():
        return []
    needle = keyword.strip().lower()
    return [item for item in items if needle in str(item).lower()]
