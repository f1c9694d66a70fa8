"""Catalog entities.

Songs and podcasts are the playable media of the catalog. They share the
``id``/``title``/``duration_seconds`` field set but are separate classes;
``Media`` is the closed union of the two and callers dispatch on the concrete
type. Artists and albums reference each other and reference songs by
identity: an album never owns a copy of a song.

Entity equality is identity by id within a kind, so a renamed song is still
the same song.
"""

from dataclasses import dataclass, field
from typing import Any, ClassVar, Dict, List, Union

from .result import ValidationError
from .value_objects import Capability, EntityKind, Genre


def _require_id(value: str, what: str) -> None:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{what} requires a non-empty id, got {value!r}")


def _require_non_negative(value: int, what: str) -> None:
    if not isinstance(value, int) or value < 0:
        raise ValidationError(f"{what} must be a non-negative integer, got {value!r}")


@dataclass(eq=False)
class Song:
    """A music track."""

    kind: ClassVar[EntityKind] = EntityKind.SONG
    capabilities: ClassVar[Capability] = (
        Capability.PLAYABLE | Capability.DOWNLOADABLE | Capability.SEARCHABLE
    )

    id: str
    title: str
    duration_seconds: int
    artist_name: str
    genre: Union[str, Genre] = ""

    def __post_init__(self) -> None:
        _require_id(self.id, "Song")

    def __setattr__(self, name: str, value: Any) -> None:
        if name == "duration_seconds":
            _require_non_negative(value, "Song duration")
        elif name == "genre" and isinstance(value, Genre):
            value = value.display_name
        super().__setattr__(name, value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Song):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash((self.kind, self.id))

    def __str__(self) -> str:
        return f"{self.title} by {self.artist_name}"

    def play(self) -> str:
        """Describe playback of this song."""
        return f"Playing Song: {self.title} by {self.artist_name}"

    def to_dict(self) -> Dict[str, Any]:
        """Convert song to dictionary."""
        return {
            "kind": self.kind.value,
            "id": self.id,
            "title": self.title,
            "duration_seconds": self.duration_seconds,
            "artist_name": self.artist_name,
            "genre": self.genre,
        }


@dataclass(eq=False)
class Podcast:
    """A podcast episode. Podcasts stream but cannot be downloaded."""

    kind: ClassVar[EntityKind] = EntityKind.PODCAST
    capabilities: ClassVar[Capability] = Capability.PLAYABLE | Capability.SEARCHABLE

    id: str
    title: str
    duration_seconds: int
    host_name: str
    episode_number: int = 0

    def __post_init__(self) -> None:
        _require_id(self.id, "Podcast")

    def __setattr__(self, name: str, value: Any) -> None:
        if name == "duration_seconds":
            _require_non_negative(value, "Podcast duration")
        elif name == "episode_number":
            _require_non_negative(value, "Podcast episode number")
        super().__setattr__(name, value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Podcast):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash((self.kind, self.id))

    def __str__(self) -> str:
        return f"{self.title} (Episode {self.episode_number}) hosted by {self.host_name}"

    def play(self) -> str:
        """Describe playback of this episode."""
        return (
            f"Playing Podcast: {self.title} (Episode {self.episode_number}) "
            f"hosted by {self.host_name}"
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert podcast to dictionary."""
        return {
            "kind": self.kind.value,
            "id": self.id,
            "title": self.title,
            "duration_seconds": self.duration_seconds,
            "host_name": self.host_name,
            "episode_number": self.episode_number,
        }


Media = Union[Song, Podcast]


def is_downloadable(media: Media) -> bool:
    """Check whether a media item may be saved for offline use."""
    return Capability.DOWNLOADABLE in media.capabilities


@dataclass(eq=False)
class Artist:
    """
    A musical artist or group.

    The artist keeps an ordered, duplicate-free set of its albums. Only albums
    created for this artist can be attached.
    """

    kind: ClassVar[EntityKind] = EntityKind.ARTIST
    capabilities: ClassVar[Capability] = Capability.SEARCHABLE

    artist_id: str
    name: str
    _albums: List["Album"] = field(default_factory=list, init=False, repr=False)

    def __post_init__(self) -> None:
        _require_id(self.artist_id, "Artist")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Artist):
            return NotImplemented
        return self.artist_id == other.artist_id

    def __hash__(self) -> int:
        return hash((self.kind, self.artist_id))

    def __str__(self) -> str:
        return self.name

    @property
    def id(self) -> str:
        """Catalog id, shared spelling with media entities."""
        return self.artist_id

    @property
    def albums(self) -> List["Album"]:
        """Get a copy of the artist's albums in insertion order."""
        return list(self._albums)

    @property
    def album_count(self) -> int:
        """Get number of albums."""
        return len(self._albums)

    def add_album(self, album: "Album") -> bool:
        """Attach an album of this artist. Returns False if it was not added."""
        if album is None or album.artist != self:
            return False
        if album in self._albums:
            return False
        self._albums.append(album)
        return True

    def remove_album(self, album: "Album") -> None:
        """Detach an album; no-op if it is not attached."""
        if album in self._albums:
            self._albums.remove(album)

    def to_dict(self) -> Dict[str, Any]:
        """Convert artist to dictionary."""
        return {
            "kind": self.kind.value,
            "artist_id": self.artist_id,
            "name": self.name,
            "albums": [a.album_id for a in self._albums],
        }


@dataclass(eq=False)
class Album:
    """
    A music album.

    The owning artist is fixed at construction. Songs are shared references
    to catalog songs, kept as an ordered set.
    """

    kind: ClassVar[EntityKind] = EntityKind.ALBUM
    capabilities: ClassVar[Capability] = Capability.SEARCHABLE

    album_id: str
    title: str
    artist: Artist
    release_year: int = 0  # 0 = unknown
    _songs: List[Song] = field(default_factory=list, init=False, repr=False)

    def __post_init__(self) -> None:
        _require_id(self.album_id, "Album")
        if not isinstance(self.artist, Artist):
            raise ValidationError(
                f"Album {self.album_id!r} requires an Artist, got {self.artist!r}"
            )

    def __setattr__(self, name: str, value: Any) -> None:
        if name == "artist" and "artist" in self.__dict__:
            raise AttributeError("Album artist cannot be changed after construction")
        if name == "release_year":
            _require_non_negative(value, "Album release year")
        super().__setattr__(name, value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Album):
            return NotImplemented
        return self.album_id == other.album_id

    def __hash__(self) -> int:
        return hash((self.kind, self.album_id))

    def __str__(self) -> str:
        return f"{self.title} by {self.artist.name}"

    @property
    def id(self) -> str:
        """Catalog id, shared spelling with media entities."""
        return self.album_id

    @property
    def songs(self) -> List[Song]:
        """Get a copy of the album's songs in insertion order."""
        return list(self._songs)

    @property
    def song_count(self) -> int:
        """Get number of songs."""
        return len(self._songs)

    @property
    def total_duration_seconds(self) -> int:
        """Get total duration of all songs."""
        return sum(song.duration_seconds for song in self._songs)

    @property
    def display_name(self) -> str:
        """Get display name with year."""
        year_str = f" ({self.release_year})" if self.release_year else ""
        return f"{self.title}{year_str}"

    def add_song(self, song: Song) -> bool:
        """Add a song to this album. Returns False if it was not added."""
        if song is None or song in self._songs:
            return False
        self._songs.append(song)
        return True

    def remove_song(self, song: Song) -> None:
        """Remove a song from this album; no-op if absent."""
        if song in self._songs:
            self._songs.remove(song)

    def to_dict(self) -> Dict[str, Any]:
        """Convert album to dictionary."""
        return {
            "kind": self.kind.value,
            "album_id": self.album_id,
            "title": self.title,
            "artist_id": self.artist.artist_id,
            "release_year": self.release_year,
            "songs": [s.id for s in self._songs],
            "total_duration_seconds": self.total_duration_seconds,
        }


CatalogEntity = Union[Song, Podcast, Artist, Album]
