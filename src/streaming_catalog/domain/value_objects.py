"""
Domain value objects for the streaming catalog.

Value objects are immutable and defined by their attributes rather than
identity.
"""

from __future__ import annotations

from enum import Enum, Flag, auto


class EntityKind(Enum):
    """Kinds of entity stored by the catalog registry."""
    SONG = "song"
    PODCAST = "podcast"
    ARTIST = "artist"
    ALBUM = "album"


class Capability(Flag):
    """What an entity can do beyond holding data."""
    NONE = 0
    PLAYABLE = auto()
    DOWNLOADABLE = auto()
    SEARCHABLE = auto()


class Genre(Enum):
    """Music genres with their display names."""
    POP = "Pop"
    ROCK = "Rock"
    HIP_HOP = "Hip-Hop"
    JAZZ = "Jazz"
    CLASSICAL = "Classical"
    ELECTRONIC = "Electronic"
    COUNTRY = "Country"
    RNB = "R&B"
    REGGAE = "Reggae"
    BLUES = "Blues"
    METAL = "Metal"
    FOLK = "Folk"
    INDIE = "Indie"
    OTHER = "Other"

    @property
    def display_name(self) -> str:
        """Get the human-readable genre name."""
        return self.value

    def __str__(self) -> str:
        return self.value
