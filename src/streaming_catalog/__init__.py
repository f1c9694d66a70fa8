"""Streaming Catalog

A catalog of songs, podcasts, artists and albums with user libraries,
playlists and keyword search.
"""

__version__ = "0.1.0"

from .domain import (
    Album,
    Artist,
    CatalogStatistics,
    Collection,
    EntityKind,
    Genre,
    Library,
    Media,
    MusicService,
    Playlist,
    Podcast,
    Song,
)
from .events import EventBus

__all__ = [
    # Registry
    "MusicService",
    "CatalogStatistics",

    # Entities
    "Song",
    "Podcast",
    "Media",
    "Artist",
    "Album",

    # Collections
    "Collection",
    "Library",
    "Playlist",

    # Types and enums
    "EntityKind",
    "Genre",

    # Events
    "EventBus",
]
