"""
Domain Layer - Streaming Catalog

Entities, the catalog registry, user collections and keyword search.
"""

from .value_objects import EntityKind, Capability, Genre
from .entities import (
    Song,
    Podcast,
    Media,
    Artist,
    Album,
    CatalogEntity,
    is_downloadable,
)
from .collections import Collection, Library, Playlist
from .registry import MusicService, CatalogStatistics
from .result import (
    Result,
    Success,
    Failure,
    success,
    failure,
    DomainError,
    ValidationError,
    DuplicateError,
)

__all__ = [
    # Value objects
    "EntityKind",
    "Capability",
    "Genre",
    # Entities
    "Song",
    "Podcast",
    "Media",
    "Artist",
    "Album",
    "CatalogEntity",
    "is_downloadable",
    # Collections
    "Collection",
    "Library",
    "Playlist",
    # Registry
    "MusicService",
    "CatalogStatistics",
    # Result pattern
    "Result",
    "Success",
    "Failure",
    "success",
    "failure",
    "DomainError",
    "ValidationError",
    "DuplicateError",
]
