"""Tests for the catalog registry."""

import pytest

from streaming_catalog.domain.entities import Album, Artist, Podcast, Song
from streaming_catalog.domain.registry import CatalogStatistics, MusicService
from streaming_catalog.domain.result import DuplicateError, ValidationError
from streaming_catalog.domain.value_objects import EntityKind, Genre
from streaming_catalog.events import EntityAdded, EntityRejected, EntityRemoved, EventBus


@pytest.fixture
def event_bus():
    bus = EventBus()
    yield bus
    bus.clear()


@pytest.fixture
def service(event_bus):
    return MusicService(event_bus=event_bus)


@pytest.fixture
def coldplay():
    return Artist("A001", "Coldplay")


@pytest.fixture
def fix_you():
    return Song("S1", "Fix You", 295, "Coldplay", "Rock")


@pytest.fixture
def tech_talk():
    return Podcast("P1", "Tech Talk", 1800, "Coldplay Fan", 1)


@pytest.fixture
def populated(service, coldplay, fix_you, tech_talk):
    """Catalog with one entity of each kind, the album holding the song."""
    album = Album("AL1", "X&Y", coldplay, 2005)
    album.add_song(fix_you)
    coldplay.add_album(album)
    service.add_artist(coldplay)
    service.add_song(fix_you)
    service.add_podcast(tech_talk)
    service.add_album(album)
    return service


class TestAdd:
    """Test add-with-validation."""

    def test_add_each_kind(self, service, coldplay, fix_you, tech_talk):
        album = Album("AL1", "X&Y", coldplay)
        assert service.add_song(fix_you) is True
        assert service.add_podcast(tech_talk) is True
        assert service.add_artist(coldplay) is True
        assert service.add_album(album) is True
        assert service.statistics() == CatalogStatistics(1, 1, 1, 1)

    def test_add_none_returns_false(self, service):
        assert service.add_song(None) is False
        assert service.add_podcast(None) is False
        assert service.add_artist(None) is False
        assert service.add_album(None) is False
        assert service.statistics().total == 0

    def test_add_duplicate_returns_false(self, service, fix_you):
        assert service.add_song(fix_you) is True
        assert service.add_song(Song("S1", "Another", 10, "Other")) is False
        assert service.get_all_songs() == [fix_you]

    def test_add_wrong_kind_returns_false(self, service, tech_talk):
        assert service.add_song(tech_talk) is False
        assert service.get_all_songs() == []
        assert service.get_all_podcasts() == []

    def test_register_reports_reason(self, service, fix_you):
        assert service.register(fix_you).value() is fix_you
        duplicate = service.register(fix_you)
        assert duplicate.is_failure()
        assert isinstance(duplicate.error(), DuplicateError)
        assert isinstance(service.register(None).error(), ValidationError)
        assert isinstance(service.register("not an entity").error(), ValidationError)

    def test_events_published(self, service, event_bus, fix_you):
        service.add_song(fix_you)
        service.add_song(fix_you)
        added = event_bus.get_events(event_type=EntityAdded)
        rejected = event_bus.get_events(event_type=EntityRejected)
        assert [(e.kind, e.entity_id, e.label) for e in added] == [("song", "S1", "Fix You")]
        assert rejected[0].entity_id == "S1"
        assert "already exists" in rejected[0].reason

    def test_works_without_event_bus(self, fix_you):
        service = MusicService()
        assert service.add_song(fix_you)
        assert not service.add_song(fix_you)


class TestLookup:
    """Test id lookup and listing."""

    def test_get_by_id(self, populated):
        assert populated.get_song_by_id("S1").title == "Fix You"
        assert populated.get_podcast_by_id("P1").title == "Tech Talk"
        assert populated.get_artist_by_id("A001").name == "Coldplay"
        assert populated.get_album_by_id("AL1").title == "X&Y"
        assert populated.get_by_id(EntityKind.SONG, "S1") is populated.get_song_by_id("S1")

    def test_lookup_miss_returns_none(self, populated):
        assert populated.get_song_by_id("missing") is None
        assert populated.get_by_id(EntityKind.ALBUM, "S1") is None

    def test_get_all_returns_copies(self, populated):
        songs = populated.get_all_songs()
        songs.clear()
        populated.get_all_artists().clear()
        assert len(populated.get_all_songs()) == 1
        assert len(populated.get_all_artists()) == 1

    def test_statistics(self, populated):
        stats = populated.statistics()
        assert stats.to_dict() == {
            "song_count": 1,
            "podcast_count": 1,
            "artist_count": 1,
            "album_count": 1,
        }
        assert stats.total == 4


class TestSearchDelegation:
    """Test registry search entry points."""

    def test_scenario_unified_search(self, populated, fix_you, tech_talk):
        """Scenario: 'coldplay' finds the song first, then the podcast."""
        assert populated.search("coldplay") == [fix_you, tech_talk]

    def test_kind_specific_search(self, populated, coldplay, fix_you, tech_talk):
        assert populated.search_songs("rock") == [fix_you]
        assert populated.search_podcasts("fan") == [tech_talk]
        assert populated.search_artists("COLD") == [coldplay]
        assert [a.album_id for a in populated.search_albums("coldplay")] == ["AL1"]

    def test_search_after_genre_reassigned(self, populated, fix_you):
        fix_you.genre = Genre.POP
        assert populated.search_songs("pop") == [fix_you]
        assert populated.search_songs("rock") == []
        assert populated.search("pop") == [fix_you]

    def test_search_artists_empty_keyword(self, populated):
        """Scenario: empty keyword on a non-empty artist list finds nothing."""
        assert populated.search_artists("") == []

    def test_new_entity_visible_to_search(self, populated):
        populated.add_song(Song("S2", "Yellow", 269, "Coldplay", "Rock"))
        assert [s.id for s in populated.search_songs("yellow")] == ["S2"]


class TestRemove:
    """Test removal and back-reference repair."""

    def test_remove_song_detaches_from_albums(self, populated):
        album = populated.get_album_by_id("AL1")
        removed = populated.remove_song("S1")
        assert removed.id == "S1"
        assert populated.get_song_by_id("S1") is None
        assert album.songs == []

    def test_remove_podcast(self, populated):
        assert populated.remove_podcast("P1").id == "P1"
        assert populated.search("tech") == []

    def test_remove_album_detaches_from_artist(self, populated, coldplay):
        populated.remove_album("AL1")
        assert populated.get_album_by_id("AL1") is None
        assert coldplay.albums == []

    def test_remove_artist_cascades_to_albums(self, populated, coldplay, fix_you):
        populated.remove_artist("A001")
        assert populated.get_all_artists() == []
        assert populated.get_all_albums() == []
        assert coldplay.albums == []
        assert populated.get_all_songs() == [fix_you]

    def test_remove_missing_returns_none(self, populated):
        assert populated.remove_song("nope") is None
        assert populated.remove_artist("nope") is None
        assert populated.statistics().total == 4

    def test_remove_publishes_event(self, populated, event_bus):
        populated.remove_podcast("P1")
        removed = event_bus.get_events(event_type=EntityRemoved)
        assert [(e.kind, e.entity_id) for e in removed] == [("podcast", "P1")]

    def test_removed_entity_can_be_added_again(self, populated, fix_you):
        populated.remove_song("S1")
        assert populated.add_song(fix_you) is True
