"""Sample catalog used by the CLI and for demonstrations."""

from typing import Optional

from .domain import Album, Artist, Genre, MusicService, Podcast, Song
from .events import EventBus


def build_sample_catalog(event_bus: Optional[EventBus] = None) -> MusicService:
    """Create a catalog with a couple of artists, albums, songs and podcasts."""
    service = MusicService(event_bus=event_bus)

    coldplay = Artist("A001", "Coldplay")
    adele = Artist("A002", "Adele")
    service.add_artist(coldplay)
    service.add_artist(adele)

    songs = [
        Song("S001", "Fix You", 295, "Coldplay", Genre.ROCK),
        Song("S002", "Yellow", 269, "Coldplay", Genre.ROCK),
        Song("S003", "Hello", 295, "Adele", Genre.POP),
        Song("S004", "When We Were Young", 290, "Adele", Genre.POP),
    ]
    for song in songs:
        service.add_song(song)

    x_and_y = Album("AL001", "X&Y", coldplay, 2005)
    parachutes = Album("AL002", "Parachutes", coldplay, 2000)
    twenty_five = Album("AL003", "25", adele, 2015)
    x_and_y.add_song(songs[0])
    parachutes.add_song(songs[1])
    twenty_five.add_song(songs[2])
    twenty_five.add_song(songs[3])

    for album in (x_and_y, parachutes, twenty_five):
        album.artist.add_album(album)
        service.add_album(album)

    service.add_podcast(Podcast("P001", "Tech Talk", 1800, "Coldplay Fan", 1))
    service.add_podcast(Podcast("P002", "Song Exploder", 1200, "Hrishikesh Hirway", 42))

    return service
