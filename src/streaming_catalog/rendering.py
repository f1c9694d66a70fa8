"""Rich renderer for catalog contents."""

from typing import Iterable, Optional, Sequence

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from .domain import Album, Artist, CatalogStatistics, Collection, Media, Playlist, Podcast, Song


def format_duration(seconds: int) -> str:
    """Format seconds as m:ss, or h:mm:ss from one hour up."""
    hours, remainder = divmod(seconds, 3600)
    minutes, secs = divmod(remainder, 60)
    if hours:
        return f"{hours}:{minutes:02d}:{secs:02d}"
    return f"{minutes}:{secs:02d}"


class CatalogRenderer:
    """Renders catalog entities, search results and collections using Rich."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def render_statistics(self, stats: CatalogStatistics) -> None:
        table = Table(title="Music Streaming System Stats")
        table.add_column("Entity", style="cyan")
        table.add_column("Count", justify="right")
        table.add_row("Songs", str(stats.song_count))
        table.add_row("Podcasts", str(stats.podcast_count))
        table.add_row("Artists", str(stats.artist_count))
        table.add_row("Albums", str(stats.album_count))
        self.console.print(table)

    def render_media(self, media: Sequence[Media], title: str = "Media") -> None:
        """Render songs and podcasts in one table, in the given order."""
        table = Table(title=f"{title} ({len(media)})")
        table.add_column("Type", style="magenta")
        table.add_column("ID", style="dim")
        table.add_column("Title", style="bold")
        table.add_column("By")
        table.add_column("Details")
        table.add_column("Duration", justify="right")

        for item in media:
            if isinstance(item, Song):
                table.add_row("Song", item.id, item.title, item.artist_name,
                              item.genre, format_duration(item.duration_seconds))
            elif isinstance(item, Podcast):
                table.add_row("Podcast", item.id, item.title, item.host_name,
                              f"Episode {item.episode_number}",
                              format_duration(item.duration_seconds))
        self.console.print(table)

    def render_artists(self, artists: Iterable[Artist]) -> None:
        table = Table(title="Artists")
        table.add_column("ID", style="dim")
        table.add_column("Name", style="bold")
        table.add_column("Albums", justify="right")
        for artist in artists:
            table.add_row(artist.artist_id, artist.name, str(artist.album_count))
        self.console.print(table)

    def render_albums(self, albums: Iterable[Album]) -> None:
        table = Table(title="Albums")
        table.add_column("ID", style="dim")
        table.add_column("Title", style="bold")
        table.add_column("Artist")
        table.add_column("Year", justify="right")
        table.add_column("Songs", justify="right")
        table.add_column("Total Duration", justify="right")
        for album in albums:
            table.add_row(
                album.album_id,
                album.title,
                album.artist.name,
                str(album.release_year) if album.release_year else "-",
                str(album.song_count),
                format_duration(album.total_duration_seconds),
            )
        self.console.print(table)

    def render_album(self, album: Album) -> None:
        """Render one album with its track list."""
        lines = [
            f"Artist: {album.artist.name}",
            f"Year: {album.release_year or 'unknown'}",
            f"Number of Songs: {album.song_count}",
            f"Total Duration: {album.total_duration_seconds} seconds",
        ]
        for position, song in enumerate(album.songs, start=1):
            lines.append(f"  {position}. {song.title} ({format_duration(song.duration_seconds)})")
        self.console.print(Panel("\n".join(lines), title=f"Album: {album.title}"))

    def render_collection(self, collection: Collection) -> None:
        """Render a library or playlist, numbering items from 1."""
        items = collection.items()
        if isinstance(collection, Playlist):
            heading = f"Playlist: '{collection.name}' ({len(items)} items)"
        else:
            heading = f"Library ({len(items)} items)"

        if not items:
            body = "(empty playlist)" if isinstance(collection, Playlist) else "(empty library)"
        else:
            body = "\n".join(f"{i}. {item}" for i, item in enumerate(items, start=1))
        self.console.print(Panel(body, title=heading))
