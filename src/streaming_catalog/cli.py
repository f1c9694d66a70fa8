"""Command line interface for the streaming catalog."""

import logging
import sys
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from .config import CatalogConfig, load_config
from .domain import MusicService
from .events import EventBus
from .exceptions import StreamingCatalogError
from .rendering import CatalogRenderer
from .sample_data import build_sample_catalog

console = Console()

SEARCH_KINDS = ("all", "media", "songs", "podcasts", "artists", "albums")


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _build_service(config: CatalogConfig) -> MusicService:
    bus = EventBus(max_events_in_memory=config.max_events_in_memory)
    if config.seed_sample_data:
        return build_sample_catalog(event_bus=bus)
    return MusicService(event_bus=bus)


@click.group()
@click.version_option(package_name="streaming-catalog")
@click.option(
    '--config',
    'config_path',
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help='Configuration file path'
)
@click.option('--verbose', is_flag=True, help='Verbose output')
@click.pass_context
def cli(ctx: click.Context, config_path: Optional[Path], verbose: bool):
    """Browse and search the music streaming catalog."""
    try:
        config = load_config(config_path) if config_path else CatalogConfig.default()
    except StreamingCatalogError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        sys.exit(1)

    _configure_logging("DEBUG" if verbose else config.log_level)
    ctx.obj = _build_service(config)


@cli.command()
@click.pass_obj
def stats(service: MusicService):
    """Show how many songs, podcasts, artists and albums are in the catalog."""
    CatalogRenderer(console).render_statistics(service.statistics())


@cli.command()
@click.argument('keyword')
@click.option(
    '--kind',
    type=click.Choice(SEARCH_KINDS),
    default='all',
    show_default=True,
    help='Which part of the catalog to search'
)
@click.pass_obj
def search(service: MusicService, keyword: str, kind: str):
    """Search the catalog for KEYWORD (case-insensitive substring)."""
    renderer = CatalogRenderer(console)

    if kind in ("all", "media"):
        renderer.render_media(service.search(keyword), title=f"Media matching '{keyword}'")
    elif kind == "songs":
        renderer.render_media(service.search_songs(keyword), title=f"Songs matching '{keyword}'")
    elif kind == "podcasts":
        renderer.render_media(service.search_podcasts(keyword),
                              title=f"Podcasts matching '{keyword}'")

    if kind in ("all", "artists"):
        renderer.render_artists(service.search_artists(keyword))
    if kind in ("all", "albums"):
        renderer.render_albums(service.search_albums(keyword))


@cli.command()
@click.option('--detail', is_flag=True, help='Show each album with its track list')
@click.pass_obj
def albums(service: MusicService, detail: bool):
    """List every album with artist, year and total duration."""
    renderer = CatalogRenderer(console)
    if detail:
        for album in service.get_all_albums():
            renderer.render_album(album)
    else:
        renderer.render_albums(service.get_all_albums())


def main():
    cli()


if __name__ == '__main__':
    main()
