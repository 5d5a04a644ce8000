"""
Defines the command-line interface for the application using Typer.
"""

import asyncio
import logging

import typer
from rich.console import Console
from rich.logging import RichHandler

from ytmusic_dl import __version__
from ytmusic_dl.api.client import YouTubeClient
from ytmusic_dl.core.playlist_processor import PlaylistProcessor
from ytmusic_dl.core.runner import Runner
from ytmusic_dl.core.video_processor import VideoProcessor
from ytmusic_dl.media import Downloader, Tagger, Transcoder
from ytmusic_dl.media.downloader import close_connection_pool
from ytmusic_dl.models.config import DownloadConfig
from ytmusic_dl.models.stats import RunStats

from .formatters import print_summary_panel
from .progress_manager import ProgressManager

APP_TITLE = "YouTube Music Downloader"

console = Console()

logging.basicConfig(
    level="INFO",
    format="%(message)s",
    datefmt="[%X]",
    handlers=[
        RichHandler(
            console=console,
            rich_tracebacks=True,
            show_path=False,
            show_level=False,
            show_time=False,
            markup=True,
        )
    ],
)
log = logging.getLogger("ytmusic_dl")

app = typer.Typer(
    name="ytmusic-dl",
    help="Download YouTube videos and playlists as tagged MP3 files.",
    rich_markup_mode="rich",
    pretty_exceptions_show_locals=False,
    add_completion=False,
)


@app.command()
def download(
    arguments: list[str] = typer.Argument(  # noqa: B008
        ...,
        help="YouTube video or playlist URLs or IDs, processed in order.",
        metavar="URL_OR_ID...",
    ),
):
    """Download each video or playlist, convert it to MP3, and tag it."""
    console.set_window_title(APP_TITLE)
    console.print(f"[bold cyan]🎵 {APP_TITLE}[/bold cyan] [dim]v{__version__}[/dim]\n")

    config = DownloadConfig()
    stats = RunStats()
    log.debug(f"Temp directory: {config.temp_dir}, output directory: {config.output_dir}")

    async def _download_async():
        async with ProgressManager(console) as progress_manager:
            try:
                client = YouTubeClient(Downloader(progress_manager))
                video_processor = VideoProcessor(
                    config,
                    client,
                    Transcoder(config.ffmpeg_path, config.audio_quality),
                    Tagger(),
                    stats,
                )
                runner = Runner(
                    client, video_processor, PlaylistProcessor(client, video_processor)
                )
                await runner.run(arguments)
            finally:
                await close_connection_pool()

    try:
        asyncio.run(_download_async())
    finally:
        print_summary_panel(stats, console)
