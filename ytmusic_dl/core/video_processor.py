"""
Handles the processing of a single video, from download to tagging.
"""

import logging
import os
from pathlib import Path

from rich.markup import escape

from ytmusic_dl.api.client import YouTubeClient
from ytmusic_dl.media import Tagger, Transcoder, parse_title
from ytmusic_dl.models.config import DownloadConfig
from ytmusic_dl.models.stats import RunStats
from ytmusic_dl.utils.path import create_dir, sanitize_title, unique_temp_path

from .stream_selector import select_stream

log = logging.getLogger(__name__)

OUTPUT_SUFFIX = ".mp3"


class VideoProcessor:
    """
    Orchestrates the download, conversion, and tagging of a single video.
    """

    def __init__(
        self,
        config: DownloadConfig,
        client: YouTubeClient,
        transcoder: Transcoder,
        tagger: Tagger,
        stats: RunStats | None = None,
    ):
        self.config = config
        self.client = client
        self.transcoder = transcoder
        self.tagger = tagger
        self.stats = stats or RunStats()

    async def process(self, video_id: str) -> Path:
        """
        Manages the complete lifecycle of downloading and saving a video as MP3.

        Each stage runs only after the previous one has finished, and any error
        propagates to the caller. Existing output files are overwritten.
        """
        log.info(f"Working on video [cyan]\\[{video_id}][/cyan]...")
        try:
            output_path = await self._process(video_id)
        except Exception:
            self.stats.videos_failed += 1
            raise
        self.stats.videos_converted += 1
        log.info(
            f"[green]✓[/green] Downloaded and converted video \\[{video_id}] to "
            f"[dim]\\[{escape(str(output_path))}][/dim]"
        )
        return output_path

    async def _process(self, video_id: str) -> Path:
        video, streams = await self.client.get_video_with_streams(video_id)
        clean_title = sanitize_title(
            video.title, suffix=OUTPUT_SUFFIX, fallback=video.id
        )
        log.info(f"[bold]{escape(video.title)}[/bold]")

        stream = select_stream(streams)
        log.debug(f"Selected {stream.describe()} (format {stream.format_id})")

        log.info("Downloading...")
        create_dir(self.config.temp_dir)
        temp_path = unique_temp_path(self.config.temp_dir, stream.container)
        size = await self.client.download_stream(
            stream, str(temp_path), description=video.title
        )
        self.stats.total_size_downloaded += size

        log.info("Converting...")
        create_dir(self.config.output_dir)
        output_path = self.config.output_dir / f"{clean_title}{OUTPUT_SUFFIX}"
        await self.transcoder.convert_to_mp3(str(temp_path), str(output_path))

        log.info("Deleting temp file...")
        self._delete_temp_file(temp_path)

        log.info("Writing metadata...")
        artist, title = parse_title(video.title)
        self.tagger.tag_file(str(output_path), artist, title)

        return output_path

    @staticmethod
    def _delete_temp_file(temp_path: Path) -> None:
        try:
            os.remove(temp_path)
        except OSError as e:
            log.warning(
                f"[yellow]⚠ Could not delete temp file[/yellow] "
                f"[dim]{escape(temp_path.name)}[/dim]: {e}"
            )
