"""
Expands a playlist into its videos and processes them one after another.
"""

import logging
from pathlib import Path
from typing import List, Tuple, Union

from rich.markup import escape

from ytmusic_dl.api.client import YouTubeClient
from ytmusic_dl.exceptions import YtMusicDlError

from .video_processor import VideoProcessor

log = logging.getLogger(__name__)

VideoResult = Union[Path, Exception]


class PlaylistProcessor:
    """Drives a VideoProcessor over every video of a playlist, in order."""

    def __init__(
        self,
        client: YouTubeClient,
        video_processor: VideoProcessor,
        fail_fast: bool = True,
    ):
        self.client = client
        self.video_processor = video_processor
        self.fail_fast = fail_fast

    async def process(self, playlist_id: str) -> List[Tuple[str, VideoResult]]:
        """
        Processes each video of the playlist sequentially.

        With fail_fast, the first failing video stops the playlist and its error
        propagates; otherwise the error becomes that video's result and the
        remaining videos are still attempted.
        """
        log.info(f"Working on playlist [cyan]\\[{playlist_id}][/cyan]...")

        playlist = await self.client.get_playlist(playlist_id)
        self.video_processor.stats.playlists_processed += 1
        log.info(
            f"[bold]{escape(playlist.title)}[/bold] "
            f"({len(playlist.video_ids)} videos)"
        )
        log.info("")

        results: List[Tuple[str, VideoResult]] = []
        for video_id in playlist.video_ids:
            try:
                output_path = await self.video_processor.process(video_id)
            except YtMusicDlError as e:
                if self.fail_fast:
                    raise
                log.error(f"  [red]✗ Failed:[/] \\[{video_id}] ({escape(str(e))})")
                results.append((video_id, e))
            else:
                results.append((video_id, output_path))
            log.info("")

        return results
