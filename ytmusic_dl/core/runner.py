"""
The top-level orchestrator: classifies each argument and dispatches it to the
playlist or video pipeline.
"""

import logging
from typing import Sequence

from rich.markup import escape

from ytmusic_dl.api.client import YouTubeClient
from ytmusic_dl.models.media import IdentifierKind
from ytmusic_dl.models.stats import RunStats

from .classifier import classify
from .playlist_processor import PlaylistProcessor
from .video_processor import VideoProcessor

log = logging.getLogger(__name__)


class Runner:
    """
    Processes command-line arguments strictly in order.

    The first failure of any kind stops the run; the arguments after it are
    not attempted.
    """

    def __init__(
        self,
        client: YouTubeClient,
        video_processor: VideoProcessor,
        playlist_processor: PlaylistProcessor,
    ):
        self.client = client
        self.video_processor = video_processor
        self.playlist_processor = playlist_processor

    @property
    def stats(self) -> RunStats:
        return self.video_processor.stats

    async def run(self, arguments: Sequence[str]) -> RunStats:
        for argument in arguments:
            outcome = self.stats.start_argument(argument)
            try:
                identifier = classify(argument, self.client)
                outcome.kind = identifier.kind.value

                if identifier.kind is IdentifierKind.PLAYLIST:
                    results = await self.playlist_processor.process(identifier.value)
                    outcome.detail = f"{len(results)} videos"
                else:
                    output_path = await self.video_processor.process(identifier.value)
                    outcome.detail = output_path.name
            except Exception as e:
                outcome.status = "failed"
                outcome.detail = str(e)
                log.debug(f"Stopping at {escape(argument)}: {e}", exc_info=True)
                raise

            outcome.status = "done"
            log.info("")

        log.info("Done")
        return self.stats
