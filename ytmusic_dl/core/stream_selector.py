"""
Chooses which of a video's streams to download.
"""

from typing import Iterable

from ytmusic_dl.exceptions import NoApplicableStreamError
from ytmusic_dl.models.media import StreamInfo, StreamKind


def select_stream(streams: Iterable[StreamInfo]) -> StreamInfo:
    """
    Returns the highest-bitrate audio-only stream, or the highest-quality
    muxed stream when no audio-only stream exists.

    Ties go to the first stream encountered.
    """
    streams = list(streams)

    audio = [s for s in streams if s.kind is StreamKind.AUDIO]
    if audio:
        return max(audio, key=lambda s: s.bitrate)

    muxed = [s for s in streams if s.kind is StreamKind.MUXED]
    if muxed:
        return max(muxed, key=lambda s: s.quality_rank)

    raise NoApplicableStreamError("No applicable media streams found for this video")
