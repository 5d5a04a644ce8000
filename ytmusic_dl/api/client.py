"""
Client for the YouTube catalog: ID validation, URL parsing, metadata lookup
through yt-dlp, and stream transfer.
"""

import asyncio
import logging
import re
from typing import Any, Dict, List, Optional

import yt_dlp
from yt_dlp.utils import DownloadError

from ytmusic_dl.exceptions import FetchError
from ytmusic_dl.media.downloader import Downloader
from ytmusic_dl.models.media import Playlist, StreamInfo, StreamKind, Video

log = logging.getLogger(__name__)

_ID_CHARS = re.compile(r"[^0-9a-zA-Z_\-]")

PLAYLIST_SPECIAL_IDS = ("WL", "FL", "LL", "LM")
PLAYLIST_ID_PREFIXES = ("PL", "RD", "UL", "UU", "PU", "OL", "LL", "FL")

PLAYLIST_URL_PATTERNS = [
    re.compile(r"youtube\..+?/playlist.*?list=(.*?)(?:&|/|$)"),
    re.compile(r"youtube\..+?/watch.*?list=(.*?)(?:&|/|$)"),
    re.compile(r"youtu\.be/.*?/.*?list=(.*?)(?:&|/|$)"),
    re.compile(r"youtube\..+?/embed/.*?/.*?list=(.*?)(?:&|/|$)"),
]

VIDEO_URL_PATTERNS = [
    re.compile(r"youtube\..+?/watch.*?v=(.*?)(?:&|/|$)"),
    re.compile(r"youtu\.be/(.*?)(?:\?|&|/|$)"),
    re.compile(r"youtube\..+?/embed/(.*?)(?:\?|&|/|$)"),
]

# Protocols the aiohttp downloader can fetch in a single request.
DIRECT_PROTOCOLS = ("https", "http")


class YouTubeClient:
    """
    Resolves YouTube IDs and URLs and fetches video and playlist metadata.

    Metadata extraction is delegated to yt-dlp, which is synchronous; every
    call is pushed to a worker thread so the event loop is never blocked.
    """

    VIDEO_URL = "https://www.youtube.com/watch?v={}"
    PLAYLIST_URL = "https://www.youtube.com/playlist?list={}"

    def __init__(self, downloader: Downloader, ydl_options: Optional[Dict] = None):
        self.downloader = downloader
        self.ydl_options: Dict[str, Any] = {
            "quiet": True,
            "no_warnings": True,
            "skip_download": True,
            "noplaylist": True,
            "logger": log,
        }
        if ydl_options:
            self.ydl_options.update(ydl_options)

    # ID validation and URL parsing
    @staticmethod
    def validate_video_id(video_id: str) -> bool:
        if not video_id or len(video_id) != 11:
            return False
        return not _ID_CHARS.search(video_id)

    @staticmethod
    def validate_playlist_id(playlist_id: str) -> bool:
        if not playlist_id:
            return False
        if playlist_id in PLAYLIST_SPECIAL_IDS:
            return True
        if not playlist_id.startswith(PLAYLIST_ID_PREFIXES):
            return False
        # Playlist ID lengths vary a lot, so only the extremes are checked.
        if not 13 <= len(playlist_id) <= 42:
            return False
        return not _ID_CHARS.search(playlist_id)

    @classmethod
    def try_parse_video_id(cls, url: str) -> Optional[str]:
        return cls._parse_id(url, VIDEO_URL_PATTERNS, cls.validate_video_id)

    @classmethod
    def try_parse_playlist_id(cls, url: str) -> Optional[str]:
        return cls._parse_id(url, PLAYLIST_URL_PATTERNS, cls.validate_playlist_id)

    @staticmethod
    def _parse_id(url: str, patterns, validator) -> Optional[str]:
        url = url.strip()
        for pattern in patterns:
            match = pattern.search(url)
            if match and validator(match.group(1)):
                return match.group(1)
        return None

    # Metadata
    def _extract_info(self, url: str, **extra_options: Any) -> Dict[str, Any]:
        options = {**self.ydl_options, **extra_options}
        try:
            with yt_dlp.YoutubeDL(options) as ydl:
                info = ydl.extract_info(url, download=False)
        except DownloadError as e:
            raise FetchError(f"Could not fetch '{url}': {e}") from e
        if not info:
            raise FetchError(f"No metadata returned for '{url}'")
        return info

    async def _extract_info_async(self, url: str, **extra_options: Any) -> Dict[str, Any]:
        return await asyncio.to_thread(self._extract_info, url, **extra_options)

    async def get_video(self, video_id: str) -> Video:
        info = await self._extract_info_async(self.VIDEO_URL.format(video_id))
        return self._parse_video(info, video_id)

    async def get_video_streams(self, video_id: str) -> List[StreamInfo]:
        info = await self._extract_info_async(self.VIDEO_URL.format(video_id))
        return self.parse_streams(info.get("formats") or [])

    async def get_video_with_streams(
        self, video_id: str
    ) -> tuple[Video, List[StreamInfo]]:
        """Fetches the video and its streams with a single extraction."""
        info = await self._extract_info_async(self.VIDEO_URL.format(video_id))
        return (
            self._parse_video(info, video_id),
            self.parse_streams(info.get("formats") or []),
        )

    async def get_playlist(self, playlist_id: str) -> Playlist:
        info = await self._extract_info_async(
            self.PLAYLIST_URL.format(playlist_id),
            extract_flat="in_playlist",
            noplaylist=False,
        )
        video_ids = [
            entry["id"]
            for entry in info.get("entries") or []
            if entry and entry.get("id")
        ]
        return Playlist(
            id=playlist_id,
            title=info.get("title") or playlist_id,
            author=info.get("uploader") or info.get("channel") or "",
            video_ids=video_ids,
        )

    @staticmethod
    def _parse_video(info: Dict[str, Any], video_id: str) -> Video:
        duration = info.get("duration")
        return Video(
            id=info.get("id") or video_id,
            title=info.get("title") or video_id,
            author=info.get("uploader") or info.get("channel") or "",
            duration=int(duration) if duration else None,
        )

    @staticmethod
    def parse_streams(formats: List[Dict[str, Any]]) -> List[StreamInfo]:
        """
        Converts yt-dlp format dictionaries into stream descriptors.

        Video-only formats and formats that need a segmented protocol
        (HLS, DASH manifests) are dropped.
        """
        streams = []
        for fmt in formats:
            if not fmt.get("url") or fmt.get("protocol", "https") not in DIRECT_PROTOCOLS:
                continue
            acodec = fmt.get("acodec") or "none"
            vcodec = fmt.get("vcodec") or "none"
            if acodec == "none":
                continue

            kind = StreamKind.AUDIO if vcodec == "none" else StreamKind.MUXED
            bitrate = fmt.get("abr") or fmt.get("tbr") or 0
            streams.append(
                StreamInfo(
                    kind=kind,
                    url=fmt["url"],
                    container=fmt.get("ext") or "bin",
                    bitrate=int(bitrate * 1000),
                    video_quality=int(fmt.get("height") or 0),
                    framerate=int(fmt.get("fps") or 0),
                    size=fmt.get("filesize") or fmt.get("filesize_approx"),
                    format_id=str(fmt.get("format_id", "")),
                    http_headers=fmt.get("http_headers") or {},
                )
            )
        return streams

    # Transfer
    async def download_stream(
        self, stream: StreamInfo, destination_path: str, description: str | None = None
    ) -> int:
        return await self.downloader.download_file(
            stream.url,
            destination_path,
            headers=stream.http_headers,
            total_size_estimate=stream.size,
            description=description,
        )
