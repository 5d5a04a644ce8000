"""
Pydantic models for the YouTube entities handled by the pipelines.
"""

from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class IdentifierKind(str, Enum):
    PLAYLIST = "playlist"
    VIDEO = "video"


class Identifier(BaseModel):
    """A normalized bare ID tagged with the pipeline that handles it."""

    model_config = ConfigDict(frozen=True)

    kind: IdentifierKind
    value: str


class StreamKind(str, Enum):
    AUDIO = "audio"
    MUXED = "muxed"


class StreamInfo(BaseModel):
    """
    One retrievable encoding of a video.

    `bitrate` ranks audio-only streams; `video_quality` (vertical resolution)
    and `framerate` rank muxed streams.
    """

    model_config = ConfigDict(frozen=True)

    kind: StreamKind
    url: str
    container: str
    bitrate: int = 0
    video_quality: int = 0
    framerate: int = 0
    size: Optional[int] = None
    format_id: str = ""
    http_headers: Dict[str, str] = Field(default_factory=dict)

    @property
    def quality_rank(self) -> tuple[int, int]:
        return (self.video_quality, self.framerate)

    def describe(self) -> str:
        if self.kind is StreamKind.AUDIO:
            return f"audio-only {self.container} @ {self.bitrate // 1000} kbps"
        label = f"{self.video_quality}p"
        if self.framerate > 30:
            label += str(self.framerate)
        return f"muxed {self.container} @ {label}"


class Video(BaseModel):
    id: str
    title: str
    author: str = ""
    duration: Optional[int] = None


class Playlist(BaseModel):
    id: str
    title: str
    author: str = ""
    video_ids: List[str] = Field(default_factory=list)
