"""
Data Models Layer.

This package contains the Pydantic models and dataclasses that define the core
data structures used throughout the application: YouTube entities, stream
descriptors, configuration, and session statistics.
"""

from .config import DownloadConfig
from .media import (
    Identifier,
    IdentifierKind,
    Playlist,
    StreamInfo,
    StreamKind,
    Video,
)
from .stats import ArgumentOutcome, RunStats

__all__ = [
    "ArgumentOutcome",
    "DownloadConfig",
    "Identifier",
    "IdentifierKind",
    "Playlist",
    "RunStats",
    "StreamInfo",
    "StreamKind",
    "Video",
]
