"""
Media Processing Layer.

This package is responsible for all media file operations, including
downloading streams, converting them with ffmpeg, and metadata tagging.
"""

from .downloader import Downloader
from .tagger import ParsedTitle, Tagger, parse_title
from .transcoder import Transcoder

__all__ = ["Downloader", "ParsedTitle", "Tagger", "Transcoder", "parse_title"]
