"""
YouTube Catalog Layer.

This package handles all communication with YouTube: ID and URL parsing,
metadata lookup, and stream transfer.
"""

from .client import YouTubeClient

__all__ = ["YouTubeClient"]
