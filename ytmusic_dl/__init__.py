"""Download YouTube videos and playlists as tagged MP3 files."""

__version__ = "1.0.0"
