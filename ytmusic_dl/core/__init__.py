"""
Core application engine for orchestrating the download process.

The `Runner` classifies each argument and hands it to the `PlaylistProcessor`
or straight to the `VideoProcessor`, which turns one video into a tagged MP3.
"""
