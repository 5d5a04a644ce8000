"""
Defines custom exceptions for the application to allow for more specific error handling.
"""


class YtMusicDlError(Exception):
    """Base exception for all application-specific errors."""


class UnrecognizedInputError(YtMusicDlError):
    """Raised when an argument is neither a playlist nor a video ID or URL."""

    def __init__(self, value: str):
        super().__init__(f"Unrecognized URL or ID: [{value}]")
        self.value = value


class NoApplicableStreamError(YtMusicDlError):
    """Raised when a video offers no audio-only or muxed stream to download."""


class FetchError(YtMusicDlError):
    """
    Raised when metadata cannot be fetched or a stream cannot be transferred.
    """


class TranscodeError(YtMusicDlError):
    """Raised when ffmpeg fails to convert the downloaded stream."""

    def __init__(self, message: str, returncode: int | None = None, stderr: str = ""):
        super().__init__(message)
        self.returncode = returncode
        self.stderr = stderr


class MetadataError(YtMusicDlError):
    """Raised when tags cannot be written to the converted file."""
