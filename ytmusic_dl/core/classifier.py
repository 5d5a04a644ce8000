"""
Determines what kind of YouTube entity a command-line argument refers to.
"""

from ytmusic_dl.api.client import YouTubeClient
from ytmusic_dl.exceptions import UnrecognizedInputError
from ytmusic_dl.models.media import Identifier, IdentifierKind


def classify(
    value: str, client: type[YouTubeClient] | YouTubeClient = YouTubeClient
) -> Identifier:
    """
    Reduces an argument to a bare playlist or video ID.

    Checks run in a fixed order and the first match wins: playlist ID,
    playlist URL, video ID, video URL.
    """
    if client.validate_playlist_id(value):
        return Identifier(kind=IdentifierKind.PLAYLIST, value=value)

    if playlist_id := client.try_parse_playlist_id(value):
        return Identifier(kind=IdentifierKind.PLAYLIST, value=playlist_id)

    if client.validate_video_id(value):
        return Identifier(kind=IdentifierKind.VIDEO, value=value)

    if video_id := client.try_parse_video_id(value):
        return Identifier(kind=IdentifierKind.VIDEO, value=video_id)

    raise UnrecognizedInputError(value)
