"""
Handles parsing of video titles and writing them as tags to MP3 files.
"""

import logging
import os
import re
from typing import NamedTuple

import mutagen.id3 as id3
from mutagen import MutagenError
from mutagen.id3 import ID3NoHeaderError

from ytmusic_dl.exceptions import MetadataError

log = logging.getLogger(__name__)

TITLE_PATTERN = re.compile(r"^(?P<artist>.*?)-(?P<title>.*?)$")


class ParsedTitle(NamedTuple):
    artist: str
    title: str


def parse_title(raw_title: str) -> ParsedTitle:
    """
    Splits a video title of the form 'Artist - Title' at its first dash.

    Titles without a dash yield two empty strings.
    """
    match = TITLE_PATTERN.match(raw_title)
    if not match:
        return ParsedTitle("", "")
    return ParsedTitle(match.group("artist").strip(), match.group("title").strip())


class Tagger:
    """Writes performer and title tags to MP3 files."""

    def tag_file(self, file_path: str, artist: str, title: str) -> None:
        try:
            try:
                audio = id3.ID3(file_path)
            except ID3NoHeaderError:
                audio = id3.ID3()

            # An empty field clears the frame so no stale tag survives.
            if artist:
                audio.setall("TPE1", [id3.TPE1(encoding=3, text=[artist])])
            else:
                audio.delall("TPE1")
            if title:
                audio.setall("TIT2", [id3.TIT2(encoding=3, text=[title])])
            else:
                audio.delall("TIT2")
            if not (artist or title):
                log.debug(
                    f"No artist/title found in title of '{os.path.basename(file_path)}'"
                )

            audio.save(file_path, v2_version=3)
        except (MutagenError, OSError) as e:
            raise MetadataError(
                f"Failed to tag file '{os.path.basename(file_path)}': {e}"
            ) from e
