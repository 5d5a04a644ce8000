"""
Utilities for handling file paths and file names.
"""

import uuid
from pathlib import Path

from pathvalidate import sanitize_filename

FILENAME_REPLACEMENT = "_"
MAX_FILENAME_BYTES = 255


def sanitize_title(
    title: str, suffix: str = "", fallback: str = FILENAME_REPLACEMENT
) -> str:
    """
    Makes a video title safe to use as a file name.

    Every character that is illegal in a file name on any supported platform is
    replaced with an underscore, and the result is kept short enough that
    appending `suffix` still fits the file system's name limit. Titles that
    sanitize to nothing (e.g. '...') fall back to `fallback`. Applying it
    twice yields the same result.
    """
    max_len = MAX_FILENAME_BYTES - len(suffix.encode("utf-8"))
    clean = sanitize_filename(
        title,
        replacement_text=FILENAME_REPLACEMENT,
        platform="universal",
        max_len=max_len,
    )
    if clean:
        return clean
    return sanitize_filename(
        fallback,
        replacement_text=FILENAME_REPLACEMENT,
        platform="universal",
        max_len=max_len,
    ) or FILENAME_REPLACEMENT


def create_dir(directory_path: Path) -> None:
    """Creates a directory if it does not already exist."""
    directory_path.mkdir(parents=True, exist_ok=True)


def unique_temp_path(temp_dir: Path, extension: str) -> Path:
    """Returns a fresh, collision-free file path inside temp_dir."""
    return temp_dir / f"{uuid.uuid4().hex}.{extension}"
