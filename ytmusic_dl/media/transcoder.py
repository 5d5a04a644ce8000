"""
Runs ffmpeg to turn a downloaded stream into an MP3 file.
"""

import asyncio
import logging
import os

from ytmusic_dl.exceptions import TranscodeError

log = logging.getLogger(__name__)


class Transcoder:
    """Thin async wrapper around the ffmpeg executable."""

    def __init__(self, ffmpeg_path: str = "ffmpeg", audio_quality: int = 0):
        self.ffmpeg_path = ffmpeg_path
        self.audio_quality = audio_quality

    def build_command(self, input_path: str, output_path: str) -> list[str]:
        return [
            self.ffmpeg_path,
            "-y",
            "-hide_banner",
            "-loglevel",
            "error",
            "-i",
            input_path,
            "-q:a",
            str(self.audio_quality),
            "-map",
            "a",
            output_path,
        ]

    async def convert_to_mp3(self, input_path: str, output_path: str) -> None:
        """
        Extracts the audio of input_path and encodes it to output_path,
        overwriting any existing file.
        """
        command = self.build_command(input_path, output_path)
        log.debug(f"Running: {' '.join(command)}")

        try:
            process = await asyncio.create_subprocess_exec(
                *command,
                stdin=asyncio.subprocess.DEVNULL,
                stdout=asyncio.subprocess.DEVNULL,
                stderr=asyncio.subprocess.PIPE,
            )
        except OSError as e:
            raise TranscodeError(
                f"Could not start ffmpeg ('{self.ffmpeg_path}'): {e}"
            ) from e

        _, stderr = await process.communicate()
        if process.returncode != 0:
            stderr_text = stderr.decode("utf-8", errors="replace").strip()
            tail = stderr_text.splitlines()[-1] if stderr_text else "no output"
            raise TranscodeError(
                f"ffmpeg exited with code {process.returncode} while converting "
                f"'{os.path.basename(input_path)}': {tail}",
                returncode=process.returncode,
                stderr=stderr_text,
            )
