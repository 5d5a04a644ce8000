"""
Pydantic model for application configuration.
All values are fixed; the only inputs are the working directory and defaults.
"""

from pathlib import Path

from pydantic import BaseModel, Field, field_validator

TEMP_DIR_NAME = "Temp"
OUTPUT_DIR_NAME = "Output"


class DownloadConfig(BaseModel):
    """Settings shared by every pipeline run in a session."""

    temp_dir: Path = Field(default_factory=lambda: Path.cwd() / TEMP_DIR_NAME)
    output_dir: Path = Field(default_factory=lambda: Path.cwd() / OUTPUT_DIR_NAME)
    ffmpeg_path: str = "ffmpeg"
    audio_quality: int = Field(default=0, description="ffmpeg -q:a VBR setting")

    @field_validator("temp_dir", "output_dir")
    @classmethod
    def make_absolute(cls, v: Path) -> Path:
        return v if v.is_absolute() else Path.cwd() / v

    @field_validator("audio_quality")
    @classmethod
    def validate_audio_quality(cls, v: int) -> int:
        if not 0 <= v <= 9:
            raise ValueError("Audio quality must be between 0 (best) and 9.")
        return v

    @classmethod
    def for_directory(cls, base_dir: Path) -> "DownloadConfig":
        """Builds a config with Temp/ and Output/ placed under base_dir."""
        return cls(
            temp_dir=base_dir / TEMP_DIR_NAME, output_dir=base_dir / OUTPUT_DIR_NAME
        )
