from pathlib import Path

from rich.console import Console

from ytmusic_dl.cli.formatters import format_error_with_suggestions, print_summary_panel
from ytmusic_dl.exceptions import UnrecognizedInputError
from ytmusic_dl.models.config import DownloadConfig
from ytmusic_dl.models.stats import RunStats


def _render(renderable) -> str:
    console = Console(record=True, width=120)
    console.print(renderable)
    return console.export_text()


def test_error_panel_names_error_and_suggestions():
    text = _render(format_error_with_suggestions(UnrecognizedInputError("nope")))
    assert "UnrecognizedInputError" in text
    assert "Unrecognized URL or ID: [nope]" in text
    assert "11 characters" in text


def test_summary_panel_lists_outcomes():
    stats = RunStats(videos_converted=2)
    outcome = stats.start_argument("dQw4w9WgXcQ")
    outcome.kind, outcome.status, outcome.detail = "video", "done", "Song.mp3"
    failed = stats.start_argument("bad")
    failed.status, failed.detail = "failed", "Unrecognized URL or ID: [bad]"

    console = Console(record=True, width=120)
    print_summary_panel(stats, console)
    text = console.export_text()

    assert "Run Aborted" in text
    assert "dQw4w9WgXcQ" in text
    assert "Song.mp3" in text


def test_config_defaults_to_working_directory(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    config = DownloadConfig()
    assert config.temp_dir == Path.cwd() / "Temp"
    assert config.output_dir == Path.cwd() / "Output"
    assert config.audio_quality == 0


def test_summary_sizes_and_durations():
    from ytmusic_dl.cli.formatters import describe_elapsed, describe_size

    assert describe_size(0) == "0 KB"
    assert describe_size(512 * 1024) == "512 KB"
    assert describe_size(7 * 1024 * 1024 + 400 * 1024) == "7.4 MB"
    assert describe_elapsed(9.7) == "9s"
    assert describe_elapsed(125) == "2m 05s"
