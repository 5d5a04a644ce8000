"""
Functions for formatting and displaying data in the console using Rich.
"""

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from ytmusic_dl.models.stats import RunStats


def describe_size(num_bytes: int) -> str:
    """Formats a session total as KB or MB (e.g. '7.4 MB')."""
    if num_bytes < 1024 * 1024:
        return f"{num_bytes / 1024:.0f} KB"
    return f"{num_bytes / (1024 * 1024):.1f} MB"


def describe_elapsed(seconds: float) -> str:
    minutes, secs = divmod(int(seconds), 60)
    return f"{minutes}m {secs:02d}s" if minutes else f"{secs}s"


STATUS_STYLES = {
    "done": "[green]✓ done[/green]",
    "failed": "[red]✗ failed[/red]",
    "pending": "[dim]○ pending[/dim]",
}


def format_error_with_suggestions(
    error: Exception, context: dict | None = None
) -> Panel:
    """Formats an error with actionable suggestions into a Rich Panel."""
    error_type = type(error).__name__
    error_msg = str(error)

    suggestions_map = {
        "UnrecognizedInputError": [
            "• Pass a YouTube video or playlist URL, or a bare ID.",
            "• Video IDs are 11 characters long (e.g. dQw4w9WgXcQ).",
            "• Quote URLs that contain '&' so the shell does not split them.",
        ],
        "NoApplicableStreamError": [
            "• The video may be a live stream or a premiere without streams yet.",
            "• The video may be blocked in your region.",
        ],
        "FetchError": [
            "• Check your internet connection.",
            "• The video may be private, deleted, or age-restricted.",
            "• Update yt-dlp; YouTube changes frequently break older versions.",
        ],
        "TranscodeError": [
            "• Make sure ffmpeg is installed and on your PATH.",
            "• The downloaded stream was kept in the Temp directory for inspection.",
        ],
        "MetadataError": [
            "• The MP3 file was written but could not be tagged.",
            "• Check that the Output directory is writable.",
        ],
    }

    suggestions = suggestions_map.get(
        error_type, ["• Check the log output above for details."]
    )

    error_text = Text()
    error_text.append(f"{error_type}: ", style="bold red")
    error_text.append(error_msg)

    suggestion_text = Text("\n".join(suggestions))

    content = Table.grid(padding=(1, 0))
    content.add_row(error_text)
    content.add_row()
    content.add_row(Text("Suggestions", style="bold yellow"))
    content.add_row(suggestion_text)

    if context:
        content.add_row()
        content.add_row(Text(f"Context: {context}", style="dim"))

    return Panel(
        content,
        title="[bold red]An Error Occurred[/bold red]",
        border_style="red",
        expand=False,
    )


def print_summary_panel(stats: RunStats, console: Console | None = None):
    """Displays the final summary of the download session."""
    console = console or Console()

    outcomes_table = Table(box=box.SIMPLE, show_edge=False, padding=(0, 1))
    outcomes_table.add_column("Argument", style="cyan", overflow="fold")
    outcomes_table.add_column("Type", style="dim")
    outcomes_table.add_column("Status")
    outcomes_table.add_column("Detail", style="dim", overflow="fold")
    for outcome in stats.outcomes:
        outcomes_table.add_row(
            escape(outcome.argument),
            outcome.kind or "?",
            STATUS_STYLES.get(outcome.status, outcome.status),
            escape(outcome.detail),
        )

    stats_table = Table(show_header=False, box=None, padding=(0, 2))
    stats_table.add_column(style="bold cyan", justify="right", width=16)
    stats_table.add_column(style="white", justify="left")

    stats_table.add_row(
        "✓ Converted:", f"[bold green]{stats.videos_converted}[/bold green]"
    )
    if stats.videos_failed > 0:
        stats_table.add_row("✗ Failed:", f"[bold red]{stats.videos_failed}[/bold red]")
    if stats.playlists_processed > 0:
        stats_table.add_row("Playlists:", str(stats.playlists_processed))
    stats_table.add_row(
        "Total Size:", f"[cyan]{describe_size(stats.total_size_downloaded)}[/cyan]"
    )
    stats_table.add_row("Time Elapsed:", f"[blue]{describe_elapsed(stats.elapsed)}[/blue]")

    content = Table.grid(padding=(1, 0))
    if stats.outcomes:
        content.add_row(outcomes_table)
    content.add_row(stats_table)

    if stats.aborted:
        title = "⚠ [bold]Run Aborted[/bold]"
        border_color = "red"
    else:
        title = "🎵 [bold]Download Complete![/bold]"
        border_color = "green"

    console.print()
    console.print(
        Panel(
            content,
            title=title,
            border_style=border_color,
            box=box.DOUBLE,
            expand=False,
            padding=(1, 2),
        )
    )
    console.print()
