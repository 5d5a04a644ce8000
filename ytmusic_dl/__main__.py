"""
Entry point for `ytmusic-dl` and `python -m ytmusic_dl`.

Application errors end the process with exit code 1 after an error panel;
anything else is reported as unexpected, with the traceback at debug level.
"""

import asyncio
import logging
import sys

import typer
from rich.console import Console

from ytmusic_dl.cli.app import app
from ytmusic_dl.cli.formatters import format_error_with_suggestions
from ytmusic_dl.exceptions import (
    TranscodeError,
    UnrecognizedInputError,
    YtMusicDlError,
)

log = logging.getLogger("ytmusic_dl")


def report_error(console: Console, error: YtMusicDlError) -> None:
    """Prints the error panel plus whatever detail the error carries."""
    context = None
    if isinstance(error, UnrecognizedInputError):
        context = {"argument": error.value}
    elif isinstance(error, TranscodeError):
        context = {"returncode": error.returncode}
        if error.stderr:
            log.debug(f"ffmpeg stderr:\n{error.stderr}")

    console.print()
    console.print(format_error_with_suggestions(error, context))


def main() -> None:
    console = Console(stderr=True)

    try:
        app()
    except (typer.Exit, typer.Abort):
        pass
    except (KeyboardInterrupt, asyncio.CancelledError):
        console.print(
            "\n[yellow]⚠️  Cancelled. Partial downloads may remain in Temp/.[/yellow]"
        )
        sys.exit(0)
    except YtMusicDlError as e:
        report_error(console, e)
        sys.exit(1)
    except Exception as e:
        console.print()
        console.print(format_error_with_suggestions(e, {"type": "Unexpected"}))
        log.debug("Full traceback:", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
