"""
Manages a Rich progress display for stream transfers.
"""

import asyncio

from rich.console import Console
from rich.progress import (
    BarColumn,
    DownloadColumn,
    Progress,
    SpinnerColumn,
    TaskID,
    TextColumn,
    TimeRemainingColumn,
    TransferSpeedColumn,
)


class ProgressManager:
    """Shows one progress bar per active transfer, above the log output."""

    def __init__(self, console: Console):
        self.console = console
        self.progress = Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}", justify="left"),
            BarColumn(bar_width=20),
            "[progress.percentage]{task.percentage:>3.0f}%",
            "•",
            DownloadColumn(),
            "•",
            TransferSpeedColumn(),
            "•",
            TimeRemainingColumn(),
            console=console,
            transient=True,
        )
        self._started = False

    def add_transfer_task(self, description: str, total_size: int | None) -> TaskID:
        if len(description) > 55:
            description = description[:52] + "..."
        return self.progress.add_task(description, total=total_size, start=True)

    def update_task_progress(self, task_id: TaskID, completed: int):
        self.progress.update(task_id, completed=completed)

    def update_task_total(self, task_id: TaskID, total: int):
        self.progress.update(task_id, total=total)

    def remove_task(self, task_id: TaskID):
        try:
            self.progress.remove_task(task_id)
        except KeyError:
            pass

    async def __aenter__(self):
        self.progress.start()
        self._started = True
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        if self._started:
            await asyncio.sleep(0.1)
            self.progress.stop()
            self._started = False
