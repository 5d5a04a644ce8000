"""
Dataclasses for tracking the outcome of a download session.
"""

import time
from dataclasses import dataclass, field
from typing import Optional


@dataclass
class ArgumentOutcome:
    """What happened to one command-line argument."""

    argument: str
    kind: Optional[str] = None
    status: str = "pending"
    detail: str = ""


@dataclass
class RunStats:
    """Tracks statistics for a download session."""

    videos_converted: int = 0
    videos_failed: int = 0
    playlists_processed: int = 0
    total_size_downloaded: int = 0
    outcomes: list[ArgumentOutcome] = field(default_factory=list)
    _start_time: float = field(default_factory=time.monotonic, repr=False)

    def start_argument(self, argument: str) -> ArgumentOutcome:
        outcome = ArgumentOutcome(argument=argument)
        self.outcomes.append(outcome)
        return outcome

    @property
    def elapsed(self) -> float:
        return time.monotonic() - self._start_time

    @property
    def aborted(self) -> bool:
        return any(o.status == "failed" for o in self.outcomes)
