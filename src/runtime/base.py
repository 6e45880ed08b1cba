"""The runtime boundary the executor is driven against."""

from __future__ import annotations

from typing import Protocol

from src.runtime.commands import CommandBatch, Feedback
from src.runtime.views import WorldSnapshot


class Runtime(Protocol):
    """What a host simulation must offer for a session to drive it."""

    @property
    def turn(self) -> int: ...

    def snapshot(self, player: int) -> WorldSnapshot:
        """Units, templates and resources visible to *player* this turn."""
        ...

    def command_feedback(self, player: int, turn: int) -> Feedback:
        """Per-unit results of the commands *player* submitted in *turn*."""
        ...

    def submit(self, player: int, batch: CommandBatch) -> None: ...

    def step(self) -> Feedback:
        """Resolve submitted commands and advance to the next turn."""
        ...
