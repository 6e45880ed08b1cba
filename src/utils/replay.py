"""Replay serialization — records turn-by-turn commands and feedback."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from src.runtime.commands import Command, CommandBatch, Feedback

logger = logging.getLogger(__name__)


def _command_dict(command: Command) -> dict[str, Any]:
    data: dict[str, Any] = {"unit": command.unit_id, "type": command.command_type.name}
    if command.x is not None:
        data["to"] = [command.x, command.y]
    if command.direction is not None:
        data["direction"] = command.direction.name
    if command.template_id is not None:
        data["template"] = command.template_id
    return data


class ReplayRecorder:
    """Accumulates per-turn records and flushes them to a JSON replay file."""

    __slots__ = ("_path", "_turns", "_player")

    def __init__(self, path: str | Path, player: int) -> None:
        self._path = Path(path)
        self._player = player
        self._turns: list[dict[str, Any]] = []

    @property
    def turns(self) -> list[dict[str, Any]]:
        return self._turns

    def record_turn(
        self,
        turn: int,
        issued: CommandBatch,
        feedback: Feedback,
        plan_remaining: int,
    ) -> None:
        self._turns.append(
            {
                "turn": turn,
                "issued": [_command_dict(c) for _, c in sorted(issued.items())],
                "feedback": [
                    {"unit": uid, "status": r.status.name, "command": _command_dict(r.command)}
                    for uid, r in sorted(feedback.items())
                ],
                "plan_remaining": plan_remaining,
            }
        )

    def flush(self) -> None:
        """Write accumulated data to disk."""
        replay = {
            "version": "1.0",
            "player": self._player,
            "total_turns": len(self._turns),
            "turns": self._turns,
        }
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(json.dumps(replay, indent=2), encoding="utf-8")
        logger.info("Replay saved to %s (%d turns)", self._path, len(self._turns))
