"""Executor and runtime configuration with sensible defaults."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ExecutorConfig:
    """Immutable configuration for one plan execution session."""

    # Player
    player_num: int = 0

    # Template names used to classify live units (compared case-insensitively)
    townhall_template: str = "townhall"
    peasant_template: str = "peasant"

    # Symbolic id seeding at turn 0: "ordinal" (1, 2, 3...) or "identity"
    id_binding: str = "ordinal"
    first_symbolic_id: int = 1

    # What to do when the runtime reports FAILED: "skip" or "abort"
    on_failure: str = "skip"

    # Session
    max_turns: int = 500

    # Logging
    log_level: str = "INFO"
    replay_file: str | None = None


@dataclass(frozen=True)
class RuntimeConfig:
    """Rules of the in-memory simulated runtime."""

    map_width: int = 32
    map_height: int = 32

    # Economy
    carry_capacity: int = 100      # Resource units per gather
    peasant_gold_cost: int = 400
    starting_gold: int = 0
    starting_wood: int = 0

    # Movement
    move_tiles_per_turn: int = 1
