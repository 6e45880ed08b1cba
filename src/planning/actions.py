"""Symbolic actions — the planner's vocabulary, one closed variant per kind.

Every action shares the same fields; which of them are meaningful depends on
``kind``:

  MOVE     per-actor ``targets`` (absolute destination)
  HARVEST  per-actor ``targets`` (resource position) and ``resources``
  DEPOSIT  ``shared_target`` (town hall position)
  BUILD    actors only; produces one peasant regardless of ``k``
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from src.core.enums import ActionKind
from src.core.models import Position
from src.core.resources import Resource


class PlanError(ValueError):
    """A symbolic action violates its structural invariants."""


@dataclass(frozen=True, slots=True)
class ActorRef:
    """An actor as the planner knows it: symbolic id and planned position."""

    symbolic_id: int
    pos: Position


@dataclass(frozen=True, slots=True)
class SymbolicAction:
    kind: ActionKind
    actors: tuple[ActorRef, ...]
    targets: tuple[Position, ...] = ()
    shared_target: Position | None = None
    resources: tuple[Resource, ...] = ()

    def __post_init__(self) -> None:
        if not self.actors:
            raise PlanError(f"{self.kind.name} needs at least one actor")
        ids = [a.symbolic_id for a in self.actors]
        if len(set(ids)) != len(ids):
            raise PlanError(f"{self.kind.name} repeats an actor: {ids}")
        if self.kind in (ActionKind.MOVE, ActionKind.HARVEST) and len(self.targets) != len(self.actors):
            raise PlanError(
                f"{self.kind.name} has {len(self.actors)} actors but {len(self.targets)} targets"
            )
        if self.kind == ActionKind.HARVEST and self.resources and len(self.resources) != len(self.actors):
            raise PlanError(f"HARVEST has {len(self.actors)} actors but {len(self.resources)} resources")
        if self.kind == ActionKind.DEPOSIT and self.shared_target is None:
            raise PlanError("DEPOSIT needs a shared target")

    @property
    def k(self) -> int:
        return len(self.actors)

    @property
    def symbolic_ids(self) -> tuple[int, ...]:
        return tuple(a.symbolic_id for a in self.actors)

    def actor(self, i: int) -> ActorRef:
        return self.actors[i]

    def target_position(self, i: int) -> Position:
        """Where actor *i* is headed; DEPOSIT returns the shared target."""
        if self.kind == ActionKind.DEPOSIT:
            return self.shared_target
        if self.kind == ActionKind.BUILD:
            raise PlanError("BUILD has no target position")
        return self.targets[i]

    def resource(self, i: int) -> Resource | None:
        return self.resources[i] if self.resources else None

    # -- factories --

    @classmethod
    def move(cls, actors: Sequence[ActorRef], targets: Sequence[Position]) -> SymbolicAction:
        return cls(ActionKind.MOVE, tuple(actors), targets=tuple(targets))

    @classmethod
    def harvest(cls, actors: Sequence[ActorRef], resources: Sequence[Resource]) -> SymbolicAction:
        return cls(
            ActionKind.HARVEST,
            tuple(actors),
            targets=tuple(r.pos for r in resources),
            resources=tuple(resources),
        )

    @classmethod
    def deposit(cls, actors: Sequence[ActorRef], townhall_pos: Position) -> SymbolicAction:
        return cls(ActionKind.DEPOSIT, tuple(actors), shared_target=townhall_pos)

    @classmethod
    def build(cls, actors: Sequence[ActorRef]) -> SymbolicAction:
        return cls(ActionKind.BUILD, tuple(actors))

    def __repr__(self) -> str:
        return f"{self.kind.name}(k={self.k}, actors={list(self.symbolic_ids)})"
