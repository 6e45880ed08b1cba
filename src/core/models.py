"""Core data models: Position, Entity, Peasant, TownHall."""

from __future__ import annotations

from dataclasses import dataclass

from src.core.enums import OFFSET_DIRECTIONS, Direction, ResourceType


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


@dataclass(frozen=True, slots=True)
class Position:
    """Immutable 2D integer coordinate."""

    x: int = 0
    y: int = 0

    def __add__(self, other: Position) -> Position:
        return Position(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Position) -> Position:
        return Position(self.x - other.x, self.y - other.y)

    def chebyshev(self, other: Position) -> int:
        return max(abs(self.x - other.x), abs(self.y - other.y))

    def is_adjacent(self, other: Position) -> bool:
        return self.chebyshev(other) == 1

    def direction_to(self, other: Position) -> Direction:
        """Compass direction from this cell toward *other*.

        Only the sign of each axis delta matters, so distant targets map onto
        the nearest of the eight directions.
        """
        offset = (_sign(other.x - self.x), _sign(other.y - self.y))
        if offset == (0, 0):
            raise ValueError(f"No direction from {self} to itself")
        return OFFSET_DIRECTIONS[offset]

    def step(self, direction: Direction) -> Position:
        return Position(self.x + direction.dx, self.y + direction.dy)

    def step_toward(self, other: Position) -> Position:
        if self == other:
            return self
        return self.step(self.direction_to(other))

    def __repr__(self) -> str:
        return f"({self.x}, {self.y})"


@dataclass(frozen=True, slots=True)
class Entity:
    """Anything placed in the world."""

    entity_id: int
    pos: Position


@dataclass(frozen=True, slots=True)
class Peasant(Entity):
    """A worker unit carrying at most one load."""

    cargo_type: ResourceType | None = None
    cargo_amount: int = 0

    @property
    def is_carrying(self) -> bool:
        return self.cargo_type is not None and self.cargo_amount > 0


@dataclass(frozen=True, slots=True)
class TownHall(Entity):
    """Deposit target and peasant producer; one per player."""
