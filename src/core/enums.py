"""Enumerations used throughout the executor."""

from __future__ import annotations

from enum import IntEnum, unique


@unique
class ResourceType(IntEnum):
    """Harvestable resource kinds."""

    GOLD = 0
    WOOD = 1


@unique
class ActionKind(IntEnum):
    """Kinds of symbolic action a planner can emit."""

    MOVE = 0
    HARVEST = 1
    DEPOSIT = 2
    BUILD = 3


@unique
class Direction(IntEnum):
    """Eight compass directions on the grid (y grows southward)."""

    NORTH = 0
    NORTHEAST = 1
    EAST = 2
    SOUTHEAST = 3
    SOUTH = 4
    SOUTHWEST = 5
    WEST = 6
    NORTHWEST = 7

    @property
    def dx(self) -> int:
        return DIRECTION_OFFSETS[self][0]

    @property
    def dy(self) -> int:
        return DIRECTION_OFFSETS[self][1]


DIRECTION_OFFSETS: dict[int, tuple[int, int]] = {
    Direction.NORTH: (0, -1),
    Direction.NORTHEAST: (1, -1),
    Direction.EAST: (1, 0),
    Direction.SOUTHEAST: (1, 1),
    Direction.SOUTH: (0, 1),
    Direction.SOUTHWEST: (-1, 1),
    Direction.WEST: (-1, 0),
    Direction.NORTHWEST: (-1, -1),
}

# (sign(dx), sign(dy)) -> Direction
OFFSET_DIRECTIONS: dict[tuple[int, int], Direction] = {
    offset: Direction(d) for d, offset in DIRECTION_OFFSETS.items()
}


@unique
class CommandType(IntEnum):
    """Low-level commands understood by the runtime."""

    COMPOUND_MOVE = 0
    PRIMITIVE_GATHER = 1
    PRIMITIVE_DEPOSIT = 2
    PRIMITIVE_PRODUCTION = 3


@unique
class CommandStatus(IntEnum):
    """Per-unit feedback the runtime reports for the previous turn."""

    COMPLETE = 0
    INCOMPLETE = 1
    FAILED = 2
    INCOMPLETEMAYBESTUCK = 3   # Still underway but no progress last turn

    @property
    def in_progress(self) -> bool:
        return self in (CommandStatus.INCOMPLETE, CommandStatus.INCOMPLETEMAYBESTUCK)
