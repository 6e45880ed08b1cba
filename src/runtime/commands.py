"""Concrete commands submitted to the runtime, and their feedback."""

from __future__ import annotations

from dataclasses import dataclass

from src.core.enums import CommandStatus, CommandType, Direction


@dataclass(frozen=True, slots=True)
class Command:
    """A single low-level command for one unit.

    Equality is structural, so a resubmitted command compares equal to the
    one the runtime reported back.
    """

    unit_id: int
    command_type: CommandType
    x: int | None = None
    y: int | None = None
    direction: Direction | None = None
    template_id: int | None = None

    # -- factories --

    @classmethod
    def compound_move(cls, unit_id: int, x: int, y: int) -> Command:
        return cls(unit_id, CommandType.COMPOUND_MOVE, x=x, y=y)

    @classmethod
    def primitive_gather(cls, unit_id: int, direction: Direction) -> Command:
        return cls(unit_id, CommandType.PRIMITIVE_GATHER, direction=direction)

    @classmethod
    def primitive_deposit(cls, unit_id: int, direction: Direction) -> Command:
        return cls(unit_id, CommandType.PRIMITIVE_DEPOSIT, direction=direction)

    @classmethod
    def primitive_production(cls, unit_id: int, template_id: int) -> Command:
        return cls(unit_id, CommandType.PRIMITIVE_PRODUCTION, template_id=template_id)

    def __repr__(self) -> str:
        match self.command_type:
            case CommandType.COMPOUND_MOVE:
                detail = f"to=({self.x}, {self.y})"
            case CommandType.PRIMITIVE_PRODUCTION:
                detail = f"template={self.template_id}"
            case _:
                detail = f"dir={self.direction.name if self.direction is not None else None}"
        return f"Command(unit={self.unit_id}, {self.command_type.name}, {detail})"


@dataclass(frozen=True, slots=True)
class ActionResult:
    """Outcome the runtime reports for a command submitted in some turn."""

    command: Command
    status: CommandStatus


# Commands for one turn, keyed by the unit that executes them
CommandBatch = dict[int, Command]

# Feedback for one turn, keyed by unit id
Feedback = dict[int, ActionResult]
