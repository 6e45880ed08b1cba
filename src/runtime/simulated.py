"""SimulatedRuntime — a small in-memory turn-based world for one player.

Stands in for the real simulation when running scenario files and in
integration tests.  Each call to ``step`` resolves the commands submitted
for the current turn:

  COMPOUND_MOVE         walks up to ``move_tiles_per_turn`` cells (8-way),
                        INCOMPLETE until the unit reaches its destination
  PRIMITIVE_GATHER      loads one cargo from the adjacent resource
  PRIMITIVE_DEPOSIT     unloads cargo into the adjacent town hall
  PRIMITIVE_PRODUCTION  spends gold to spawn a unit next to the producer

A unit that receives no command in a turn holds position, so an unfinished
move must be resubmitted every turn.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from src.core.enums import CommandStatus, CommandType, Direction, ResourceType
from src.core.models import Position
from src.runtime.commands import ActionResult, Command, CommandBatch, Feedback
from src.runtime.views import ResourceView, TemplateView, UnitView, WorldSnapshot

if TYPE_CHECKING:
    from src.config import RuntimeConfig

logger = logging.getLogger(__name__)

TOWNHALL = "townhall"
PEASANT = "peasant"


@dataclass(slots=True)
class SimUnit:
    unit_id: int
    template_name: str
    pos: Position
    cargo_type: ResourceType | None = None
    cargo_amount: int = 0

    def view(self) -> UnitView:
        return UnitView(self.unit_id, self.template_name, self.pos, self.cargo_type, self.cargo_amount)


@dataclass(slots=True)
class SimResource:
    node_id: int
    kind: ResourceType
    pos: Position
    amount: int

    def view(self) -> ResourceView:
        return ResourceView(self.node_id, self.kind, self.pos, self.amount)


class SimulatedRuntime:
    """Authoritative world state, only mutated by ``step``."""

    __slots__ = (
        "_config",
        "_player",
        "_turn",
        "_units",
        "_templates",
        "_resources",
        "_pending",
        "_history",
        "_next_unit_id",
        "gold",
        "wood",
    )

    def __init__(self, config: RuntimeConfig, player: int = 0) -> None:
        self._config = config
        self._player = player
        self._turn: int = 0
        self._units: dict[int, SimUnit] = {}
        self._templates: dict[int, TemplateView] = {}
        self._resources: dict[int, SimResource] = {}
        self._pending: CommandBatch = {}
        self._history: dict[int, Feedback] = {}
        self._next_unit_id: int = 1
        self.gold: int = config.starting_gold
        self.wood: int = config.starting_wood

    # -- world setup --

    def add_unit(self, template_name: str, pos: Position, unit_id: int | None = None) -> int:
        if unit_id is None:
            unit_id = self._next_unit_id
        if unit_id in self._units:
            raise ValueError(f"Unit id {unit_id} already in use")
        self._units[unit_id] = SimUnit(unit_id, template_name, pos)
        self._next_unit_id = max(self._next_unit_id, unit_id + 1)
        return unit_id

    def add_template(self, template_id: int, name: str) -> None:
        self._templates[template_id] = TemplateView(template_id, name)

    def add_resource(self, kind: ResourceType, pos: Position, amount: int, node_id: int | None = None) -> int:
        if node_id is None:
            node_id = max(self._resources, default=0) + 1
        self._resources[node_id] = SimResource(node_id, kind, pos, amount)
        return node_id

    # -- queries --

    @property
    def turn(self) -> int:
        return self._turn

    def unit(self, unit_id: int) -> SimUnit | None:
        return self._units.get(unit_id)

    def resource(self, node_id: int) -> SimResource | None:
        return self._resources.get(node_id)

    def snapshot(self, player: int) -> WorldSnapshot:
        self._check_player(player)
        return WorldSnapshot(
            turn=self._turn,
            player=player,
            units=tuple(self._units[uid].view() for uid in sorted(self._units)),
            templates=tuple(self._templates.values()),
            resources=tuple(r.view() for r in self._resources.values()),
            gold=self.gold,
            wood=self.wood,
        )

    def command_feedback(self, player: int, turn: int) -> Feedback:
        self._check_player(player)
        return dict(self._history.get(turn, {}))

    # -- commands --

    def submit(self, player: int, batch: CommandBatch) -> None:
        self._check_player(player)
        self._pending.update(batch)

    def step(self) -> Feedback:
        """Resolve this turn's commands in unit-id order and advance the turn."""
        feedback: Feedback = {}
        for unit_id in sorted(self._pending):
            command = self._pending[unit_id]
            status = self._apply(command)
            if status == CommandStatus.FAILED:
                logger.debug("Turn %d: %r failed", self._turn, command)
            feedback[unit_id] = ActionResult(command, status)
        self._history[self._turn] = feedback
        self._pending = {}
        self._turn += 1
        return feedback

    # -- internals --

    def _check_player(self, player: int) -> None:
        if player != self._player:
            raise ValueError(f"Unknown player {player}")

    def _apply(self, command: Command) -> CommandStatus:
        unit = self._units.get(command.unit_id)
        if unit is None:
            return CommandStatus.FAILED
        match command.command_type:
            case CommandType.COMPOUND_MOVE:
                return self._move(unit, Position(command.x, command.y))
            case CommandType.PRIMITIVE_GATHER:
                return self._gather(unit, command.direction)
            case CommandType.PRIMITIVE_DEPOSIT:
                return self._deposit(unit, command.direction)
            case CommandType.PRIMITIVE_PRODUCTION:
                return self._produce(unit, command.template_id)
        return CommandStatus.FAILED

    def _in_bounds(self, pos: Position) -> bool:
        return 0 <= pos.x < self._config.map_width and 0 <= pos.y < self._config.map_height

    def _occupied(self, pos: Position) -> bool:
        return any(u.pos == pos for u in self._units.values()) or any(
            r.pos == pos for r in self._resources.values()
        )

    def _resource_at(self, pos: Position) -> SimResource | None:
        for r in self._resources.values():
            if r.pos == pos:
                return r
        return None

    def _move(self, unit: SimUnit, dest: Position) -> CommandStatus:
        if unit.pos == dest:
            return CommandStatus.COMPLETE
        if not self._in_bounds(dest) or self._occupied(dest):
            return CommandStatus.FAILED
        for _ in range(self._config.move_tiles_per_turn):
            nxt = self._next_step(unit.pos, dest)
            if nxt is None:
                return CommandStatus.INCOMPLETEMAYBESTUCK
            unit.pos = nxt
            if unit.pos == dest:
                return CommandStatus.COMPLETE
        return CommandStatus.INCOMPLETE

    def _next_step(self, start: Position, dest: Position) -> Position | None:
        """Greedy step toward *dest*, sidestepping by one rotation if blocked."""
        heading = start.direction_to(dest)
        for turn in (0, 1, -1):
            cand = start.step(Direction((heading + turn) % 8))
            if self._in_bounds(cand) and not self._occupied(cand):
                return cand
        return None

    def _gather(self, unit: SimUnit, direction: Direction) -> CommandStatus:
        node = self._resource_at(unit.pos.step(direction))
        if node is None or node.amount <= 0 or unit.cargo_amount > 0 or unit.template_name.lower() != PEASANT:
            return CommandStatus.FAILED
        taken = min(self._config.carry_capacity, node.amount)
        node.amount -= taken
        unit.cargo_type = node.kind
        unit.cargo_amount = taken
        if node.amount == 0:
            del self._resources[node.node_id]
        return CommandStatus.COMPLETE

    def _deposit(self, unit: SimUnit, direction: Direction) -> CommandStatus:
        cell = unit.pos.step(direction)
        hall = next(
            (u for u in self._units.values() if u.pos == cell and u.template_name.lower() == TOWNHALL),
            None,
        )
        if hall is None or unit.cargo_amount <= 0:
            return CommandStatus.FAILED
        if unit.cargo_type == ResourceType.GOLD:
            self.gold += unit.cargo_amount
        else:
            self.wood += unit.cargo_amount
        unit.cargo_type = None
        unit.cargo_amount = 0
        return CommandStatus.COMPLETE

    def _produce(self, unit: SimUnit, template_id: int) -> CommandStatus:
        template = self._templates.get(template_id)
        if template is None or unit.template_name.lower() != TOWNHALL:
            return CommandStatus.FAILED
        if self.gold < self._config.peasant_gold_cost:
            return CommandStatus.FAILED
        for direction in Direction:
            cell = unit.pos.step(direction)
            if self._in_bounds(cell) and not self._occupied(cell):
                self.gold -= self._config.peasant_gold_cost
                new_id = self.add_unit(template.name, cell)
                logger.debug("Turn %d: unit %d produced %s %d at %s",
                             self._turn, unit.unit_id, template.name, new_id, cell)
                return CommandStatus.COMPLETE
        return CommandStatus.FAILED
