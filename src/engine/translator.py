"""Symbolic action -> concrete runtime commands."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from src.core.enums import ActionKind
from src.runtime.commands import Command, CommandBatch

if TYPE_CHECKING:
    from src.core.models import Position
    from src.engine.identifier_map import IdentifierMap
    from src.planning.actions import SymbolicAction
    from src.runtime.views import WorldSnapshot

logger = logging.getLogger(__name__)


class ActionTranslator:
    """Stateless apart from the ids recorded at initialization.

    Every actor is resolved through the identifier map before any command is
    built, so an unbound actor raises without producing a partial batch.
    """

    __slots__ = ("_id_map", "_townhall_id", "_peasant_template_id")

    def __init__(self, id_map: IdentifierMap, townhall_id: int, peasant_template_id: int) -> None:
        self._id_map = id_map
        self._townhall_id = townhall_id
        self._peasant_template_id = peasant_template_id

    def translate(self, action: SymbolicAction, snapshot: WorldSnapshot | None = None) -> CommandBatch:
        runtime_ids = [self._id_map.resolve(sid) for sid in action.symbolic_ids]

        if action.kind == ActionKind.BUILD:
            return {
                self._townhall_id: Command.primitive_production(self._townhall_id, self._peasant_template_id)
            }

        batch: CommandBatch = {}
        for i, unit_id in enumerate(runtime_ids):
            target = action.target_position(i)
            match action.kind:
                case ActionKind.MOVE:
                    batch[unit_id] = Command.compound_move(unit_id, target.x, target.y)
                case ActionKind.HARVEST:
                    origin = self._actor_position(action, i, unit_id, snapshot)
                    batch[unit_id] = Command.primitive_gather(unit_id, origin.direction_to(target))
                case ActionKind.DEPOSIT:
                    origin = self._actor_position(action, i, unit_id, snapshot)
                    batch[unit_id] = Command.primitive_deposit(unit_id, origin.direction_to(target))
        return batch

    @staticmethod
    def _actor_position(
        action: SymbolicAction, i: int, unit_id: int, snapshot: WorldSnapshot | None
    ) -> Position:
        """Live position when the runtime reports the unit, else the planned one."""
        planned = action.actor(i).pos
        if snapshot is None:
            return planned
        view = snapshot.unit(unit_id)
        if view is None:
            return planned
        if view.pos != planned:
            logger.debug("Unit %d is at %s, planner expected %s", unit_id, view.pos, planned)
        return view.pos
