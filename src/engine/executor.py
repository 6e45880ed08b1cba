"""PlanExecutor — turns a symbolic plan into runtime commands, one step per turn.

Per-turn cycle:
  1. Initialization (first turn only) — find the town hall, bind peasants to
     symbolic ids, record the peasant production template
  2. Feedback reconciliation — resubmit every command still in progress;
     if any is, nothing new is issued this turn
  3. Plan advancement — translate the top symbolic action and pop it

A unit with work in progress only ever receives the exact command it is
already running, since any other command would interrupt it.
"""

from __future__ import annotations

import logging
from typing import IO, TYPE_CHECKING

from src.core.enums import CommandStatus
from src.engine.errors import CommandFailedError, ConfigurationError, ExecutorError
from src.engine.identifier_map import IdentifierMap
from src.engine.translator import ActionTranslator

if TYPE_CHECKING:
    from src.config import ExecutorConfig
    from src.planning.plan import Plan
    from src.runtime.commands import ActionResult, CommandBatch, Feedback
    from src.runtime.views import WorldSnapshot

logger = logging.getLogger(__name__)

_ID_BINDINGS = ("ordinal", "identity")
_FAILURE_POLICIES = ("skip", "abort")


class PlanExecutor:
    """Single-threaded state machine driven once per turn by the host."""

    __slots__ = (
        "_config",
        "_plan",
        "_id_map",
        "_translator",
        "_townhall_id",
        "_peasant_template_id",
        "_initialized",
        "_turn",
        "_pending_units",
        "_failures",
        "_issued",
    )

    def __init__(self, config: ExecutorConfig, plan: Plan) -> None:
        if config.id_binding not in _ID_BINDINGS:
            raise ConfigurationError(f"id_binding must be one of {_ID_BINDINGS}, got {config.id_binding!r}")
        if config.on_failure not in _FAILURE_POLICIES:
            raise ConfigurationError(f"on_failure must be one of {_FAILURE_POLICIES}, got {config.on_failure!r}")
        self._config = config
        self._plan = plan
        self._id_map = IdentifierMap(first_slot=config.first_symbolic_id)
        self._translator: ActionTranslator | None = None
        self._townhall_id: int | None = None
        self._peasant_template_id: int | None = None
        self._initialized = False
        self._turn = 0
        self._pending_units: set[int] = set()
        self._failures: list[tuple[int, ActionResult]] = []
        self._issued = 0

    # -- introspection --

    @property
    def plan(self) -> Plan:
        return self._plan

    @property
    def id_map(self) -> IdentifierMap:
        return self._id_map

    @property
    def townhall_id(self) -> int | None:
        return self._townhall_id

    @property
    def peasant_template_id(self) -> int | None:
        return self._peasant_template_id

    @property
    def player(self) -> int:
        return self._config.player_num

    @property
    def turn(self) -> int:
        return self._turn

    @property
    def pending_units(self) -> frozenset[int]:
        """Units given a command this turn whose outcome is not yet known."""
        return frozenset(self._pending_units)

    @property
    def failures(self) -> list[tuple[int, ActionResult]]:
        """(turn the command was submitted, result) for every reported failure."""
        return list(self._failures)

    @property
    def failed_units(self) -> set[int]:
        return {result.command.unit_id for _, result in self._failures}

    @property
    def issued(self) -> int:
        """Commands issued from plan steps (resubmissions excluded)."""
        return self._issued

    @property
    def initialized(self) -> bool:
        return self._initialized

    @property
    def is_finished(self) -> bool:
        return self._initialized and self._plan.empty and not self._pending_units

    # -- lifecycle --

    def on_init(self, snapshot: WorldSnapshot) -> CommandBatch:
        if self._initialized:
            raise ExecutorError("on_init called twice")
        if snapshot.player != self._config.player_num:
            raise ConfigurationError(
                f"Snapshot is for player {snapshot.player}, executor controls player {self._config.player_num}"
            )
        self._turn = snapshot.turn
        self._scan_units(snapshot)
        self._scan_templates(snapshot)
        self._translator = ActionTranslator(self._id_map, self._townhall_id, self._peasant_template_id)
        self._initialized = True
        logger.info(
            "Turn %d: initialized (townhall=%d, peasant template=%d, bindings=%s, plan=%d steps)",
            self._turn, self._townhall_id, self._peasant_template_id,
            self._id_map.bindings(), len(self._plan),
        )
        batch = self._advance(snapshot)
        self._pending_units = set(batch)
        return batch

    def on_turn(self, snapshot: WorldSnapshot, previous_feedback: Feedback) -> CommandBatch:
        if not self._initialized:
            raise ExecutorError("on_turn called before on_init")
        self._turn = snapshot.turn
        self._id_map.backfill(
            u.unit_id for u in snapshot.units_named(self._config.peasant_template)
        )

        batch = self._reconcile(previous_feedback)
        if batch:
            logger.debug("Turn %d: %d command(s) still in progress, holding plan", self._turn, len(batch))
            return batch
        batch = self._advance(snapshot)
        self._pending_units = set(batch)
        return batch

    def on_end(self, snapshot: WorldSnapshot) -> None:
        if self._plan.empty:
            logger.info("Turn %d: session ended with plan complete (%d commands issued)",
                        snapshot.turn, self._issued)
        else:
            logger.warning("Turn %d: session ended with %d plan step(s) remaining",
                           snapshot.turn, len(self._plan))

    def save_player_data(self, stream: IO[bytes]) -> None:
        """No state is persisted across sessions."""

    def load_player_data(self, stream: IO[bytes]) -> None:
        """No state is persisted across sessions."""

    # -- internals --

    def _scan_units(self, snapshot: WorldSnapshot) -> None:
        halls = snapshot.units_named(self._config.townhall_template)
        if not halls:
            raise ConfigurationError(
                f"No {self._config.townhall_template!r} unit found for player {snapshot.player}"
            )
        if len(halls) > 1:
            logger.warning("Player %d has %d town halls, using unit %d",
                           snapshot.player, len(halls), halls[0].unit_id)
        self._townhall_id = halls[0].unit_id

        peasants = snapshot.units_named(self._config.peasant_template)
        for offset, view in enumerate(peasants):
            if self._config.id_binding == "identity":
                self._id_map.bind(view.unit_id, view.unit_id)
            else:
                self._id_map.bind(self._config.first_symbolic_id + offset, view.unit_id)

    def _scan_templates(self, snapshot: WorldSnapshot) -> None:
        name = self._config.peasant_template.lower()
        for template in snapshot.templates:
            if template.name.lower() == name:
                self._peasant_template_id = template.template_id
                return
        raise ConfigurationError(
            f"No {self._config.peasant_template!r} template available to player {snapshot.player}"
        )

    def _reconcile(self, feedback: Feedback) -> CommandBatch:
        batch: CommandBatch = {}
        for unit_id in sorted(feedback):
            result = feedback[unit_id]
            if result.status.in_progress:
                batch[result.command.unit_id] = result.command
            elif result.status == CommandStatus.FAILED:
                self._record_failure(result)
        self._pending_units = set(batch)
        return batch

    def _record_failure(self, result: ActionResult) -> None:
        submitted_turn = self._turn - 1
        self._failures.append((submitted_turn, result))
        if self._config.on_failure == "abort":
            logger.error("Turn %d: %r failed, aborting", submitted_turn, result.command)
            raise CommandFailedError(result.command.unit_id, submitted_turn, result.command)
        logger.warning("Turn %d: %r failed, not retrying", submitted_turn, result.command)

    def _advance(self, snapshot: WorldSnapshot) -> CommandBatch:
        action = self._plan.peek()
        if action is None:
            return {}
        # Translate before popping so a desynchronized step stays on the plan
        batch = self._translator.translate(action, snapshot)
        self._plan.pop()
        self._issued += len(batch)
        logger.info("Turn %d: %r -> %s (%d step(s) left)",
                    self._turn, action, list(batch.values()), len(self._plan))
        return batch
