"""ExecutionSession — the host loop driving a runtime and a PlanExecutor."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from src.engine.executor import PlanExecutor
    from src.runtime.base import Runtime
    from src.runtime.commands import Feedback
    from src.utils.replay import ReplayRecorder

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ExecutionReport:
    turns: int
    commands_issued: int
    failures: int
    plan_remaining: int
    finished: bool


class ExecutionSession:
    """Calls the executor once per turn and feeds its commands to the runtime.

    Feedback for turn T only exists once the runtime has stepped, so the
    executor sees it at the start of turn T + 1.  The session therefore ends
    on the turn after the last command was issued, once that feedback shows
    nothing is still in progress.
    """

    __slots__ = ("_runtime", "_executor", "_player", "_recorder")

    def __init__(
        self,
        runtime: Runtime,
        executor: PlanExecutor,
        recorder: ReplayRecorder | None = None,
    ) -> None:
        self._runtime = runtime
        self._executor = executor
        self._player = executor.player
        self._recorder = recorder

    @property
    def executor(self) -> PlanExecutor:
        return self._executor

    def step_once(self) -> bool:
        """Run a single turn. Returns False once there is nothing left to do."""
        snapshot = self._runtime.snapshot(self._player)
        feedback: Feedback
        if not self._executor.initialized:
            feedback = {}
            batch = self._executor.on_init(snapshot)
        else:
            feedback = self._runtime.command_feedback(self._player, snapshot.turn - 1)
            batch = self._executor.on_turn(snapshot, feedback)

        if self._recorder is not None:
            self._recorder.record_turn(snapshot.turn, batch, feedback, len(self._executor.plan))

        if not batch and self._executor.is_finished:
            return False
        if batch:
            self._runtime.submit(self._player, batch)
        self._runtime.step()
        return True

    def run(self, max_turns: int) -> ExecutionReport:
        """Drive turns until the plan is done and every command has resolved."""
        logger.info("=== Execution started (player=%d, plan=%d steps) ===",
                    self._player, len(self._executor.plan))
        turns = 0
        try:
            while turns < max_turns:
                if not self.step_once():
                    break
                turns += 1
            else:
                logger.warning("Max turns (%d) reached before the plan finished", max_turns)
        finally:
            # Also runs when a turn raises
            self._executor.on_end(self._runtime.snapshot(self._player))
            if self._recorder is not None:
                self._recorder.flush()

        report = ExecutionReport(
            turns=turns,
            commands_issued=self._executor.issued,
            failures=len(self._executor.failures),
            plan_remaining=len(self._executor.plan),
            finished=self._executor.is_finished,
        )
        logger.info("=== Execution ended: %s ===", report)
        return report
