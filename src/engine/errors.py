"""Exceptions raised by the plan execution engine."""

from __future__ import annotations


class ExecutorError(Exception):
    """Base class for plan execution failures."""


class ConfigurationError(ExecutorError):
    """The live world lacks something execution cannot start without."""


class DesynchronizationError(ExecutorError):
    """A symbolic id has no runtime binding, or would be rebound."""

    def __init__(self, symbolic_id: int, message: str | None = None) -> None:
        self.symbolic_id = symbolic_id
        super().__init__(message or f"Symbolic id {symbolic_id} is not bound to a runtime unit")


class CommandFailedError(ExecutorError):
    """The runtime reported FAILED and the executor is set to abort."""

    def __init__(self, unit_id: int, turn: int, command: object) -> None:
        self.unit_id = unit_id
        self.turn = turn
        self.command = command
        super().__init__(f"Command {command!r} for unit {unit_id} failed in turn {turn}")
