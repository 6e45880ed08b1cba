"""Engine layer: identifier map, action translation, plan executor, host session."""

from src.engine.errors import CommandFailedError, ConfigurationError, DesynchronizationError, ExecutorError
from src.engine.executor import PlanExecutor
from src.engine.identifier_map import IdentifierMap
from src.engine.session import ExecutionReport, ExecutionSession
from src.engine.translator import ActionTranslator

__all__ = [
    "ActionTranslator",
    "CommandFailedError",
    "ConfigurationError",
    "DesynchronizationError",
    "ExecutionReport",
    "ExecutionSession",
    "ExecutorError",
    "IdentifierMap",
    "PlanExecutor",
]
