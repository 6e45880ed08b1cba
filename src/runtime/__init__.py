"""Runtime boundary: world views, commands, feedback, and a simulated runtime."""

from src.runtime.base import Runtime
from src.runtime.commands import ActionResult, Command, CommandBatch, Feedback
from src.runtime.simulated import SimulatedRuntime
from src.runtime.views import ResourceView, TemplateView, UnitView, WorldSnapshot

__all__ = [
    "ActionResult",
    "Command",
    "CommandBatch",
    "Feedback",
    "ResourceView",
    "Runtime",
    "SimulatedRuntime",
    "TemplateView",
    "UnitView",
    "WorldSnapshot",
]
