"""Planning layer: symbolic actions, the plan stack, and scenario loading."""

from src.planning.actions import ActorRef, PlanError, SymbolicAction
from src.planning.plan import Plan

__all__ = ["ActorRef", "Plan", "PlanError", "SymbolicAction"]
