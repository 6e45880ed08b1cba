"""Core data models: enums, positions, entities, and resources."""

from src.core.enums import ActionKind, CommandStatus, CommandType, Direction, ResourceType
from src.core.models import Entity, Peasant, Position, TownHall
from src.core.resources import Resource

__all__ = [
    "ActionKind",
    "CommandStatus",
    "CommandType",
    "Direction",
    "Entity",
    "Peasant",
    "Position",
    "Resource",
    "ResourceType",
    "TownHall",
]
