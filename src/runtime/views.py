"""Read-only views the runtime exposes to a controlling player."""

from __future__ import annotations

from dataclasses import dataclass

from src.core.enums import ResourceType
from src.core.models import Position


@dataclass(frozen=True, slots=True)
class UnitView:
    """One live unit as seen at the start of a turn."""

    unit_id: int
    template_name: str
    pos: Position
    cargo_type: ResourceType | None = None
    cargo_amount: int = 0


@dataclass(frozen=True, slots=True)
class TemplateView:
    """A production template available to the player."""

    template_id: int
    name: str


@dataclass(frozen=True, slots=True)
class ResourceView:
    node_id: int
    kind: ResourceType
    pos: Position
    amount: int


@dataclass(frozen=True, slots=True)
class WorldSnapshot:
    """Everything a player may observe at the start of a turn.

    Units are listed in the runtime's enumeration order, which the executor
    relies on when binding new units to symbolic ids.
    """

    turn: int
    player: int
    units: tuple[UnitView, ...] = ()
    templates: tuple[TemplateView, ...] = ()
    resources: tuple[ResourceView, ...] = ()
    gold: int = 0
    wood: int = 0

    def unit(self, unit_id: int) -> UnitView | None:
        for view in self.units:
            if view.unit_id == unit_id:
                return view
        return None

    def units_named(self, template_name: str) -> list[UnitView]:
        name = template_name.lower()
        return [u for u in self.units if u.template_name.lower() == name]
