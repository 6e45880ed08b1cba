"""Resource nodes: forests and gold mines as one typed view.

Forests and gold mines behave identically from the executor's point of view;
they differ only in ``kind``.  The runtime hands out ``ResourceView`` objects,
and ``Resource.from_view`` adapts them so symbolic actions can refer to
resources without reaching back into the runtime.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from src.core.enums import ResourceType
from src.core.models import Entity, Position

if TYPE_CHECKING:
    from src.runtime.views import ResourceView


@dataclass(frozen=True, slots=True)
class Resource(Entity):
    """A harvestable resource on the map."""

    kind: ResourceType = ResourceType.WOOD
    amount: int = 0

    def __post_init__(self) -> None:
        if self.amount < 0:
            raise ValueError(f"Resource {self.entity_id} has negative amount {self.amount}")

    @property
    def is_depleted(self) -> bool:
        return self.amount == 0

    @property
    def is_forest(self) -> bool:
        return self.kind == ResourceType.WOOD

    @property
    def is_gold_mine(self) -> bool:
        return self.kind == ResourceType.GOLD

    # -- construction --

    @classmethod
    def from_view(cls, view: ResourceView) -> Resource:
        return cls(entity_id=view.node_id, pos=view.pos, kind=view.kind, amount=view.amount)

    @classmethod
    def from_resource(cls, other: Resource, kind: ResourceType | None = None) -> Resource:
        """Copy *other*, optionally relabelling its kind."""
        return cls(
            entity_id=other.entity_id,
            pos=other.pos,
            kind=other.kind if kind is None else kind,
            amount=other.amount,
        )

    @classmethod
    def forest(cls, entity_id: int, pos: Position, amount: int = 0) -> Resource:
        return cls(entity_id=entity_id, pos=pos, kind=ResourceType.WOOD, amount=amount)

    @classmethod
    def gold_mine(cls, entity_id: int, pos: Position, amount: int = 0) -> Resource:
        return cls(entity_id=entity_id, pos=pos, kind=ResourceType.GOLD, amount=amount)
