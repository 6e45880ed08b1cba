"""Append-only binding of planner (symbolic) ids to runtime unit ids."""

from __future__ import annotations

import logging
from typing import Iterable, Iterator

from src.engine.errors import DesynchronizationError

logger = logging.getLogger(__name__)


class IdentifierMap:
    """Symbolic id -> runtime id, never rebound once set.

    New runtime units (e.g. freshly produced peasants) are bound by
    ``backfill`` to the slot after the highest symbolic id claimed so far,
    in the order the runtime enumerates them.
    """

    __slots__ = ("_forward", "_runtime_ids", "_first_slot")

    def __init__(self, first_slot: int = 1) -> None:
        self._forward: dict[int, int] = {}
        self._runtime_ids: set[int] = set()
        self._first_slot = first_slot

    def bind(self, symbolic_id: int, runtime_id: int) -> bool:
        """Bind a pair; returns False if it was already bound identically."""
        current = self._forward.get(symbolic_id)
        if current == runtime_id:
            return False
        if current is not None:
            raise DesynchronizationError(
                symbolic_id,
                f"Symbolic id {symbolic_id} is bound to {current}, refusing to rebind to {runtime_id}",
            )
        if runtime_id in self._runtime_ids:
            raise DesynchronizationError(
                symbolic_id, f"Runtime id {runtime_id} is already bound to another symbolic id"
            )
        self._forward[symbolic_id] = runtime_id
        self._runtime_ids.add(runtime_id)
        logger.debug("Bound symbolic %d -> runtime %d", symbolic_id, runtime_id)
        return True

    def resolve(self, symbolic_id: int) -> int:
        try:
            return self._forward[symbolic_id]
        except KeyError:
            raise DesynchronizationError(symbolic_id) from None

    def next_slot(self) -> int:
        return max(self._forward, default=self._first_slot - 1) + 1

    def backfill(self, runtime_ids: Iterable[int]) -> list[tuple[int, int]]:
        """Bind every unseen runtime id, in order; returns the new bindings."""
        added: list[tuple[int, int]] = []
        for runtime_id in runtime_ids:
            if runtime_id in self._runtime_ids:
                continue
            slot = self.next_slot()
            self.bind(slot, runtime_id)
            added.append((slot, runtime_id))
        if added:
            logger.info("Backfilled %d new unit(s): %s", len(added), added)
        return added

    def bindings(self) -> list[tuple[int, int]]:
        return list(self._forward.items())

    def __contains__(self, symbolic_id: object) -> bool:
        return symbolic_id in self._forward

    def __len__(self) -> int:
        return len(self._forward)

    def __iter__(self) -> Iterator[int]:
        return iter(self._forward)

    def __repr__(self) -> str:
        return f"IdentifierMap({self._forward})"
