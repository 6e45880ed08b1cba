"""Tests for the append-only symbolic -> runtime identifier map."""

import sys
import os

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from src.engine.errors import DesynchronizationError
from src.engine.identifier_map import IdentifierMap


class TestBindAndResolve:
    def test_resolve_bound(self):
        ids = IdentifierMap()
        ids.bind(1, 404)
        assert ids.resolve(1) == 404
        assert 1 in ids
        assert len(ids) == 1

    def test_resolve_unbound_raises(self):
        ids = IdentifierMap()
        with pytest.raises(DesynchronizationError) as exc:
            ids.resolve(3)
        assert exc.value.symbolic_id == 3

    def test_rebinding_same_pair_is_noop(self):
        ids = IdentifierMap()
        assert ids.bind(1, 404) is True
        assert ids.bind(1, 404) is False
        assert ids.bindings() == [(1, 404)]

    def test_rebinding_to_other_runtime_id_refused(self):
        ids = IdentifierMap()
        ids.bind(1, 404)
        with pytest.raises(DesynchronizationError):
            ids.bind(1, 405)
        assert ids.resolve(1) == 404

    def test_runtime_id_bound_once(self):
        ids = IdentifierMap()
        ids.bind(1, 404)
        with pytest.raises(DesynchronizationError):
            ids.bind(2, 404)


class TestBackfill:
    def test_new_units_take_next_slots_in_order(self):
        ids = IdentifierMap()
        ids.bind(1, 404)
        ids.bind(2, 405)
        added = ids.backfill([404, 405, 412, 409])
        assert added == [(3, 412), (4, 409)]
        assert ids.resolve(3) == 412
        assert ids.resolve(4) == 409

    def test_backfill_empty_map_starts_at_first_slot(self):
        ids = IdentifierMap(first_slot=1)
        assert ids.backfill([20, 21]) == [(1, 20), (2, 21)]

    def test_backfill_known_units_adds_nothing(self):
        ids = IdentifierMap()
        ids.bind(1, 404)
        assert ids.backfill([404]) == []

    def test_monotonic_across_backfills(self):
        """Existing bindings never change as more units appear."""
        ids = IdentifierMap()
        ids.backfill([10, 11])
        before = ids.bindings()
        ids.backfill([12, 10, 13, 11])
        assert ids.bindings()[: len(before)] == before
        assert len(ids) == 4
