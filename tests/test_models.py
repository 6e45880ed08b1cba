"""Tests for positions, directions, and the entity/resource model."""

import sys
import os

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from src.core.enums import Direction, ResourceType
from src.core.models import Peasant, Position, TownHall
from src.core.resources import Resource
from src.runtime.views import ResourceView


class TestDirection:
    """Eight-way direction between two cells, y growing southward."""

    def test_north(self):
        assert Position(2, 2).direction_to(Position(2, 1)) == Direction.NORTH

    @pytest.mark.parametrize(
        "target, expected",
        [
            ((3, 1), Direction.NORTHEAST),
            ((3, 2), Direction.EAST),
            ((3, 3), Direction.SOUTHEAST),
            ((2, 3), Direction.SOUTH),
            ((1, 3), Direction.SOUTHWEST),
            ((1, 2), Direction.WEST),
            ((1, 1), Direction.NORTHWEST),
        ],
    )
    def test_adjacent_cells(self, target, expected):
        assert Position(2, 2).direction_to(Position(*target)) == expected

    def test_distant_target_uses_sign_only(self):
        assert Position(0, 0).direction_to(Position(7, 2)) == Direction.SOUTHEAST
        assert Position(5, 5).direction_to(Position(5, 0)) == Direction.NORTH

    def test_same_cell_has_no_direction(self):
        with pytest.raises(ValueError):
            Position(3, 3).direction_to(Position(3, 3))

    def test_step_inverts_direction(self):
        origin = Position(4, 4)
        for d in Direction:
            assert origin.direction_to(origin.step(d)) == d

    def test_step_toward(self):
        assert Position(0, 0).step_toward(Position(3, 1)) == Position(1, 1)
        assert Position(2, 2).step_toward(Position(2, 2)) == Position(2, 2)

    def test_adjacency(self):
        assert Position(1, 1).is_adjacent(Position(2, 2))
        assert not Position(1, 1).is_adjacent(Position(1, 1))
        assert not Position(1, 1).is_adjacent(Position(3, 1))


class TestResource:
    def test_from_view_keeps_fields(self):
        view = ResourceView(node_id=9, kind=ResourceType.GOLD, pos=Position(3, 4), amount=500)
        r = Resource.from_view(view)
        assert (r.entity_id, r.pos, r.kind, r.amount) == (9, Position(3, 4), ResourceType.GOLD, 500)
        assert r.is_gold_mine and not r.is_forest

    def test_forest_and_gold_mine_differ_only_by_kind(self):
        forest = Resource.forest(1, Position(5, 4), amount=100)
        mine = Resource.gold_mine(1, Position(5, 4), amount=100)
        assert forest.kind == ResourceType.WOOD
        assert mine.kind == ResourceType.GOLD
        assert type(forest) is type(mine)
        assert (forest.entity_id, forest.pos, forest.amount) == (mine.entity_id, mine.pos, mine.amount)

    def test_copy_construction_is_lossless(self):
        original = Resource.forest(4, Position(1, 1), amount=250)
        copy = Resource.from_resource(original)
        assert copy == original
        assert copy is not original

    def test_copy_construction_relabels_kind(self):
        original = Resource.forest(4, Position(1, 1), amount=250)
        relabelled = Resource.from_resource(original, kind=ResourceType.GOLD)
        assert relabelled.is_gold_mine
        assert (relabelled.entity_id, relabelled.pos, relabelled.amount) == (4, Position(1, 1), 250)

    def test_depleted(self):
        assert Resource.forest(1, Position(0, 0), amount=0).is_depleted
        assert not Resource.forest(1, Position(0, 0), amount=1).is_depleted

    def test_negative_amount_rejected(self):
        with pytest.raises(ValueError):
            Resource.gold_mine(1, Position(0, 0), amount=-5)


class TestEntities:
    def test_peasant_cargo(self):
        idle = Peasant(1, Position(0, 0))
        loaded = Peasant(1, Position(0, 0), cargo_type=ResourceType.WOOD, cargo_amount=100)
        assert not idle.is_carrying
        assert loaded.is_carrying

    def test_townhall_is_entity(self):
        hall = TownHall(entity_id=3, pos=Position(2, 2))
        assert hall.pos == Position(2, 2)
