"""Tests for the in-memory SimulatedRuntime."""

import sys
import os

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from src.config import RuntimeConfig
from src.core.enums import CommandStatus, Direction, ResourceType
from src.core.models import Position
from src.runtime.commands import Command
from src.runtime.simulated import SimulatedRuntime


def _runtime(**overrides) -> SimulatedRuntime:
    rt = SimulatedRuntime(RuntimeConfig(map_width=16, map_height=16, **overrides))
    rt.add_unit("TownHall", Position(0, 1), unit_id=1)
    rt.add_unit("Peasant", Position(1, 1), unit_id=2)
    rt.add_template(26, "Peasant")
    return rt


def _run(rt: SimulatedRuntime, command: Command) -> CommandStatus:
    rt.submit(0, {command.unit_id: command})
    return rt.step()[command.unit_id].status


class TestCompoundMove:
    def test_multi_turn_move_needs_resubmission(self):
        rt = _runtime()
        move = Command.compound_move(2, 4, 1)
        assert _run(rt, move) == CommandStatus.INCOMPLETE
        assert rt.unit(2).pos == Position(2, 1)
        assert _run(rt, move) == CommandStatus.INCOMPLETE
        assert _run(rt, move) == CommandStatus.COMPLETE
        assert rt.unit(2).pos == Position(4, 1)

    def test_no_command_holds_position(self):
        rt = _runtime()
        _run(rt, Command.compound_move(2, 6, 1))
        rt.step()
        assert rt.unit(2).pos == Position(2, 1)
        assert rt.command_feedback(0, 1) == {}

    def test_faster_units_finish_sooner(self):
        rt = _runtime(move_tiles_per_turn=5)
        assert _run(rt, Command.compound_move(2, 5, 5)) == CommandStatus.COMPLETE

    def test_sidesteps_obstacle(self):
        rt = _runtime()
        rt.add_resource(ResourceType.WOOD, Position(2, 1), 100)
        assert _run(rt, Command.compound_move(2, 3, 1)) == CommandStatus.INCOMPLETE
        assert rt.unit(2).pos != Position(2, 1)

    def test_occupied_destination_fails(self):
        rt = _runtime()
        assert _run(rt, Command.compound_move(2, 0, 1)) == CommandStatus.FAILED

    def test_feedback_reported_per_turn(self):
        rt = _runtime()
        move = Command.compound_move(2, 3, 1)
        _run(rt, move)
        result = rt.command_feedback(0, 0)[2]
        assert result.command == move
        assert result.status == CommandStatus.INCOMPLETE


class TestGatherAndDeposit:
    def test_gather_then_deposit(self):
        rt = _runtime(carry_capacity=100)
        rt.add_resource(ResourceType.WOOD, Position(2, 1), 150, node_id=9)
        assert _run(rt, Command.primitive_gather(2, Direction.EAST)) == CommandStatus.COMPLETE
        assert rt.unit(2).cargo_amount == 100
        assert rt.resource(9).amount == 50

        assert _run(rt, Command.primitive_deposit(2, Direction.WEST)) == CommandStatus.COMPLETE
        assert rt.wood == 100
        assert rt.unit(2).cargo_amount == 0

    def test_gather_with_full_cargo_fails(self):
        rt = _runtime()
        rt.add_resource(ResourceType.GOLD, Position(2, 1), 500)
        _run(rt, Command.primitive_gather(2, Direction.EAST))
        assert _run(rt, Command.primitive_gather(2, Direction.EAST)) == CommandStatus.FAILED

    def test_gather_wrong_direction_fails(self):
        rt = _runtime()
        rt.add_resource(ResourceType.GOLD, Position(2, 1), 500)
        assert _run(rt, Command.primitive_gather(2, Direction.SOUTH)) == CommandStatus.FAILED

    def test_depleted_resource_disappears(self):
        rt = _runtime(carry_capacity=100)
        rt.add_resource(ResourceType.GOLD, Position(2, 1), 60, node_id=4)
        _run(rt, Command.primitive_gather(2, Direction.EAST))
        assert rt.unit(2).cargo_amount == 60
        assert rt.resource(4) is None

    def test_deposit_without_cargo_fails(self):
        rt = _runtime()
        assert _run(rt, Command.primitive_deposit(2, Direction.WEST)) == CommandStatus.FAILED


class TestProduction:
    def test_production_spawns_peasant(self):
        rt = _runtime(starting_gold=400, peasant_gold_cost=400)
        assert _run(rt, Command.primitive_production(1, 26)) == CommandStatus.COMPLETE
        assert rt.gold == 0
        spawned = [u for u in rt.snapshot(0).units if u.unit_id not in (1, 2)]
        assert len(spawned) == 1
        assert spawned[0].template_name == "Peasant"
        assert spawned[0].pos.is_adjacent(Position(0, 1))

    def test_production_without_gold_fails(self):
        rt = _runtime(starting_gold=100, peasant_gold_cost=400)
        assert _run(rt, Command.primitive_production(1, 26)) == CommandStatus.FAILED
        assert len(rt.snapshot(0).units) == 2


class TestBoundary:
    def test_unknown_player_rejected(self):
        rt = _runtime()
        with pytest.raises(ValueError):
            rt.snapshot(3)

    def test_duplicate_unit_id_rejected(self):
        rt = _runtime()
        with pytest.raises(ValueError):
            rt.add_unit("Peasant", Position(5, 5), unit_id=2)

    def test_snapshot_lists_units_in_id_order(self):
        rt = _runtime()
        rt.add_unit("Peasant", Position(5, 5), unit_id=7)
        assert [u.unit_id for u in rt.snapshot(0).units] == [1, 2, 7]
