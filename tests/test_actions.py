"""Tests for symbolic actions and the LIFO plan stack."""

import sys
import os

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from src.core.enums import ActionKind
from src.core.models import Position
from src.core.resources import Resource
from src.planning.actions import ActorRef, PlanError, SymbolicAction
from src.planning.plan import Plan


def _actor(sid: int, x: int = 0, y: int = 0) -> ActorRef:
    return ActorRef(sid, Position(x, y))


class TestSymbolicAction:
    def test_move_accessors(self):
        action = SymbolicAction.move([_actor(1), _actor(2)], [Position(5, 5), Position(6, 6)])
        assert action.kind == ActionKind.MOVE
        assert action.k == 2
        assert action.symbolic_ids == (1, 2)
        assert action.target_position(1) == Position(6, 6)

    def test_harvest_targets_are_resource_positions(self):
        forest = Resource.forest(100, Position(5, 4), amount=300)
        action = SymbolicAction.harvest([_actor(1, 5, 5)], [forest])
        assert action.target_position(0) == Position(5, 4)
        assert action.resource(0) is forest

    def test_deposit_shares_target(self):
        action = SymbolicAction.deposit([_actor(1), _actor(2)], Position(0, 1))
        assert action.target_position(0) == action.target_position(1) == Position(0, 1)

    def test_build_has_no_target(self):
        action = SymbolicAction.build([_actor(1)])
        with pytest.raises(PlanError):
            action.target_position(0)

    def test_no_actors_rejected(self):
        with pytest.raises(PlanError):
            SymbolicAction.build([])

    def test_duplicate_actors_rejected(self):
        with pytest.raises(PlanError):
            SymbolicAction.move([_actor(1), _actor(1)], [Position(1, 1), Position(2, 2)])

    def test_target_count_must_match_k(self):
        with pytest.raises(PlanError):
            SymbolicAction.move([_actor(1), _actor(2)], [Position(1, 1)])

    def test_deposit_requires_target(self):
        with pytest.raises(PlanError):
            SymbolicAction(ActionKind.DEPOSIT, (_actor(1),))


class TestPlan:
    def test_pop_is_lifo(self):
        a = SymbolicAction.build([_actor(1)])
        b = SymbolicAction.build([_actor(2)])
        plan = Plan()
        plan.push(a)
        plan.push(b)
        assert plan.pop() is b
        assert plan.pop() is a
        assert plan.empty

    def test_from_sequence_executes_first_action_first(self):
        steps = [SymbolicAction.build([_actor(i)]) for i in (1, 2, 3)]
        plan = Plan.from_sequence(steps)
        assert plan.peek() is steps[0]
        assert list(plan) == steps
        assert [plan.pop() for _ in range(3)] == steps

    def test_peek_does_not_consume(self):
        plan = Plan.from_sequence([SymbolicAction.build([_actor(1)])])
        plan.peek()
        assert len(plan) == 1

    def test_empty_plan(self):
        plan = Plan()
        assert plan.peek() is None
        with pytest.raises(IndexError):
            plan.pop()
