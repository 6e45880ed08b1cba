"""Scenario loading — JSON file -> validated world definition + ordered plan."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from src.config import RuntimeConfig
from src.core.enums import ResourceType
from src.core.models import Position
from src.core.resources import Resource
from src.planning.actions import ActorRef, PlanError, SymbolicAction
from src.planning.plan import Plan
from src.planning.schemas import ActionSchema, ScenarioSchema
from src.runtime.simulated import SimulatedRuntime
from src.runtime.views import ResourceView, TemplateView, UnitView

logger = logging.getLogger(__name__)

_KINDS = {"gold": ResourceType.GOLD, "wood": ResourceType.WOOD}


@dataclass(frozen=True, slots=True)
class Scenario:
    """A starting world plus the ordered plan to execute in it."""

    player: int
    runtime_config: RuntimeConfig
    units: tuple[UnitView, ...]
    templates: tuple[TemplateView, ...]
    resources: tuple[ResourceView, ...]
    actions: tuple[SymbolicAction, ...]

    def build_plan(self) -> Plan:
        return Plan.from_sequence(self.actions)

    def build_runtime(self) -> SimulatedRuntime:
        runtime = SimulatedRuntime(self.runtime_config, player=self.player)
        for u in self.units:
            runtime.add_unit(u.template_name, u.pos, unit_id=u.unit_id)
        for t in self.templates:
            runtime.add_template(t.template_id, t.name)
        for r in self.resources:
            runtime.add_resource(r.kind, r.pos, r.amount, node_id=r.node_id)
        return runtime


def load_scenario(path: str | Path) -> Scenario:
    path = Path(path)
    doc = ScenarioSchema.model_validate_json(path.read_text(encoding="utf-8"))
    scenario = scenario_from_schema(doc)
    logger.info("Loaded scenario %s (%d units, %d plan steps)", path, len(scenario.units), len(scenario.actions))
    return scenario


def scenario_from_schema(doc: ScenarioSchema) -> Scenario:
    resources = tuple(
        ResourceView(r.id, _KINDS[r.kind], Position(r.x, r.y), r.amount) for r in doc.resources
    )
    by_id = {r.node_id: Resource.from_view(r) for r in resources}
    runtime_config = RuntimeConfig(
        map_width=doc.runtime.map_width,
        map_height=doc.runtime.map_height,
        carry_capacity=doc.runtime.carry_capacity,
        peasant_gold_cost=doc.runtime.peasant_gold_cost,
        move_tiles_per_turn=doc.runtime.move_tiles_per_turn,
        starting_gold=doc.gold,
        starting_wood=doc.wood,
    )
    return Scenario(
        player=doc.player,
        runtime_config=runtime_config,
        units=tuple(UnitView(u.id, u.template, Position(u.x, u.y)) for u in doc.units),
        templates=tuple(TemplateView(t.id, t.name) for t in doc.templates),
        resources=resources,
        actions=tuple(_action_from_schema(a, by_id) for a in doc.plan),
    )


def _action_from_schema(schema: ActionSchema, resources: dict[int, Resource]) -> SymbolicAction:
    actors = [ActorRef(a.id, Position(a.x, a.y)) for a in schema.actors]
    match schema.kind:
        case "move":
            return SymbolicAction.move(actors, [Position(p.x, p.y) for p in schema.targets])
        case "harvest":
            missing = [rid for rid in schema.resources if rid not in resources]
            if missing:
                raise PlanError(f"HARVEST references unknown resources {missing}")
            return SymbolicAction.harvest(actors, [resources[rid] for rid in schema.resources])
        case "deposit":
            if schema.target is None:
                raise PlanError("DEPOSIT needs a target")
            return SymbolicAction.deposit(actors, Position(schema.target.x, schema.target.y))
        case "build":
            return SymbolicAction.build(actors)
    raise PlanError(f"Unknown action kind {schema.kind!r}")
