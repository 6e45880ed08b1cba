"""Built-in demo scenario: gather wood, train a peasant, put it to work on gold.

Town hall at (2, 2), one peasant at (4, 4), a forest at (6, 5) and a gold
mine at (1, 6).  Symbolic id 1 is the starting peasant; symbolic id 2 is the
peasant the town hall produces mid-plan, so its binding only exists once the
runtime has spawned it.
"""

from __future__ import annotations

from typing import Any

from src.planning.loader import Scenario, scenario_from_schema
from src.planning.schemas import ScenarioSchema

DEMO_SCENARIO: dict[str, Any] = {
    "player": 0,
    "gold": 400,
    "units": [
        {"id": 10, "template": "TownHall", "x": 2, "y": 2},
        {"id": 11, "template": "Peasant", "x": 4, "y": 4},
    ],
    "templates": [
        {"id": 25, "name": "TownHall"},
        {"id": 26, "name": "Peasant"},
    ],
    "resources": [
        {"id": 100, "kind": "wood", "x": 6, "y": 5, "amount": 300},
        {"id": 101, "kind": "gold", "x": 1, "y": 6, "amount": 1000},
    ],
    "plan": [
        {"kind": "move", "actors": [{"id": 1, "x": 4, "y": 4}], "targets": [{"x": 5, "y": 5}]},
        {"kind": "harvest", "actors": [{"id": 1, "x": 5, "y": 5}], "resources": [100]},
        {"kind": "build", "actors": [{"id": 1, "x": 5, "y": 5}]},
        {"kind": "move", "actors": [{"id": 1, "x": 5, "y": 5}], "targets": [{"x": 3, "y": 3}]},
        {"kind": "deposit", "actors": [{"id": 1, "x": 3, "y": 3}], "target": {"x": 2, "y": 2}},
        {"kind": "move", "actors": [{"id": 2, "x": 2, "y": 1}], "targets": [{"x": 1, "y": 5}]},
        {"kind": "harvest", "actors": [{"id": 2, "x": 1, "y": 5}], "resources": [101]},
        {"kind": "move", "actors": [{"id": 2, "x": 1, "y": 5}], "targets": [{"x": 2, "y": 3}]},
        {"kind": "deposit", "actors": [{"id": 2, "x": 2, "y": 3}], "target": {"x": 2, "y": 2}},
    ],
}


def demo_scenario() -> Scenario:
    return scenario_from_schema(ScenarioSchema.model_validate(DEMO_SCENARIO))
