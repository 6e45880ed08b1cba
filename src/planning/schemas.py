"""Pydantic models for scenario files (world definition + ordered plan)."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field


class PointSchema(BaseModel):
    x: int
    y: int


class UnitSchema(BaseModel):
    id: int
    template: str
    x: int
    y: int


class TemplateSchema(BaseModel):
    id: int
    name: str


class ResourceSchema(BaseModel):
    id: int
    kind: Literal["gold", "wood"]
    x: int
    y: int
    amount: int = Field(ge=0)


class ActorSchema(BaseModel):
    """Planner's view of an actor: symbolic id plus planned position."""

    id: int
    x: int
    y: int


class ActionSchema(BaseModel):
    kind: Literal["move", "harvest", "deposit", "build"]
    actors: list[ActorSchema] = Field(min_length=1)
    targets: list[PointSchema] = Field(default_factory=list)    # move
    resources: list[int] = Field(default_factory=list)          # harvest, by resource id
    target: PointSchema | None = None                           # deposit


class RuntimeSchema(BaseModel):
    map_width: int = 32
    map_height: int = 32
    carry_capacity: int = 100
    peasant_gold_cost: int = 400
    move_tiles_per_turn: int = 1


class ScenarioSchema(BaseModel):
    player: int = 0
    gold: int = 0
    wood: int = 0
    runtime: RuntimeSchema = Field(default_factory=RuntimeSchema)
    units: list[UnitSchema]
    templates: list[TemplateSchema]
    resources: list[ResourceSchema] = Field(default_factory=list)
    plan: list[ActionSchema] = Field(default_factory=list)
