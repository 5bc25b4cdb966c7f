"""Pydantic response models for the REST API."""

from __future__ import annotations

from pydantic import BaseModel, Field


# --- Frame ---

class PositionSchema(BaseModel):
    x: int
    y: int


class AdversarySchema(BaseModel):
    name: str
    x: int
    y: int
    direction: str
    mode: str
    home: PositionSchema
    respawn_in: float | None = Field(None, description="Seconds until a captured adversary returns home")


class FrameResponse(BaseModel):
    player_ticks: int
    adversary_ticks: int
    game_time: float
    player_name: str
    player: PositionSchema
    player_direction: str
    invulnerable: bool
    adversaries: list[AdversarySchema] = Field(default_factory=list)
    score: int
    high_score: int
    lives: int
    level: int
    status: str
    remaining_dots: int
    total_dots: int
    speed_rate: float
    frightened_remaining: float | None = None
    running: bool
    last_error: str | None = None


# --- Map ---

class MapResponse(BaseModel):
    width: int
    height: int
    level: int
    grid: list[int] = Field(description="RLE-encoded cell kinds, row-major: [value, count, value, count, ...]")


# --- Events ---

class EventSchema(BaseModel):
    tick: int
    category: str
    message: str
    actors: list[str] = Field(default_factory=list)
    metadata: dict | None = None


class EventsResponse(BaseModel):
    since_tick: int
    events: list[EventSchema] = Field(default_factory=list)


# --- Control ---

class ControlResponse(BaseModel):
    status: str
    message: str
    tick: int = 0


# --- Config ---

class GameConfigResponse(BaseModel):
    player_name: str
    seed: int
    player_tick_interval: float
    adversary_tick_interval: float
    speed_rate: float
    speed_step: float
    min_speed_rate: float
    max_speed_rate: float
    invulnerability_duration: float
    frightened_duration: float
    respawn_duration: float
    dot_points: int
    energy_dot_points: int
    capture_points: int
    starting_lives: int
    level_count: int
    victory_score: int
