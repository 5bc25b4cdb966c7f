"""GET /api/v1/config — expose game configuration."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from mazechase.api.dependencies import get_game_manager
from mazechase.api.game_manager import GameManager
from mazechase.api.schemas import GameConfigResponse

router = APIRouter()


@router.get("/config", response_model=GameConfigResponse)
def get_config(manager: GameManager = Depends(get_game_manager)) -> GameConfigResponse:
    cfg = manager.config
    frame = manager.get_frame()
    loop = manager.loop
    return GameConfigResponse(
        player_name=cfg.player_name,
        seed=cfg.seed,
        player_tick_interval=cfg.player_tick_interval,
        adversary_tick_interval=cfg.adversary_tick_interval,
        speed_rate=frame.speed_rate if frame else cfg.initial_speed_rate,
        speed_step=cfg.speed_step,
        min_speed_rate=cfg.min_speed_rate,
        max_speed_rate=cfg.max_speed_rate,
        invulnerability_duration=cfg.invulnerability_duration,
        frightened_duration=cfg.frightened_duration,
        respawn_duration=cfg.respawn_duration,
        dot_points=cfg.dot_points,
        energy_dot_points=cfg.energy_dot_points,
        capture_points=cfg.capture_points,
        starting_lives=cfg.starting_lives,
        level_count=loop.level_count if loop else 0,
        victory_score=cfg.victory_score,
    )
