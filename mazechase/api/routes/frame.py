"""GET /api/v1/frame and /api/v1/events — live session data (polled by UI)."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query

from mazechase.api.dependencies import get_game_manager
from mazechase.api.game_manager import GameManager
from mazechase.api.schemas import (
    AdversarySchema,
    EventSchema,
    EventsResponse,
    FrameResponse,
    PositionSchema,
)

router = APIRouter()


@router.get("/frame", response_model=FrameResponse)
def get_frame(manager: GameManager = Depends(get_game_manager)) -> FrameResponse:
    frame = manager.get_frame()
    if frame is None:
        raise HTTPException(status_code=503, detail="No frame available yet.")

    adversaries = [
        AdversarySchema(
            name=a.name,
            x=a.pos.x,
            y=a.pos.y,
            direction=a.direction.value,
            mode=a.mode.value,
            home=PositionSchema(x=a.home.x, y=a.home.y),
            respawn_in=a.respawn_in,
        )
        for a in frame.adversaries
    ]
    return FrameResponse(
        player_ticks=frame.player_ticks,
        adversary_ticks=frame.adversary_ticks,
        game_time=frame.game_time,
        player_name=frame.player_name,
        player=PositionSchema(x=frame.player_pos.x, y=frame.player_pos.y),
        player_direction=frame.player_direction.value,
        invulnerable=frame.invulnerable,
        adversaries=adversaries,
        score=frame.score,
        high_score=frame.high_score,
        lives=frame.lives,
        level=frame.level,
        status=frame.status.value,
        remaining_dots=frame.remaining_dots,
        total_dots=frame.total_dots,
        speed_rate=frame.speed_rate,
        frightened_remaining=frame.frightened_remaining,
        running=manager.running,
        last_error=manager.last_error,
    )


@router.get("/events", response_model=EventsResponse)
def get_events(
    since_tick: int = Query(0, ge=0, description="Only return events since this player tick"),
    limit: int = Query(100, ge=1, le=1000),
    manager: GameManager = Depends(get_game_manager),
) -> EventsResponse:
    events = manager.event_log.since_tick(since_tick)[-limit:]
    return EventsResponse(
        since_tick=since_tick,
        events=[
            EventSchema(
                tick=e.tick,
                category=e.category,
                message=e.message,
                actors=list(e.actors),
                metadata=e.metadata,
            )
            for e in events
        ],
    )
