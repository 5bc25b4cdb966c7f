"""POST /api/v1/control/{action} and /api/v1/direction/{direction} — session input."""

from __future__ import annotations

from enum import Enum

from fastapi import APIRouter, Depends, HTTPException

from mazechase.api.dependencies import get_game_manager
from mazechase.api.game_manager import GameManager
from mazechase.api.schemas import ControlResponse
from mazechase.core.enums import Direction, SessionStatus

router = APIRouter()


class ControlAction(str, Enum):
    start = "start"
    pause = "pause"
    resume = "resume"
    restart = "restart"
    speed_up = "speed_up"
    slow_down = "slow_down"


def _conflict(message: str) -> HTTPException:
    return HTTPException(status_code=409, detail=message)


@router.post("/control/{action}", response_model=ControlResponse)
def control(
    action: ControlAction,
    manager: GameManager = Depends(get_game_manager),
) -> ControlResponse:
    frame = manager.get_frame()
    if frame is None:
        raise HTTPException(status_code=503, detail=manager.last_error or "Game not initialised yet.")
    tick = frame.player_ticks
    status = frame.status

    match action:
        case ControlAction.start:
            if manager.running:
                return ControlResponse(status="noop", message="Already running.", tick=tick)
            manager.start()
            return ControlResponse(status="ok", message="Engine started.", tick=tick)

        case ControlAction.pause:
            if status != SessionStatus.RUNNING:
                raise _conflict(f"Cannot pause a session that is {status.value}.")
            manager.pause()
            return ControlResponse(status="ok", message="Pause requested.", tick=tick)

        case ControlAction.resume:
            if status != SessionStatus.PAUSED:
                raise _conflict(f"Cannot resume a session that is {status.value}.")
            manager.resume()
            return ControlResponse(status="ok", message="Resume requested.", tick=tick)

        case ControlAction.restart:
            manager.restart()
            return ControlResponse(status="ok", message="Restart requested.", tick=tick)

        case ControlAction.speed_up:
            manager.speed_up()
            return ControlResponse(status="ok", message="Speed increase requested.", tick=tick)

        case ControlAction.slow_down:
            manager.slow_down()
            return ControlResponse(status="ok", message="Speed decrease requested.", tick=tick)


@router.post("/direction/{direction}", response_model=ControlResponse)
def set_direction(
    direction: Direction,
    manager: GameManager = Depends(get_game_manager),
) -> ControlResponse:
    frame = manager.get_frame()
    if frame is None:
        raise HTTPException(status_code=503, detail=manager.last_error or "Game not initialised yet.")
    if frame.status in (SessionStatus.GAME_OVER, SessionStatus.VICTORY):
        raise _conflict(f"Session is over ({frame.status.value}); restart first.")
    manager.set_direction(direction)
    # Turns into walls are dropped silently on the engine thread.
    return ControlResponse(status="ok", message=f"Heading {direction.value} queued.", tick=frame.player_ticks)
