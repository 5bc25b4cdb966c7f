"""GET /api/v1/map — current board layout."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from mazechase.api.dependencies import get_game_manager
from mazechase.api.game_manager import GameManager
from mazechase.api.schemas import MapResponse

router = APIRouter()


def rle_encode(values) -> list[int]:
    """Run-length encode as a flat ``[value, count, value, count, ...]`` list."""
    rle: list[int] = []
    it = iter(values)
    try:
        cur_val = int(next(it))
    except StopIteration:
        return rle
    cur_count = 1
    for v in it:
        v = int(v)
        if v == cur_val:
            cur_count += 1
        else:
            rle.append(cur_val)
            rle.append(cur_count)
            cur_val = v
            cur_count = 1
    rle.append(cur_val)
    rle.append(cur_count)
    return rle


@router.get("/map", response_model=MapResponse)
def get_map(manager: GameManager = Depends(get_game_manager)) -> MapResponse:
    # Consumed cells change, so clients refetch after level changes and restarts.
    frame = manager.get_frame()
    if frame is None:
        raise HTTPException(status_code=503, detail="Game not initialised yet.")
    return MapResponse(width=frame.width, height=frame.height, level=frame.level, grid=rle_encode(frame.cells))
