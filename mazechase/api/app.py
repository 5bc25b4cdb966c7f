"""FastAPI application factory with lifespan management."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from mazechase.api.dependencies import set_game_manager
from mazechase.api.game_manager import GameManager
from mazechase.api.routes import api_router
from mazechase.config import GameConfig
from mazechase.utils.logging import setup_logging

logger = logging.getLogger(__name__)


def create_app(
    config: GameConfig | None = None,
    manager: GameManager | None = None,
    autostart: bool = True,
) -> FastAPI:
    """Build and return the fully-configured FastAPI application.

    A prebuilt *manager* may be injected (tests drive one with a manual
    clock); with ``autostart=False`` the engine thread is left stopped and
    the caller pumps ticks itself.
    """
    if config is None:
        config = manager.config if manager is not None else GameConfig()

    _config = config

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        setup_logging(_config.log_level)
        mgr = manager or GameManager(_config)
        set_game_manager(mgr)
        if autostart:
            mgr.start()
        logger.info("API server started (engine %s).", "running" if mgr.running else "idle")
        yield
        mgr.stop()
        set_game_manager(None)
        logger.info("API server shutting down.")

    app = FastAPI(
        title="Maze Chase Engine",
        description=(
            "Tick-driven maze chase simulation — control and state API.\n\n"
            "## API Groups\n\n"
            "- **Frame** — Latest frame snapshot and the event feed\n"
            "- **Map** — Current board layout (RLE)\n"
            "- **Control** — Session lifecycle, speed and player heading\n"
            "- **Config** — Read-only game configuration\n"
        ),
        version="0.1.0",
        lifespan=lifespan,
        openapi_tags=[
            {"name": "Frame", "description": "Live session state polled by a renderer: player, adversaries, score, lives, events."},
            {"name": "Map", "description": "Board cells for the current level. Refetch after level changes."},
            {"name": "Control", "description": "Start, pause, resume, restart, speed changes and direction input."},
            {"name": "Config", "description": "Read-only game configuration (timings, scoring, levels)."},
        ],
    )

    # CORS: any origin, for local renderers
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(api_router)

    return app
