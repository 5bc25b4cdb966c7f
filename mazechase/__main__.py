"""Entry point: ``python -m mazechase``.

Supports two modes:
  - ``python -m mazechase``            → Launch the FastAPI control/state server
  - ``python -m mazechase cli``        → Headless session steered by the autopilot
"""

from __future__ import annotations

import argparse
import logging

from mazechase.config import GameConfig
from mazechase.core.enums import Cycle
from mazechase.core.errors import ConfigurationError
from mazechase.core.snapshot import FrameState

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Maze Chase simulation engine")
    sub = parser.add_subparsers(dest="command")

    # --- Server mode (default) ---
    srv = sub.add_parser("serve", help="Start the FastAPI control/state server (default)")
    srv.add_argument("--host", type=str, default="127.0.0.1")
    srv.add_argument("--port", type=int, default=8000)
    _add_game_args(srv)

    # --- Headless CLI mode ---
    cli = sub.add_parser("cli", help="Run a headless session with the autopilot")
    cli.add_argument("--seconds", type=float, default=120.0, help="Simulated seconds to run")
    _add_game_args(cli)

    return parser


def _add_game_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("--seed", type=int, default=42)
    p.add_argument("--name", type=str, default="player", help="Player name")
    p.add_argument("--levels-dir", type=str, default=None, help="Directory of board{N}.txt files")
    p.add_argument("--strict-levels", action="store_true", help="Reject malformed boards")
    p.add_argument("--speed", type=float, default=1.0, help="Initial speed rate")
    p.add_argument("--log-level", type=str, default="INFO", choices=["DEBUG", "INFO", "WARNING"])


def _config_from_args(args: argparse.Namespace) -> GameConfig:
    return GameConfig(
        player_name=args.name,
        seed=args.seed,
        levels_dir=args.levels_dir,
        strict_levels=args.strict_levels,
        initial_speed_rate=args.speed,
        log_level=args.log_level,
    )


def _run_server(args: argparse.Namespace) -> None:
    import uvicorn

    from mazechase.api.app import create_app

    app = create_app(_config_from_args(args))
    uvicorn.run(app, host=args.host, port=args.port, log_level=args.log_level.lower())


def run_headless(config: GameConfig, seconds: float) -> FrameState:
    """Play one session on a manual clock for *seconds* of game time."""
    from mazechase.engine.clock import ManualClock
    from mazechase.engine.game_loop import GameLoop
    from mazechase.systems.autopilot import Autopilot

    clock = ManualClock()
    loop = GameLoop(config, clock=clock)
    pilot = Autopilot(loop.session.board.exit_cells())
    loop.start()

    level = loop.session.level
    frame = loop.frame
    while frame.game_time < seconds and not loop.session.finished:
        clock.advance(loop.scheduler.interval(Cycle.PLAYER))
        if loop.advance():
            frame = loop.frame
            if frame.level != level:
                level = frame.level
                pilot.set_exits(loop.session.board.exit_cells())
            loop.set_player_direction(pilot.choose(frame))
        for event in loop.drain_events():
            logger.debug("[tick %d] %s: %s", event.tick, event.category, event.message)

    return loop.on_tick()


def _run_cli(args: argparse.Namespace) -> None:
    from mazechase.utils.logging import setup_logging

    config = _config_from_args(args)
    setup_logging(config.log_level)

    try:
        frame = run_headless(config, args.seconds)
    except ConfigurationError as exc:
        logger.error("Session aborted: %s", exc)
        raise SystemExit(2) from exc
    logger.info(
        "Finished: status=%s level=%d score=%d lives=%d dots=%d/%d after %.1fs (%d player ticks)",
        frame.status.value, frame.level, frame.score, frame.lives,
        frame.total_dots - frame.remaining_dots, frame.total_dots,
        frame.game_time, frame.player_ticks,
    )


def main() -> None:
    parser = _build_parser()
    args = parser.parse_args()

    # Default to serve mode if no subcommand given
    if args.command is None:
        args = parser.parse_args(["serve"])
    if args.command == "serve":
        _run_server(args)
    elif args.command == "cli":
        _run_cli(args)


if __name__ == "__main__":
    main()
