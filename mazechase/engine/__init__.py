"""Engine layer: scheduler, movement, adversary control, collisions, game loop."""

from mazechase.engine.adversary import AdversaryController
from mazechase.engine.clock import ManualClock
from mazechase.engine.collision import CollisionResolver, Outcome
from mazechase.engine.game_loop import GameLoop
from mazechase.engine.scheduler import TickScheduler

__all__ = [
    "AdversaryController",
    "CollisionResolver",
    "GameLoop",
    "ManualClock",
    "Outcome",
    "TickScheduler",
]
