"""Support systems: deterministic RNG and the headless autopilot."""

from mazechase.systems.autopilot import Autopilot, Pathfinder
from mazechase.systems.rng import DeterministicRNG

__all__ = ["Autopilot", "DeterministicRNG", "Pathfinder"]
