"""Domain-separated deterministic RNG using xxhash.

Every draw is a pure function of (seed, domain, entity index, tick, salt),
so a session replayed with the same seed and inputs makes the same choices.
"""

from __future__ import annotations

import struct
from typing import Sequence, TypeVar

import xxhash

from mazechase.core.enums import Domain

T = TypeVar("T")


class DeterministicRNG:
    """Stateless domain-separated pseudo-random number generator."""

    __slots__ = ("_seed",)

    _MAX_UINT64 = (1 << 64) - 1

    def __init__(self, seed: int) -> None:
        self._seed = seed

    @property
    def seed(self) -> int:
        return self._seed

    def _hash(self, domain: Domain, entity_id: int, tick: int, salt: int = 0) -> int:
        payload = struct.pack("<qiqqi", self._seed, domain.value, entity_id, tick, salt)
        return xxhash.xxh64(payload).intdigest()

    def next_float(self, domain: Domain, entity_id: int, tick: int, salt: int = 0) -> float:
        """Return a deterministic float in [0.0, 1.0)."""
        return self._hash(domain, entity_id, tick, salt) / (self._MAX_UINT64 + 1)

    def next_int(self, domain: Domain, entity_id: int, tick: int, low: int, high: int, salt: int = 0) -> int:
        """Return a deterministic integer in [low, high] inclusive."""
        f = self.next_float(domain, entity_id, tick, salt)
        return low + int(f * (high - low + 1))

    def shuffled(self, items: Sequence[T], domain: Domain, entity_id: int, tick: int) -> list[T]:
        """Return a Fisher-Yates shuffled copy of *items*."""
        out = list(items)
        for i in range(len(out) - 1, 0, -1):
            j = self.next_int(domain, entity_id, tick, 0, i, salt=i)
            out[i], out[j] = out[j], out[i]
        return out
