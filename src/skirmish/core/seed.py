from __future__ import annotations

import logging
import random
import secrets
from typing import Optional, Protocol

logger = logging.getLogger(__name__)


class RandomSource(Protocol):
    """Anything that can draw a uniform integer from an inclusive range."""

    def randint(self, a: int, b: int) -> int:
        ...


class SeedManager:
    """Seeded RNG handed to the combat orchestrator.

    Uses a dedicated random.Random so the global random state is untouched.
    When no seed is given one is drawn from system entropy and logged, so
    any duel can be replayed by passing that seed back in.
    """

    def __init__(self, seed: Optional[int] = None) -> None:
        if seed is None:
            seed = secrets.randbits(32)
            logger.info("No seed provided; generated seed: %d", seed)
        else:
            logger.debug("Using seed: %d", seed)
        self._seed = seed
        self._rng = random.Random(seed)

    @property
    def seed(self) -> int:
        return self._seed

    def randint(self, a: int, b: int) -> int:
        return self._rng.randint(a, b)
