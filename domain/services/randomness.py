from __future__ import annotations

import random
import time
from abc import ABC, abstractmethod


class RandomSource(ABC):
    """Capability that yields uniform draws on [0, 1)."""

    @abstractmethod
    def uniform(self) -> float:
        """Return the next uniform draw on [0, 1)."""


class TimeSeededRandomSource(RandomSource):
    """Builds a fresh generator seeded from the wall clock on every draw."""

    def __init__(self, clock=time.time_ns) -> None:
        self.clock = clock

    def uniform(self) -> float:
        return random.Random(self.clock()).random()
