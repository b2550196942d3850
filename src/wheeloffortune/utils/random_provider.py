from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import List, Optional, Protocol, Sequence, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class RandomSource(Protocol):
    """Randomness consumed by the engine.

    Puzzle sampling uses ``sample``, the wheel uses ``random`` for the spin
    success trial and ``randrange`` to pick a field. Tests substitute a scripted
    implementation to force outcomes.
    """

    def random(self) -> float:  # pragma: no cover - protocol
        ...

    def randrange(self, stop: int) -> int:  # pragma: no cover - protocol
        ...

    def sample(self, population: Sequence[T], k: int) -> List[T]:  # pragma: no cover - protocol
        ...


@dataclass
class RandomProvider:
    """
    Thin wrapper around random.Random to make RNG deterministic and injectable
    for tests while avoiding global state.
    """

    seed: Optional[int] = None

    def __post_init__(self) -> None:
        self._rng = random.Random(self.seed)
        if self.seed is not None:
            logger.debug("Initialized RandomProvider with deterministic seed=%s", self.seed)

    def random(self) -> float:
        return self._rng.random()

    def randrange(self, stop: int) -> int:
        if stop <= 0:
            raise ValueError("randrange() requires a positive stop value")
        return self._rng.randrange(stop)

    def sample(self, population: Sequence[T], k: int) -> List[T]:
        return self._rng.sample(list(population), k)


__all__ = ["RandomSource", "RandomProvider"]
