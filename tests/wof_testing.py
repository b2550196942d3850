from typing import List, Optional, Sequence

# Small wheel used by most tests: index -> field
#   0: 100, 1: 500, 2: LOSE_TURN, 3: BANKRUPT, 4: PRIZE:Car
TEST_WHEEL = [100, 500, "LOSE_TURN", "BANKRUPT", "PRIZE:Car"]
CASH_100, CASH_500, LOSE_TURN, BANKRUPT, PRIZE_CAR = range(5)

TEST_PUZZLES = ["CAT", "Wheel of Fortune", "BANANA", "HELLO WORLD", "PYTHON"]


class ScriptedRandom:
    """RandomSource that replays scripted outcomes.

    - random() pops from ``randoms`` (0.0 once exhausted, i.e. spins succeed)
    - randrange() pops wheel indexes queued with ``land_on``
    - sample() returns the population positions listed in ``sample_order``,
      or the first k items when none are given
    """

    def __init__(self, randoms: Sequence[float] = (), sample_order: Optional[Sequence[int]] = None) -> None:
        self.randoms: List[float] = list(randoms)
        self.indexes: List[int] = []
        self.sample_order = list(sample_order) if sample_order is not None else None

    def land_on(self, *indexes: int) -> "ScriptedRandom":
        self.indexes.extend(indexes)
        return self

    def random(self) -> float:
        return self.randoms.pop(0) if self.randoms else 0.0

    def randrange(self, stop: int) -> int:
        if not self.indexes:
            raise AssertionError("ScriptedRandom: no wheel index queued")
        idx = self.indexes.pop(0)
        assert 0 <= idx < stop
        return idx

    def sample(self, population, k: int):
        pop = list(population)
        if self.sample_order is None:
            return pop[:k]
        return [pop[i] for i in self.sample_order[:k]]


