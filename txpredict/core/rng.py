import random


class RandomSource:
    """Injectable randomness for the coin-flip fallback and the extra voters.

    Wraps a ``random.Random``; ``seeded`` gives reproducible runs,
    ``system`` draws from OS entropy.
    """

    def __init__(self, rnd: random.Random | None = None):
        self._rnd = rnd if rnd is not None else random.SystemRandom()

    @classmethod
    def system(cls) -> "RandomSource":
        return cls(random.SystemRandom())

    @classmethod
    def seeded(cls, seed: int) -> "RandomSource":
        return cls(random.Random(seed))

    def random(self) -> float:
        return self._rnd.random()

    def uniform(self, low: float, high: float) -> float:
        # half-open [low, high)
        return low + self.random() * (high - low)

    def boolean(self) -> bool:
        return self.random() > 0.5

    def symbol(self) -> str:
        return "T" if self.boolean() else "X"
