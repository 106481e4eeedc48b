import random


class RandomSource:
    """Source of uniformly distributed integers, injected into move application."""

    def next_int(self, low: int, high: int) -> int:
        """Return an integer N such that low <= N < high."""
        raise NotImplementedError


class SystemRandomSource(RandomSource):
    def __init__(self, seed: int | None = None):
        self._random = random.Random(seed)

    def next_int(self, low: int, high: int) -> int:
        return self._random.randrange(low, high)
