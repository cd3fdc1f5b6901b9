"""
Seeded pseudo-random sequence

Each draw is frac(sin(counter) * 10000) with the counter starting at the seed
and advancing by one per draw. Statistically weak, but portable and fully
determined by the seed, which is what "same seed, same puzzle" needs.
Every random choice the generator makes goes through one of these objects.
"""
import math
from typing import List, Sequence, TypeVar

T = TypeVar('T')


class SeededSequence:
    def __init__(self, seed: int):
        self.seed = seed
        self.counter = seed
        self.draws = 0

    def next_float(self) -> float:
        """Next value in [0, 1)"""
        x = math.sin(self.counter) * 10000
        self.counter += 1
        self.draws += 1
        return x - math.floor(x)

    def randrange(self, n: int) -> int:
        """Uniform-ish integer in [0, n)"""
        if n <= 0:
            raise ValueError("randrange() needs a positive bound")
        return min(int(self.next_float() * n), n - 1)

    def choice(self, items: Sequence[T]) -> T:
        return items[self.randrange(len(items))]

    def shuffle(self, items: List[T]) -> None:
        """Fisher-Yates shuffle in place"""
        for i in range(len(items) - 1, 0, -1):
            j = self.randrange(i + 1)
            items[i], items[j] = items[j], items[i]

    def __repr__(self):
        return f"SeededSequence(seed={self.seed}, draws={self.draws})"
