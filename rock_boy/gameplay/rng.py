"""
Random source abstraction.
NO UI DEPENDENCIES.

random.Random satisfies this protocol; tests pass a seeded instance.
"""
from typing import Protocol


class RandomSource(Protocol):
    def random(self) -> float:  # returns in [0.0, 1.0)
        ...

    def uniform(self, a: float, b: float) -> float:
        ...

    def randint(self, a: int, b: int) -> int:
        ...
