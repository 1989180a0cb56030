"""Pluggable uniform random source.

Every randomized step takes an optional ``rng``. Anything with a
``random() -> float`` method returning values in [0, 1) works, which includes
``numpy.random.Generator`` and ``random.Random``.
"""

from __future__ import annotations

from typing import Iterable, List, Optional, Protocol, runtime_checkable

import numpy as np


@runtime_checkable
class RandomSource(Protocol):
    def random(self) -> float:
        ...


def default_rng() -> RandomSource:
    """Unseeded numpy generator."""
    return np.random.default_rng()


def resolve_rng(rng: Optional[RandomSource]) -> RandomSource:
    return rng if rng is not None else default_rng()


def random_index(rng: RandomSource, n: int) -> int:
    """Uniform index in [0, n)."""
    return min(n - 1, int(float(rng.random()) * n))


class SequenceRandom:
    """Replays a fixed sequence of uniforms, cycling when exhausted.

    Used to make randomized paths reproducible in tests and demos.
    """

    def __init__(self, values: Iterable[float]):
        self.values: List[float] = [float(v) for v in values]
        if not self.values:
            raise ValueError("SequenceRandom needs at least one value")
        for v in self.values:
            if not 0.0 <= v < 1.0:
                raise ValueError(f"Uniform values must lie in [0, 1), got {v}")
        self._pos = 0

    def random(self) -> float:
        value = self.values[self._pos % len(self.values)]
        self._pos += 1
        return value

    @property
    def calls(self) -> int:
        return self._pos
