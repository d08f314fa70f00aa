"""
Random Sampler
==============
Picks a random subset of a sequence without replacement.

Backed by a numpy Generator so tests can pass a seed and get a reproducible board.
"""
from __future__ import annotations

from typing import Optional, Sequence, TypeVar

import numpy as np

T = TypeVar("T")


class Sampler:
    def __init__(self, seed: Optional[int] = None) -> None:
        self._rng = np.random.default_rng(seed)

    def sample(self, population: Sequence[T], k: int) -> list[T]:
        """
        Return k elements taken from distinct positions of the population.

        Raises:
            ValueError: If k is negative or larger than the population.
        """
        if k < 0 or k > len(population):
            raise ValueError(f"Cannot sample {k} elements from a population of {len(population)}.")

        indices = self._rng.choice(len(population), size=k, replace=False)
        return [population[int(i)] for i in indices]
