"""Injectable random source used for food placement and autoplay."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol, TypeVar

import numpy as np

T = TypeVar("T")

# Resolution used to turn a probability into a single integer draw.
_CHANCE_RESOLUTION = 10_000


class RandomSource(Protocol):
    """Anything that can draw a uniform integer in ``[0, n)``.

    :class:`numpy.random.Generator` satisfies this protocol as-is.
    """

    def integers(self, n: int) -> int: ...


def default_rng(seed: int | None = None) -> np.random.Generator:
    """Return a NumPy generator, seeded for reproducible games."""
    return np.random.default_rng(seed)


def uniform_index(rng: RandomSource, n: int) -> int:
    """Draw a single index in ``[0, n)``."""
    if n <= 0:
        raise ValueError("Cannot draw an index from an empty range.")
    return int(rng.integers(n))


def choice(rng: RandomSource, items: Sequence[T]) -> T:
    """Pick one element of *items* uniformly."""
    return items[uniform_index(rng, len(items))]


def chance(rng: RandomSource, probability: float) -> bool:
    """Return True with the given probability.

    Always consumes exactly one draw so the stream stays aligned.
    """
    threshold = round(max(0.0, min(1.0, probability)) * _CHANCE_RESOLUTION)
    return uniform_index(rng, _CHANCE_RESOLUTION) < threshold
