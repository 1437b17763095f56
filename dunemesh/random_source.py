"""Uniform random float sources for the deposition stage."""
import random
from typing import Callable, Iterable, Optional, Union
import numpy as np

# Zero-argument callable returning a float in [0, 1)
RandomSource = Callable[[], float]

# Anything as_random_source accepts
SourceLike = Union[None, RandomSource, np.random.Generator, random.Random]


class ScriptedSource:
    """Replays a fixed sequence of floats.

    Used to pin slice pivots and directions, e.g. ``ScriptedSource([0.5, 0.5, 0.0])``
    puts a single slice's pivot at the origin with direction +x.
    """

    def __init__(self, values: Iterable[float]):
        self._values = [float(v) for v in values]
        self._pos = 0

    def __call__(self) -> float:
        if self._pos >= len(self._values):
            raise RuntimeError(
                f"ScriptedSource exhausted after {len(self._values)} values"
            )
        value = self._values[self._pos]
        self._pos += 1
        return value

    @property
    def remaining(self) -> int:
        return len(self._values) - self._pos


def as_random_source(
    source: SourceLike = None,
    seed: Optional[int] = None,
) -> RandomSource:
    """Adapt a generator object or callable into a RandomSource.

    Args:
        source: None, a numpy Generator, a random.Random, or a callable
        seed: Seed used only when source is None

    Returns:
        Zero-argument callable yielding floats in [0, 1)
    """
    if source is None:
        source = np.random.default_rng(seed)

    if isinstance(source, np.random.Generator):
        rng = source
        return lambda: float(rng.random())
    if isinstance(source, random.Random):
        return source.random
    if callable(source):
        return source

    raise TypeError(f"Unsupported random source: {type(source).__name__}")
