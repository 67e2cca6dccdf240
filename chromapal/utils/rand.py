"""
Random sources used by the color and palette generators.

Every generator takes a ``RandomSource`` explicitly. ``DefaultRandomSource``
wraps a numpy ``Generator`` and is only bound by the convenience wrappers
(``warm_color()``, ``soft_palette()`` ...); its output is not reproducible
unless a seed is passed. ``LCGRandomSource`` is a tiny deterministic
generator for reproducible palettes and tests.

Sources keep internal state and are not thread-safe; share one between
threads only behind your own lock.
"""

from typing import Optional, Protocol, runtime_checkable

import numpy as np


@runtime_checkable
class RandomSource(Protocol):
    def next_float64(self) -> float:
        """Return a float in [0, 1)."""
        ...

    def next_int(self, n: int) -> int:
        """Return an int in [0, n)."""
        ...


class DefaultRandomSource:
    """Random source backed by ``numpy.random.default_rng``."""

    __slots__ = ("_rng",)

    def __init__(self, seed: Optional[int] = None) -> None:
        self._rng = np.random.default_rng(seed)

    def next_float64(self) -> float:
        return float(self._rng.random())

    def next_int(self, n: int) -> int:
        if n <= 0:
            raise ValueError("invalid argument to next_int: n must be positive")
        return int(self._rng.integers(n))


class LCGRandomSource:
    """
    Deterministic linear congruential generator.

    ``state = (state * 1103515245 + 12345) & 0x7fffffff`` and floats are
    ``state / 2**31``. Two sources built with the same seed produce the same
    sequence, which makes palette generation reproducible.

    The product is computed on exact integers. Ports that multiply in
    doubles lose the low bits once it passes 2**53, so their sequences
    diverge from this one after the first draw.
    """

    __slots__ = ("_state",)

    def __init__(self, seed: int = 1) -> None:
        self._state = seed & 0x7FFFFFFF

    def next_float64(self) -> float:
        self._state = (self._state * 1103515245 + 12345) & 0x7FFFFFFF
        return self._state / 0x80000000

    def next_int(self, n: int) -> int:
        if n <= 0:
            raise ValueError("invalid argument to next_int: n must be positive")
        return int(self.next_float64() * n)


def default_random_source() -> DefaultRandomSource:
    """Build a fresh, unseeded random source for the convenience wrappers."""
    return DefaultRandomSource()
