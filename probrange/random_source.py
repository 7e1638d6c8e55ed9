"""Uniform integer random sources.

A random source is the only collaborator a generator needs: something that
draws an integer uniformly from an inclusive [low, high] interval. The
default source is backed by the operating system's entropy pool; the seeded
source is reproducible and is the one to use in tests and simulations.
"""

from __future__ import annotations

import random
import secrets
from typing import Protocol, runtime_checkable

from probrange.errors import RandomSourceError


@runtime_checkable
class RandomSource(Protocol):
    """Protocol for uniform integer random sources.

    Implementations must return a value drawn uniformly from [low, high]
    (inclusive) and raise RandomSourceError when low > high.
    """

    def uniform(self, low: int, high: int) -> int:
        """Draw an integer uniformly from [low, high]."""
        ...


class SystemRandomSource:
    """Random source backed by secrets.SystemRandom.

    Examples
    --------
    >>> source = SystemRandomSource()
    >>> 1 <= source.uniform(1, 6) <= 6
    True
    """

    def __init__(self) -> None:
        self._rng = secrets.SystemRandom()

    def uniform(self, low: int, high: int) -> int:
        """Draw an integer uniformly from [low, high].

        Parameters
        ----------
        low : int
            Lower bound (inclusive).
        high : int
            Upper bound (inclusive).

        Returns
        -------
        int
            The drawn integer.

        Raises
        ------
        RandomSourceError
            If low > high.
        """
        if low > high:
            raise RandomSourceError(low, high)
        return self._rng.randint(low, high)

    def __repr__(self) -> str:
        return "SystemRandomSource()"


class SeededRandomSource:
    """Deterministic random source backed by random.Random.

    All draws are reproducible given the same seed. Use fork() to give
    another component its own independent stream without disturbing this
    one.

    Parameters
    ----------
    seed : int
        Non-negative seed.

    Examples
    --------
    >>> a = SeededRandomSource(42)
    >>> b = SeededRandomSource(42)
    >>> [a.uniform(1, 100) for _ in range(5)] == [b.uniform(1, 100) for _ in range(5)]
    True
    """

    def __init__(self, seed: int) -> None:
        if seed < 0:
            raise ValueError(f"seed ({seed}) must be non-negative")
        self._seed = seed
        self._rng = random.Random(seed)
        self._fork_count = 0

    @property
    def seed(self) -> int:
        """Get the original seed."""
        return self._seed

    @property
    def fork_count(self) -> int:
        """Get the number of times this source has been forked."""
        return self._fork_count

    def uniform(self, low: int, high: int) -> int:
        """Draw an integer uniformly from [low, high].

        Raises
        ------
        RandomSourceError
            If low > high.
        """
        if low > high:
            raise RandomSourceError(low, high)
        return self._rng.randint(low, high)

    def fork(self) -> SeededRandomSource:
        """Create an independent source seeded from this one's state."""
        self._fork_count += 1
        return SeededRandomSource(self._rng.randint(0, 2**63 - 1))

    def __repr__(self) -> str:
        return f"SeededRandomSource(seed={self._seed})"


def default_source(seed: int | None = None) -> RandomSource:
    """Return a seeded source when a seed is given, else a system source.

    Parameters
    ----------
    seed : int | None
        Optional seed for reproducibility.

    Returns
    -------
    RandomSource
        SeededRandomSource if seed is not None, otherwise SystemRandomSource.
    """
    if seed is None:
        return SystemRandomSource()
    return SeededRandomSource(seed)
