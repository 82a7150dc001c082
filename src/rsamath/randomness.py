"""Random number sources consumed by primality testing and key generation.

All sampling in the package goes through a single capability, `random_in_range(low, high)`, so callers can inject a
seeded source for reproducible runs or keep the default one backed by `secrets`.

Typical usage example:

    rng = SeededRandomSource(1234)
    gen_prime(rng=rng)
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import random
import secrets
import typing


class RandomSource(typing.Protocol):
    """Anything able to draw a uniform integer from a half-open range."""

    def random_in_range(self, low: int, high: int) -> int:
        ...


def _check_range(low: int, high: int) -> None:
    if high <= low:
        raise ValueError(f"Empty range [{low}, {high}).")


class SystemRandomSource:
    """Operating system entropy via `secrets`. Safe to share between threads."""

    def random_in_range(self, low: int, high: int) -> int:
        """Draws uniformly from `[low, high)`.

        Raises:
            ValueError: If the range is empty.
        """
        _check_range(low, high)
        return secrets.randbelow(high - low) + low


class SeededRandomSource:
    """Deterministic source for reproducible runs and tests.

    Wraps a private `random.Random` instance, so two sources with the same seed draw the same sequence. Not
    intended for sharing between threads, create one per worker instead.

    Attributes:
        seed: The seed the source was created with.
    """

    def __init__(self, seed: int | None = None) -> None:
        self.seed = seed
        self._rand = random.Random(seed)

    def random_in_range(self, low: int, high: int) -> int:
        """Draws uniformly from `[low, high)`.

        Raises:
            ValueError: If the range is empty.
        """
        _check_range(low, high)
        return self._rand.randrange(low, high)


_SYSTEM_SOURCE = SystemRandomSource()


def default_source() -> RandomSource:
    """The process-wide source used when no `rng` is passed."""
    return _SYSTEM_SOURCE
