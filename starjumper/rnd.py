"""Uniform random number sources, real and fake, over 32-bit unsigned ranges."""

from __future__ import annotations

import secrets
from abc import ABC, abstractmethod
from collections.abc import Sequence

UINT32_MAX = 0xFFFFFFFF


def _span(inclusive_lower_bound: int, inclusive_upper_bound: int) -> int:
    """Number of values in an inclusive range."""
    return inclusive_upper_bound - inclusive_lower_bound + 1


class Rnd(ABC):
    """A source of uniformly distributed unsigned 32-bit values."""

    @abstractmethod
    def _next_in_range(self, inclusive_lower_bound: int, inclusive_upper_bound: int) -> int:
        """Return a value in a non-empty inclusive range."""

    def next_value(self) -> int:
        """Return a value in the full range 0 to 2**32 - 1."""
        return self._next_in_range(0, UINT32_MAX)

    def next_uniform_value(self, exclusive_upper_bound: int) -> int:
        """Return a value from 0 up to but not including the bound."""
        if exclusive_upper_bound <= 1:
            return 0
        return self._next_in_range(0, exclusive_upper_bound - 1)

    def next_uniform_value_in_range(
        self, inclusive_lower_bound: int, inclusive_upper_bound: int
    ) -> int:
        """Return a value between both bounds, inclusive.

        An empty or single-valued range yields the lower bound.
        """
        if inclusive_upper_bound <= inclusive_lower_bound:
            return inclusive_lower_bound
        return self._next_in_range(inclusive_lower_bound, inclusive_upper_bound)


class SystemRnd(Rnd):
    """Cryptographically strong randomness from the operating system."""

    def _next_in_range(self, inclusive_lower_bound: int, inclusive_upper_bound: int) -> int:
        if inclusive_lower_bound == 0 and inclusive_upper_bound == UINT32_MAX:
            return secrets.randbits(32)
        return inclusive_lower_bound + secrets.randbelow(
            _span(inclusive_lower_bound, inclusive_upper_bound)
        )


class FakeAscendingRnd(Rnd):
    """Yields successive values starting from an initial value, wrapped into range."""

    def __init__(self, initial_value: int) -> None:
        self._value = initial_value & UINT32_MAX

    def _next_in_range(self, inclusive_lower_bound: int, inclusive_upper_bound: int) -> int:
        result = inclusive_lower_bound + (
            self._value % _span(inclusive_lower_bound, inclusive_upper_bound)
        )
        self._value = (self._value + 1) & UINT32_MAX
        return result


class FakeFixedRnd(Rnd):
    """Always yields the same value, wrapped into range."""

    def __init__(self, fixed_value: int) -> None:
        self._value = fixed_value & UINT32_MAX

    def _next_in_range(self, inclusive_lower_bound: int, inclusive_upper_bound: int) -> int:
        return inclusive_lower_bound + (
            self._value % _span(inclusive_lower_bound, inclusive_upper_bound)
        )


class FakeMaxRnd(Rnd):
    """Always yields the upper bound."""

    def _next_in_range(self, inclusive_lower_bound: int, inclusive_upper_bound: int) -> int:
        return inclusive_upper_bound


class FakeMedianRnd(Rnd):
    """Always yields the middle of the range."""

    def _next_in_range(self, inclusive_lower_bound: int, inclusive_upper_bound: int) -> int:
        return inclusive_lower_bound + _span(inclusive_lower_bound, inclusive_upper_bound) // 2


class FakeMinRnd(Rnd):
    """Always yields the lower bound."""

    def _next_in_range(self, inclusive_lower_bound: int, inclusive_upper_bound: int) -> int:
        return inclusive_lower_bound


class Jrand48Rnd(Rnd):
    """Deterministic 48-bit linear congruential generator, seeded with three 16-bit words."""

    _MULTIPLIER = 0x5DEECE66D
    _INCREMENT = 0xB
    _MASK48 = (1 << 48) - 1

    def __init__(self, state: Sequence[int]) -> None:
        words = list(state)
        if len(words) != 3:
            raise ValueError("jrand48 state must hold exactly three words")
        if any(not 0 <= word <= 0xFFFF for word in words):
            raise ValueError("jrand48 state words must be 16-bit unsigned values")
        low, middle, high = words
        self._state = low | (middle << 16) | (high << 32)

    def _raw_value(self) -> int:
        self._state = (self._state * self._MULTIPLIER + self._INCREMENT) & self._MASK48
        return (self._state >> 16) & UINT32_MAX

    def _next_in_range(self, inclusive_lower_bound: int, inclusive_upper_bound: int) -> int:
        span = _span(inclusive_lower_bound, inclusive_upper_bound)
        if span > UINT32_MAX:
            return inclusive_lower_bound + self._raw_value()
        largest_multiple = UINT32_MAX - (UINT32_MAX % span)
        value = self._raw_value()
        while value > largest_multiple:
            value = self._raw_value()
        return inclusive_lower_bound + value % span