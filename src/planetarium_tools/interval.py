"""Closed and right-open real intervals, with the argument checks built on them."""

from __future__ import annotations

import math
from dataclasses import dataclass


def check_argument(condition: bool, message: str = 'invalid argument') -> None:
    """Raise ValueError unless condition holds.

    Parameters:
        condition: Value that must be true for the call to proceed.
        message: Error message used when it is not.

    Raises:
        ValueError: If condition is false.
    """
    if not condition:
        raise ValueError(message)


def check_in_interval(interval: _Interval, value: float) -> float:
    """Return value unchanged if it belongs to interval.

    Parameters:
        interval: Interval the value must belong to.
        value: Value to check.

    Returns:
        The value itself.

    Raises:
        ValueError: If value is outside interval.
    """
    if not interval.contains(value):
        raise ValueError(f'{value!r} is not in {interval}')
    return value


@dataclass(frozen=True)
class _Interval:
    """Pair of bounds with low < high; subclasses decide whether high is included."""

    low: float
    high: float

    def __post_init__(self) -> None:
        if not self.low < self.high:
            raise ValueError(f'interval bounds must satisfy low < high, got [{self.low!r}, {self.high!r}]')

    @property
    def size(self) -> float:
        """Length of the interval (high - low)."""
        return self.high - self.low

    @property
    def center(self) -> float:
        """Midpoint of the interval."""
        return (self.low + self.high) / 2.0

    def contains(self, value: float) -> bool:
        raise NotImplementedError

    def _wrap(self, value: float) -> float:
        """True floor modulo of value into [low, high)."""
        if self.low <= value < self.high:
            return value
        wrapped = self.low + math.fmod(value - self.low, self.size)
        if wrapped < self.low:
            wrapped += self.size
        # Rounding can land exactly on the excluded bound.
        if wrapped >= self.high:
            wrapped = self.low
        return wrapped


@dataclass(frozen=True)
class ClosedInterval(_Interval):
    """Closed interval [low, high]."""

    @classmethod
    def of(cls, low: float, high: float) -> ClosedInterval:
        return cls(low, high)

    @classmethod
    def symmetric(cls, size: float) -> ClosedInterval:
        """Interval [-size/2, size/2]; size must be positive."""
        check_argument(size > 0, f'interval size must be positive, got {size!r}')
        return cls(-size / 2.0, size / 2.0)

    def contains(self, value: float) -> bool:
        return self.low <= value <= self.high

    def clip(self, value: float) -> float:
        """Clamp value to the nearest point of the interval."""
        if value < self.low:
            return self.low
        if value > self.high:
            return self.high
        return value

    def reduce(self, value: float) -> float:
        """Wrap value modulo the interval size.

        Values already inside (including high itself) are returned unchanged;
        anything else lands in [low, high).
        """
        if self.contains(value):
            return value
        return self._wrap(value)

    def __str__(self) -> str:
        return f'[{self.low},{self.high}]'


@dataclass(frozen=True)
class RightOpenInterval(_Interval):
    """Right-open interval [low, high[, the natural domain of longitudes."""

    @classmethod
    def of(cls, low: float, high: float) -> RightOpenInterval:
        return cls(low, high)

    @classmethod
    def symmetric(cls, size: float) -> RightOpenInterval:
        """Interval [-size/2, size/2[; size must be positive."""
        check_argument(size > 0, f'interval size must be positive, got {size!r}')
        return cls(-size / 2.0, size / 2.0)

    def contains(self, value: float) -> bool:
        return self.low <= value < self.high

    def reduce(self, value: float) -> float:
        """Map value into [low, high[ by floor modulo (negative values included).

        Parameters:
            value: Any finite real.

        Returns:
            low + ((value - low) mod size); value itself if already inside.
        """
        return self._wrap(value)

    def __str__(self) -> str:
        return f'[{self.low},{self.high}['
