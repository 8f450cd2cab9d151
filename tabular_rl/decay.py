"""Time-decaying scalar schedules.

Each schedule maps elapsed training time ``t`` (usually the episode index) to
a value. They are used to anneal the exploration rate, but nothing here is
specific to exploration.

Example:
    >>> eps = Exponential(rate=0.01, vi=1.0, vf=0.05)
    >>> eps.evaluate(0)
    1.0
"""

import math
from dataclasses import dataclass
from typing import Protocol


class Decay(Protocol):
    """A value that changes with elapsed time."""

    def evaluate(self, t: float) -> float:
        """Value at time ``t``."""
        ...


def _validate(rate: float, vi: float, vf: float) -> None:
    if not ((rate >= 0.0 and vi > vf) or (rate < 0.0 and vi < vf)):
        raise ValueError(
            f"`vi - vf` must have same sign as `rate`, got rate={rate}, vi={vi}, vf={vf}"
        )


@dataclass(frozen=True)
class Constant:
    """v(t) = value"""

    value: float

    def evaluate(self, t: float) -> float:
        return self.value


@dataclass(frozen=True)
class Exponential:
    """v(t) = vf + (vi - vf) * e^(-|rate| * t)

    A negative rate approaches ``vf`` from below.
    """

    rate: float
    vi: float
    vf: float

    def __post_init__(self):
        _validate(self.rate, self.vi, self.vf)

    def evaluate(self, t: float) -> float:
        return self.vf + (self.vi - self.vf) * math.exp(-abs(self.rate) * t)


@dataclass(frozen=True)
class InverseTime:
    """v(t) = vf + (vi - vf) / (1 + |rate| * t)

    A negative rate approaches ``vf`` from below.
    """

    rate: float
    vi: float
    vf: float

    def __post_init__(self):
        _validate(self.rate, self.vi, self.vf)

    def evaluate(self, t: float) -> float:
        return self.vf + (self.vi - self.vf) / (1.0 + abs(self.rate) * t)


@dataclass(frozen=True)
class Linear:
    """v(t) = max(vi - rate * t, vf)

    With a negative rate the value grows and is capped with ``min`` instead.
    """

    rate: float
    vi: float
    vf: float

    def __post_init__(self):
        _validate(self.rate, self.vi, self.vf)

    def evaluate(self, t: float) -> float:
        v = self.vi - self.rate * t
        if self.rate >= 0.0:
            return max(v, self.vf)
        return min(v, self.vf)


@dataclass(frozen=True)
class Step:
    """v(t) = max(vi * rate^floor(t / step), vf)

    Piecewise constant: the value only changes at multiples of ``step``.
    """

    rate: float
    vi: float
    vf: float
    step: float

    def __post_init__(self):
        _validate(self.rate, self.vi, self.vf)
        # rate is a multiplicative factor here
        if not 0.0 <= self.rate < 1.0:
            raise ValueError(f"Step decay needs 0 <= rate < 1, got {self.rate}")
        if self.step <= 0:
            raise ValueError(f"step must be positive, got {self.step}")

    def evaluate(self, t: float) -> float:
        return max(self.vi * self.rate ** math.floor(t / self.step), self.vf)
