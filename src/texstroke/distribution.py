"""
distribution.py
---------------

Spread of dots across the width of a textured stroke.

Each distribution samples a value inside a half-open range [lo, hi) that is
symmetric about its midpoint:

  - uniform:             even spread across the range
  - normal:              mean at the midpoint, sigma = half-width / 3
  - exponential:         folded exponential, dense at the midpoint
  - reverse-exponential: exponential anchored at either edge, dense at the edges

Open-ended draws that land outside the range are replaced by a single uniform
draw over the same range, so every returned sample is inside [lo, hi).
"""

from __future__ import annotations

__all__ = ["DotsDistribution",]

from enum import Enum
from typing import Callable, Dict

import numpy as np

from .rng import RNG


def _sample_uniform(rng: RNG, lo: float, hi: float) -> float:
    # lo + (hi - lo) * u can round up to hi; keep the range half-open.
    return min(rng.uniform(lo, hi), float(np.nextafter(hi, lo)))


def _sample_normal(rng: RNG, lo: float, hi: float) -> float:
    mean = (hi + lo) / 2.0
    std_dev = ((hi - lo) / 2.0) / 3.0
    return rng.normal(mean, std_dev)


def _sample_exponential(rng: RNG, lo: float, hi: float) -> float:
    mid = (hi + lo) / 2.0
    width = (hi - lo) / 4.0
    sign = 1.0 if rng.coin() else -1.0
    return mid + sign * width * rng.exponential(1.0)


def _sample_reverse_exponential(rng: RNG, lo: float, hi: float) -> float:
    width = (hi - lo) / 4.0
    # Heads: grow inward from the lower edge; tails: from the upper edge.
    positive = rng.coin()
    sign = 1.0 if positive else -1.0
    offset = lo if positive else hi
    return offset + sign * width * rng.exponential(1.0)


class DotsDistribution(Enum):
    """The distribution for the spread of dots across the width of a stroke."""
    UNIFORM = "uniform"
    NORMAL = "normal"
    EXPONENTIAL = "exponential"
    REVERSE_EXPONENTIAL = "reverse-exponential"

    @classmethod
    def default(cls) -> DotsDistribution:
        return cls.NORMAL

    @classmethod
    def parse(cls, value: object) -> DotsDistribution:
        """Accept a member, its nick, its name or its display name (any case).

        Raises:
            ValueError: unknown distribution.
        """
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            raise TypeError(f"Unsupported distribution type: {type(value).__name__}")
        key = value.strip().lower().replace("_", "-").replace(" ", "-")
        if key == "reverseexponential":
            key = "reverse-exponential"
        for member in cls:
            if member.value == key:
                return member
        raise ValueError(f"Invalid distribution: {value!r}")

    @property
    def display_name(self) -> str:
        return self.value.replace("-", " ").title()

    def sample_unclipped(self, rng: RNG, lo: float, hi: float) -> float:
        """Raw draw for [lo, hi) without the out-of-range fallback."""
        return _SAMPLERS[self](rng, lo, hi)

    def sample(self, rng: RNG, lo: float, hi: float) -> float:
        """Draw a value in [lo, hi), symmetric to the middle of the range.

        Requires lo < hi. Samples of open-ended distributions that fall out of
        range are redrawn once from the uniform distribution.
        """
        sample = self.sample_unclipped(rng, lo, hi)
        if not lo <= sample < hi:
            sample = _sample_uniform(rng, lo, hi)
        return sample


_SAMPLERS: Dict[DotsDistribution, Callable[[RNG, float, float], float]] = {
    DotsDistribution.UNIFORM: _sample_uniform,
    DotsDistribution.NORMAL: _sample_normal,
    DotsDistribution.EXPONENTIAL: _sample_exponential,
    DotsDistribution.REVERSE_EXPONENTIAL: _sample_reverse_exponential,
}
