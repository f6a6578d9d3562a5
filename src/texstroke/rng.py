"""
rng.py
------

Thread-safe seedable random generator used by the stroke compositor.

- Supports both `numpy.random.Generator` (PCG64) and `random.Random` backends.
- Identical scalar API across backends.
- Thread-safe lock for concurrent access to one instance.
- Reproducible streams: the same seed and the same call sequence always yield
  the same values on the same backend.
"""

from __future__ import annotations

__all__ = ["RNGBackend", "RNG", "entropy_seed",]

import os
import time
import random
import threading
from numbers import Real
from typing import Any, Optional, TypeAlias, Union

import numpy as np

# ---------------------------------------------------------------------
# Type alias
# ---------------------------------------------------------------------
RNGBackend: TypeAlias = Union[random.Random, np.random.Generator]


def entropy_seed() -> int:
    """Return a non-reproducible seed mixed from PID, clock and OS entropy."""
    return os.getpid() ^ (time.time_ns() & 0xFFFFFFFF) ^ random.SystemRandom().getrandbits(64)


# ---------------------------------------------------------------------
# RNG class
# ---------------------------------------------------------------------
class RNG:
    """Encapsulated, thread-safe hybrid random generator.

    Attributes:
        _rng:  Backend RNG (numpy.random.Generator or random.Random).
        _lock: threading.Lock for safe concurrent access.

    Notes:
        - The NumPy backend is `np.random.default_rng`, i.e. PCG64. This is the
          pinned algorithm for reproducible strokes.
        - `seed=None` self-seeds from an entropy source; `seed=0` is a valid,
          reproducible seed.
    """

    def __init__(self, seed: Optional[int] = None, use_numpy: bool = True):
        self._lock = threading.Lock()
        self._use_numpy = use_numpy
        self._seed = seed if seed is not None else entropy_seed()

        if use_numpy:
            self._rng: RNGBackend = np.random.default_rng(self._seed)
        else:
            self._rng: RNGBackend = random.Random(self._seed)

    # -----------------------------------------------------------------
    # Core seeding
    # -----------------------------------------------------------------
    def seed(self, seed: Optional[int] = None) -> None:
        """Reinitialize the RNG in place (preserves object identity)."""
        with self._lock:
            self._seed = seed if seed is not None else entropy_seed()
            if self._use_numpy:
                self._rng = np.random.default_rng(self._seed)
            else:
                self._rng.seed(self._seed)

    @property
    def seed_value(self) -> int:
        """Seed the current stream was started from."""
        return self._seed

    @property
    def backend(self) -> str:
        return "numpy" if self._use_numpy else "stdlib"

    # -----------------------------------------------------------------
    # Scalar random methods
    # -----------------------------------------------------------------
    """
    - NumPy backend: scalar results are converted to Python float, array
      results (when `size` is passed) are returned as is.
    - Stdlib backend: always Python float.
    """

    def random(self, *a, **kw) -> float:
        """Uniform draw in [0, 1)."""
        with self._lock:
            out = self._rng.random(*a, **kw)
            if self._use_numpy and isinstance(out, Real):
                return float(out)
            return out

    def uniform(self, low: float = 0.0, high: float = 1.0, **kw) -> Union[float, np.ndarray]:
        """Uniform draw in [low, high)."""
        with self._lock:
            out = self._rng.uniform(low, high, **kw)
            if self._use_numpy and isinstance(out, Real):
                return float(out)
            return out

    def normal(self, mu: float = 0.0, sigma: float = 1.0, **kw) -> Union[float, np.ndarray]:
        with self._lock:
            if self._use_numpy:
                out = self._rng.normal(mu, sigma, **kw)
                if isinstance(out, Real):
                    return float(out)
                return out
            return self._rng.normalvariate(mu, sigma)

    def exponential(self, scale: float = 1.0, **kw) -> Union[float, np.ndarray]:
        """Exponential draw with mean `scale` (rate 1/scale)."""
        with self._lock:
            if self._use_numpy:
                out = self._rng.exponential(scale, **kw)
                if isinstance(out, Real):
                    return float(out)
                return out
            return self._rng.expovariate(1.0 / scale)

    def coin(self) -> bool:
        """Fair coin flip."""
        with self._lock:
            return bool(self._rng.random() < 0.5)

    # -----------------------------------------------------------------
    # Utility & Introspection
    # -----------------------------------------------------------------
    def getstate(self) -> Any:
        with self._lock:
            if self._use_numpy:
                return self._rng.bit_generator.state
            return self._rng.getstate()

    def setstate(self, state: Any) -> None:
        with self._lock:
            if self._use_numpy:
                self._rng.bit_generator.state = state
            else:
                self._rng.setstate(state)

    def as_numpy(self) -> np.random.Generator:
        """Return the NumPy Generator instance (NumPy backend only)."""
        if not self._use_numpy:
            raise RuntimeError("RNG was created with the stdlib backend.")
        return self._rng

    def __repr__(self) -> str:
        return f"<RNG backend={self.backend} seed={self._seed} id={id(self)}>"
