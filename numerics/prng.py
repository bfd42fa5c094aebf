# numerics/prng.py
# Minimal LCG-style PRNG (32-bit output) plus an inclusive range sampler.
# Not cryptographically safe; it only picks Rabin-Miller witnesses and the like.

from __future__ import annotations
import threading
import time
from typing import Optional

from . import config
from .basics import INT32_MAX, UINT32_MAX, fits_u32, imin
from .results import Found, InvalidArgument, NumericsError, Result

# m = 2^32; a - 1 is a multiple of 4 (Knuth, TAOCP Vol. 2, 3.2.1.2, Theorem A)
MULTIPLIER = 0xEA5F3F01
_MASK64 = (1 << 64) - 1
_DEFAULT_STATE = 144312


def _step(r: int) -> int:
    """One generator step from a 32-bit value to the next 32-bit value."""
    r = (r * MULTIPLIER) & _MASK64
    r1 = r & UINT32_MAX
    # low-order bits barely move, fold the upper half back in
    return (r1 + (r1 >> 16)) & UINT32_MAX


def _clock_seed() -> int:
    return (int(time.time()) & UINT32_MAX) or _DEFAULT_STATE


class Generator:
    """
    Owns one 32-bit PRNG state.

    Stateful draws (get32() / get32(0)) are serialized with a lock, so each
    call sees a distinct successor even under threads; a single-threaded
    owner gets a reproducible sequence. get32(state) with a nonzero state is
    pure: store the returned value and pass it back as the next state.
    """

    def __init__(self, seed: Optional[int] = None):
        self._lock = threading.Lock()
        self._state = _DEFAULT_STATE
        self._seeded = False
        if seed is not None:
            self.seed(seed)

    @property
    def seeded(self) -> bool:
        return self._seeded

    @property
    def state(self) -> int:
        return self._state

    def seed(self, value: int) -> None:
        if not fits_u32(value) or value == 0:
            raise NumericsError("seed must be a nonzero 32-bit unsigned integer")
        with self._lock:
            self._state = value
            self._seeded = True

    def reseed(self) -> None:
        """Seed from the clock; only the first call after reset() has an effect."""
        with self._lock:
            self._reseed_locked()

    def reset(self) -> None:
        with self._lock:
            self._seeded = False

    def _reseed_locked(self) -> None:
        if self._seeded:
            return
        self._state = _clock_seed()
        self._seeded = True

    def get32(self, state: int = 0) -> int:
        if state:
            if not fits_u32(state):
                raise NumericsError("state must be a 32-bit unsigned integer")
            return _step(state)
        with self._lock:
            if not self._seeded:
                self._reseed_locked()
            self._state = _step(self._state)
            return self._state

    def range(self, min_value: int, max_value: int) -> Result:
        """Draw from [min_value, max_value]; max_value == 0 means 'up to INT32_MAX'."""
        if max_value == 0:
            max_value = INT32_MAX
        if min_value > max_value:
            return InvalidArgument(f"empty range: min {min_value} > max {max_value}")
        if not (fits_u32(min_value) and fits_u32(max_value)):
            return InvalidArgument("range bounds must be 32-bit unsigned integers")

        r = float(self.get32(0))
        r *= max_value - min_value + 1
        r /= UINT32_MAX + 1
        return Found(imin(min_value + int(r), max_value))


# ---------- process default ----------

_default = Generator(seed=config.SEED)


def default_generator() -> Generator:
    return _default


def reseed() -> None:
    _default.reseed()


def get32(state: int = 0) -> int:
    return _default.get32(state)


def random_range(min_value: int, max_value: int) -> Result:
    return _default.range(min_value, max_value)
