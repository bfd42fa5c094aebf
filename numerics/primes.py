# numerics/primes.py
# Prime tests and searches
# - trial division (reliable, slow)
# - single-witness Rabin-Miller filter on top of the subtraction-only power_mod
# - next prime / next prime factor by linear search

from __future__ import annotations
import math
from typing import List, Optional, Tuple

from . import config
from .basics import UINT64_MAX, fits_u32, fits_u64, imax, is_even
from .modular import MAX_MODULUS, _power_mod
from .prng import Generator, default_generator
from .results import Found, InvalidArgument, NotFound, NumericsError, Result

# ---------- Deterministic ----------

def is_prime(p: int) -> bool:
    """Trial division by every integer in [2, isqrt(p)]."""
    if p == 2:
        return True
    if p < 2 or is_even(p):
        return False
    for factor in range(2, math.isqrt(p) + 1):
        if p % factor == 0:
            return False
    return True

# ---------- Rabin-Miller ----------

def decompose(n_minus_1: int) -> Tuple[int, int]:
    """Write n-1 as d * 2^s with d odd; returns (d, s)."""
    if n_minus_1 <= 0:
        raise NumericsError("n - 1 must be positive")
    d, s = n_minus_1, 0
    while is_even(d):
        d //= 2
        s += 1
    return d, s


def _witness_round(n: int, d: int, s: int, gen: Generator) -> bool:
    a = gen.range(2, n - 1).unwrap()
    assert 2 <= a <= n - 1

    m = _power_mod(a, d, n)
    if m == 1:
        return True

    last_m = m
    for _ in range(s):
        last_m = m
        m = _power_mod(m, 2, n)
        if m == 1:
            break

    return m == 1 and last_m == n - 1


def passes_rabin_miller(n: int, rounds: int = 1, generator: Optional[Generator] = None) -> bool:
    """
    Every prime passes; most composites do not. Each round draws one random
    witness from [2, n-1]. A fast pre-filter, not a standalone proof.
    """
    if n == 2:
        return True
    if n < 2 or is_even(n):
        return False
    if n > MAX_MODULUS:
        raise NumericsError(f"Rabin-Miller is limited to n <= 2^32, got {n}")
    if rounds < 1:
        raise NumericsError("rounds must be >= 1")

    gen = default_generator() if generator is None else generator
    d, s = decompose(n - 1)
    for _ in range(rounds):
        if not _witness_round(n, d, s, gen):
            return False
    return True


def is_large_prime(p: int, rounds: Optional[int] = None,
                   generator: Optional[Generator] = None) -> bool:
    """Rabin-Miller rejection first, trial division confirms."""
    if rounds is None:
        rounds = config.WITNESS_ROUNDS
    if not passes_rabin_miller(p, rounds, generator):
        return False
    return is_prime(p)

# ---------- Searches ----------

def next_prime(n: int) -> int:
    """Smallest prime strictly greater than n."""
    candidate = imax(n + 1, 2)
    while candidate <= UINT64_MAX:
        if is_prime(candidate):
            return candidate
        candidate += 1
    raise NumericsError(f"no prime above {n} in the 64-bit range")


def _strip_below(n: int, bound: int) -> int:
    """Divide every prime factor < bound out of n."""
    rest = n
    f = 2
    while f < bound and f * f <= rest:
        while rest % f == 0:
            rest //= f
        f += 1
    # rest is 1, a prime, or has only factors >= bound
    return rest if rest >= bound else 1


def next_prime_factor(n: int, min_factor: int) -> Result:
    """
    Smallest prime factor of n that is >= min_factor.

    Candidates run over the primes in [min_factor, isqrt(n)]. If none
    divides, at most one prime factor >= min_factor is left and it is larger
    than isqrt(n); it is what remains of n once the factors below min_factor
    are removed.
    """
    if n == 0 or not fits_u64(n):
        return InvalidArgument("n must be a nonzero 64-bit unsigned integer")
    if not fits_u32(min_factor):
        return InvalidArgument("min_factor must be a 32-bit unsigned integer")

    last_factor_to_check = math.isqrt(n)
    factor = min_factor if is_prime(min_factor) else next_prime(min_factor)
    while factor <= last_factor_to_check:
        if n % factor == 0:
            return Found(factor)
        factor = next_prime(factor)

    rest = _strip_below(n, min_factor)
    if rest > 1 and rest >= min_factor:
        return Found(rest)
    return NotFound(f"no prime factor of {n} at or above {min_factor}")


def prime_factors(n: int) -> List[int]:
    """Prime factors of n with multiplicity, ascending."""
    if n < 1 or not fits_u64(n):
        raise NumericsError("n must be a positive 64-bit unsigned integer")
    factors: List[int] = []
    rest, factor = n, 2
    while rest > 1:
        factor = next_prime_factor(rest, factor).unwrap()
        while rest % factor == 0:
            factors.append(factor)
            rest //= factor
    return factors

# ---------- Summary ----------

def classify(n: int, generator: Optional[Generator] = None) -> dict:
    if not fits_u64(n):
        raise NumericsError("n must be a 64-bit unsigned integer")
    info = {
        "n": n,
        "bits": n.bit_length(),
        "is_prime": False,
        "is_even": is_even(n),
        "status": "unit",
        "factor": None,
        "method": None,
        "steps": [],
    }
    steps: List[str] = info["steps"]
    if n < 2:
        steps.append("n < 2 is neither prime nor composite")
        return info

    method = "trial"
    if n <= config.RM_MAX:
        if passes_rabin_miller(n, config.WITNESS_ROUNDS, generator):
            steps.append("passed Rabin-Miller")
        else:
            steps.append("rejected by Rabin-Miller")
            method = "rabin-miller"
    else:
        steps.append(f"Rabin-Miller skipped above {config.RM_MAX}")

    if method == "trial":
        if is_prime(n):
            steps.append("trial division: prime")
            info.update(is_prime=True, status="prime", method=method)
            return info
        steps.append("trial division: composite")

    factor = next_prime_factor(n, 2).unwrap()
    steps.append(f"smallest prime factor {factor}")
    info.update(status="composite", factor=factor, method=method)
    return info
