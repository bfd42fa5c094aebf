from .basics import imax, imin, is_even, is_odd
from .divisors import gcd, lcm
from .modular import power_mod
from .primes import (
    classify,
    is_large_prime,
    is_prime,
    next_prime,
    next_prime_factor,
    passes_rabin_miller,
    prime_factors,
)
from .prng import Generator, default_generator, get32, random_range, reseed
from .results import Found, InvalidArgument, NotFound, NumericsError

__all__ = [
    "imax", "imin", "is_even", "is_odd",
    "gcd", "lcm",
    "power_mod",
    "classify", "is_large_prime", "is_prime", "next_prime", "next_prime_factor",
    "passes_rabin_miller", "prime_factors",
    "Generator", "default_generator", "get32", "random_range", "reseed",
    "Found", "InvalidArgument", "NotFound", "NumericsError",
]
