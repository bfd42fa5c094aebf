# numerics/divisors.py
# gcd / lcm by peeling prime factors off the smaller operand.

from __future__ import annotations
import math

from .basics import imax, imin
from .results import NumericsError


def gcd(n: int, m: int) -> int:
    """
    Split the smaller operand into primes and keep the ones the larger
    operand shares.

    Trial divisors only run up to 1 + isqrt(smaller): of all prime factors of
    a number at most one exceeds its square root, so whatever is left of the
    smaller operand after the loop is 1 or that single large prime, checked
    against the larger operand at the end.
    """
    if n == 0 or m == 0:
        raise NumericsError("gcd is only defined here for nonzero operands")
    n, m = abs(n), abs(m)

    sfactor = imin(n, m)
    ofactor = imax(n, m)
    max_divisor = 1 + math.isqrt(sfactor)

    result = 1
    divisor = 2
    while divisor <= max_divisor and sfactor > 1:
        if sfactor % divisor:
            divisor += 1
            continue
        sfactor //= divisor
        if ofactor % divisor == 0:
            result *= divisor
            ofactor //= divisor

    if sfactor > 1 and ofactor % sfactor == 0:
        result *= sfactor
    return result


def lcm(n: int, m: int) -> int:
    return abs(n * m) // gcd(n, m)
