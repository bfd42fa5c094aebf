# numerics/modular.py
# a^d mod n without division: residues are reduced by subtraction only.
#
# The running product residue * base must fit an unsigned 64-bit word, which
# holds as long as n <= 2^32. Larger moduli are rejected instead of silently
# overflowing. The exponent is walked one step at a time (no square-and-
# multiply), so the cost is linear in d.

from __future__ import annotations

from .basics import fits_u64
from .results import Found, InvalidArgument, Result

MAX_MODULUS = 1 << 32


def reduce_mod(m: int, n: int) -> int:
    """m mod n (m >= 0, n > 0) by subtracting shifted copies of n."""
    if m < n:
        return m
    shift = m.bit_length() - n.bit_length()
    while shift >= 0:
        chunk = n << shift
        if chunk <= m:
            m -= chunk
        shift -= 1
    return m


def _power_mod(a: int, d: int, n: int) -> int:
    if d == 0:
        return reduce_mod(1, n)
    base = reduce_mod(a, n)
    m = base
    for _ in range(1, d):
        assert m < n
        m = reduce_mod(m * base, n)
        assert m < n
    return m


def power_mod(a: int, d: int, n: int) -> Result:
    """Found(a^d mod n), or InvalidArgument when the operands break the 64-bit contract."""
    if n == 0:
        return InvalidArgument("modulus must be nonzero")
    if not (fits_u64(a) and fits_u64(d) and fits_u64(n)):
        return InvalidArgument("operands must be 64-bit unsigned integers")
    if n > MAX_MODULUS:
        return InvalidArgument(f"modulus {n} exceeds 2^32; residue products would overflow 64 bits")
    return Found(_power_mod(a, d, n))
