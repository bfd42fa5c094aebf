# numerics/basics.py
# ---------- Very basics ----------

UINT32_MAX = 0xFFFFFFFF
UINT64_MAX = 0xFFFFFFFFFFFFFFFF
INT32_MAX = 0x7FFFFFFF


def is_even(n: int) -> bool:
    return n & 1 == 0


def is_odd(n: int) -> bool:
    return not is_even(n)


def imax(n: int, m: int) -> int:
    if n > m:
        return n
    return m


def imin(n: int, m: int) -> int:
    if n < m:
        return n
    return m


def fits_u64(n: int) -> bool:
    return 0 <= n <= UINT64_MAX


def fits_u32(n: int) -> bool:
    return 0 <= n <= UINT32_MAX
