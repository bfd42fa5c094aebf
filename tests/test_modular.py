"""Subtraction-only modular exponentiation."""

import pytest

from numerics import Found, InvalidArgument, power_mod
from numerics.modular import MAX_MODULUS, reduce_mod


def test_matches_builtin_pow_on_small_operands():
    for n in (1, 2, 3, 7, 97, 1000, 7919):
        for a in (0, 1, 2, 5, 96, 1234, 99999):
            for d in range(0, 25):
                assert power_mod(a, d, n) == Found(pow(a, d, n)), (a, d, n)


def test_reduce_mod_handles_wide_values():
    for m in (0, 96, 97, 98, 2**32 + 5, 2**64 - 1, 3**50):
        assert reduce_mod(m, 97) == m % 97
    assert reduce_mod(2**64 - 1, 2**32) == (2**64 - 1) % 2**32


def test_zero_exponent_is_one():
    assert power_mod(12345, 0, 7) == Found(1)
    assert power_mod(0, 0, 1) == Found(0)


def test_modulus_at_the_bound_is_accepted():
    assert power_mod(3, 5, MAX_MODULUS) == Found(243)
    assert power_mod(MAX_MODULUS - 1, 3, MAX_MODULUS) == Found(pow(MAX_MODULUS - 1, 3, MAX_MODULUS))


@pytest.mark.parametrize(
    "a, d, n",
    [
        (2, 10, 0),
        (-2, 10, 7),
        (2, -1, 7),
        (2, 3, MAX_MODULUS + 1),
        (2**64, 3, 7),
    ],
)
def test_bad_operands_are_invalid(a, d, n):
    res = power_mod(a, d, n)
    assert isinstance(res, InvalidArgument)
    assert not res.ok
    assert res.reason
