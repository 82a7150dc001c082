# pylint: disable=missing-module-docstring
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import math
import random

from cryptography.hazmat.primitives.asymmetric import rsa
import pytest
import sympy

from rsamath import arith

TEXTBOOK_PHI = 3120
TEXTBOOK_E = 17
TEXTBOOK_D = 2753


def test_powmod_small_agrees_with_builtin():
    for base in range(0, 20):
        for exponent in range(0, 20):
            for modulus in range(1, 20):
                assert arith.powmod(base, exponent, modulus) == pow(base, exponent, modulus)


@pytest.mark.parametrize("base,exponent,modulus", [
    (2**200 + 3, 2**100 + 1, 2**127 - 1),
    (123456789, 987654321, 2**61 - 1),
    (3, 2**64, 2**128 + 51),
])
def test_powmod_large_no_overflow(base, exponent, modulus):
    assert arith.powmod(base, exponent, modulus) == pow(base, exponent, modulus)


@pytest.mark.parametrize("base", [0, 1, 2, 3233, 10**30])
@pytest.mark.parametrize("modulus", [2, 3, 3233])
def test_powmod_zero_exponent(base, modulus):
    assert arith.powmod(base, 0, modulus) == 1


def test_powmod_zero_exponent_unit_modulus():
    assert arith.powmod(5, 0, 1) == 0


@pytest.mark.parametrize("base,modulus", [(5, 3), (3, 5), (3233, 3233), (0, 7)])
def test_powmod_unit_exponent(base, modulus):
    assert arith.powmod(base, 1, modulus) == base % modulus


def test_powmod_textbook():
    assert arith.powmod(65, 17, 3233) == 2790
    assert arith.powmod(2790, 2753, 3233) == 65


@pytest.mark.parametrize("base,exponent,modulus", [(2, 3, 0), (2, 3, -7), (2, -1, 7)])
def test_powmod_preconditions(base, exponent, modulus):
    with pytest.raises(ValueError):
        arith.powmod(base, exponent, modulus)


def test_gcd_agrees_with_math():
    for a in range(1, 80):
        for b in range(1, 80):
            g = arith.gcd(a, b)
            assert g == math.gcd(a, b)
            assert a % g == 0 and b % g == 0


@pytest.mark.parametrize("a,b,expected", [(0, 7, 7), (7, 0, 7), (3120, 17, 1), (17, 3120, 1), (2**64, 2**32 * 3, 2**32)])
def test_gcd_concrete(a, b, expected):
    assert arith.gcd(a, b) == expected


@pytest.mark.parametrize("a,b", [(0, 0), (-1, 5), (5, -1)])
def test_gcd_preconditions(a, b):
    with pytest.raises(ValueError):
        arith.gcd(a, b)


def test_eea_mod_textbook():
    res = arith.eea_mod(TEXTBOOK_PHI, TEXTBOOK_E, TEXTBOOK_PHI)
    assert res.gcd == 1
    assert res.d == TEXTBOOK_D
    assert TEXTBOOK_E * res.d % TEXTBOOK_PHI == 1


def test_eea_mod_argument_order():
    forward = arith.eea_mod(TEXTBOOK_PHI, TEXTBOOK_E, TEXTBOOK_PHI)
    backward = arith.eea_mod(TEXTBOOK_E, TEXTBOOK_PHI, TEXTBOOK_PHI)
    assert backward == (forward.gcd, forward.d, forward.c)


def test_eea_mod_bezout_identity():
    gen = random.Random(42)
    for _ in range(200):
        a = gen.randrange(1, 10**6)
        b = gen.randrange(1, 10**6)
        n = gen.randrange(2, 10**6)
        res = arith.eea_mod(a, b, n)
        assert res.gcd == math.gcd(a, b)
        assert 0 <= res.c < n and 0 <= res.d < n
        assert (a * res.c + b * res.d) % n == res.gcd % n


def test_eea_mod_exact_division():
    assert arith.eea_mod(12, 4, 12) == (4, 0, 1)
    assert arith.eea_mod(9, 9, 9) == (9, 0, 1)


def test_eea_mod_inverse_against_sympy():
    gen = random.Random(7)
    checked = 0
    while checked < 200:
        phi = gen.randrange(3, 10**9)
        e = gen.randrange(2, phi)
        if math.gcd(phi, e) != 1:
            continue
        assert arith.eea_mod(phi, e, phi).d == sympy.mod_inverse(e, phi)
        checked += 1


@pytest.mark.parametrize("a,b,n", [(5, 0, 7), (0, 5, 7), (5, 3, 0), (-5, 3, 7)])
def test_eea_mod_preconditions(a, b, n):
    with pytest.raises(ValueError):
        arith.eea_mod(a, b, n)


def test_mod_inverse_against_crt_coefficient():
    primes = list(sympy.primerange(1000, 1400))
    for p, q in zip(primes, primes[1:]):
        assert arith.mod_inverse(q, p) == rsa.rsa_crt_iqmp(p, q)


def test_mod_inverse_reduces_value():
    assert arith.mod_inverse(TEXTBOOK_E + TEXTBOOK_PHI, TEXTBOOK_PHI) == TEXTBOOK_D
    assert arith.mod_inverse(1, 2) == 1


@pytest.mark.parametrize("value,modulus", [(6, 3120), (0, 7), (3120, 3120), (3, 1), (3, 0)])
def test_mod_inverse_not_invertible(value, modulus):
    with pytest.raises(ValueError):
        arith.mod_inverse(value, modulus)
