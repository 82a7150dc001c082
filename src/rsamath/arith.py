"""Integer arithmetic underpinning the RSA primitives: modular exponentiation, GCD and modular inversion.

Everything here works on plain non-negative Python integers. Since those are arbitrary precision, intermediate
squarings never overflow, the word-width bound on key sizes is instead enforced at key generation time.

Typical usage example:

    powmod(65, 17, 3233)
    gcd(3120, 17)
    eea_mod(3120, 17, 3120).d
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import typing


class EEAResult(typing.NamedTuple):
    """Outcome of the modular Extended Euclidean Algorithm.

    Attributes:
        gcd: Greatest common divisor of the two inputs.
        c: Bezout coefficient of the first input, reduced modulo `n`.
        d: Bezout coefficient of the second input, reduced modulo `n`.
    """
    gcd: int
    c: int
    d: int


def powmod(base: int, exponent: int, modulus: int) -> int:
    """Computes `base**exponent mod modulus` by repeated squaring.

    The exponent is consumed bit by bit, halving it each step and folding the odd remainder into the accumulator,
    which yields the same result as the recursive `half * half * rest` formulation without recursion depth.

    Args:
        base: The base. Reduced modulo `modulus` before use.
        exponent: The exponent. Must be >= 0.
        modulus: The modulus. Must be > 0.

    Returns:
        The residue of `base**exponent` modulo `modulus`. An exponent of 0 yields 1, even for a base of 0.

    Raises:
        ValueError: If `modulus` is not positive or `exponent` is negative.
    """
    if modulus <= 0:
        raise ValueError("Modulus must be > 0.")
    if exponent < 0:
        raise ValueError("Exponent must be >= 0.")
    result = 1 % modulus
    base %= modulus
    while exponent > 0:
        if exponent % 2:
            result = result * base % modulus
        base = base * base % modulus
        exponent //= 2
    return result


def gcd(a: int, b: int) -> int:
    """Greatest common divisor by the textbook Euclidean algorithm.

    Args:
        a: First non-negative integer.
        b: Second non-negative integer.

    Returns:
        The last non-zero remainder, i.e. gcd(a, b).

    Raises:
        ValueError: If either argument is negative or both are 0.
    """
    if a < 0 or b < 0:
        raise ValueError("Arguments must be >= 0.")
    if a == 0 and b == 0:
        raise ValueError("gcd(0, 0) is undefined.")
    big, small = (a, b) if a > b else (b, a)
    while small:
        big, small = small, big % small
    return big


def eea_mod(a: int, b: int, n: int) -> EEAResult:
    """Implements the Extended Euclidean Algorithm with coefficients kept in Z_n.

    Runs the division chain on the larger/smaller ordering of `a` and `b`. The Bezout coefficients are updated as
    `(prev + n - (cur * quotient) % n) % n` so no intermediate ever goes negative. With `n` set to the larger input
    and a gcd of 1, the coefficient of the smaller input is its inverse modulo `n`.

    Args:
        a: First non-negative integer.
        b: Second non-negative integer.
        n: Modulus for the coefficients. Must be >= 1.

    Returns:
        EEAResult with the gcd and the coefficients of `a` and `b` (in that order), such that
        `a*c + b*d = gcd (mod n)`.

    Raises:
        ValueError: On negative input, `n < 1` or if the smaller of `a`, `b` is 0.
    """
    if n < 1:
        raise ValueError("Coefficient modulus must be >= 1.")
    if a < 0 or b < 0:
        raise ValueError("Arguments must be >= 0.")
    swapped = a < b
    big, small = (b, a) if swapped else (a, b)
    if small == 0:
        raise ValueError("The smaller argument must be non-zero.")
    c0, c1 = 1, 0  # coefficients of the larger input
    d0, d1 = 0, 1  # coefficients of the smaller input
    while True:
        quotient, remainder = divmod(big, small)
        if remainder == 0:
            break
        c0, c1 = c1, (c0 + n - (c1 * quotient) % n) % n
        d0, d1 = d1, (d0 + n - (d1 * quotient) % n) % n
        big, small = small, remainder
    c1, d1 = c1 % n, d1 % n
    if swapped:
        return EEAResult(small, d1, c1)
    return EEAResult(small, c1, d1)


def mod_inverse(value: int, modulus: int) -> int:
    """Modular multiplicative inverse via `eea_mod`.

    Args:
        value: The value to invert. Reduced modulo `modulus` first.
        modulus: The modulus. Must be >= 2.

    Returns:
        The unique `x` in `[0, modulus)` with `value * x = 1 (mod modulus)`.

    Raises:
        ValueError: If `modulus < 2` or `value` shares a factor with `modulus`.
    """
    if modulus < 2:
        raise ValueError("Modulus must be >= 2.")
    value %= modulus
    if value == 0:
        raise ValueError(f"0 is not invertible modulo {modulus}.")
    res = eea_mod(modulus, value, modulus)
    if res.gcd != 1:
        raise ValueError(f"{value} is not invertible modulo {modulus}.")
    return res.d
