"""Core Key Generation Utility, covering primality testing, random prime generation and textbook RSA key pairs.

Primality is decided by a trial division against the first hundred primes, followed by a Miller-Rabin test with
randomly drawn witnesses. Every sampling loop is bounded by a retry budget and gives up with
`RetryBudgetExceededError` instead of spinning forever.

Typical usage example:

    is_prime(3571)
    p = gen_prime()
    (e, n), (d, _) = generate_key_pair()
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import typing

from rsamath import arith
from rsamath import randomness

MILLER_RABIN_ROUNDS: int = 16
PRIME_LOW: int = 2**10
PRIME_HIGH: int = 2**20
EXP_LOW: int = 2**5
EXP_HIGH: int = 2**10
MAX_ATTEMPTS: int = 10000
WORD_WIDTH: int = 128


class RetryBudgetExceededError(RuntimeError):
    """A sample-until-success loop ran out of attempts."""


class KeyGenConfig(typing.NamedTuple):
    """Tunable parameters of key generation.

    Attributes:
        prime_low: Inclusive lower bound for prime candidates.
        prime_high: Exclusive upper bound for prime candidates.
        exp_low: Inclusive lower bound for public exponent candidates.
        exp_high: Exclusive upper bound for public exponent candidates.
        rounds: Miller-Rabin rounds per candidate.
        max_attempts: Retry budget of every sampling loop.
        width: Word width in bits the modulus has to fit into.
    """
    prime_low: int = PRIME_LOW
    prime_high: int = PRIME_HIGH
    exp_low: int = EXP_LOW
    exp_high: int = EXP_HIGH
    rounds: int = MILLER_RABIN_ROUNDS
    max_attempts: int = MAX_ATTEMPTS
    width: int = WORD_WIDTH

    def validate(self) -> None:
        """Checks the parameters for consistency.

        Raises:
            ValueError: If a range is empty or out of bounds, a count is not positive or the largest possible
                modulus does not fit into `width` bits.
        """
        if self.prime_low < 2 or self.prime_high <= self.prime_low:
            raise ValueError("Prime range must satisfy 2 <= prime_low < prime_high.")
        if self.exp_low < 2 or self.exp_high <= self.exp_low:
            raise ValueError("Exponent range must satisfy 2 <= exp_low < exp_high.")
        if self.rounds < 1:
            raise ValueError("rounds must be >= 1")
        if self.max_attempts < 1:
            raise ValueError("max_attempts must be >= 1")
        if (self.prime_high - 1)**2 >= 1 << self.width:
            raise ValueError(f"Moduli from primes below {self.prime_high} do not fit into {self.width} bits.")


DEFAULT_CONFIG = KeyGenConfig()


def _sieve(n: int) -> list[int]:
    """Implements the Sieve of Eratosthenes.

    Args:
        n: The number up to which to generate primes.

    Returns:
        A list of primes up to `n`.
    """
    if n < 2:
        return []
    i_size = (n - 1) // 2
    candidate: list[bool] = [True] * i_size
    for i in range(int(n**0.5) // 2):
        if candidate[i]:
            r = 2 * i + 3
            for j in range((r * r - 3) // 2, i_size, r):
                candidate[j] = False
    return [2] + [(no * 2 + 3) for no, ele in enumerate(candidate) if ele]


# The first 100 primes, 2 through 541.
SMALL_PRIMES: tuple[int, ...] = tuple(_sieve(541))
_SMALL_PRIME_SET = frozenset(SMALL_PRIMES)


def _trial_division(no: int) -> bool:
    """Check the provided `no` against the small primes.

    Runs a fast pre-check before Miller-Rabin by using modulo division on our known frequent primes.

    Args:
         no: The number to check. Must be non-negative.

    Returns:
        False if `no` cannot be prime, True otherwise.
    """
    if no < 2:
        return False
    for prime in SMALL_PRIMES:
        if prime * prime > no:
            return True
        if no % prime == 0:
            return no == prime
    return True


def _miller_rabin_round(n: int, rng: randomness.RandomSource) -> bool:
    """Performs a single Miller-Rabin round with a fresh random witness.

    Writes `n - 1 = m * 2**k` and squares `a**m` up to `k` times. If the chain does not start at 1 it has to end at
    1, and the element right before the first 1 must be a trivial square root of 1, which is checked through
    `gcd(n, b_j + 1)`.

    Args:
        n: Odd integer to be tested, at least 5.
        rng: Source of the witness.

    Returns:
        True if `n` passes this round, False if `n` is certainly composite.

    Raises:
        ValueError: If `n` is even or below 5, the witness range would be degenerate.
    """
    if n < 5 or n % 2 == 0:
        raise ValueError("Miller-Rabin requires an odd n >= 5.")
    m, k = n - 1, 0
    while m % 2 == 0:
        m //= 2
        k += 1
    a = rng.random_in_range(2, n - 1)
    if arith.gcd(n, a) != 1:
        return False
    chain = [arith.powmod(a, m, n)]
    if chain[0] == 1:
        return True
    for _ in range(k):
        chain.append(arith.powmod(chain[-1], 2, n))
    if chain[k] != 1:
        return False
    j = chain.index(1) - 1
    return arith.gcd(n, chain[j] + 1) in (1, n)


def is_prime(n: int, rounds: int = MILLER_RABIN_ROUNDS, rng: randomness.RandomSource | None = None) -> bool:
    """Performs a composite primality test, trial division against the small primes followed by Miller-Rabin.

    A composite survives a single round with probability at most 1/4, so the default 16 rounds bound false
    positives by 4**-16 = 2**-32. A negative answer is always correct.

    Args:
        n: The candidate prime to test.
        rounds: Number of Miller-Rabin rounds. Defaults to 16.
        rng: Witness source. Defaults to the process-wide system source.

    Returns:
        True if `n` is probably prime, False otherwise.

    Raises:
        ValueError: If `rounds` is not positive.
    """
    if rounds < 1:
        raise ValueError("rounds must be >= 1")
    if n < 2:
        return False
    if n in _SMALL_PRIME_SET:
        return True
    if not _trial_division(n):
        return False
    rng = rng or randomness.default_source()
    return all(_miller_rabin_round(n, rng) for _ in range(rounds))


def gen_prime(low: int = PRIME_LOW,
              high: int = PRIME_HIGH,
              rng: randomness.RandomSource | None = None,
              max_attempts: int = MAX_ATTEMPTS,
              rounds: int = MILLER_RABIN_ROUNDS) -> int:
    """Draws random candidates from `[low, high)` until one is probably prime.

    Args:
        low: Inclusive lower bound. Must be >= 2.
        high: Exclusive upper bound.
        rng: Candidate and witness source. Defaults to the process-wide system source.
        max_attempts: Number of candidates to try before giving up.
        rounds: Miller-Rabin rounds per candidate.

    Returns:
        A probable prime in `[low, high)`.

    Raises:
        ValueError: If the range is invalid or `max_attempts` is not positive.
        RetryBudgetExceededError: If no prime turned up within `max_attempts` draws.
    """
    if low < 2 or high <= low:
        raise ValueError("Range must satisfy 2 <= low < high.")
    if max_attempts < 1:
        raise ValueError("max_attempts must be >= 1")
    rng = rng or randomness.default_source()
    for _ in range(max_attempts):
        candidate = rng.random_in_range(low, high)
        if is_prime(candidate, rounds, rng):
            return candidate
    raise RetryBudgetExceededError(f"No prime in [{low}, {high}) after {max_attempts} draws.")


def generate_primes(config: KeyGenConfig = DEFAULT_CONFIG,
                    rng: randomness.RandomSource | None = None) -> tuple[int, int]:
    """Generates a pair of distinct primes from the configured range.

    Args:
        config: Generation parameters.
        rng: Random source. Defaults to the process-wide system source.

    Returns:
        Two distinct probable primes.

    Raises:
        RetryBudgetExceededError: If a prime search or the search for a second, distinct prime ran out of attempts.
    """
    rng = rng or randomness.default_source()
    p = gen_prime(config.prime_low, config.prime_high, rng, config.max_attempts, config.rounds)
    for _ in range(config.max_attempts):
        q = gen_prime(config.prime_low, config.prime_high, rng, config.max_attempts, config.rounds)
        if q != p:
            return p, q
    raise RetryBudgetExceededError(f"No prime distinct from {p} after {config.max_attempts} draws.")


def _draw_exponent(phi: int, config: KeyGenConfig, rng: randomness.RandomSource) -> int:
    """Draws public exponent candidates until one is coprime to `phi`."""
    for _ in range(config.max_attempts):
        e = rng.random_in_range(config.exp_low, config.exp_high)
        if arith.gcd(phi, e) == 1:
            return e
    raise RetryBudgetExceededError(
        f"No exponent in [{config.exp_low}, {config.exp_high}) coprime to {phi} after {config.max_attempts} draws.")


def generate_key_pair(config: KeyGenConfig = DEFAULT_CONFIG,
                      rng: randomness.RandomSource | None = None) -> tuple[tuple[int, int], tuple[int, int]]:
    """Generates a textbook RSA key pair.

    Draws two distinct primes, picks a random public exponent coprime to the totient and derives the private
    exponent as its inverse modulo the totient. The primes and the totient are discarded.

    Args:
        config: Generation parameters. Validated before any sampling.
        rng: Random source. Defaults to the process-wide system source.

    Returns:
        A tuple of (public, private) sub-tuples (exponent, modulus).

    Raises:
        ValueError: If `config` is inconsistent.
        RetryBudgetExceededError: If any sampling loop ran out of attempts.
    """
    config.validate()
    rng = rng or randomness.default_source()
    p, q = generate_primes(config, rng)
    n = p * q
    phi = (p - 1) * (q - 1)
    del p, q
    e = _draw_exponent(phi, config, rng)
    d = arith.eea_mod(phi, e, phi).d
    return (e, n), (d, n)
