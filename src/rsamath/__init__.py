"""Textbook RSA arithmetic in an Academic Sense.

Provides modular exponentiation, GCD, a modular Extended Euclidean Algorithm, Miller-Rabin primality testing,
random prime generation and textbook RSA key generation, encryption and decryption on plain integers.

Typical usage example:

    sk, pk = generate()
    c = encrypt(pk, 65)
    m = decrypt(sk, c)
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
from rsamath.arith import eea_mod
from rsamath.arith import EEAResult
from rsamath.arith import gcd
from rsamath.arith import mod_inverse
from rsamath.arith import powmod
from rsamath.keygen import DEFAULT_CONFIG
from rsamath.keygen import gen_prime
from rsamath.keygen import generate_key_pair
from rsamath.keygen import is_prime
from rsamath.keygen import KeyGenConfig
from rsamath.keygen import RetryBudgetExceededError
from rsamath.randomness import RandomSource
from rsamath.randomness import SeededRandomSource
from rsamath.randomness import SystemRandomSource
from rsamath.rsa import decrypt
from rsamath.rsa import encrypt
from rsamath.rsa import generate
from rsamath.rsa import RSAPrivKey
from rsamath.rsa import RSAPubKey

__version__ = "0.0.1"
__all__ = [
    "powmod",
    "gcd",
    "eea_mod",
    "EEAResult",
    "mod_inverse",
    "is_prime",
    "gen_prime",
    "generate_key_pair",
    "KeyGenConfig",
    "DEFAULT_CONFIG",
    "RetryBudgetExceededError",
    "RandomSource",
    "SeededRandomSource",
    "SystemRandomSource",
    "RSAPrivKey",
    "RSAPubKey",
    "generate",
    "encrypt",
    "decrypt",
]
