"""Provides core textbook RSA functionalities: key pairs, encryption and decryption.

Keys are immutable (exponent, modulus) values. Messages are plain integers, no padding or encoding scheme is
applied, which makes this strictly an academic implementation.

Typical usage example:

    sk, pk = generate()
    c = encrypt(pk, 65)
    m = decrypt(sk, c)
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import typing
import warnings

from rsamath import arith
from rsamath import keygen
from rsamath import randomness


class RSAKey(typing.NamedTuple):
    """The overall RSA key implementation.

    Holds the components mandatory in both a public and a private key.

    Attributes:
        expo: The exponent of the key, whether private or public.
        mod: The modulus of the keypair.
    """
    expo: int
    mod: int

    def c_rsa(self, message: int) -> int:
        """Performs core RSA operation. (Encrypt/Decrypt)

        Representatives outside `[0, mod-1]` are not rejected, they alias to their residue modulo `mod` and a
        `RuntimeWarning` is issued.

        Args:
            message: The integer message representative.

        Returns:
            `message**expo mod mod`.
        """
        if not 0 <= message < self.mod:
            warnings.warn("Message representative outside [0, mod-1] will be reduced modulo mod.",
                          RuntimeWarning,
                          stacklevel=3)
        return arith.powmod(message, self.expo, self.mod)


class RSAPubKey(RSAKey):
    """Public half of a key pair, (e, n)."""
    __slots__ = ()

    def encrypt(self, message: int) -> int:
        """Use the public key to encrypt the message.

        Args:
            message: The message, expected in `[0, mod-1]`.

        Returns:
            The ciphertext.
        """
        return self.c_rsa(message)


class RSAPrivKey(RSAKey):
    """Private half of a key pair, (d, n). The primes behind `mod` are not retained."""
    __slots__ = ()

    def decrypt(self, ciphertext: int) -> int:
        """Decrypts the ciphertext using the private key.

        Args:
            ciphertext: The ciphertext, expected in `[0, mod-1]`.

        Returns:
            The recovered message.
        """
        return self.c_rsa(ciphertext)


def generate(config: keygen.KeyGenConfig | None = None,
             rng: randomness.RandomSource | None = None) -> tuple[RSAPrivKey, RSAPubKey]:
    """Generates a fresh key pair.

    Args:
        config: Generation parameters. Defaults to `keygen.DEFAULT_CONFIG`.
        rng: Random source. Defaults to the process-wide system source.

    Returns:
        A (private key, public key) tuple.
    """
    (e, n), (d, _) = keygen.generate_key_pair(config or keygen.DEFAULT_CONFIG, rng)
    return RSAPrivKey(d, n), RSAPubKey(e, n)


def encrypt(public_key: RSAPubKey, message: int) -> int:
    """Encrypts `message` under `public_key`."""
    return public_key.encrypt(message)


def decrypt(private_key: RSAPrivKey, ciphertext: int) -> int:
    """Decrypts `ciphertext` with `private_key`."""
    return private_key.decrypt(ciphertext)
