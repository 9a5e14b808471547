import math
from collections.abc import Iterator
from typing import ClassVar

from cipherkit.core.exceptions import InvalidKeyError
from cipherkit.models.schemas import CipherFamily, CipherType, KeyMaterial, SweepStrategy
from cipherkit.services.engines.base import CipherEngine
from cipherkit.services.engines.primitives import (
    ALPHABET_SIZE,
    is_ascii_letter,
    letter_from_index,
    letter_index,
    mod_inverse,
)
from cipherkit.services.engines.registry import EngineRegistry


@EngineRegistry.register
class AffineEngine(CipherEngine):
    """
    Affine cipher engine.

    The Affine cipher encrypts using the formula: E(x) = (ax + b) mod 26
    where 'a' must be coprime with 26 (valid values: 1, 3, 5, 7, 9, 11, 15, 17, 19, 21, 23, 25).

    Decryption uses: D(y) = a^(-1) * (y - b) mod 26
    where a^(-1) is the modular multiplicative inverse of a mod 26.

    A key whose 'a' has no inverse is rejected in both directions; no
    placeholder output is ever produced for it.
    """

    name = "Affine Cipher"
    label = "Affine"
    cipher_type = CipherType.AFFINE
    cipher_family = CipherFamily.MONOALPHABETIC
    strategy = SweepStrategy.BOUNDED
    description = (
        "A monoalphabetic substitution cipher that computes (a*x + b) mod 26 for "
        "each letter, given the key [a, b]. 'a' must be coprime to 26 "
        "(eg 3, 5, 7, 9, 11, 15...)."
    )
    key_description = "Integer pair 'a,b' with a coprime to 26."

    # Natural closed range for both parameters during a brute force
    SWEEP_MAX: ClassVar[int] = 26

    def parse_key(self, key: KeyMaterial, message: str = "") -> tuple[int, int]:
        """Parse key to (a, b) tuple and check that 'a' is invertible."""
        if isinstance(key, dict):
            a = self._parse_int(key.get("a"), "a")
            b = self._parse_int(key.get("b"), "b")
        elif isinstance(key, (list, tuple)) and len(key) == 2:
            a = self._parse_int(key[0], "a")
            b = self._parse_int(key[1], "b")
        elif isinstance(key, str):
            parts = key.replace(" ", "").split(",")
            if len(parts) != 2:
                raise InvalidKeyError("key", "expected 'a,b'", key)
            a = self._parse_int(parts[0], "a")
            b = self._parse_int(parts[1], "b")
        else:
            raise InvalidKeyError("key", "expected an (a, b) pair", key)

        if mod_inverse(a, ALPHABET_SIZE) is None:
            raise InvalidKeyError("a", f"{a} is not coprime with 26", a)

        return a, b

    def encrypt(self, message: str, key: tuple[int, int]) -> str:
        """Encrypt using E(x) = (ax + b) mod 26."""
        a, b = key
        return "".join(
            letter_from_index(a * letter_index(c) + b, c.isupper()) if is_ascii_letter(c) else c
            for c in message
        )

    def decrypt(self, message: str, key: tuple[int, int]) -> str:
        """Decrypt using D(y) = a^(-1) * (y - b) mod 26."""
        a, b = key
        a_inv = mod_inverse(a, ALPHABET_SIZE)
        if a_inv is None:
            raise InvalidKeyError("a", f"{a} is not coprime with 26", a)

        return "".join(
            letter_from_index(a_inv * (letter_index(c) - b), c.isupper())
            if is_ascii_letter(c)
            else c
            for c in message
        )

    def sweep_keys(self, message: str) -> Iterator[tuple[int, int]]:
        """All invertible (a, b) pairs with a and b in 0..26."""
        for a in range(self.SWEEP_MAX + 1):
            if math.gcd(a, ALPHABET_SIZE) != 1:
                continue
            for b in range(self.SWEEP_MAX + 1):
                yield a, b

    def candidate_label(self, key: tuple[int, int]) -> str:
        return f"Affine[a={key[0]},b={key[1]}]"
