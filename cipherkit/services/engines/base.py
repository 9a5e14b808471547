from abc import ABC, abstractmethod
from collections.abc import Iterator
from typing import Any

from cipherkit.core.exceptions import InvalidKeyError
from cipherkit.models.schemas import (
    CipherFamily,
    CipherType,
    Direction,
    KeyMaterial,
    SweepStrategy,
)


class CipherEngine(ABC):
    """
    Abstract base class for all cipher engines.

    Each cipher implementation must provide:
    - parse_key(): Turn caller key material into the engine's key form
    - encrypt(): Encrypt a message with a parsed key
    - decrypt(): Decrypt a message with a parsed key

    Bounded-sweep engines additionally provide sweep_keys(), which yields
    every key in their closed parameter range. Dictionary-sweep engines
    take their keys from an external password list instead.
    """

    # Cipher metadata
    name: str
    label: str
    cipher_type: CipherType
    cipher_family: CipherFamily
    strategy: SweepStrategy
    description: str
    key_description: str = "No key required."

    def apply(self, message: str, key: KeyMaterial, direction: Direction) -> str:
        """
        Run the transform in the requested direction.

        Args:
            message: Text to transform
            key: Raw key material as supplied by the caller
            direction: Encrypt or decrypt

        Returns:
            Transformed text

        Raises:
            InvalidKeyError: If the key is unusable for this cipher
            DecodeError: If the message cannot be decoded
        """
        parsed = self.parse_key(key, message)
        if direction == Direction.ENCRYPT:
            return self.encrypt(message, parsed)
        return self.decrypt(message, parsed)

    def parse_key(self, key: KeyMaterial, message: str = "") -> Any:
        """
        Parse key material into the form encrypt()/decrypt() expect.

        Keyless ciphers ignore the key entirely.
        """
        return None

    def validate_key(self, key: KeyMaterial, message: str = "") -> bool:
        """Check whether key material is acceptable for this cipher."""
        try:
            self.parse_key(key, message)
        except InvalidKeyError:
            return False
        return True

    @abstractmethod
    def encrypt(self, message: str, key: Any) -> str:
        """Encrypt a message with an already parsed key."""
        pass

    @abstractmethod
    def decrypt(self, message: str, key: Any) -> str:
        """Decrypt a message with an already parsed key."""
        pass

    def sweep_keys(self, message: str) -> Iterator[Any]:
        """
        Yield every parsed key in this cipher's closed parameter range.

        Keyless ciphers have exactly one "key".
        """
        yield None

    def candidate_label(self, key: Any) -> str:
        """Label attached to a candidate decoded with ``key``."""
        if key is None:
            return self.label
        return f"{self.label} - {key}"

    # ------------------------------------------------------------------
    # Shared key parsing helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _parse_int(key: KeyMaterial, parameter: str) -> int:
        if isinstance(key, dict):
            key = key.get(parameter, key.get("key"))
        if isinstance(key, bool) or key is None:
            raise InvalidKeyError(parameter, "an integer is required", key)
        if isinstance(key, int):
            return key
        try:
            return int(str(key).strip())
        except ValueError:
            raise InvalidKeyError(parameter, "an integer is required", key) from None

    @staticmethod
    def _parse_text_key(key: KeyMaterial, parameter: str = "key") -> str:
        """
        Validate a keyword-style key.

        Keys must be non-empty and made of printable, non-whitespace ASCII.
        There is no fallback key: anything else is rejected.
        """
        if isinstance(key, dict):
            key = key.get(parameter, key.get("key"))
        if not isinstance(key, str):
            raise InvalidKeyError(parameter, "a text key is required", key)
        if not key:
            raise InvalidKeyError(parameter, "key must not be empty", key)
        if not all(33 <= ord(c) <= 126 for c in key):
            raise InvalidKeyError(
                parameter, "key must contain only printable non-whitespace ASCII", key
            )
        return key
