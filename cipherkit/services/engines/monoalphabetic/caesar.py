from collections.abc import Iterator

from cipherkit.models.schemas import CipherFamily, CipherType, KeyMaterial, SweepStrategy
from cipherkit.services.engines.base import CipherEngine
from cipherkit.services.engines.primitives import BAND_SIZE, shift_text
from cipherkit.services.engines.registry import EngineRegistry


@EngineRegistry.register
class CaesarEngine(CipherEngine):
    """
    Caesar (shift) cipher engine.

    Every character in the printable band '0'..'~' is shifted by a fixed
    amount, wrapping around the 79-symbol band. Digits and punctuation are
    therefore scrambled along with letters, while whitespace is left alone.
    """

    name = "Caesar Cipher"
    label = "Caesar"
    cipher_type = CipherType.CAESAR
    cipher_family = CipherFamily.MONOALPHABETIC
    strategy = SweepStrategy.BOUNDED
    description = (
        "A common monoalphabetic substitution cipher that shifts characters "
        "by a key called the shift value."
    )
    key_description = "Integer shift value (may be negative)."

    # Shifts tried during a brute force; covers the whole band plus one.
    SWEEP_RANGE = range(1, BAND_SIZE + 2)

    def parse_key(self, key: KeyMaterial, message: str = "") -> int:
        """Parse key to integer shift value."""
        return self._parse_int(key, "shift")

    def encrypt(self, message: str, key: int) -> str:
        return shift_text(message, key)

    def decrypt(self, message: str, key: int) -> str:
        """Decrypt by shifting in reverse."""
        return shift_text(message, -key)

    def sweep_keys(self, message: str) -> Iterator[int]:
        yield from self.SWEEP_RANGE

    def candidate_label(self, key: int) -> str:
        return f"Caesar[{key}]"
