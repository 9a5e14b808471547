from cipherkit.models.schemas import CipherFamily, CipherType, SweepStrategy
from cipherkit.services.engines.base import CipherEngine
from cipherkit.services.engines.primitives import is_ascii_letter, letter_from_index, letter_index
from cipherkit.services.engines.registry import EngineRegistry


@EngineRegistry.register
class ROT13Engine(CipherEngine):
    """
    ROT13 cipher engine.

    ROT13 rotates each letter 13 places. Because 13 is half of 26, the
    transform is its own inverse. Case is preserved; everything that is
    not an ASCII letter passes through.
    """

    name = "ROT13 Cipher"
    label = "ROT13"
    cipher_type = CipherType.ROT13
    cipher_family = CipherFamily.MONOALPHABETIC
    strategy = SweepStrategy.BOUNDED
    description = (
        "A simple substitution cipher that rotates each letter by 13 places, "
        "as if choosing the other side of an alphabet wheel."
    )

    def encrypt(self, message: str, key: None = None) -> str:
        return "".join(
            letter_from_index(letter_index(c) + 13, c.isupper()) if is_ascii_letter(c) else c
            for c in message
        )

    def decrypt(self, message: str, key: None = None) -> str:
        """ROT13 is self-reciprocal."""
        return self.encrypt(message)
