from cipherkit.models.schemas import CipherFamily, CipherType, KeyMaterial, SweepStrategy
from cipherkit.services.engines.base import CipherEngine
from cipherkit.services.engines.primitives import is_ascii_letter, key_shift, shift_char
from cipherkit.services.engines.registry import EngineRegistry


@EngineRegistry.register
class AutokeyEngine(CipherEngine):
    """
    Autokey cipher engine.

    The running key is the primer followed by the plaintext itself.
    Each plaintext character is band shifted by ``runningkey[i] - 'a'``
    when that running-key character is a letter; otherwise it passes
    through unchanged.

    Decryption works one primer-length block at a time: the key for
    block n is the plaintext recovered from block n-1.
    """

    name = "Autokey Cipher"
    label = "Autokey"
    cipher_type = CipherType.AUTOKEY
    cipher_family = CipherFamily.POLYALPHABETIC
    strategy = SweepStrategy.DICTIONARY
    description = (
        "A polyalphabetic substitution cipher that shifts values according to "
        "both the secret key and the plaintext, making the distribution of "
        "characters flatter than a Vigenère cipher."
    )
    key_description = "Primer keyword (printable ASCII, no whitespace)."

    def parse_key(self, key: KeyMaterial, message: str = "") -> str:
        return self._parse_text_key(key, "primer")

    def encrypt(self, message: str, key: str) -> str:
        running_key = key + message
        return "".join(self._shift(c, k, 1) for c, k in zip(message, running_key))

    def decrypt(self, message: str, key: str) -> str:
        block_size = len(key)
        block_key = key
        recovered = []

        for start in range(0, len(message), block_size):
            block = message[start:start + block_size]
            plain_block = "".join(self._shift(c, k, -1) for c, k in zip(block, block_key))
            recovered.append(plain_block)
            block_key = plain_block

        return "".join(recovered)

    @staticmethod
    def _shift(char: str, key_char: str, sign: int) -> str:
        if not is_ascii_letter(key_char):
            return char
        return shift_char(char, sign * key_shift(key_char))
