from cipherkit.models.schemas import CipherFamily, CipherType, KeyMaterial, SweepStrategy
from cipherkit.services.engines.base import CipherEngine
from cipherkit.services.engines.primitives import key_shift, shift_char
from cipherkit.services.engines.registry import EngineRegistry


@EngineRegistry.register
class VigenereEngine(CipherEngine):
    """
    Vigenère cipher engine.

    A polyalphabetic substitution cipher that uses a keyword to determine
    the shift for each character. Character ``i`` of the message is band
    shifted by ``key[i mod len(key)] - 'a'``, so the key cursor advances on
    every character and resets at the key length. Key letters are compared
    case-insensitively.
    """

    name = "Vigenère Cipher"
    label = "Vigenere"
    cipher_type = CipherType.VIGENERE
    cipher_family = CipherFamily.POLYALPHABETIC
    strategy = SweepStrategy.DICTIONARY
    description = (
        "A common polyalphabetic substitution cipher that shifts characters by "
        "the values of a repeating key."
    )
    key_description = "Keyword (printable ASCII, no whitespace)."

    def parse_key(self, key: KeyMaterial, message: str = "") -> str:
        return self._parse_text_key(key)

    def encrypt(self, message: str, key: str) -> str:
        return self._transform(message, key, 1)

    def decrypt(self, message: str, key: str) -> str:
        return self._transform(message, key, -1)

    def _transform(self, message: str, key: str, sign: int) -> str:
        shifts = [sign * key_shift(k) for k in key]
        period = len(shifts)
        return "".join(shift_char(c, shifts[i % period]) for i, c in enumerate(message))
