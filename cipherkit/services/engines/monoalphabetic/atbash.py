import string

from cipherkit.models.schemas import CipherFamily, CipherType, SweepStrategy
from cipherkit.services.engines.base import CipherEngine
from cipherkit.services.engines.registry import EngineRegistry


def _mirror_table() -> dict[int, str]:
    table = {}
    for alphabet in (string.ascii_lowercase, string.ascii_uppercase, string.digits):
        table.update(str.maketrans(alphabet, alphabet[::-1]))
    return table


@EngineRegistry.register
class AtbashEngine(CipherEngine):
    """
    Atbash cipher engine.

    Atbash mirrors the alphabet: a <-> z, b <-> y, and so on, with case
    preserved. Digits are mirrored the same way (0 <-> 9). Applying the
    transform twice returns the original text.
    """

    name = "Atbash Cipher"
    label = "Atbash"
    cipher_type = CipherType.ATBASH
    cipher_family = CipherFamily.MONOALPHABETIC
    strategy = SweepStrategy.BOUNDED
    description = (
        "A monoalphabetic substitution cipher that reverses the alphabet. "
        "A becomes Z, B becomes Y, etc. Self-reciprocal."
    )

    MIRROR = _mirror_table()

    def encrypt(self, message: str, key: None = None) -> str:
        return message.translate(self.MIRROR)

    def decrypt(self, message: str, key: None = None) -> str:
        """Atbash is self-reciprocal."""
        return message.translate(self.MIRROR)
