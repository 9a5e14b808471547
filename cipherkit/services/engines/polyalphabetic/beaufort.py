from cipherkit.models.schemas import CipherFamily, CipherType, KeyMaterial, SweepStrategy
from cipherkit.services.engines.monoalphabetic.atbash import AtbashEngine
from cipherkit.services.engines.polyalphabetic.vigenere import VigenereEngine
from cipherkit.services.engines.registry import EngineRegistry


@EngineRegistry.register
class BeaufortEngine(VigenereEngine):
    """
    Beaufort-style cipher engine.

    Derived from Vigenère: the keyword is first passed through Atbash
    (a <-> z, b <-> y, ...) and the message is then Vigenère-transformed
    with that reversed key in the same direction.
    """

    name = "Beaufort Cipher"
    label = "Beaufort"
    cipher_type = CipherType.BEAUFORT
    cipher_family = CipherFamily.POLYALPHABETIC
    strategy = SweepStrategy.DICTIONARY
    description = (
        "A polyalphabetic cipher derived from Vigenère that uses the "
        "Atbash-reversed keyword."
    )
    key_description = "Keyword (printable ASCII, no whitespace)."

    def parse_key(self, key: KeyMaterial, message: str = "") -> str:
        """Validate the keyword and return it Atbash-reversed."""
        keyword = self._parse_text_key(key)
        return keyword.translate(AtbashEngine.MIRROR)

    def candidate_label(self, key: str) -> str:
        # Report the keyword the caller would type, not the reversed one
        return f"{self.label} - {key.translate(AtbashEngine.MIRROR)}"
