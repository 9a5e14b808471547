import random
import string

from cipherkit.models.schemas import CipherFamily, CipherType, KeyMaterial, SweepStrategy
from cipherkit.services.engines.base import CipherEngine
from cipherkit.services.engines.registry import EngineRegistry


@EngineRegistry.register
class SimpleSubstitutionEngine(CipherEngine):
    """
    Seeded simple substitution cipher engine.

    The key is a seed string. The 26-letter alphabet is shuffled with a
    ``random.Random`` seeded from that string, so the same seed rebuilds
    the same substitution alphabet on every run and platform. Letters map
    to the shuffled alphabet with case preserved; everything else passes
    through.
    """

    name = "Simple Substitution Cipher"
    label = "Simplesub"
    cipher_type = CipherType.SIMPLE_SUBSTITUTION
    cipher_family = CipherFamily.MONOALPHABETIC
    strategy = SweepStrategy.DICTIONARY
    description = (
        "A monoalphabetic substitution cipher that maps letters through an "
        "alphabet shuffled deterministically from a seed password."
    )
    key_description = "Seed password (printable ASCII, no whitespace)."

    def parse_key(self, key: KeyMaterial, message: str = "") -> str:
        return self._parse_text_key(key, "seed")

    def substitution_alphabet(self, seed: str) -> str:
        """Shuffled lowercase alphabet for a seed."""
        letters = list(string.ascii_lowercase)
        random.Random(seed).shuffle(letters)
        return "".join(letters)

    def encrypt(self, message: str, key: str) -> str:
        shuffled = self.substitution_alphabet(key)
        table = str.maketrans(
            string.ascii_lowercase + string.ascii_uppercase,
            shuffled + shuffled.upper(),
        )
        return message.translate(table)

    def decrypt(self, message: str, key: str) -> str:
        shuffled = self.substitution_alphabet(key)
        table = str.maketrans(
            shuffled + shuffled.upper(),
            string.ascii_lowercase + string.ascii_uppercase,
        )
        return message.translate(table)
