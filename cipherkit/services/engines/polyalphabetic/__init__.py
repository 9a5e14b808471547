"""Polyalphabetic cipher engines."""

from cipherkit.services.engines.polyalphabetic.vigenere import VigenereEngine
from cipherkit.services.engines.polyalphabetic.beaufort import BeaufortEngine
from cipherkit.services.engines.polyalphabetic.autokey import AutokeyEngine

__all__ = [
    "VigenereEngine",
    "BeaufortEngine",
    "AutokeyEngine",
]
