"""Monoalphabetic cipher engines."""

from cipherkit.services.engines.monoalphabetic.caesar import CaesarEngine
from cipherkit.services.engines.monoalphabetic.rot13 import ROT13Engine
from cipherkit.services.engines.monoalphabetic.atbash import AtbashEngine
from cipherkit.services.engines.monoalphabetic.affine import AffineEngine
from cipherkit.services.engines.monoalphabetic.polybius import PolybiusEngine
from cipherkit.services.engines.monoalphabetic.simple_substitution import SimpleSubstitutionEngine

__all__ = [
    "CaesarEngine",
    "ROT13Engine",
    "AtbashEngine",
    "AffineEngine",
    "PolybiusEngine",
    "SimpleSubstitutionEngine",
]
