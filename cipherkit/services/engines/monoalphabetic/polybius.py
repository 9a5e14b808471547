from cipherkit.models.schemas import CipherFamily, CipherType, SweepStrategy
from cipherkit.services.engines.base import CipherEngine
from cipherkit.services.engines.registry import EngineRegistry

GRID_SIZE = 5
GRID = "abcdefghijklmnopqrstuvwxy"


def _row_shift_table(rows: int) -> dict[int, str]:
    """Translation table moving every grid letter ``rows`` rows down."""
    shifted = "".join(
        GRID[(i + rows * GRID_SIZE) % len(GRID)] for i in range(len(GRID))
    )
    return str.maketrans(GRID + GRID.upper(), shifted + shifted.upper())


@EngineRegistry.register
class PolybiusEngine(CipherEngine):
    """
    Polybius square cipher engine.

    Uses the fixed 5x5 grid::

        a b c d e
        f g h i j
        k l m n o
        p q r s t
        u v w x y

    Encryption replaces each letter with the one directly below it in the
    same column (the bottom row wraps to the top); decryption moves one row
    up. 'z' is not on the grid and, like non-letters, passes through.
    """

    name = "Polybius Square Cipher"
    label = "Polybius"
    cipher_type = CipherType.POLYBIUS
    cipher_family = CipherFamily.MONOALPHABETIC
    strategy = SweepStrategy.BOUNDED
    description = (
        "A monoalphabetic substitution cipher that shifts letters by one row "
        "according to a 5x5 alphabetic table."
    )

    DOWN = _row_shift_table(1)
    UP = _row_shift_table(-1)

    def encrypt(self, message: str, key: None = None) -> str:
        return message.translate(self.DOWN)

    def decrypt(self, message: str, key: None = None) -> str:
        return message.translate(self.UP)
