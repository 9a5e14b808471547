from cipherkit.models.schemas import CipherFamily, CipherType, KeyMaterial, SweepStrategy
from cipherkit.services.engines.base import CipherEngine
from cipherkit.services.engines.registry import EngineRegistry


@EngineRegistry.register
class ColumnarEngine(CipherEngine):
    """
    Columnar Transposition cipher engine.

    The message is written row by row into ``len(key)`` columns, then the
    columns are read out in the alphabetical order of the key letters.
    No padding is added; the last row may be short, and decryption
    rebuilds those ragged column lengths exactly.

    Key letters compare case-insensitively. Repeated letters are ordered
    left to right (``"ALPHA"`` reads columns 0, 4, 3, 1, 2), which keeps
    the transform a bijection for any key.
    """

    name = "Columnar Transposition Cipher"
    label = "Columnar"
    cipher_type = CipherType.COLUMNAR
    cipher_family = CipherFamily.TRANSPOSITION
    strategy = SweepStrategy.DICTIONARY
    description = (
        "A transposition cipher that lays characters out on a table based on a "
        "key, then reads the columns in the alphabetical order of the key."
    )
    key_description = "Keyword (printable ASCII, no whitespace); repeated letters read left to right."

    def parse_key(self, key: KeyMaterial, message: str = "") -> str:
        return self._parse_text_key(key)

    def column_order(self, keyword: str) -> list[int]:
        """Column positions in the order they are read."""
        lowered = keyword.lower()
        return sorted(range(len(lowered)), key=lambda pos: (lowered[pos], pos))

    def encrypt(self, message: str, key: str) -> str:
        width = len(key)
        return "".join(message[pos::width] for pos in self.column_order(key))

    def decrypt(self, message: str, key: str) -> str:
        width = len(key)
        n = len(message)
        result = [""] * n

        idx = 0
        for pos in self.column_order(key):
            # Columns left of n % width hold one extra character
            length = len(range(pos, n, width))
            result[pos::width] = message[idx:idx + length]
            idx += length

        return "".join(result)
