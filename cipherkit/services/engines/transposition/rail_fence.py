from collections.abc import Iterator

from cipherkit.core.exceptions import InvalidKeyError
from cipherkit.models.schemas import CipherFamily, CipherType, KeyMaterial, SweepStrategy
from cipherkit.services.engines.base import CipherEngine
from cipherkit.services.engines.registry import EngineRegistry


def zigzag_rails(length: int, rails: int) -> list[int]:
    """Rail index visited by each position of a zigzag walk."""
    pattern = []
    rail = 0
    direction = 1  # 1 = down, -1 = up

    for _ in range(length):
        pattern.append(rail)

        # Change direction at top or bottom
        if rail == 0:
            direction = 1
        elif rail == rails - 1:
            direction = -1

        rail += direction

    return pattern


@EngineRegistry.register
class RailFenceEngine(CipherEngine):
    """
    Rail Fence cipher engine.

    The Rail Fence cipher writes the plaintext in a zigzag pattern across
    a number of "rails" (rows), then reads off each rail in order to
    produce the ciphertext.

    Example with 3 rails:
    Plaintext: WEAREDISCOVEREDFLEEATONCE

    W . . . E . . . C . . . R . . . L . . . T . . . E
    . E . R . D . S . O . E . E . F . E . A . O . C .
    . . A . . . I . . . V . . . D . . . E . . . N . .

    Read off rows: WECRLTE + ERDSOEEFEAOC + AIVDEN

    Every character takes part, including spaces and punctuation.
    """

    name = "Rail Fence Cipher"
    label = "Railfence"
    cipher_type = CipherType.RAIL_FENCE
    cipher_family = CipherFamily.TRANSPOSITION
    strategy = SweepStrategy.BOUNDED
    description = (
        "A transposition cipher that shuffles each character according to a "
        "number of rails that act as the key."
    )
    key_description = "Integer rail count between 2 and the message length."

    def parse_key(self, key: KeyMaterial, message: str = "") -> int:
        rails = self._parse_int(key, "rails")
        if rails < 2:
            raise InvalidKeyError("rails", "at least 2 rails are required", rails)
        if rails > len(message):
            raise InvalidKeyError(
                "rails", f"cannot exceed the message length ({len(message)})", rails
            )
        return rails

    def encrypt(self, message: str, key: int) -> str:
        fence: list[list[str]] = [[] for _ in range(key)]
        for char, rail in zip(message, zigzag_rails(len(message), key)):
            fence[rail].append(char)

        # Read off each rail
        return "".join("".join(row) for row in fence)

    def decrypt(self, message: str, key: int) -> str:
        n = len(message)
        pattern = zigzag_rails(n, key)

        # Columns occupied by each rail, collected in one pass
        rows: list[list[int]] = [[] for _ in range(key)]
        for col, rail in enumerate(pattern):
            rows[rail].append(col)

        # Ciphertext fills the rails in order; reading columns left to right
        # walks the zigzag again
        result = [""] * n
        chars = iter(message)
        for row in rows:
            for col in row:
                result[col] = next(chars)

        return "".join(result)

    def sweep_keys(self, message: str) -> Iterator[int]:
        yield from range(2, len(message) + 1)

    def candidate_label(self, key: int) -> str:
        return f"Railfence[{key}]"
